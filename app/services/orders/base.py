"""
Order Store Abstract Base Class

Defines the interface contract for every order store backend.
The order service only talks to this interface, so a persistent
backend can be substituted without touching the request handlers.

Design Pattern: Strategy Pattern
    - Backends are chosen at runtime from configuration
    - Tests construct isolated stores directly

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.models import Order


class BaseOrderStore(ABC):
    """
    Abstract base class for order stores.

    Implementations must make every method safe to call from
    concurrent request handlers and must return snapshots, never
    live views of their internal collections.

    Example:
        >>> store = get_order_store()
        >>> store.add(order)
        >>> store.get(order.id) == order
        True
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Return the name of the store backend.

        Returns:
            str: Backend name (e.g., "memory")
        """
        pass

    @abstractmethod
    def add(self, order: Order) -> None:
        """
        Insert a new order keyed by its id.

        Args:
            order: Fully built order

        Raises:
            DuplicateOrderError: If an order with the same id exists
        """
        pass

    @abstractmethod
    def get(self, order_id: str) -> Optional[Order]:
        """
        Look up an order by id.

        Returns:
            The order, or None if no order has that id
        """
        pass

    @abstractmethod
    def list_all(self) -> list[Order]:
        """
        Return all orders in insertion order.
        """
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored order."""
        pass
