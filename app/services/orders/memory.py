"""
In-Memory Order Store

Keeps orders in a dict keyed by id. Python dicts preserve insertion
order, which gives list() its ordering for free. All access goes
through a single lock because FastAPI runs sync handlers in a thread pool.

Nothing survives a process restart.

Version: 1.0.0
"""

import logging
import threading
from typing import Optional

from app.core.exceptions import DuplicateOrderError
from app.models import Order
from app.services.orders.base import BaseOrderStore

logger = logging.getLogger(__name__)


class InMemoryOrderStore(BaseOrderStore):
    """
    Thread-safe in-memory order store.

    Example:
        >>> store = InMemoryOrderStore()
        >>> store.add(order)
        >>> store.count()
        1
    """

    def __init__(self):
        self._orders: dict[str, Order] = {}
        self._lock = threading.Lock()

    @property
    def provider_name(self) -> str:
        return "memory"

    def add(self, order: Order) -> None:
        with self._lock:
            if order.id in self._orders:
                raise DuplicateOrderError(order.id)
            self._orders[order.id] = order
        logger.debug(f"Stored order {order.id}")

    def get(self, order_id: str) -> Optional[Order]:
        with self._lock:
            return self._orders.get(order_id)

    def list_all(self) -> list[Order]:
        with self._lock:
            return list(self._orders.values())

    def count(self) -> int:
        with self._lock:
            return len(self._orders)

    def clear(self) -> None:
        with self._lock:
            self._orders.clear()
        logger.debug("Order store cleared")
