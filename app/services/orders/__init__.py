"""
Order Store Factory

Provides a single entry point for obtaining the configured order store
and the order service built on top of it.

Usage:
    from app.services.orders import get_order_store, OrderService

    service = OrderService(store=get_order_store())
    order = service.create_order({...})

Backend Selection:
    - ORDER_STORE=memory → InMemoryOrderStore (default, process lifetime only)

Version: 1.0.0
"""

import logging
from functools import lru_cache

from app.core.config import get_settings
from app.services.orders.base import BaseOrderStore
from app.services.orders.memory import InMemoryOrderStore
from app.services.orders.service import OrderService

logger = logging.getLogger(__name__)


@lru_cache()
def get_order_store() -> BaseOrderStore:
    """
    Get the configured order store instance.

    The instance is cached so every request handler in the process
    shares the same collection.

    Returns:
        BaseOrderStore: Configured store

    Raises:
        ValueError: If ORDER_STORE names an unknown backend
    """
    settings = get_settings()

    if settings.order_store == "memory":
        logger.info("Order Store: Using InMemoryOrderStore")
        return InMemoryOrderStore()

    raise ValueError(f"Unsupported order store: {settings.order_store}")


def reset_order_store() -> None:
    """
    Clear the cached order store instance.

    The next call to get_order_store() will create a new, empty store.
    """
    get_order_store.cache_clear()
    logger.debug("Order store cache cleared")


__all__ = [
    "get_order_store",
    "reset_order_store",
    "BaseOrderStore",
    "InMemoryOrderStore",
    "OrderService",
]
