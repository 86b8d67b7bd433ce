"""
                        Services Module

Contains the business logic services. Each service talks to its backend
through an abstract base class so implementations can be swapped by
configuration.

Services:
    - orders: Order management over a pluggable order store
"""

from app.services.orders import OrderService, get_order_store

__all__ = ["OrderService", "get_order_store"]
