"""
Order Service

Business logic for the pizza ordering API. The service owns no global
state: it is handed a store and a menu, so tests can build isolated
instances and a persistent store can be dropped in behind the same
interface.

Operations:
    - health(): fixed status record
    - create_order(): validate, assign id/timestamp, store
    - list_orders(): every order in insertion order
    - get_order(): one order by id
    - get_menu(): the static menu

Version: 1.0.0
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from app.core.config import Settings
from app.core.exceptions import NotFound, ValidationError
from app.models import DEFAULT_MENU, Menu, Order, OrderStatus
from app.schemas import OrderCreate
from app.services.orders.base import BaseOrderStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_order_id() -> str:
    return uuid.uuid4().hex


class OrderService:
    """
    In-process order management over an injected store.

    Attributes:
        store: Where orders are kept
        menu: Read-only catalog used for validation and get_menu()
        service_name: Name reported by health()
        estimated_delivery: Display string attached to each new order
        strict_toppings: Reject toppings that are not on the menu

    Example:
        >>> service = OrderService(store=InMemoryOrderStore())
        >>> order = service.create_order({
        ...     "size": "large", "crust": "thin", "toppings": ["pepperoni"],
        ...     "customer_name": "Ana", "delivery_address": "1 Elm St",
        ...     "phone": "555-0100",
        ... })
        >>> service.get_order(order.id) == order
        True
    """

    def __init__(
        self,
        store: BaseOrderStore,
        menu: Menu = DEFAULT_MENU,
        service_name: str = "pizza-api",
        estimated_delivery: str = "30-45 minutes",
        strict_toppings: bool = False,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_order_id,
    ):
        self.store = store
        self.menu = menu
        self.service_name = service_name
        self.estimated_delivery = estimated_delivery
        self.strict_toppings = strict_toppings
        self._clock = clock
        self._id_factory = id_factory
        # Serializes id assignment, timestamping and insertion
        self._write_lock = threading.Lock()
        self._last_created_at: Optional[datetime] = None

    @classmethod
    def from_settings(cls, settings: Settings, store: BaseOrderStore) -> "OrderService":
        """Build a service configured from application settings."""
        return cls(
            store=store,
            service_name=settings.service_name,
            estimated_delivery=settings.estimated_delivery,
            strict_toppings=settings.strict_toppings,
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    def health(self) -> dict[str, str]:
        return {"status": "healthy", "service": self.service_name}

    def get_menu(self) -> Menu:
        return self.menu

    def list_orders(self, status: Union[OrderStatus, str, None] = None) -> list[Order]:
        """
        Return stored orders in insertion order.

        Args:
            status: Only return orders with this status

        Raises:
            ValidationError: If status is not a known order status
        """
        orders = self.store.list_all()
        if status is None:
            return orders

        try:
            wanted = OrderStatus(status)
        except ValueError:
            valid = [s.value for s in OrderStatus]
            raise ValidationError(
                f"Invalid status {status!r}. Options: {valid}", fields=["status"]
            )
        return [o for o in orders if o.status == wanted]

    def get_order(self, order_id: str) -> Order:
        """
        Raises:
            NotFound: If no order has this id
        """
        order = self.store.get(order_id)
        if order is None:
            logger.info(f"Order {order_id} not found")
            raise NotFound("Order", order_id)
        return order

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def create_order(self, data: Union[OrderCreate, Mapping[str, Any]]) -> Order:
        """
        Validate a candidate order and store it.

        Args:
            data: OrderCreate payload or a plain mapping with the same fields

        Returns:
            Order: The stored order with id, status and timestamps filled in

        Raises:
            ValidationError: If any field is missing, malformed or off-menu
        """
        payload = self._validate(data)

        with self._write_lock:
            created_at = self._clock()
            if self._last_created_at is not None and created_at < self._last_created_at:
                created_at = self._last_created_at

            order = Order(
                id=self._id_factory(),
                size=payload.size,
                toppings=tuple(payload.toppings),
                crust=payload.crust,
                customer_name=payload.customer_name,
                delivery_address=payload.delivery_address,
                phone=payload.phone,
                status=OrderStatus.PENDING,
                created_at=created_at,
                estimated_delivery=self.estimated_delivery,
            )
            self.store.add(order)
            self._last_created_at = created_at

        logger.info(
            f"Order {order.id} created for {order.customer_name} "
            f"({order.size.value}, {order.crust.value}, {len(order.toppings)} toppings)"
        )
        return order

    def _validate(self, data: Union[OrderCreate, Mapping[str, Any]]) -> OrderCreate:
        if isinstance(data, OrderCreate):
            payload = data
        else:
            try:
                payload = OrderCreate.model_validate(data)
            except PydanticValidationError as e:
                raise validation_error_from_errors(e.errors())

        if not self.menu.has_size(payload.size.value):
            raise ValidationError(f"Size {payload.size.value!r} is not on the menu", fields=["size"])
        if not self.menu.has_crust(payload.crust.value):
            raise ValidationError(f"Crust {payload.crust.value!r} is not on the menu", fields=["crust"])

        if self.strict_toppings:
            unknown = [t for t in payload.toppings if not self.menu.has_topping(t)]
            if unknown:
                raise ValidationError(f"Toppings not on the menu: {unknown}", fields=["toppings"])

        return payload


def validation_error_from_errors(errors: list, skip_prefix: tuple = ()) -> ValidationError:
    """
    Collapse a pydantic error report into a single ValidationError.

    Args:
        errors: Output of ``exc.errors()`` from pydantic or FastAPI
        skip_prefix: Location parts to drop (e.g. "body" for request errors)
    """
    fields = []
    messages = []
    for err in errors:
        raw = tuple(err.get("loc", ()))
        if len(raw) == 2 and raw[0] == "body" and isinstance(raw[1], int):
            # JSON decode errors carry a character offset, not a field
            name = "body"
        else:
            loc = [str(p) for p in raw if p not in skip_prefix]
            name = ".".join(loc) or "order"
        if name not in fields:
            fields.append(name)
        messages.append(f"{name}: {err.get('msg', 'invalid value')}")

    return ValidationError("; ".join(messages), fields=fields)
