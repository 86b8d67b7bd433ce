"""
Domain Models

Plain data structures for the ordering domain:
- Order: a single customer purchase with delivery details
- Menu: the static catalog of sizes, toppings and crusts

Orders are frozen once built; only the service creates them.

Version: 1.0.0
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping


class OrderStatus(str, enum.Enum):
    """Order status. New orders are always pending."""
    PENDING = "pending"


class PizzaSize(str, enum.Enum):
    """Pizza sizes offered on the menu."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class CrustType(str, enum.Enum):
    """Crust styles offered on the menu."""
    THIN = "thin"
    THICK = "thick"
    STUFFED = "stuffed"
    GLUTEN_FREE = "gluten-free"


@dataclass(frozen=True)
class Order:
    """
    A stored pizza order.

    Attributes:
        id: Opaque identifier generated by the service
        size: Pizza size
        toppings: Toppings in submission order (duplicates allowed)
        crust: Crust style
        customer_name: Name for the delivery
        delivery_address: Where to deliver
        phone: Contact number
        status: Current order status
        created_at: When the order was accepted (UTC)
        estimated_delivery: Display string for the delivery window
    """
    id: str
    size: PizzaSize
    toppings: tuple[str, ...]
    crust: CrustType
    customer_name: str
    delivery_address: str
    phone: str
    status: OrderStatus
    created_at: datetime
    estimated_delivery: str


@dataclass(frozen=True)
class SizeOption:
    """Price (in cents) and slice count for one pizza size."""
    price: int
    slices: int


@dataclass(frozen=True)
class Menu:
    """
    Read-only menu configuration.

    Attributes:
        sizes: Size name to price/slices
        toppings: Available toppings
        crusts: Available crusts
    """
    sizes: Mapping[str, SizeOption]
    toppings: tuple[str, ...]
    crusts: tuple[str, ...]
    _topping_set: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Freeze the sizes mapping so callers can't edit the shared menu
        object.__setattr__(self, "sizes", MappingProxyType(dict(self.sizes)))
        object.__setattr__(self, "_topping_set", frozenset(self.toppings))

    def has_size(self, size: str) -> bool:
        return size in self.sizes

    def has_crust(self, crust: str) -> bool:
        return crust in self.crusts

    def has_topping(self, topping: str) -> bool:
        return topping in self._topping_set

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "sizes": {
                name: {"price": option.price, "slices": option.slices}
                for name, option in self.sizes.items()
            },
            "toppings": list(self.toppings),
            "crusts": list(self.crusts),
        }


DEFAULT_MENU = Menu(
    sizes={
        PizzaSize.SMALL.value: SizeOption(price=599, slices=6),
        PizzaSize.MEDIUM.value: SizeOption(price=899, slices=8),
        PizzaSize.LARGE.value: SizeOption(price=1299, slices=12),
    },
    toppings=(
        "pepperoni",
        "mushrooms",
        "onions",
        "sausage",
        "bacon",
        "extra cheese",
        "black olives",
        "green peppers",
        "pineapple",
        "spinach",
    ),
    crusts=tuple(c.value for c in CrustType),
)
