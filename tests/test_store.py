from datetime import datetime, timezone

import pytest

from app.core.exceptions import DuplicateOrderError
from app.models import CrustType, Order, OrderStatus, PizzaSize
from app.schemas import OrderResponse


def make_order(order_id: str) -> Order:
    return Order(
        id=order_id,
        size=PizzaSize.SMALL,
        toppings=("spinach",),
        crust=CrustType.GLUTEN_FREE,
        customer_name="Ana",
        delivery_address="1 Elm St",
        phone="555-0100",
        status=OrderStatus.PENDING,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        estimated_delivery="30-45 minutes",
    )


def test_add_and_get(store):
    order = make_order("a1")
    store.add(order)

    assert store.get("a1") is order
    assert store.get("missing") is None
    assert store.count() == 1


def test_duplicate_id(store):
    store.add(make_order("a1"))

    with pytest.raises(DuplicateOrderError):
        store.add(make_order("a1"))


def test_list_keeps_insertion_order(store):
    for order_id in ["c", "a", "b"]:
        store.add(make_order(order_id))

    assert [o.id for o in store.list_all()] == ["c", "a", "b"]


def test_clear(store):
    store.add(make_order("a1"))
    store.clear()

    assert store.list_all() == []
    assert store.count() == 0


def test_provider_name(store):
    assert store.provider_name == "memory"



def test_order_response_reads_attributes():
    assert OrderResponse.model_config["from_attributes"] is True

    response = OrderResponse.model_validate(make_order("a1"))

    assert response.id == "a1"
    assert response.toppings == ["spinach"]
    assert response.crust is CrustType.GLUTEN_FREE
