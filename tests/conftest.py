"""
Shared pytest fixtures.

Every test gets its own store, service and application so no state
leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.main import create_app
from app.services.orders import InMemoryOrderStore, OrderService, reset_order_store


@pytest.fixture(autouse=True)
def _reset_caches():
    yield
    get_settings.cache_clear()
    reset_order_store()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def service(store) -> OrderService:
    return OrderService(store=store)


@pytest.fixture
def client(settings, service):
    app = create_app(settings=settings, service=service)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def order_payload() -> dict:
    return {
        "size": "medium",
        "toppings": ["pepperoni", "mushrooms"],
        "crust": "thin",
        "customer_name": "John Doe",
        "delivery_address": "123 Main St",
        "phone": "555-0123",
    }
