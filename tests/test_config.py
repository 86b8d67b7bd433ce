import pytest
from pydantic import ValidationError as PydanticValidationError

from app.core.config import EnvironmentMode, Settings, get_settings
from app.services.orders import InMemoryOrderStore, get_order_store, reset_order_store


def test_defaults(settings):
    assert settings.env_mode is EnvironmentMode.DEVELOPMENT
    assert settings.is_development
    assert settings.service_name == "pizza-api"
    assert settings.order_store == "memory"
    assert settings.estimated_delivery == "30-45 minutes"
    assert settings.strict_toppings is False


def test_env_mode_is_case_insensitive():
    assert Settings(_env_file=None, env_mode="PRODUCTION").is_production


def test_invalid_env_mode():
    with pytest.raises(PydanticValidationError):
        Settings(_env_file=None, env_mode="qa")


def test_invalid_order_store():
    with pytest.raises(PydanticValidationError):
        Settings(_env_file=None, order_store="redis")


def test_cors_origins_list():
    settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("STRICT_TOPPINGS", "true")
    monkeypatch.setenv("SERVICE_NAME", "pizza-api-eu")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.strict_toppings is True
    assert settings.service_name == "pizza-api-eu"


def test_order_store_factory_is_cached():
    store = get_order_store()

    assert isinstance(store, InMemoryOrderStore)
    assert get_order_store() is store

    reset_order_store()
    assert get_order_store() is not store
