"""
Core module initialization.
Exports configuration, logging utilities and domain exceptions.
"""

from app.core.config import get_settings, setup_logging, Settings, EnvironmentMode
from app.core.exceptions import PizzaAPIError, ValidationError, NotFound, DuplicateOrderError

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "PizzaAPIError",
    "ValidationError",
    "NotFound",
    "DuplicateOrderError",
]
