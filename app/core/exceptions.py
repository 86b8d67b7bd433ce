"""
Domain Exceptions

Errors raised by the order service. They are recoverable at the request
boundary: the HTTP layer maps each one to a client-error response and the
process keeps running.
"""

from typing import Optional, Sequence


class PizzaAPIError(Exception):
    """Base class for all service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PizzaAPIError):
    """
    Order input was malformed or out of range.

    Attributes:
        fields: Names of the offending input fields
    """

    def __init__(self, message: str, fields: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.fields = list(fields or [])


class NotFound(PizzaAPIError):
    """No record exists for the requested identifier."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} {identifier!r} not found")
        self.resource = resource
        self.identifier = identifier


class DuplicateOrderError(PizzaAPIError):
    """An order id was inserted twice into the same store."""

    def __init__(self, order_id: str):
        super().__init__(f"Order {order_id!r} already exists")
        self.order_id = order_id
