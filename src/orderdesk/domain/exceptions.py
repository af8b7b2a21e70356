"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EmptyOrderRequest(ValidationError):
    """An order was requested without any lines."""

    def __init__(self) -> None:
        super().__init__("Order must contain at least one item")


class InvalidQuantity(ValidationError):
    """A line quantity was not a positive integer."""

    def __init__(self, quantity: object) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity must be positive, got {quantity!r}")


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFound(EntityNotFoundError):

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found: '{product_id}'")


class OrderNotFound(EntityNotFoundError):

    def __init__(self, order_id: int) -> None:
        self.order_id = order_id
        super().__init__(f"Order #{order_id} not found")


class AccessDenied(DomainException):
    """The caller's roles do not satisfy the required access tier."""


class DataIntegrityError(DomainException):
    """Persisted data contradicts an aggregate invariant."""
