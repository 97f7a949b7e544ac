"""Domain-level exceptions.

All failures the fulfillment engine can surface are subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OrderNotFoundError(EntityNotFoundError):
    """No order matches the requested identifier."""

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order #{order_id} not found")
        self.order_id = order_id


class UnsupportedTypeError(DomainException):
    """A product carries a type outside the known product types."""

    def __init__(self, product_id: str, product_type: object) -> None:
        super().__init__(
            f"No fulfillment rule for product '{product_id}' of type {product_type!r}"
        )
        self.product_id = product_id
        self.product_type = product_type


class PersistenceError(DomainException):
    """A storage operation failed."""
