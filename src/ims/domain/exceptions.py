"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the facade and the shell can catch them uniformly and display
user-friendly messages.  Each error remembers which argument was at fault.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantity(ValidationError):
    """A quantity that must be positive was zero or negative."""

    def __init__(self, message: str, field: str = "quantity") -> None:
        super().__init__(message, field)


class InvalidPrice(ValidationError):
    """A price was negative or not a number."""

    def __init__(self, message: str, field: str = "price") -> None:
        super().__init__(message, field)


class InsufficientStock(ValidationError):
    """A sale asked for more units than are on hand."""

    def __init__(self, message: str, field: str = "quantity") -> None:
        super().__init__(message, field)


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFound(EntityNotFoundError):
    """No product with the given name is in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unavailable product: {name}", field="name")
        self.name = name


class InvariantViolation(RuntimeError):
    """Stock or cost-basis state is corrupt.

    Not a DomainException: callers must not treat this as a user error.
    """
