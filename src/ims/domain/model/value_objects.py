"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ims.domain.exceptions import InvalidPrice, InvalidQuantity


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  The ledger is single-currency
    so no currency code is carried.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidPrice(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidPrice(f"Invalid price: {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidPrice(f"Invalid price: {self.amount}")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return str(self.amount)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, field: str = "price") -> Money:
        """Coerce to Decimal safely, tagging failures with *field*."""
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise InvalidPrice(f"Invalid {field.replace('_', ' ')}: {amount!r}", field) from exc
        if not value.is_finite() or value < Decimal("0"):
            raise InvalidPrice(f"Invalid {field.replace('_', ' ')}: {amount}", field)
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot purchase or sell zero or
    negative units.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidQuantity(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidQuantity(f"Invalid quantity: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
