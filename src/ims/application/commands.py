"""Commands the shell can send to the ledger facade.

The set is closed: every request is one of the frozen dataclasses below,
and ``LedgerFacade.execute`` dispatches over ``Command`` with a single
``match``.  Adding a request type means adding a class here and a case
there.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from ims.domain.exceptions import DomainException


@dataclass(frozen=True)
class Purchase:
    name: str
    description: str
    quantity: int
    sale_price: Decimal
    purchase_price: Decimal


@dataclass(frozen=True)
class Sell:
    name: str
    quantity: int


@dataclass(frozen=True)
class GetProduct:
    name: str


@dataclass(frozen=True)
class EditProduct:
    """Both fields are optional; None leaves the field unchanged."""

    name: str
    description: str | None = None
    sale_price: Decimal | None = None


@dataclass(frozen=True)
class DeleteProduct:
    name: str


@dataclass(frozen=True)
class ReportProduct:
    name: str


@dataclass(frozen=True)
class ReportProfit:
    name: str


@dataclass(frozen=True)
class ReportInventory:
    pass


@dataclass(frozen=True)
class ReportSalesSummary:
    pass


@dataclass(frozen=True)
class ReportSalesHistory:
    with_profit: bool = False


@dataclass(frozen=True)
class ReportPurchaseSummary:
    pass


@dataclass(frozen=True)
class ReportPurchaseHistory:
    pass


Command = Union[
    Purchase,
    Sell,
    GetProduct,
    EditProduct,
    DeleteProduct,
    ReportProduct,
    ReportProfit,
    ReportInventory,
    ReportSalesSummary,
    ReportSalesHistory,
    ReportPurchaseSummary,
    ReportPurchaseHistory,
]


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command: a value on success, the error otherwise."""

    command: Command
    value: Any = None
    error: DomainException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> str | None:
        return type(self.error).__name__ if self.error is not None else None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error is not None else None
