"""Domain service: Accounting Engine.

Derives totals, cost bases and profit from the catalog and the ledger.
Nothing here mutates state.

Cost basis is the weighted average unit cost over every lot of the
product as it currently stands in the catalog, applied uniformly to each
sale.  It is not a FIFO walk over the lots.  Because lots belong to the
catalog entry, profit for a product that has since been deleted cannot be
resolved.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ims.domain.exceptions import InvariantViolation, ProductNotFound
from ims.domain.model.product import ProductSnapshot
from ims.domain.model.transactions import PurchaseTx, SaleTx
from ims.domain.repository.ledger_repository import TransactionLedger
from ims.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class CostBasis:
    """Units and total cost over every lot of one product."""

    units: int
    cost: Decimal

    def profit(self, sales: list[SaleTx]) -> Decimal:
        """Profit of *sales* at the weighted average unit cost.

        Divides once, at the end, so an average such as 5/3 does not
        leave rounding residue in the result.
        """
        if self.units <= 0:
            raise InvariantViolation(f"No purchase lots behind cost basis {self!r}")
        revenue = sum((tx.sale_price * tx.quantity for tx in sales), Decimal("0"))
        sold = sum(tx.quantity for tx in sales)
        return (revenue * self.units - self.cost * sold) / self.units


@dataclass(frozen=True)
class SaleLine:
    """A sale with its own profit contribution.

    ``profit`` is None when the product is no longer in the catalog.
    """

    transaction: SaleTx
    revenue: Decimal
    profit: Decimal | None


@dataclass(frozen=True)
class ProductSalesLine:
    product_name: str
    quantity: int
    revenue: Decimal
    profit: Decimal | None


@dataclass(frozen=True)
class SalesSummary:
    lines: list[ProductSalesLine]
    total_profit: Decimal


@dataclass(frozen=True)
class PurchaseSummaryLine:
    product_name: str
    quantity: int
    total_cost: Decimal


class AccountingEngine:

    def __init__(self, product_repo: ProductRepository, ledger: TransactionLedger) -> None:
        self._product_repo = product_repo
        self._ledger = ledger

    # --- Transaction totals ---------------------------------------------------

    @staticmethod
    def purchase_total(tx: PurchaseTx) -> Decimal:
        return tx.purchase_price * tx.quantity

    @staticmethod
    def sale_total(tx: SaleTx) -> Decimal:
        return tx.sale_price * tx.quantity

    # --- Product views --------------------------------------------------------

    def product_report(self, name: str) -> ProductSnapshot:
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise ProductNotFound(name)
        return product.snapshot()

    def inventory_report(self) -> list[ProductSnapshot]:
        return [product.snapshot() for product in self._product_repo.list_all()]

    # --- Profit ---------------------------------------------------------------

    def cost_basis(self, name: str) -> CostBasis:
        """Lot totals of the catalog product *name*."""
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise ProductNotFound(name)
        product.check_invariants()
        return CostBasis(units=product.purchased_quantity, cost=product.purchased_cost)

    def profit_report(self, name: str) -> Decimal:
        """Total profit over every recorded sale of *name*."""
        return self.cost_basis(name).profit(self._ledger.sales_for(name))

    def sales_summary_report(self) -> SalesSummary:
        """Sales grouped by product, in order of each product's first sale."""
        grouped: dict[str, list[SaleTx]] = {}
        for tx in self._ledger.all_sales():
            grouped.setdefault(tx.product_name, []).append(tx)

        lines: list[ProductSalesLine] = []
        total_profit = Decimal("0")
        for name, sales in grouped.items():
            profit = self._profit_or_none(name)
            if profit is not None:
                total_profit += profit
            lines.append(
                ProductSalesLine(
                    product_name=name,
                    quantity=sum(tx.quantity for tx in sales),
                    revenue=sum((self.sale_total(tx) for tx in sales), Decimal("0")),
                    profit=profit,
                )
            )
        return SalesSummary(lines=lines, total_profit=total_profit)

    def sales_history_with_profit(self) -> list[SaleLine]:
        bases: dict[str, CostBasis | None] = {}
        lines: list[SaleLine] = []
        for tx in self._ledger.all_sales():
            if tx.product_name not in bases:
                bases[tx.product_name] = self._cost_basis_or_none(tx.product_name)
            basis = bases[tx.product_name]
            profit = None if basis is None else basis.profit([tx])
            lines.append(SaleLine(transaction=tx, revenue=self.sale_total(tx), profit=profit))
        return lines

    def purchase_summary_report(self) -> list[PurchaseSummaryLine]:
        """Units and cost bought per catalog product, from its lots."""
        return [
            PurchaseSummaryLine(
                product_name=product.name,
                quantity=product.purchased_quantity,
                total_cost=product.purchased_cost,
            )
            for product in self._product_repo.list_all()
        ]

    # --- History --------------------------------------------------------------

    def sales_history_report(self) -> list[SaleTx]:
        return self._ledger.all_sales()

    def purchase_history_report(self) -> list[PurchaseTx]:
        return self._ledger.all_purchases()

    # --- Internal helpers -----------------------------------------------------

    def _cost_basis_or_none(self, name: str) -> CostBasis | None:
        try:
            return self.cost_basis(name)
        except ProductNotFound:
            return None

    def _profit_or_none(self, name: str) -> Decimal | None:
        try:
            return self.profit_report(name)
        except ProductNotFound:
            return None
