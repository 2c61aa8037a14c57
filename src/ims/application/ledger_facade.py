"""Ledger Facade: the single entry point into the inventory ledger.

The facade owns the catalog and the ledger for the lifetime of one run.
Its typed methods raise domain errors; ``execute()`` takes a command,
routes it to the right method and hands back a ``CommandResult`` instead
of raising, which is what the interactive shell consumes.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from ims.application import commands as cmd
from ims.application.delete_product import DeleteProductHandler
from ims.application.dto import PurchaseReceipt, SaleReceipt
from ims.application.edit_product import EditProductHandler
from ims.application.purchase_product import PurchaseProductHandler
from ims.application.sell_product import SellProductHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.product import ProductSnapshot
from ims.domain.model.transactions import PurchaseTx, SaleTx
from ims.domain.repository.ledger_repository import TransactionLedger
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.accounting_service import (
    AccountingEngine,
    PurchaseSummaryLine,
    SaleLine,
    SalesSummary,
)
from ims.domain.service.catalog_service import ProductCatalog

logger = logging.getLogger(__name__)


class LedgerFacade:

    def __init__(self, product_repo: ProductRepository, ledger: TransactionLedger) -> None:
        self._catalog = ProductCatalog(product_repo)
        self._ledger = ledger
        self._accounting = AccountingEngine(product_repo, ledger)

        self._purchase = PurchaseProductHandler(self._catalog, ledger, self._accounting)
        self._sell = SellProductHandler(self._catalog, ledger, self._accounting)
        self._edit = EditProductHandler(self._catalog)
        self._delete = DeleteProductHandler(self._catalog)

    # --- Mutations ------------------------------------------------------------

    def purchase(
        self,
        name: str,
        description: str,
        quantity: int,
        sale_price: Decimal | float | str,
        purchase_price: Decimal | float | str,
    ) -> PurchaseReceipt:
        return self._purchase.handle(name, description, quantity, sale_price, purchase_price)

    def sell(self, name: str, quantity: int) -> SaleReceipt:
        return self._sell.handle(name, quantity)

    def edit_product(
        self,
        name: str,
        description: str | None = None,
        sale_price: Decimal | float | str | None = None,
    ) -> ProductSnapshot:
        return self._edit.handle(name, description, sale_price)

    def delete_product(self, name: str) -> None:
        self._delete.handle(name)

    # --- Queries --------------------------------------------------------------

    def get_product(self, name: str) -> ProductSnapshot:
        return self._catalog.get(name).snapshot()

    def report_product(self, name: str) -> ProductSnapshot:
        return self._accounting.product_report(name)

    def report_profit(self, name: str) -> Decimal:
        return self._accounting.profit_report(name)

    def report_inventory(self) -> list[ProductSnapshot]:
        return self._accounting.inventory_report()

    def report_sales_summary(self) -> SalesSummary:
        return self._accounting.sales_summary_report()

    def report_sales_history(self) -> list[SaleTx]:
        return self._accounting.sales_history_report()

    def report_sales_history_with_profit(self) -> list[SaleLine]:
        return self._accounting.sales_history_with_profit()

    def report_purchase_summary(self) -> list[PurchaseSummaryLine]:
        return self._accounting.purchase_summary_report()

    def report_purchase_history(self) -> list[PurchaseTx]:
        return self._accounting.purchase_history_report()

    def purchase_total(self, tx: PurchaseTx) -> Decimal:
        return self._accounting.purchase_total(tx)

    # --- Command dispatch -----------------------------------------------------

    def execute(self, command: cmd.Command) -> cmd.CommandResult:
        """Run one command.  Domain errors come back inside the result."""
        try:
            value = self._dispatch(command)
        except DomainException as exc:
            logger.warning(
                "Rejected %s: %s (field=%s)", type(command).__name__, exc.message, exc.field
            )
            return cmd.CommandResult(command=command, error=exc)
        return cmd.CommandResult(command=command, value=value)

    def _dispatch(self, command: cmd.Command) -> Any:
        match command:
            case cmd.Purchase(name, description, quantity, sale_price, purchase_price):
                return self.purchase(name, description, quantity, sale_price, purchase_price)
            case cmd.Sell(name, quantity):
                return self.sell(name, quantity)
            case cmd.GetProduct(name):
                return self.get_product(name)
            case cmd.EditProduct(name, description, sale_price):
                return self.edit_product(name, description, sale_price)
            case cmd.DeleteProduct(name):
                return self.delete_product(name)
            case cmd.ReportProduct(name):
                return self.report_product(name)
            case cmd.ReportProfit(name):
                return self.report_profit(name)
            case cmd.ReportInventory():
                return self.report_inventory()
            case cmd.ReportSalesSummary():
                return self.report_sales_summary()
            case cmd.ReportSalesHistory(with_profit=True):
                return self.report_sales_history_with_profit()
            case cmd.ReportSalesHistory():
                return self.report_sales_history()
            case cmd.ReportPurchaseSummary():
                return self.report_purchase_summary()
            case cmd.ReportPurchaseHistory():
                return self.report_purchase_history()
        raise TypeError(f"Unsupported command: {command!r}")
