"""Application service: Sell Product use case."""

from __future__ import annotations

import logging

from ims.application.dto import SaleReceipt
from ims.domain.model.transactions import SaleTx
from ims.domain.repository.ledger_repository import TransactionLedger
from ims.domain.service.accounting_service import AccountingEngine
from ims.domain.service.catalog_service import ProductCatalog

logger = logging.getLogger(__name__)


class SellProductHandler:

    def __init__(
        self,
        catalog: ProductCatalog,
        ledger: TransactionLedger,
        accounting: AccountingEngine,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._accounting = accounting

    def handle(self, name: str, quantity: int) -> SaleReceipt:
        """Sell units at the product's current sale price.

        Stock is checked and taken by the catalog before the sale is
        appended to the ledger.
        """
        before = self._catalog.get(name).snapshot()
        unit_cost = self._catalog.consume_stock(name, quantity)

        tx = SaleTx(product_name=before.name, quantity=quantity, sale_price=before.sale_price)
        self._ledger.record_sale(tx)

        revenue = self._accounting.sale_total(tx)
        logger.info("Sold %d x %r, revenue %s", tx.quantity, tx.product_name, revenue)
        return SaleReceipt(
            transaction=tx,
            product_before_sale=before,
            total_revenue=revenue,
            unit_cost_estimate=unit_cost,
        )
