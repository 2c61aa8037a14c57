"""Application service: Purchase Product use case.

Buys units into stock.  The catalog creates or restocks the product and
only then is the purchase appended to the ledger, so a rejected purchase
leaves no trace in either.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ims.application.dto import PurchaseReceipt
from ims.domain.model.transactions import PurchaseTx
from ims.domain.repository.ledger_repository import TransactionLedger
from ims.domain.service.accounting_service import AccountingEngine
from ims.domain.service.catalog_service import ProductCatalog

logger = logging.getLogger(__name__)


class PurchaseProductHandler:

    def __init__(
        self,
        catalog: ProductCatalog,
        ledger: TransactionLedger,
        accounting: AccountingEngine,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._accounting = accounting

    def handle(
        self,
        name: str,
        description: str,
        quantity: int,
        sale_price: Decimal | float | str,
        purchase_price: Decimal | float | str,
    ) -> PurchaseReceipt:
        product = self._catalog.add_or_restock(
            name, description, quantity, sale_price, purchase_price
        )
        lot = product.purchase_lots[-1]
        tx = PurchaseTx(product_name=product.name, quantity=lot.quantity, purchase_price=lot.unit_price)
        self._ledger.record_purchase(tx)

        total = self._accounting.purchase_total(tx)
        logger.info("Purchased %d x %r, total cost %s", tx.quantity, tx.product_name, total)
        return PurchaseReceipt(product=product.snapshot(), transaction=tx, total_cost=total)
