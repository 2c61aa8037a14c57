"""Test wiring helpers.

The in-memory stores are the production implementations, so tests use
them directly; these helpers just save the boilerplate of wiring them.
"""

from __future__ import annotations


from ims.application.ledger_facade import LedgerFacade
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money, Quantity
from ims.infrastructure.persistence.in_memory_ledger import InMemoryLedger
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def make_product(
    name: str = "Potato",
    quantity: int = 100,
    sale_price: str = "15.0",
    purchase_price: str = "12.0",
    description: str = "Made in Ukraine",
) -> Product:
    return Product.create(
        name, description, Quantity(quantity), Money.of(sale_price), Money.of(purchase_price)
    )


def make_facade() -> tuple[LedgerFacade, InMemoryProductRepository, InMemoryLedger]:
    product_repo = InMemoryProductRepository()
    ledger = InMemoryLedger()
    return LedgerFacade(product_repo, ledger), product_repo, ledger


def stock_invariant_holds(facade: LedgerFacade, name: str) -> bool:
    """quantity == purchased lot units - units sold to date (per ledger)."""
    product = facade.get_product(name)
    purchased = sum(lot.quantity for lot in product.purchase_lots)
    sold = sum(tx.quantity for tx in facade.report_sales_history() if tx.product_name == name)
    return product.quantity == purchased - sold
