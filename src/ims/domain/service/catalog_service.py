"""Domain service: Product Catalog.

Owns product existence and stock.  Every operation validates all of its
arguments before touching a product, so a rejected call leaves the
catalog exactly as it was.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ims.domain.exceptions import ProductNotFound, ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money, Quantity
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductCatalog:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def add_or_restock(
        self,
        name: str,
        description: str,
        quantity: int,
        sale_price: Decimal | float | str,
        purchase_price: Decimal | float | str,
    ) -> Product:
        """Create the product on its first purchase, otherwise add a lot.

        A restock keeps the existing description and sale price; those
        only change through ``edit()``.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required", field="name")
        name = name.strip()
        qty = Quantity(quantity)
        sale = Money.of(sale_price, field="sale_price")
        cost = Money.of(purchase_price, field="purchase_price")

        product = self._product_repo.get_by_name(name)
        if product is None:
            product = Product.create(name, description, qty, sale, cost)
            logger.info("Created product %r with %d units at %s", name, qty.value, cost)
        else:
            product.restock(qty, cost)
            logger.info("Restocked %r with %d units at %s", name, qty.value, cost)

        product.check_invariants()
        self._product_repo.save(product)
        return product

    def get(self, name: str) -> Product:
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise ProductNotFound(name)
        return product

    def edit(
        self,
        name: str,
        new_description: str | None = None,
        new_sale_price: Decimal | float | str | None = None,
    ) -> Product:
        """Change description and/or sale price; nothing else is editable."""
        product = self.get(name)
        price = (
            Money.of(new_sale_price, field="sale_price")
            if new_sale_price is not None
            else None
        )
        product.edit(description=new_description, sale_price=price)
        self._product_repo.save(product)
        logger.info("Edited product %r", name)
        return product

    def delete(self, name: str) -> None:
        self.get(name)
        self._product_repo.delete(name)
        logger.info("Deleted product %r", name)

    def consume_stock(self, name: str, quantity: int) -> Decimal:
        """Take units out of stock and return the unit cost estimate.

        Only the running quantity moves; lots are kept whole for
        reporting.  The estimate is the weighted average lot cost.
        """
        product = self.get(name)
        qty = Quantity(quantity)
        product.consume(qty)
        product.check_invariants()
        self._product_repo.save(product)
        return product.average_unit_cost
