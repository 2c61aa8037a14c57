"""Application service: Edit Product use case."""

from __future__ import annotations

from decimal import Decimal

from ims.domain.model.product import ProductSnapshot
from ims.domain.service.catalog_service import ProductCatalog


class EditProductHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        name: str,
        description: str | None = None,
        sale_price: Decimal | float | str | None = None,
    ) -> ProductSnapshot:
        """Update description and/or sale price.

        This does NOT affect recorded sales; they captured the sale
        price at the time they were made.
        """
        return self._catalog.edit(name, description, sale_price).snapshot()
