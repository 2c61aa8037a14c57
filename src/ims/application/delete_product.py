"""Application service: Delete Product use case.

Removes the product from the catalog.  Its purchases and sales stay in
the ledger and keep showing up in the history reports.
"""

from __future__ import annotations

from ims.domain.service.catalog_service import ProductCatalog


class DeleteProductHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, name: str) -> None:
        self._catalog.delete(name)
