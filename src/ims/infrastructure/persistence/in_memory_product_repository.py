"""In-memory implementation of ProductRepository.

State lives for one program run only.  A dict keeps insertion order, so
products list in the order they were first purchased.
"""

from __future__ import annotations

from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.name] = p

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(name)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.name] = product

    def delete(self, name: str) -> None:
        self._store.pop(name, None)
