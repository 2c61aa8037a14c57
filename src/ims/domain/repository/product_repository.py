"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact (case-sensitive) name, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, oldest first."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, name: str) -> None:
        """Remove a product.  Unknown names are ignored."""
