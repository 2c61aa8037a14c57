"""Abstract append-only transaction ledger.

The ledger is the audit trail every report is built from.  Entries are
kept in insertion order, which is the only notion of time the system
has, and are never edited or removed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.transactions import PurchaseTx, SaleTx


class TransactionLedger(ABC):

    @abstractmethod
    def record_purchase(self, tx: PurchaseTx) -> None:
        """Append a purchase."""

    @abstractmethod
    def record_sale(self, tx: SaleTx) -> None:
        """Append a sale."""

    @abstractmethod
    def all_purchases(self) -> list[PurchaseTx]:
        """Every purchase, oldest first."""

    @abstractmethod
    def all_sales(self) -> list[SaleTx]:
        """Every sale, oldest first."""

    def purchases_for(self, name: str) -> list[PurchaseTx]:
        return [tx for tx in self.all_purchases() if tx.product_name == name]

    def sales_for(self, name: str) -> list[SaleTx]:
        return [tx for tx in self.all_sales() if tx.product_name == name]
