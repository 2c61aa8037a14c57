"""In-memory, append-only implementation of TransactionLedger."""

from __future__ import annotations

from ims.domain.model.transactions import PurchaseTx, SaleTx
from ims.domain.repository.ledger_repository import TransactionLedger


class InMemoryLedger(TransactionLedger):

    def __init__(self) -> None:
        self._purchases: list[PurchaseTx] = []
        self._sales: list[SaleTx] = []

    def record_purchase(self, tx: PurchaseTx) -> None:
        self._purchases.append(tx)

    def record_sale(self, tx: SaleTx) -> None:
        self._sales.append(tx)

    # Copies, so callers cannot rewrite history.
    def all_purchases(self) -> list[PurchaseTx]:
        return list(self._purchases)

    def all_sales(self) -> list[SaleTx]:
        return list(self._sales)
