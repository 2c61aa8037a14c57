"""Unit tests for the append-only in-memory ledger."""

from decimal import Decimal

from ims.domain.model.transactions import PurchaseTx, SaleTx
from ims.infrastructure.persistence.in_memory_ledger import InMemoryLedger


def test_entries_kept_in_insertion_order():
    ledger = InMemoryLedger()
    ledger.record_purchase(PurchaseTx("Potato", 10, Decimal("1")))
    ledger.record_purchase(PurchaseTx("Carrot", 5, Decimal("2")))
    ledger.record_purchase(PurchaseTx("Potato", 3, Decimal("3")))

    assert [tx.product_name for tx in ledger.all_purchases()] == ["Potato", "Carrot", "Potato"]
    assert [tx.quantity for tx in ledger.purchases_for("Potato")] == [10, 3]


def test_sales_filtered_by_exact_name():
    ledger = InMemoryLedger()
    ledger.record_sale(SaleTx("Potato", 1, Decimal("1")))
    ledger.record_sale(SaleTx("potato", 2, Decimal("1")))

    assert [tx.quantity for tx in ledger.sales_for("Potato")] == [1]
    assert ledger.sales_for("Carrot") == []


def test_returned_lists_do_not_alias_history():
    ledger = InMemoryLedger()
    ledger.record_sale(SaleTx("Potato", 1, Decimal("1")))

    ledger.all_sales().clear()

    assert len(ledger.all_sales()) == 1
