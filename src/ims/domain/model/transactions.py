"""Ledger entries.

Transactions are immutable once recorded.  They reference products by
name only, so they outlive the catalog entry they were made against.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PurchaseTx:
    """Units bought into stock at a unit cost."""

    product_name: str
    quantity: int
    purchase_price: Decimal


@dataclass(frozen=True)
class SaleTx:
    """Units sold at the product's sale price at the time of sale."""

    product_name: str
    quantity: int
    sale_price: Decimal
