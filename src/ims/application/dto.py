"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the shell and application layers without
exposing the mutable Product aggregate to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ims.domain.model.product import ProductSnapshot
from ims.domain.model.transactions import PurchaseTx, SaleTx


@dataclass(frozen=True)
class PurchaseReceipt:
    """Output: the product after the purchase and what it cost."""

    product: ProductSnapshot
    transaction: PurchaseTx
    total_cost: Decimal


@dataclass(frozen=True)
class SaleReceipt:
    """Output: the recorded sale and the product as it was before it."""

    transaction: SaleTx
    product_before_sale: ProductSnapshot
    total_revenue: Decimal
    unit_cost_estimate: Decimal

    @property
    def remaining_quantity(self) -> int:
        return self.product_before_sale.quantity - self.transaction.quantity
