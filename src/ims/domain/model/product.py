"""Product aggregate.

A product carries its stock on hand and every purchase lot it was ever
restocked with.  Lots are the cost-basis record: they are appended on each
purchase and never merged, split or depleted.  Stock only moves through
``restock()`` and ``consume()``; ``edit()`` can touch nothing but the
description and the sale price.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ims.domain.exceptions import InsufficientStock, InvariantViolation
from ims.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class Lot:
    """One purchase's (quantity, unit cost) pair."""

    quantity: int
    unit_price: Decimal

    @property
    def cost(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class ProductSnapshot:
    """Point-in-time copy of a product, safe to hand outside the domain."""

    name: str
    description: str
    quantity: int
    sale_price: Decimal
    purchase_lots: tuple[Lot, ...]


@dataclass
class Product:
    """Aggregate root for a stocked product.

    Use ``Product.create()`` for new products; it records the first
    purchase as the opening lot.  Invariants:
    - ``quantity == sum(lot quantities) - sold_quantity``
    - ``quantity >= 0``
    """

    name: str
    description: str
    sale_price: Money
    purchase_lots: list[Lot] = field(default_factory=list)
    quantity: int = 0
    sold_quantity: int = 0

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        description: str,
        quantity: Quantity,
        sale_price: Money,
        purchase_price: Money,
    ) -> Product:
        product = Product(name=name, description=description, sale_price=sale_price)
        product.restock(quantity, purchase_price)
        return product

    # --- Mutations ------------------------------------------------------------

    def restock(self, quantity: Quantity, purchase_price: Money) -> Lot:
        """Append a new lot and add its units to stock."""
        lot = Lot(quantity=quantity.value, unit_price=purchase_price.amount)
        self.purchase_lots.append(lot)
        self.quantity += lot.quantity
        return lot

    def edit(
        self,
        description: str | None = None,
        sale_price: Money | None = None,
    ) -> None:
        """Change the description and/or sale price.

        Past sales keep the price they were recorded with.
        """
        if description is not None:
            self.description = description
        if sale_price is not None:
            self.sale_price = sale_price

    def consume(self, quantity: Quantity) -> None:
        """Take *quantity* units out of stock.  Lots stay as they are."""
        if quantity.value > self.quantity:
            raise InsufficientStock(
                f"Insufficient stock for {self.name} "
                f"(need {quantity.value}, have {self.quantity})"
            )
        self.quantity -= quantity.value
        self.sold_quantity += quantity.value

    # --- Computed properties --------------------------------------------------

    @property
    def purchased_quantity(self) -> int:
        return sum(lot.quantity for lot in self.purchase_lots)

    @property
    def purchased_cost(self) -> Decimal:
        return sum((lot.cost for lot in self.purchase_lots), Decimal("0"))

    @property
    def average_unit_cost(self) -> Decimal:
        """Weighted average unit cost across every lot ever purchased."""
        units = self.purchased_quantity
        if units <= 0:
            raise InvariantViolation(f"Product {self.name!r} has no purchase lots")
        return self.purchased_cost / units

    def check_invariants(self) -> None:
        if self.quantity < 0:
            raise InvariantViolation(
                f"Negative stock for {self.name!r}: {self.quantity}"
            )
        if self.quantity != self.purchased_quantity - self.sold_quantity:
            raise InvariantViolation(
                f"Stock for {self.name!r} is {self.quantity}, but lots hold "
                f"{self.purchased_quantity} and {self.sold_quantity} were sold"
            )

    def snapshot(self) -> ProductSnapshot:
        return ProductSnapshot(
            name=self.name,
            description=self.description,
            quantity=self.quantity,
            sale_price=self.sale_price.amount,
            purchase_lots=tuple(self.purchase_lots),
        )
