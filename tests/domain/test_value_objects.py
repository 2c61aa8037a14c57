"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import InvalidPrice, InvalidQuantity
from ims.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_short_repr(self):
        assert Money.of(12.0).amount == Decimal("12.0")

    def test_zero_allowed(self):
        assert Money.of("0").amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidPrice, match="Invalid price"):
            Money(Decimal("-1"))

    def test_of_tags_field_on_negative(self):
        with pytest.raises(InvalidPrice) as exc_info:
            Money.of("-0.01", field="sale_price")
        assert exc_info.value.field == "sale_price"
        assert exc_info.value.message == "Invalid sale price: -0.01"

    def test_of_rejects_garbage(self):
        with pytest.raises(InvalidPrice, match="Invalid purchase price"):
            Money.of("abc", field="purchase_price")

    def test_of_rejects_nan(self):
        with pytest.raises(InvalidPrice):
            Money.of("NaN")

    def test_str_is_plain_amount(self):
        assert str(Money.of("15.0")) == "15.0"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(InvalidQuantity, match="Invalid quantity: 0"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantity, match="Invalid quantity"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidQuantity, match="must be an integer"):
            Quantity(2.5)

    def test_bool_rejected(self):
        with pytest.raises(InvalidQuantity):
            Quantity(True)

    def test_error_field_is_quantity(self):
        with pytest.raises(InvalidQuantity) as exc_info:
            Quantity(0)
        assert exc_info.value.field == "quantity"

    def test_str(self):
        assert str(Quantity(7)) == "7"
