"""Tests for command dispatch through LedgerFacade.execute()."""

from decimal import Decimal

import pytest

from ims.application import commands as cmd
from ims.application.dto import PurchaseReceipt, SaleReceipt
from ims.domain.exceptions import InvariantViolation
from tests.fakes import make_facade


def _stocked_facade():
    facade, repo, ledger = make_facade()
    facade.execute(cmd.Purchase("Potato", "Made in Ukraine", 100, Decimal("15.0"), Decimal("12.0")))
    facade.execute(cmd.Purchase("Potato", "", 50, Decimal("15.0"), Decimal("18.0")))
    return facade, repo, ledger


class TestExecuteSuccess:

    def test_purchase_scenario(self):
        facade, _, _ = make_facade()
        result = facade.execute(
            cmd.Purchase("Potato", "Made in Ukraine", 100, Decimal("15.0"), Decimal("12.0"))
        )

        assert result.ok
        assert isinstance(result.value, PurchaseReceipt)
        assert result.value.total_cost == Decimal("1200.0")
        assert result.error_kind is None

    def test_sell_scenario(self):
        facade, _, _ = make_facade()
        facade.execute(cmd.Purchase("Potato", "Made in Ukraine", 100, Decimal("15.0"), Decimal("12.0")))

        result = facade.execute(cmd.Sell("Potato", 2))

        assert result.ok
        assert isinstance(result.value, SaleReceipt)
        assert result.value.transaction.quantity == 2
        assert result.value.transaction.sale_price == Decimal("15.0")
        assert result.value.remaining_quantity == 98

    def test_weighted_average_profit(self):
        facade, _, _ = _stocked_facade()
        facade.execute(cmd.Sell("Potato", 2))

        result = facade.execute(cmd.ReportProfit("Potato"))

        assert result.value == Decimal("2")

    def test_profit_exact_for_repeating_average_cost(self):
        facade, _, _ = make_facade()
        facade.execute(cmd.Purchase("Potato", "", 1, Decimal("2"), Decimal("1")))
        facade.execute(cmd.Purchase("Potato", "", 2, Decimal("2"), Decimal("2")))
        facade.execute(cmd.Sell("Potato", 3))

        assert facade.execute(cmd.ReportProfit("Potato")).value == Decimal("1")
        assert facade.execute(cmd.ReportSalesSummary()).value.total_profit == Decimal("1")

    def test_get_edit_delete(self):
        facade, _, _ = _stocked_facade()

        assert facade.execute(cmd.GetProduct("Potato")).value.quantity == 150
        edited = facade.execute(cmd.EditProduct("Potato", description="Washed"))
        assert edited.value.description == "Washed"
        assert facade.execute(cmd.DeleteProduct("Potato")).ok
        assert facade.execute(cmd.GetProduct("Potato")).error_kind == "ProductNotFound"

    def test_report_commands(self):
        facade, _, _ = _stocked_facade()
        facade.execute(cmd.Sell("Potato", 2))

        assert facade.execute(cmd.ReportProduct("Potato")).value.name == "Potato"
        assert len(facade.execute(cmd.ReportInventory()).value) == 1
        assert facade.execute(cmd.ReportSalesSummary()).value.total_profit == Decimal("2")
        assert len(facade.execute(cmd.ReportSalesHistory()).value) == 1
        with_profit = facade.execute(cmd.ReportSalesHistory(with_profit=True)).value
        assert with_profit[0].profit == Decimal("2")
        assert facade.execute(cmd.ReportPurchaseSummary()).value[0].quantity == 150
        assert len(facade.execute(cmd.ReportPurchaseHistory()).value) == 2


class TestExecuteFailure:

    def test_sell_on_empty_catalog(self):
        facade, _, ledger = make_facade()

        result = facade.execute(cmd.Sell("Carrot", 1))

        assert not result.ok
        assert result.error_kind == "ProductNotFound"
        assert result.error.field == "name"
        assert result.message == "Unavailable product: Carrot"
        assert ledger.all_sales() == []

    def test_zero_quantity_purchase(self):
        facade, repo, ledger = make_facade()

        result = facade.execute(cmd.Purchase("Potato", "", 0, Decimal("15"), Decimal("12")))

        assert result.error_kind == "InvalidQuantity"
        assert result.error.field == "quantity"
        assert repo.list_all() == []
        assert ledger.all_purchases() == []

    def test_negative_purchase_price(self):
        facade, _, _ = make_facade()
        result = facade.execute(cmd.Purchase("Potato", "", 1, Decimal("15"), Decimal("-1")))
        assert result.error_kind == "InvalidPrice"
        assert result.error.field == "purchase_price"

    def test_oversell(self):
        facade, _, ledger = _stocked_facade()
        before = facade.get_product("Potato")

        result = facade.execute(cmd.Sell("Potato", 151))

        assert result.error_kind == "InsufficientStock"
        assert facade.get_product("Potato") == before
        assert ledger.all_sales() == []

    def test_unknown_command_type(self):
        facade, _, _ = make_facade()
        with pytest.raises(TypeError, match="Unsupported command"):
            facade.execute("sell potatoes")

    def test_invariant_violation_is_not_swallowed(self):
        facade, repo, _ = _stocked_facade()
        repo.get_by_name("Potato").quantity = -4

        with pytest.raises(InvariantViolation):
            facade.execute(cmd.ReportProfit("Potato"))
