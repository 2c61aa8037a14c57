"""Interactive menu loop.

Each handler collects raw input, turns it into a command for the ledger
facade and renders the ``CommandResult``.  No bookkeeping happens here.
"""

from __future__ import annotations

from typing import Callable

import click

from ims.application import commands as cmd
from ims.application.ledger_facade import LedgerFacade
from ims.domain.exceptions import ProductNotFound
from ims.infrastructure.auth import AuthToken
from ims.infrastructure.cli import render
from ims.infrastructure.cli.prompts import (
    ESCAPE,
    SEPARATOR,
    Escape,
    ask,
    ask_optional,
    parse_price,
    parse_quantity,
)

MenuEntry = tuple[str, Callable[[LedgerFacade], None]]


def _run(facade: LedgerFacade, command: cmd.Command) -> cmd.CommandResult:
    result = facade.execute(command)
    if not result.ok:
        render.say(result.message or "")
    return result


def _menu_loop(facade: LedgerFacade, entries: dict[str, MenuEntry]) -> None:
    width = max(len(label) for label, _ in entries.values()) + 2
    while True:
        click.echo(SEPARATOR)
        click.echo(f"Enter feature number to go to, or {ESCAPE} to escape:")
        for key, (label, _) in entries.items():
            click.echo(f"{label:<{width}}{key}")
        choice = click.prompt("", prompt_suffix="> ").strip()
        if choice == ESCAPE:
            return
        entry = entries.get(choice)
        if entry is None:
            continue
        try:
            entry[1](facade)
        except Escape:
            continue
        except click.BadParameter as exc:
            render.say(exc.message)


# --- Inventory management -----------------------------------------------------


def get_product(facade: LedgerFacade) -> None:
    name = ask("Enter product name to get information about")
    result = _run(facade, cmd.GetProduct(name))
    if result.ok:
        render.show_product_details(result.value)


def edit_product(facade: LedgerFacade) -> None:
    name = ask("Enter product name to edit")
    current = _run(facade, cmd.GetProduct(name))
    if not current.ok:
        return

    click.echo(f"Product being set: {render.format_product(current.value)}")
    description = ask_optional("Enter product description", allow_empty=True)
    raw_price = ask_optional("Enter product sale price")
    sale_price = parse_price(raw_price, "sale price") if raw_price is not None else None

    result = _run(facade, cmd.EditProduct(name, description, sale_price))
    if result.ok:
        render.say(f"Product edited: {render.format_product(result.value)}")


def delete_product(facade: LedgerFacade) -> None:
    name = ask("Enter product name to delete")
    result = _run(facade, cmd.DeleteProduct(name))
    if result.ok:
        render.say(f"Product deleted: {name}")


INVENTORY_MENU: dict[str, MenuEntry] = {
    "1": ("Get product", get_product),
    "2": ("Edit product", edit_product),
    "3": ("Delete product", delete_product),
}


# --- Sales & purchases --------------------------------------------------------


def sell_product(facade: LedgerFacade) -> None:
    name = ask("Enter product name to sell")
    current = _run(facade, cmd.GetProduct(name))
    if not current.ok:
        return

    click.echo(f"Product being sold: {render.format_product(current.value)}")
    quantity = parse_quantity(ask("Enter product quantity"))
    result = _run(facade, cmd.Sell(name, quantity))
    if result.ok:
        render.say(f"Product sold: {render.format_sale_tx(result.value.transaction)}")


def purchase_product(facade: LedgerFacade) -> None:
    name = ask("Enter product name to purchase")
    try:
        existing = facade.get_product(name)
    except ProductNotFound:
        existing = None

    if existing is not None:
        render.say(f"Product already exists: {name}")
        ask("Enter any value to add more of this product", allow_empty=True)
        description = existing.description
        quantity = parse_quantity(ask("Enter product quantity"))
        sale_price = existing.sale_price
    else:
        description = ask("Enter product description", allow_empty=True)
        quantity = parse_quantity(ask("Enter product quantity"))
        sale_price = parse_price(ask("Enter product sale price"), "sale price")
    purchase_price = parse_price(ask("Enter product purchase price"), "purchase price")

    result = _run(facade, cmd.Purchase(name, description, quantity, sale_price, purchase_price))
    if result.ok:
        receipt = result.value
        render.say(
            f"Product added: {render.format_purchase_tx(receipt.transaction)}; "
            f"Total cost: {receipt.total_cost}"
        )


# --- Reporting ----------------------------------------------------------------


def report_products(facade: LedgerFacade) -> None:
    click.echo("Product report")
    for product in _run(facade, cmd.ReportInventory()).value:
        render.show_product_block(product)


def report_sales(facade: LedgerFacade) -> None:
    summary = _run(facade, cmd.ReportSalesSummary()).value
    click.echo("Sales report")
    for line in summary.lines:
        click.echo(
            f"Product: {line.product_name}; Quantity: {line.quantity}; "
            f"Total sale price: {line.revenue}; Profit: {render.format_profit(line.profit)}"
        )
    click.echo(f"Total Profit: {summary.total_profit}")


def display_sales(facade: LedgerFacade) -> None:
    click.echo("Sales history")
    for line in _run(facade, cmd.ReportSalesHistory(with_profit=True)).value:
        tx = line.transaction
        click.echo(
            f"Product: {tx.product_name}; Quantity: {tx.quantity}; "
            f"Sale price: {tx.sale_price}; Profit: {render.format_profit(line.profit)}"
        )


def report_purchases(facade: LedgerFacade) -> None:
    click.echo("Purchases report")
    for line in _run(facade, cmd.ReportPurchaseSummary()).value:
        click.echo(
            f"Product: {line.product_name}; Quantity: {line.quantity}; "
            f"Total purchase price: {line.total_cost}"
        )


def display_purchases(facade: LedgerFacade) -> None:
    click.echo("Purchase history")
    for tx in _run(facade, cmd.ReportPurchaseHistory()).value:
        click.echo(
            f"Product: {tx.product_name}; Quantity: {tx.quantity}; "
            f"Purchase price: {tx.purchase_price}; Total cost: {facade.purchase_total(tx)}"
        )


def report_profit(facade: LedgerFacade) -> None:
    name = ask("Enter product name to calculate profit for")
    result = _run(facade, cmd.ReportProfit(name))
    if result.ok:
        render.say(f"Profit for {name}: {result.value}")


REPORT_MENU: dict[str, MenuEntry] = {
    "1": ("Generate product report", report_products),
    "2": ("Generate sales report for each product", report_sales),
    "3": ("Display sales history", display_sales),
    "4": ("Generate purchase report for each product", report_purchases),
    "5": ("Display purchase history", display_purchases),
    "6": ("Calculate profit for a product", report_profit),
}


# --- Main menu ----------------------------------------------------------------


MAIN_MENU: dict[str, MenuEntry] = {
    "1": ("Inventory Management", lambda facade: _menu_loop(facade, INVENTORY_MENU)),
    "2": ("Sales Management", sell_product),
    "3": ("Purchase Management", purchase_product),
    "4": ("Reporting", lambda facade: _menu_loop(facade, REPORT_MENU)),
}


def run_session(facade: LedgerFacade, token: AuthToken) -> None:
    """Serve the main menu until the user escapes."""
    if not isinstance(token, AuthToken):
        raise click.ClickException("Not authorized")
    _menu_loop(facade, MAIN_MENU)
