"""Text rendering of ledger results for the interactive shell."""

from __future__ import annotations

from decimal import Decimal

import click

from ims.domain.model.product import Lot, ProductSnapshot
from ims.domain.model.transactions import PurchaseTx, SaleTx

RULE = "= " * 30


def say(message: str) -> None:
    click.echo(f">>> {message}")


def format_lots(lots: tuple[Lot, ...]) -> str:
    return "[" + ", ".join(f"({lot.quantity}, {lot.unit_price})" for lot in lots) + "]"


def format_purchase_tx(tx: PurchaseTx) -> str:
    return (
        f'PurchaseTx {{ product_name: "{tx.product_name}", '
        f"quantity: {tx.quantity}, purchase_price: {tx.purchase_price} }}"
    )


def format_sale_tx(tx: SaleTx) -> str:
    return (
        f'SaleTx {{ product_name: "{tx.product_name}", '
        f"quantity: {tx.quantity}, sale_price: {tx.sale_price} }}"
    )


def format_product(product: ProductSnapshot) -> str:
    return (
        f'Product {{ name: "{product.name}", description: "{product.description}", '
        f"quantity: {product.quantity}, sale_price: {product.sale_price}, "
        f"purchase_prices: {format_lots(product.purchase_lots)} }}"
    )


def format_profit(profit: Decimal | None) -> str:
    return "Error (Unable to calculate)" if profit is None else str(profit)


def show_product_details(product: ProductSnapshot) -> None:
    say("Product information")
    say(f"Name: {product.name}")
    say(f"Description: {product.description}")
    say(f"Quantity in stock: {product.quantity}")
    say(f"Sale price: {product.sale_price}")
    say(f"Purchase quantity and prices: {format_lots(product.purchase_lots)}")


def show_product_block(product: ProductSnapshot) -> None:
    click.echo(f"Product: {product.name}")
    click.echo(f"Description: {product.description}")
    click.echo(f"Quantity in stock: {product.quantity}")
    click.echo(f"Sale price: {product.sale_price}")
    click.echo(f"Purchase quantity and prices: {format_lots(product.purchase_lots)}")
    click.echo(RULE)
