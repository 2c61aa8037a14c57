"""Line-based input for the interactive shell.

Every prompt accepts ``x`` to back out, which surfaces as ``Escape``.
Numbers are parsed here so that the ledger only ever sees typed values;
the range checks (positive quantity, non-negative price) stay with the
ledger.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

ESCAPE = "x"
CONTINUE = "c"
SEPARATOR = "<>::" * 15


class Escape(Exception):
    """The user typed ``x``."""


def ask(text: str, allow_empty: bool = False) -> str:
    """Prompt for one line; with *allow_empty* a bare Enter yields ""."""
    click.echo(SEPARATOR)
    extra = {"default": "", "show_default": False} if allow_empty else {}
    answer = click.prompt(f"{text}, or {ESCAPE} to escape", **extra).strip()
    if answer == ESCAPE:
        raise Escape()
    return answer


def ask_optional(text: str, allow_empty: bool = False) -> str | None:
    """Like ``ask`` but ``c`` means "keep the current value" (None)."""
    answer = ask(f"{text}, or {CONTINUE} to continue", allow_empty)
    return None if answer == CONTINUE else answer


def parse_quantity(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid quantity: {raw}")


def parse_price(raw: str, label: str = "price") -> Decimal:
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid {label}: {raw}")
    if not value.is_finite():
        raise click.BadParameter(f"Invalid {label}: {raw}")
    return value
