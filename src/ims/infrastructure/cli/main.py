from __future__ import annotations

from pathlib import Path

import click

from ims.infrastructure.auth import authorize
from ims.infrastructure.bootstrap import ledger_facade
from ims.infrastructure.cli.prompts import ESCAPE
from ims.infrastructure.cli.session import run_session
from ims.infrastructure.config import load_settings
from ims.infrastructure.logging_setup import configure_logging


@click.group()
def cli() -> None:
    """IMS: Inventory Management System"""


@cli.command("run")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Optional INI file with [Auth] and [Logging] sections.",
)
def run(config_path: Path | None) -> None:
    """Start an interactive session (state lasts until exit)."""
    try:
        settings = load_settings(config_path)
    except FileNotFoundError as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings)

    token = authorize(
        settings.secret,
        lambda: click.prompt(f"Enter password, or {ESCAPE} to escape", hide_input=True),
    )
    if token is None:
        return

    run_session(ledger_facade(), token)
