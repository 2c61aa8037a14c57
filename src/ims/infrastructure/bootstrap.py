"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Each call builds a
fresh, empty ledger; nothing outlives the program run.
"""

from __future__ import annotations

from ims.application.ledger_facade import LedgerFacade
from ims.infrastructure.persistence.in_memory_ledger import InMemoryLedger
from ims.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def ledger_facade() -> LedgerFacade:
    return LedgerFacade(
        product_repo=InMemoryProductRepository(),
        ledger=InMemoryLedger(),
    )
