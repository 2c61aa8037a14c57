"""Password gate in front of the interactive shell.

A static shared secret, checked once.  Passing the gate yields an
``AuthToken`` which the session loop requires; the ledger itself knows
nothing about authentication.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

ESCAPE = "x"


@dataclass(frozen=True)
class AuthToken:
    """Proof that the password gate was passed."""


def authorize(secret: str, prompt: Callable[[], str]) -> AuthToken | None:
    """Ask until the secret is entered, or return None on ``x``."""
    while True:
        answer = prompt().strip()
        if answer == ESCAPE:
            logger.info("Authorization aborted")
            return None
        if answer == secret:
            logger.info("Authorization granted")
            return AuthToken()
        logger.warning("Wrong password entered")
