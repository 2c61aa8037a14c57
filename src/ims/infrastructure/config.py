"""Runtime settings for the interactive shell.

Settings come from an optional INI file and can be overridden from the
environment::

    [Auth]
    Secret = password

    [Logging]
    Level = WARNING
    File = ~/.ims/ims.log

``IMS_SECRET`` and ``IMS_LOG_LEVEL`` take precedence over the file.
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_SECRET = "password"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    secret: str = DEFAULT_SECRET
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None


def read_config(config_path: Path) -> configparser.ConfigParser:
    """Load an INI file, failing loudly if it does not exist."""
    config_path = config_path.expanduser().resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    parser = configparser.ConfigParser()
    parser.read(config_path, encoding="utf-8")
    return parser


def load_settings(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    environ = os.environ if environ is None else environ
    parser = read_config(config_path) if config_path is not None else configparser.ConfigParser()

    secret = parser.get("Auth", "Secret", fallback=DEFAULT_SECRET)
    level = parser.get("Logging", "Level", fallback=DEFAULT_LOG_LEVEL)
    log_file = parser.get("Logging", "File", fallback="").strip()

    return Settings(
        secret=environ.get("IMS_SECRET", secret),
        log_level=environ.get("IMS_LOG_LEVEL", level).upper(),
        log_file=Path(log_file).expanduser() if log_file else None,
    )
