"""
FILE: tasklist/config.py
PURPOSE: Settings loaded from environment variables
EXPORTS:
  - Settings (frozen dataclass)
  - get_settings() -> Settings
DEPENDENCIES:
  - os, dataclasses, datetime, pathlib (stdlib)
  - tasklist.core.models (parse_date)
NOTES:
  - All variables use the TASKLIST_ prefix
  - CLI options override these values
  - TASKLIST_TODAY pins the date used by the 'today' command (dd.mm.yyyy)
"""

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from .core.models import parse_date

ENV_PREFIX = "TASKLIST"

DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _env_date(name: str) -> Optional[date]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return parse_date(raw)


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_file: Optional[Path]
    today: Optional[date]


def get_settings() -> Settings:
    """
    Read settings from the environment.

    Raises:
        InvalidInputError: If TASKLIST_TODAY is set but not a dd.mm.yyyy date
    """
    return Settings(
        log_level=_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper(),
        log_file=_env_path(_k("LOG_FILE")),
        today=_env_date(_k("TODAY")),
    )
