"""
Environment configuration for the credset CLI.

Environment Variables:
    CREDSET_HOME         - Base directory (default: ~/.credset)
    CREDSET_EDITION      - Command variant to build: single (default) or team
    CREDSET_FIELDS_PATH  - Team provider schema file (default: $CREDSET_HOME/fields.json)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .models import Edition

HOME_ENV_VAR = "CREDSET_HOME"
EDITION_ENV_VAR = "CREDSET_EDITION"
FIELDS_PATH_ENV_VAR = "CREDSET_FIELDS_PATH"

DEFAULT_HOME = Path.home() / ".credset"


def env_str(name: str, default: str) -> str:
    """Return the variable's stripped value, or ``default`` when it is unset or blank."""
    value = os.environ.get(name, "").strip()
    return value or default


def env_path(name: str, default: Path) -> Path:
    """Return the variable as a user-expanded Path, or ``default`` when unset or blank."""
    value = env_str(name, "")
    return Path(value).expanduser() if value else default


def _parse_edition(value: str) -> Edition | str:
    """Map a configured edition to Edition, passing unknown values through unchanged."""
    try:
        return Edition(value.strip().lower())
    except ValueError:
        return value


@dataclass
class CredsetConfig:
    """Resolved settings for one CLI process."""

    home: Path
    edition: Edition | str
    fields_path: Path

    @property
    def credentials_dir(self) -> Path:
        return self.home / "credentials"

    @classmethod
    def from_env(cls) -> CredsetConfig:
        home = env_path(HOME_ENV_VAR, DEFAULT_HOME)
        edition = _parse_edition(env_str(EDITION_ENV_VAR, Edition.SINGLE.value))
        fields_path = env_path(FIELDS_PATH_ENV_VAR, home / "fields.json")
        return cls(home=home, edition=edition, fields_path=fields_path)
