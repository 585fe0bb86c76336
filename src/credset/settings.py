"""
Provider field schemas for team edition.

A schema maps each provider name to the ordered fields a credential for that
provider needs:

    {
        "github": [
            {"name": "username", "type": "text"},
            {"name": "token", "type": "password"}
        ]
    }

To add a built-in provider, add an entry to DEFAULT_FIELDS.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from .models import FieldSpec, FieldType, SettingsError

logger = logging.getLogger(__name__)

ProviderFields = dict[str, list[FieldSpec]]

_SCHEMA_ADAPTER = TypeAdapter(ProviderFields)

DEFAULT_FIELDS: ProviderFields = {
    "github": [
        FieldSpec(name="username", type=FieldType.TEXT),
        FieldSpec(name="token", type=FieldType.PASSWORD),
    ],
    "gitlab": [
        FieldSpec(name="username", type=FieldType.TEXT),
        FieldSpec(name="token", type=FieldType.PASSWORD),
    ],
    "aws": [
        FieldSpec(name="accessKeyId", type=FieldType.TEXT),
        FieldSpec(name="secretAccessKey", type=FieldType.PASSWORD),
    ],
    "jenkins": [
        FieldSpec(name="username", type=FieldType.TEXT),
        FieldSpec(name="token", type=FieldType.PASSWORD),
    ],
    "kubeconfig": [
        FieldSpec(name="base64config", type=FieldType.PASSWORD),
    ],
}


class Settings(Protocol):
    """Source of provider field schemas."""

    def fields(self) -> ProviderFields:
        """
        Return the field schema of every known provider.

        Raises:
            SettingsError: If the schemas cannot be loaded
        """
        ...


class StaticSettings:
    """Settings backed by an in-memory mapping."""

    def __init__(self, fields: ProviderFields | None = None):
        self._fields = DEFAULT_FIELDS if fields is None else fields

    def fields(self) -> ProviderFields:
        return {name: list(specs) for name, specs in self._fields.items()}


class FileSettings:
    """Settings read from a JSON file, falling back to DEFAULT_FIELDS when absent."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fields(self) -> ProviderFields:
        if not self.path.exists():
            logger.debug("No field schema at %s, using built-in providers", self.path)
            return StaticSettings().fields()

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise SettingsError(f"Could not read field schema {self.path}: {e}") from e

        try:
            fields = _SCHEMA_ADAPTER.validate_json(raw)
        except ValidationError as e:
            raise SettingsError(f"Invalid field schema in {self.path}: {e}") from e

        if not fields:
            raise SettingsError(f"Field schema {self.path} defines no providers")

        logger.debug("Loaded %d provider schema(s) from %s", len(fields), self.path)
        return fields
