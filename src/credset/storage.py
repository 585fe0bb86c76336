"""
Persistence collaborators for resolved credentials.

FileSetter layout:
    <base_dir>/<type or "default">/<service>.json   (chmod 600, dirs chmod 700)
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Protocol

from .models import CredentialDetail, CredentialStorageError

logger = logging.getLogger(__name__)

# Characters a service name may not contain, since it becomes a file name
_UNSAFE_NAME_CHARS = {"\x00", "/", os.sep} | ({os.altsep} if os.altsep else set())


class Setter(Protocol):
    def set(self, detail: CredentialDetail) -> None: ...


class InMemorySetter:
    """Keeps every saved record in ``saved``, in order."""

    def __init__(self):
        self.saved: list[CredentialDetail] = []

    def set(self, detail: CredentialDetail) -> None:
        self.saved.append(detail)


class FileSetter:
    """Writes each credential to its own JSON file."""

    def __init__(self, base_dir: str | Path):
        self.base_dir = Path(base_dir)

    def path_for(self, detail: CredentialDetail) -> Path:
        profile = detail.type.value if detail.type else "default"
        return self.base_dir / profile / f"{detail.service}.json"

    def set(self, detail: CredentialDetail) -> None:
        """
        Save the credential, replacing any earlier one for the same service.

        Raises:
            CredentialStorageError: If the record has no service or cannot be written
        """
        if not detail.service.strip():
            raise CredentialStorageError("credential service must not be empty")
        if _UNSAFE_NAME_CHARS.intersection(detail.service) or detail.service in (".", ".."):
            raise CredentialStorageError(f"invalid credential service name: {detail.service!r}")

        path = self.path_for(detail)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Restrict the credentials directories themselves
            self.base_dir.chmod(stat.S_IRWXU)  # 0o700
            path.parent.chmod(stat.S_IRWXU)

            path.write_text(detail.model_dump_json(indent=2))
            path.chmod(stat.S_IRUSR | stat.S_IWUSR)  # 0o600
        except (OSError, ValueError) as e:
            raise CredentialStorageError(f"Could not save credential to {path}: {e}") from e

        logger.debug("Saved %s credential to %s", detail.service, path)
