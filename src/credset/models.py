"""
Data models and errors for credential resolution.

CredentialDetail is the record every resolution path produces. It is built
fresh per command run, handed once to a Setter, and then discarded.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Edition(StrEnum):
    """Build variant of the command."""

    SINGLE = "single"
    TEAM = "team"


class CredentialType(StrEnum):
    """Ownership profile of a team credential."""

    ME = "me"
    OTHER = "other"
    ORG = "org"


class FieldType(StrEnum):
    """How a schema field is prompted."""

    TEXT = "text"
    PASSWORD = "password"


class FieldSpec(BaseModel):
    """One required input field for a provider in team edition."""

    name: str
    type: FieldType = FieldType.TEXT


class CredentialDetail(BaseModel):
    """
    A resolved credential record.

    Attributes:
        service: Provider the credential belongs to (e.g. "github")
        credential: Field name -> value
        type: Ownership profile, only set by team edition
        username: Target user when ``type`` is ``other``
    """

    model_config = ConfigDict(frozen=True)

    service: str = ""
    credential: dict[str, str] = Field(default_factory=dict)
    type: CredentialType | None = None
    username: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def _empty_type_is_none(cls, value):
        if value == "":
            return None
        return value


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class CredentialError(Exception):
    """Base class for credential resolution failures."""


class InvalidEditionError(CredentialError):
    """The command was built without a usable edition."""


class InvalidInputError(CredentialError):
    """Piped input could not be decoded into a credential record."""


class PromptError(CredentialError):
    """A prompt could not obtain a value (EOF, interrupt, bad answer)."""


class SettingsError(CredentialError):
    """Provider field schemas could not be loaded."""


class CredentialStorageError(CredentialError):
    """A credential record could not be persisted."""
