"""
credset - resolve a credential from a terminal session or piped JSON.

Two editions are supported:
- Single: free-form ``key=value`` credentials for one user
- Team: schema-driven credentials with an ownership profile (me/other/org)

Quick Start:
    from credset import StaticSettings, InMemorySetter, TerminalPrompt
    from credset import new_team_set_credential_command

    prompt = TerminalPrompt()
    setter = InMemorySetter()
    cmd = new_team_set_credential_command(setter, StaticSettings(), prompt, prompt, prompt)
    cmd.run(piped=False)

Piped input uses the same JSON shape for both editions:
    {"service": "github", "credential": {"token": "..."}, "type": "me", "username": ""}
"""

from .command import (
    SetCredentialCommand,
    new_single_set_credential_command,
    new_team_set_credential_command,
)
from .config import CredsetConfig
from .models import (
    CredentialDetail,
    CredentialError,
    CredentialStorageError,
    CredentialType,
    Edition,
    FieldSpec,
    FieldType,
    InvalidEditionError,
    InvalidInputError,
    PromptError,
    SettingsError,
)
from .prompt import (
    InputBool,
    InputList,
    InputMultiline,
    InputPassword,
    InputText,
    TerminalPrompt,
)
from .prompters import SingleEditionPrompter, TeamEditionPrompter
from .resolver import CredentialResolver
from .settings import DEFAULT_FIELDS, FileSettings, Settings, StaticSettings
from .stdin import MSG_INVALID_INPUT, read_json
from .storage import FileSetter, InMemorySetter, Setter
from .validation import split_entry, split_pair, validate_pair

__all__ = [
    # Command
    "SetCredentialCommand",
    "new_single_set_credential_command",
    "new_team_set_credential_command",
    "CredentialResolver",
    "CredsetConfig",
    # Models
    "CredentialDetail",
    "CredentialType",
    "Edition",
    "FieldSpec",
    "FieldType",
    # Exceptions
    "CredentialError",
    "InvalidEditionError",
    "InvalidInputError",
    "PromptError",
    "SettingsError",
    "CredentialStorageError",
    # Prompting
    "InputText",
    "InputPassword",
    "InputBool",
    "InputList",
    "InputMultiline",
    "TerminalPrompt",
    "SingleEditionPrompter",
    "TeamEditionPrompter",
    # Validation and decoding
    "split_entry",
    "split_pair",
    "validate_pair",
    "read_json",
    "MSG_INVALID_INPUT",
    # Collaborators
    "Settings",
    "StaticSettings",
    "FileSettings",
    "DEFAULT_FIELDS",
    "Setter",
    "InMemorySetter",
    "FileSetter",
]
