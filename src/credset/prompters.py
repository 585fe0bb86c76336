"""
Interactive credential flows, one per edition.

Single edition collects free-form ``key=value`` pairs. Team edition asks for
an ownership profile and walks the provider's field schema.
"""

from __future__ import annotations

import logging

from . import prompt
from .models import CredentialDetail, CredentialType, FieldType
from .prompt import InputBool, InputList, InputMultiline, InputPassword, InputText
from .settings import Settings
from .validation import split_entry, validate_pair

logger = logging.getLogger(__name__)

KEY_VALUE_LABEL = (
    "Type your credential using the format key=value, one pair per line"
    " (e.g. email=example@example.com): "
)

PROFILES: dict[str, CredentialType] = {
    "ME (for you)": CredentialType.ME,
    "OTHER (for another user)": CredentialType.OTHER,
    "ORG (for the organization)": CredentialType.ORG,
}


class SingleEditionPrompter:
    """Builds a credential from a provider name and repeated key/value entries."""

    def __init__(self, text: InputText, multiline: InputMultiline, confirm: InputBool):
        self.text = text
        self.multiline = multiline
        self.confirm = confirm

    def prompt(self) -> CredentialDetail:
        provider = self.text.text("Provider: ", True)

        cred: dict[str, str] = {}
        add_more = True
        while add_more:
            kv = self.multiline.multiline_text(KEY_VALUE_LABEL, True)

            # Each line of an entry is its own pair; the entry is kept only if all are valid
            pairs = split_entry(kv)
            if msg := next((m for m in map(validate_pair, pairs) if m), ""):
                prompt.error(msg)
                continue

            for pair in pairs:
                cred[pair[0].strip()] = pair[-1].strip()

            add_more = self.confirm.boolean("Add more fields?", ["yes", "no"])

        logger.debug("Collected %d field(s) for %s", len(cred), provider)
        return CredentialDetail(service=provider, credential=cred)


class TeamEditionPrompter:
    """Builds a credential from a profile choice and a provider field schema."""

    def __init__(
        self,
        settings: Settings,
        text: InputText,
        password: InputPassword,
        choice: InputList,
    ):
        self.settings = settings
        self.text = text
        self.password = password
        self.choice = choice

    def prompt(self) -> CredentialDetail:
        cfg = self.settings.fields()

        cred_type, username = self._profile()

        service = self.choice.select("Provider: ", list(cfg))

        credentials: dict[str, str] = {}
        for f in cfg[service]:
            label = f"{service.title()} {f.name}: "
            if f.type == FieldType.PASSWORD:
                val = self.password.password(label)
            else:
                val = self.text.text(label, True)
            credentials[f.name.lower()] = val

        logger.debug("Collected %d field(s) for %s (%s)", len(credentials), service, cred_type)
        return CredentialDetail(
            type=cred_type,
            username=username,
            service=service,
            credential=credentials,
        )

    def _profile(self) -> tuple[CredentialType, str]:
        """Ask who the credential is for, and the username when it is for someone else."""
        typ = self.choice.select("Profile to add credential: ", list(PROFILES))
        cred_type = PROFILES[typ]

        username = ""
        if cred_type == CredentialType.OTHER:
            username = self.text.text("Username: ", True)

        return cred_type, username
