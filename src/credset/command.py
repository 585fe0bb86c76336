"""
The ``set credential`` command.

Usage:
    from credset.command import new_single_set_credential_command
    from credset.prompt import TerminalPrompt
    from credset.storage import InMemorySetter

    prompt = TerminalPrompt()
    cmd = new_single_set_credential_command(InMemorySetter(), prompt, prompt, prompt)
    cmd.run(piped=False)
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from . import prompt
from .models import CredentialDetail, Edition
from .prompt import InputBool, InputList, InputMultiline, InputPassword, InputText
from .prompters import SingleEditionPrompter, TeamEditionPrompter
from .resolver import CredentialResolver
from .settings import Settings
from .storage import Setter

logger = logging.getLogger(__name__)


class SetCredentialCommand:
    """Resolves a credential and hands it to the Setter."""

    def __init__(self, setter: Setter, resolver: CredentialResolver):
        self.setter = setter
        self.resolver = resolver

    @property
    def edition(self) -> Edition | str:
        return self.resolver.edition

    def run(self, piped: bool, stream: TextIO | None = None) -> CredentialDetail:
        """
        Resolve and save one credential.

        Args:
            piped: Read a JSON record from ``stream`` instead of prompting
            stream: Input for piped mode (default: sys.stdin)

        Returns:
            The record that was saved
        """
        if piped and stream is None:
            stream = sys.stdin

        detail = self.resolver.resolve(piped, stream)
        self.setter.set(detail)

        logger.info("Saved %s credential", detail.service)
        prompt.success(f"{detail.service.title()} credential saved!")
        return detail


def new_single_set_credential_command(
    setter: Setter,
    text: InputText,
    multiline: InputMultiline,
    confirm: InputBool,
) -> SetCredentialCommand:
    """Build the single edition variant of the command."""
    single = SingleEditionPrompter(text, multiline, confirm)
    return SetCredentialCommand(setter, CredentialResolver(Edition.SINGLE, single=single))


def new_team_set_credential_command(
    setter: Setter,
    settings: Settings,
    text: InputText,
    password: InputPassword,
    choice: InputList,
) -> SetCredentialCommand:
    """Build the team edition variant of the command."""
    team = TeamEditionPrompter(settings, text, password, choice)
    return SetCredentialCommand(setter, CredentialResolver(Edition.TEAM, team=team))
