"""Selection of the credential source for one command run."""

from __future__ import annotations

import logging
from typing import Protocol, TextIO

from .models import CredentialDetail, Edition, InvalidEditionError
from .stdin import read_json

logger = logging.getLogger(__name__)

MSG_INVALID_EDITION = "invalid CLI build, no edition defined"


class Prompter(Protocol):
    def prompt(self) -> CredentialDetail: ...


class CredentialResolver:
    """
    Dispatch between piped input and the edition's interactive flow.

    Args:
        edition: Build variant the command was constructed with
        single: Flow used for single edition in interactive mode
        team: Flow used for team edition in interactive mode
    """

    def __init__(
        self,
        edition: Edition,
        single: Prompter | None = None,
        team: Prompter | None = None,
    ):
        self.edition = edition
        self.single = single
        self.team = team

    def resolve(self, piped: bool, stream: TextIO | None = None) -> CredentialDetail:
        """
        Produce a credential record.

        Raises:
            InvalidEditionError: If the edition is neither single nor team
            InvalidInputError: If piped input cannot be decoded
        """
        if self.edition not in (Edition.SINGLE, Edition.TEAM):
            raise InvalidEditionError(MSG_INVALID_EDITION)

        if piped:
            logger.debug("Reading %s credential from stdin", self.edition)
            if stream is None:
                raise ValueError("piped resolution needs an input stream")
            return read_json(stream)

        prompter = self.single if self.edition == Edition.SINGLE else self.team
        if prompter is None:
            raise InvalidEditionError(MSG_INVALID_EDITION)

        logger.debug("Prompting for %s credential", self.edition)
        return prompter.prompt()
