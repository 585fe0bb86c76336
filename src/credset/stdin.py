"""Decoding of piped credential input."""

from __future__ import annotations

import logging
from typing import TextIO

from pydantic import ValidationError

from . import prompt
from .models import CredentialDetail, InvalidInputError

logger = logging.getLogger(__name__)

MSG_INVALID_INPUT = "stdin input is not valid, check the json payload and try again"


def read_json(stream: TextIO) -> CredentialDetail:
    """
    Read the whole stream and decode it as a CredentialDetail.

    Only the structure is checked. Content such as an empty ``service`` is
    passed through for the Setter to accept or reject.

    Raises:
        InvalidInputError: If the payload is not JSON of the expected shape
    """
    try:
        payload = stream.read()
        detail = CredentialDetail.model_validate_json(payload)
    except (UnicodeDecodeError, ValidationError) as e:
        logger.debug("Rejected stdin payload: %s", type(e).__name__)
        prompt.error(MSG_INVALID_INPUT)
        raise InvalidInputError(MSG_INVALID_INPUT) from e

    logger.debug("Decoded stdin credential for service %r", detail.service)
    return detail
