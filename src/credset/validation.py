"""Validation of ``key=value`` credential entries."""

from __future__ import annotations

MSG_INVALID_PAIR = "Invalid key value credential"
MSG_EMPTY_KEY = "The key must not be empty."
MSG_EMPTY_VALUE = "The value must not be empty."


def split_pair(kv: str) -> list[str]:
    """Split an entry on its first ``=`` so values may contain ``=``."""
    return kv.split("=", 1)


def split_entry(kv: str) -> list[list[str]]:
    """Split a possibly multi-line entry into one pair per non-blank line."""
    pairs = [split_pair(line) for line in kv.splitlines() if line.strip()]
    return pairs or [split_pair(kv)]


def validate_pair(pair: list[str]) -> str:
    """
    Check a split ``key=value`` entry.

    Args:
        pair: Result of :func:`split_pair`

    Returns:
        Empty string when the pair is usable, otherwise the message to show
    """
    if len(pair) < 2:
        return MSG_INVALID_PAIR

    if not pair[0].strip():
        return MSG_EMPTY_KEY

    if not pair[-1].strip():
        return MSG_EMPTY_VALUE

    return ""
