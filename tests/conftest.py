"""Shared fixtures and prompt doubles."""

from __future__ import annotations

from collections import deque

import pytest

from credset.models import FieldSpec, FieldType, PromptError
from credset.storage import InMemorySetter


class FakeText:
    """InputText double answering from a script."""

    def __init__(self, *answers: str):
        self.answers = deque(answers)
        self.labels: list[str] = []

    def text(self, label, required):
        self.labels.append(label)
        return self.answers.popleft()


class FakeMultiline:
    def __init__(self, *answers: str):
        self.answers = deque(answers)
        self.labels: list[str] = []

    def multiline_text(self, label, required):
        self.labels.append(label)
        return self.answers.popleft()


class FakeBool:
    def __init__(self, *answers: bool):
        self.answers = deque(answers)
        self.labels: list[str] = []

    def boolean(self, label, options):
        self.labels.append(label)
        return self.answers.popleft()


class FakePassword:
    def __init__(self, *answers: str):
        self.answers = deque(answers)
        self.labels: list[str] = []

    def password(self, label):
        self.labels.append(label)
        return self.answers.popleft()


class FakeList:
    """InputList double that picks the first item containing the scripted answer."""

    def __init__(self, *answers: str):
        self.answers = deque(answers)
        self.calls: list[tuple[str, list[str]]] = []

    def select(self, label, items):
        self.calls.append((label, list(items)))
        wanted = self.answers.popleft()
        for item in items:
            if wanted in item:
                return item
        raise AssertionError(f"{wanted!r} not offered in {items}")


class FailingPrompt:
    """Every capability raises PromptError."""

    def __init__(self):
        self.calls = 0

    def _fail(self, *args, **kwargs):
        self.calls += 1
        raise PromptError("input interrupted")

    text = password = boolean = select = multiline_text = _fail


class FakeSettings:
    def __init__(self, fields=None, error: Exception | None = None):
        self._fields = fields or {}
        self._error = error

    def fields(self):
        if self._error:
            raise self._error
        return self._fields


@pytest.fixture
def setter() -> InMemorySetter:
    return InMemorySetter()


@pytest.fixture
def aws_schema():
    return {
        "github": [FieldSpec(name="token", type=FieldType.PASSWORD)],
        "aws": [
            FieldSpec(name="AccessKey", type=FieldType.TEXT),
            FieldSpec(name="SecretKey", type=FieldType.PASSWORD),
        ],
    }
