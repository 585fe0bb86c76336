"""
Prompt primitives for interactive credential entry.

Each capability is its own narrow protocol so a flow only depends on the
inputs it actually uses, and test doubles only implement those.

TerminalPrompt implements every protocol on top of plain ``input`` and
``getpass``. The I/O functions are injectable for embedding in other UIs:

    prompt = TerminalPrompt(input_fn=my_input, print_fn=my_print)
"""

from __future__ import annotations

import getpass
import sys
from collections.abc import Callable, Sequence
from typing import Protocol, TextIO

from .models import PromptError


# ANSI colors for terminal output
class Colors:
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    DIM = "\033[2m"
    NC = "\033[0m"  # No Color

    @classmethod
    def for_stream(cls, stream: TextIO) -> type[Colors]:
        """Colors for a stream that is a terminal, NoColors otherwise."""
        isatty = getattr(stream, "isatty", None)
        return cls if isatty is not None and isatty() else NoColors


class NoColors(Colors):
    """Color codes for non-TTY output."""

    RED = GREEN = YELLOW = ""
    CYAN = DIM = NC = ""


class InputText(Protocol):
    def text(self, label: str, required: bool) -> str: ...


class InputPassword(Protocol):
    def password(self, label: str) -> str: ...


class InputBool(Protocol):
    def boolean(self, label: str, options: Sequence[str]) -> bool: ...


class InputList(Protocol):
    def select(self, label: str, items: Sequence[str]) -> str: ...


class InputMultiline(Protocol):
    def multiline_text(self, label: str, required: bool) -> str: ...


def success(msg: str) -> None:
    """Print a success message to stdout."""
    c = Colors.for_stream(sys.stdout)
    print(f"{c.GREEN}✓ {msg}{c.NC}")


def error(msg: str) -> None:
    """Print an error message to stderr."""
    c = Colors.for_stream(sys.stderr)
    print(f"{c.RED}✗ {msg}{c.NC}", file=sys.stderr)


class TerminalPrompt:
    """Line-based terminal implementation of all prompt capabilities."""

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        print_fn: Callable[[str], None] | None = None,
        password_fn: Callable[[str], str] | None = None,
    ):
        """
        Initialize the prompt.

        Args:
            input_fn: Custom input function (default: built-in input)
            print_fn: Custom print function (default: built-in print)
            password_fn: Custom password input function (default: getpass.getpass)
        """
        self.input_fn = input_fn or input
        self.print_fn = print_fn or print
        self.password_fn = password_fn or getpass.getpass
        # Custom print functions may not write to a terminal
        self.colors = NoColors if print_fn else Colors.for_stream(sys.stdout)

    def _print(self, msg: str) -> None:
        self.print_fn(msg)

    def _read(self, read_fn: Callable[[str], str], label: str) -> str:
        try:
            return read_fn(label)
        except (EOFError, KeyboardInterrupt) as e:
            raise PromptError("input interrupted") from e

    def text(self, label: str, required: bool) -> str:
        while True:
            value = self._read(self.input_fn, label).strip()
            if value or not required:
                return value
            self._print(f"{self.colors.YELLOW}A value is required.{self.colors.NC}")

    def password(self, label: str) -> str:
        while True:
            value = self._read(self.password_fn, label).strip()
            if value:
                return value
            self._print(f"{self.colors.YELLOW}A value is required.{self.colors.NC}")

    def boolean(self, label: str, options: Sequence[str]) -> bool:
        if len(options) < 2:
            raise PromptError(f"yes/no prompt needs two options, got {list(options)}")

        yes, no = options[0].lower(), options[1].lower()
        while True:
            answer = self._read(self.input_fn, f"{label} [{yes}/{no}]: ").strip().lower()
            if answer in (yes, yes[:1]):
                return True
            if answer in (no, no[:1]):
                return False
            self._print(f"{self.colors.RED}Please answer {yes} or {no}.{self.colors.NC}")

    def select(self, label: str, items: Sequence[str]) -> str:
        if not items:
            raise PromptError(f"nothing to choose for '{label.strip()}'")

        self._print("")
        for i, item in enumerate(items, 1):
            self._print(f"  {self.colors.CYAN}{i}){self.colors.NC} {item}")
        self._print("")

        while True:
            choice_str = self._read(self.input_fn, f"{label}(1-{len(items)}) ").strip()
            if not choice_str:
                continue
            try:
                choice_num = int(choice_str)
            except ValueError:
                choice_num = 0
            if 1 <= choice_num <= len(items):
                return items[choice_num - 1]
            self._print(f"{self.colors.RED}Invalid choice. Enter 1-{len(items)}{self.colors.NC}")

    def multiline_text(self, label: str, required: bool) -> str:
        """Read lines until a blank line and return them joined with newlines."""
        self._print(f"{label}{self.colors.DIM}(finish with an empty line){self.colors.NC}")
        while True:
            lines: list[str] = []
            while True:
                line = self._read(self.input_fn, "")
                if not line.strip():
                    break
                lines.append(line)
            value = "\n".join(lines)
            if value or not required:
                return value
            self._print(f"{self.colors.YELLOW}A value is required.{self.colors.NC}")
