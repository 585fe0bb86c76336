"""Tests for the terminal prompt implementation."""

import io
from collections import deque

import pytest

from credset import prompt
from credset.models import PromptError
from credset.prompt import Colors, NoColors, TerminalPrompt


def _terminal(*lines, passwords=()):
    answers = deque(lines)
    secret = deque(passwords)
    printed: list[str] = []

    def input_fn(label):
        if not answers:
            raise EOFError
        return answers.popleft()

    terminal = TerminalPrompt(
        input_fn=input_fn,
        print_fn=printed.append,
        password_fn=lambda label: secret.popleft(),
    )
    return terminal, printed


class TestText:
    def test_returns_stripped_value(self):
        terminal, _ = _terminal("  github ")
        assert terminal.text("Provider: ", True) == "github"

    def test_required_reasks_on_blank(self):
        terminal, printed = _terminal("", "github")
        assert terminal.text("Provider: ", True) == "github"
        assert any("required" in line for line in printed)

    def test_optional_accepts_blank(self):
        terminal, _ = _terminal("")
        assert terminal.text("Note: ", False) == ""

    def test_eof_becomes_prompt_error(self):
        terminal, _ = _terminal()
        with pytest.raises(PromptError):
            terminal.text("Provider: ", True)


class TestPassword:
    def test_reasks_on_blank(self):
        terminal, _ = _terminal(passwords=["", "s3cr3t"])
        assert terminal.password("Secret: ") == "s3cr3t"

    def test_interrupt_becomes_prompt_error(self):
        def interrupted(label):
            raise KeyboardInterrupt

        terminal = TerminalPrompt(password_fn=interrupted, print_fn=lambda msg: None)
        with pytest.raises(PromptError):
            terminal.password("Secret: ")


class TestBoolean:
    @pytest.mark.parametrize(
        "answer, expected",
        [("yes", True), ("Y", True), ("no", False), ("n", False)],
    )
    def test_answers(self, answer, expected):
        terminal, _ = _terminal(answer)
        assert terminal.boolean("Add more fields?", ["yes", "no"]) is expected

    def test_reasks_on_unknown_answer(self):
        terminal, printed = _terminal("maybe", "no")
        assert terminal.boolean("Add more fields?", ["yes", "no"]) is False
        assert any("yes or no" in line for line in printed)

    def test_needs_two_options(self):
        terminal, _ = _terminal("yes")
        with pytest.raises(PromptError):
            terminal.boolean("Sure?", ["yes"])


class TestSelect:
    def test_selects_by_number(self):
        terminal, printed = _terminal("2")
        assert terminal.select("Provider: ", ["github", "aws"]) == "aws"
        assert any("github" in line for line in printed)

    def test_reasks_out_of_range(self):
        terminal, printed = _terminal("9", "abc", "1")
        assert terminal.select("Provider: ", ["github", "aws"]) == "github"
        assert sum("Invalid choice" in line for line in printed) == 2

    def test_empty_items(self):
        terminal, _ = _terminal("1")
        with pytest.raises(PromptError):
            terminal.select("Provider: ", [])


class TestMultilineText:
    def test_reads_until_blank_line(self):
        terminal, _ = _terminal("key=line1", "line2", "")
        assert terminal.multiline_text("Value: ", True) == "key=line1\nline2"

    def test_required_reasks_when_empty(self):
        terminal, _ = _terminal("", "token=abc", "")
        assert terminal.multiline_text("Value: ", True) == "token=abc"

    def test_eof_mid_entry(self):
        terminal, _ = _terminal("token=abc")
        with pytest.raises(PromptError):
            terminal.multiline_text("Value: ", True)


class _Tty(io.StringIO):
    def isatty(self):
        return True


class TestColors:
    """Each printer colors only the stream it writes to."""

    def test_for_stream(self):
        assert Colors.for_stream(_Tty()) is Colors
        assert Colors.for_stream(io.StringIO()) is NoColors

    def test_error_colored_when_only_stderr_is_a_terminal(self, monkeypatch):
        stdout, stderr = io.StringIO(), _Tty()
        monkeypatch.setattr("sys.stdout", stdout)
        monkeypatch.setattr("sys.stderr", stderr)

        prompt.error("boom")
        prompt.success("saved")

        assert stderr.getvalue().startswith(Colors.RED)
        assert stdout.getvalue() == "✓ saved\n"

    def test_success_colored_when_only_stdout_is_a_terminal(self, monkeypatch):
        stdout, stderr = _Tty(), io.StringIO()
        monkeypatch.setattr("sys.stdout", stdout)
        monkeypatch.setattr("sys.stderr", stderr)

        prompt.success("saved")
        prompt.error("boom")

        assert stdout.getvalue().startswith(Colors.GREEN)
        assert stderr.getvalue() == "✗ boom\n"

    def test_custom_print_fn_is_plain(self):
        terminal, printed = _terminal("", "github")
        terminal.text("Provider: ", True)
        assert printed == ["A value is required."]
