"""
credset command line.

Usage:
    # Prompt for a credential
    credset set credential

    # Read the credential from stdin
    echo '{"service": "github", "credential": {"token": "..."}}' | credset set credential --stdin

The command variant (single or team edition) comes from CREDSET_EDITION.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import prompt
from .command import (
    SetCredentialCommand,
    new_single_set_credential_command,
    new_team_set_credential_command,
)
from .config import CredsetConfig
from .models import CredentialError, Edition
from .prompt import TerminalPrompt
from .resolver import CredentialResolver
from .settings import FileSettings
from .storage import FileSetter, Setter

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.WARNING) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_command(
    config: CredsetConfig,
    setter: Setter | None = None,
    terminal: TerminalPrompt | None = None,
) -> SetCredentialCommand:
    """Construct the command variant selected by the configured edition."""
    setter = setter or FileSetter(config.credentials_dir)
    terminal = terminal or TerminalPrompt()

    if config.edition == Edition.SINGLE:
        return new_single_set_credential_command(setter, terminal, terminal, terminal)
    if config.edition == Edition.TEAM:
        settings = FileSettings(config.fields_path)
        return new_team_set_credential_command(setter, settings, terminal, terminal, terminal)

    logger.warning("Unknown edition %r configured", config.edition)
    return SetCredentialCommand(setter, CredentialResolver(config.edition))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="credset", description="Credential setup")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    set_parser = commands.add_parser("set", help="Set a resource")
    set_commands = set_parser.add_subparsers(dest="resource", required=True)

    credential = set_commands.add_parser(
        "credential",
        help="Set credential",
        description="Set credentials for Github, Gitlab, AWS, UserPass, etc.",
    )
    credential.add_argument(
        "--stdin",
        action="store_true",
        help="Read the credential as JSON from stdin instead of prompting",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the credset CLI. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = CredsetConfig.from_env()
    command = build_command(config)

    try:
        command.run(piped=args.stdin)
    except CredentialError as e:
        prompt.error(str(e))
        return 1
    except KeyboardInterrupt:
        prompt.error("Interrupted.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
