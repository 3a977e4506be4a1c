"""Output utilities for CLI commands with clear intent.

user_output writes human-facing text to stderr; machine_output writes
data meant for pipes (e.g. `create-seed list --json`) to stdout.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a message for humans to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write structured output to stdout."""
    click.echo(message, nl=nl)
