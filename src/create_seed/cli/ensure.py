"""CLI error handling utilities with styled output.

Ensure asserts invariants in CLI commands with a consistent red "Error:" prefix.
"""

import click

from create_seed.cli.output import user_output


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
