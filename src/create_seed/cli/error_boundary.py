"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry points
and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from create_seed.cli.output import user_output
from create_seed.core.errors import CreateSeedError


T = TypeVar("T", bound=Callable[..., Any])


def _fail(e: Exception) -> None:
    user_output(click.style("Error: ", fg="red") + str(e))
    raise SystemExit(1) from None


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - CreateSeedError: Invalid configuration, unreachable catalogs, bad templates
        - FileExistsError: File/directory conflicts
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except CreateSeedError as e:
            _fail(e)
        except FileExistsError as e:
            _fail(e)
        except PermissionError as e:
            _fail(e)

    return wrapper  # type: ignore[return-value]
