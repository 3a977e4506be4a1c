"""Shared helpers for registry commands."""

from pathlib import Path

from create_seed.cli.ensure import Ensure
from create_seed.core.context import SeedContext


def resolve_registry_root(ctx: SeedContext, directory: str) -> Path:
    """Resolve --dir against the invocation directory and require it to exist."""
    root = (ctx.cwd / directory).resolve()
    Ensure.invariant(root.is_dir(), f"Directory not found: {root}")
    return root
