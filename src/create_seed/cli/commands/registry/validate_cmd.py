"""Command to validate templates.json against README.md and the template directories."""

import click

from create_seed.cli.commands.registry.shared import resolve_registry_root
from create_seed.cli.error_boundary import cli_error_boundary
from create_seed.cli.output import user_output
from create_seed.core.context import SeedContext
from create_seed.registry.models import REGISTRY_FILENAME
from create_seed.registry.validator import validate


@click.command("validate")
@click.option(
    "--dir",
    "directory",
    default=".",
    show_default=True,
    help="Directory containing templates.json",
)
@click.pass_obj
@cli_error_boundary
def validate_registry_cmd(ctx: SeedContext, directory: str) -> None:
    """Validate templates.json against the actual templates.

    Exits 1 when any error is found; warnings alone do not fail validation.
    """
    root = resolve_registry_root(ctx, directory)
    report = validate(root)

    for finding in report.findings:
        if finding.is_error:
            user_output(click.style("[ERROR] ", fg="red") + finding.message)
        else:
            user_output(click.style("[WARN] ", fg="yellow") + finding.message)

    error_count = len(report.errors)
    warning_count = len(report.warnings)

    if error_count > 0:
        user_output(
            click.style(
                f"Validation failed: {error_count} error(s), {warning_count} warning(s)", fg="red"
            )
        )
        raise SystemExit(1)

    if warning_count > 0:
        user_output(f"Validation passed with {warning_count} warning(s)")
        return

    user_output(click.style(f"{REGISTRY_FILENAME} is valid", fg="green"))
    user_output("All checks passed")
