"""Command to generate templates.json and README.md for a template directory."""

import click

from create_seed.cli.commands.registry.shared import resolve_registry_root
from create_seed.cli.error_boundary import cli_error_boundary
from create_seed.cli.output import user_output
from create_seed.core.context import SeedContext
from create_seed.registry.builder import (
    build_registry,
    detect_repo_identity,
    generate_readme,
    write_readme,
    write_registry,
)
from create_seed.registry.scanner import scan_root

SKIP_REASONS = {
    "no-manifest": "no package.json",
    "malformed-manifest": "package.json is not valid JSON",
}


@click.command("generate")
@click.option("--dir", "directory", default=".", show_default=True, help="Directory to scan")
@click.pass_obj
@cli_error_boundary
def generate_registry_cmd(ctx: SeedContext, directory: str) -> None:
    """Scan templates and generate templates.json and README.md."""
    root = resolve_registry_root(ctx, directory)

    scan = scan_root(root)
    for skipped in scan.skipped:
        reason = SKIP_REASONS[skipped.reason]
        user_output(click.style("Skipped ", fg="yellow") + f"{skipped.path.name}: {reason}")

    if not scan.templates:
        user_output(
            click.style(
                "No templates found. Make sure subdirectories contain a package.json.", fg="yellow"
            )
        )
        user_output("No templates.json generated.")
        return

    registry = build_registry(scan.templates, detect_repo_identity(root, ctx.runner))
    registry_path = write_registry(root, registry)
    readme_path = write_readme(root, generate_readme(root, registry))

    user_output(click.style(f"Found {len(registry.templates)} template(s)", fg="green"))
    for template in registry.templates:
        user_output(f"  {template.name} - {template.description or '(no description)'}")

    user_output("")
    user_output(click.style("Files written:", bold=True))
    user_output(f"  {registry_path}")
    user_output(f"  {readme_path}")
    user_output("Done!")
