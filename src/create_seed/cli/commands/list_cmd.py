"""List command: show the templates offered by a catalog."""

import json

import click
from rich.console import Console
from rich.table import Table

from create_seed.cli.error_boundary import cli_error_boundary
from create_seed.cli.output import machine_output, user_output
from create_seed.core.catalog import Template, fetch_templates
from create_seed.core.context import SeedContext


def _templates_json(templates: list[Template]) -> str:
    return json.dumps(
        {
            "templates": [
                {"id": t.id, "name": t.name, "description": t.description} for t in templates
            ]
        },
        indent=2,
    )


def _print_table(templates: list[Template]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("id", no_wrap=True)
    table.add_column("description")

    for template in templates:
        table.add_row(template.name, template.id, template.description or "[dim]-[/dim]")

    # Output table to stderr (consistent with user_output convention)
    console = Console(stderr=True, width=200, force_terminal=True)
    console.print(table)
    console.print()


@click.command("list")
@click.option("--templates-url", help="URL or local path to templates.json")
@click.option("--json", "as_json", is_flag=True, help="Print the catalog as JSON on stdout")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: SeedContext, templates_url: str | None, as_json: bool) -> None:
    """List the templates available in the catalog."""
    templates = fetch_templates(templates_url or ctx.config.templates_url, cwd=ctx.cwd)

    if as_json:
        machine_output(_templates_json(templates))
        return

    if not templates:
        user_output(click.style("No templates found.", fg="yellow"))
        return

    _print_table(templates)
    user_output("Use: create-seed create <project> -t <template-id>")
