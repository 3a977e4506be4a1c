import logging

import click

from create_seed.cli.commands.create import create_cmd
from create_seed.cli.commands.list_cmd import list_cmd
from create_seed.cli.commands.registry import registry_group
from create_seed.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[DEBUG %(name)s:%(lineno)d] %(message)s",
        )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="create-seed")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Scaffold projects from templates and maintain template registries."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    _configure_logging(ctx.obj.config.debug)


cli.add_command(create_cmd)
cli.add_command(list_cmd)
cli.add_command(registry_group)


def main() -> None:
    """CLI entry point used by the `create-seed` console script."""
    cli()
