"""Registry command group."""

import click

from create_seed.cli.commands.registry.generate_cmd import generate_registry_cmd
from create_seed.cli.commands.registry.validate_cmd import validate_registry_cmd


@click.group("registry")
def registry_group() -> None:
    """Manage template registries."""
    pass


registry_group.add_command(generate_registry_cmd)
registry_group.add_command(validate_registry_cmd)
