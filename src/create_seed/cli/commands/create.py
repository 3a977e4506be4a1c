"""Create command: scaffold a new project from a template."""

import logging
import re
import shutil
import traceback
from pathlib import Path

import click

from create_seed.cli.ensure import Ensure
from create_seed.cli.error_boundary import cli_error_boundary
from create_seed.cli.output import user_output
from create_seed.core.catalog import Template, fetch_templates
from create_seed.core.context import SeedContext
from create_seed.core.errors import CatalogFetchError, ScaffoldStepFailure
from create_seed.core.manifest import suggest_run_script
from create_seed.core.package_manager import parse_package_manager, resolve_package_manager
from create_seed.core.pipeline import ScaffoldOptions, scaffold_project

logger = logging.getLogger(__name__)

INVALID_NAME_CHARS = re.compile(r"[^a-z0-9._-]", re.IGNORECASE)


def validate_project_name(value: str) -> str:
    """Validate a project name typed at the prompt.

    Raises:
        click.BadParameter: If the name is empty or has characters outside [a-z0-9._-]
    """
    name = value.strip()
    if not name:
        raise click.BadParameter("Project name is required")
    if INVALID_NAME_CHARS.search(name):
        raise click.BadParameter("Invalid characters in project name")
    return name


def _validate_template_ref(value: str) -> str:
    ref = value.strip()
    if not ref:
        raise click.BadParameter("Template is required")
    return ref


def _prompt_custom_template() -> str:
    return click.prompt("Template (gh:owner/repo/path)", value_proc=_validate_template_ref)


def _fetch_templates_safe(ctx: SeedContext, templates_url: str) -> list[Template]:
    try:
        return fetch_templates(templates_url, cwd=ctx.cwd)
    except CatalogFetchError as e:
        logger.debug("Catalog unavailable, falling back to a custom template: %s", e)
        return []


def prompt_template(templates: list[Template]) -> str:
    """Ask the user to pick a catalog entry by number, or enter a custom reference."""
    if not templates:
        return _prompt_custom_template()

    user_output("Select a template:")
    for index, template in enumerate(templates, start=1):
        hint = f" - {template.description}" if template.description else ""
        user_output(f"  {index}. {template.name}{hint}")
    custom_choice = len(templates) + 1
    user_output(f"  {custom_choice}. Custom - Enter a custom template path")

    choice = click.prompt("Template", type=click.IntRange(1, custom_choice))
    if choice == custom_choice:
        return _prompt_custom_template()
    return templates[choice - 1].id


def _print_dry_run(options: ScaffoldOptions, target_dir: Path, overwrite: bool) -> None:
    user_output(click.style("Dry run", bold=True))
    user_output(f"  Name:         {options.project_name}")
    user_output(f"  Template:     {options.template}")
    user_output(f"  Target:       {target_dir}")
    user_output(f"  PM:           {options.package_manager or 'auto-detect'}")
    user_output(f"  Skip git:     {str(options.skip_git).lower()}")
    user_output(f"  Skip install: {str(options.skip_install).lower()}")
    if overwrite:
        user_output("  Overwrite:    existing directory would be replaced")
    user_output("Dry run complete - no files were created.")


def _print_next_steps(ctx: SeedContext, options: ScaffoldOptions, target_dir: Path) -> None:
    pm = resolve_package_manager(options.package_manager, target_dir, ctx.config.user_agent)
    steps = [f"cd {options.project_name}"]
    run_script = suggest_run_script(target_dir)
    if run_script is not None:
        steps.append(f"{pm} run {run_script}")

    user_output("")
    user_output(click.style("Next steps:", bold=True))
    for step in steps:
        user_output(f"  {step}")
    user_output("")
    user_output(click.style("Done!", fg="green"))


@click.command("create")
@click.argument("name", required=False)
@click.option(
    "-t", "--template", "template_ref", help="Template to use (gh:owner/repo/path or local path)"
)
@click.option(
    "--pm", "package_manager", help="Package manager (npm|pnpm|bun, default: auto-detect)"
)
@click.option("--skip-git", is_flag=True, help="Skip git initialization")
@click.option("--skip-install", is_flag=True, help="Skip installing dependencies")
@click.option("--templates-url", help="URL or local path to templates.json")
@click.option("-d", "--dry-run", is_flag=True, help="Show the plan without writing files")
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks for failed steps")
@click.option("-y", "--yes", is_flag=True, help="Overwrite an existing directory without asking")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors")
@click.pass_obj
@cli_error_boundary
def create_cmd(
    ctx: SeedContext,
    name: str | None,
    template_ref: str | None,
    package_manager: str | None,
    skip_git: bool,
    skip_install: bool,
    templates_url: str | None,
    dry_run: bool,
    verbose: bool,
    yes: bool,
    quiet: bool,
) -> None:
    """Scaffold a new project NAME from a template."""
    if package_manager is not None:
        parse_package_manager(package_manager)

    if quiet:
        ctx = ctx.with_quiet_feedback()

    project_name = name if name is not None else click.prompt(
        "Project name", value_proc=validate_project_name
    )

    if template_ref is None:
        templates = _fetch_templates_safe(ctx, templates_url or ctx.config.templates_url)
        template_ref = prompt_template(templates)

    cwd = ctx.cwd.resolve()
    target_dir = (cwd / project_name).resolve()
    Ensure.invariant(
        target_dir != cwd and target_dir.is_relative_to(cwd),
        f'Invalid project name: "{project_name}" would target files outside the current directory.',
    )

    options = ScaffoldOptions(
        template=template_ref,
        project_name=project_name,
        skip_install=skip_install,
        skip_git=skip_git,
        package_manager=package_manager,
    )

    if dry_run:
        _print_dry_run(options, target_dir, overwrite=target_dir.exists())
        return

    if target_dir.exists():
        if not yes and not click.confirm(
            f'Directory "{project_name}" already exists. Overwrite?', default=False
        ):
            user_output("Cancelled.")
            return
        ctx.feedback.warning(f"Removing existing {target_dir}")
        if target_dir.is_dir():
            shutil.rmtree(target_dir)
        else:
            target_dir.unlink()

    try:
        scaffold_project(ctx, options, target_dir)
    except ScaffoldStepFailure as e:
        user_output(click.style(f"Failed: {e}", fg="red"))
        if verbose:
            user_output("".join(traceback.format_exception(e.cause)))
        raise SystemExit(1) from None

    _print_next_steps(ctx, options, target_dir)
