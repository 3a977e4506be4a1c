"""Scaffold pipeline: ordered, fail-fast steps that turn a template into a project.

Steps run in order: clone, rewrite package.json, install dependencies,
initialize git. The first failure is wrapped in ScaffoldStepFailure with the
step's title and aborts the run. Earlier steps are not rolled back; the
target directory is left as the failed step left it.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from create_seed.core.context import SeedContext
from create_seed.core.errors import ScaffoldStepFailure
from create_seed.core.git_init import GitInitializer
from create_seed.core.install_deps import install_dependencies
from create_seed.core.manifest import rewrite_package_json
from create_seed.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaffoldOptions:
    """What to scaffold and which optional steps to run."""

    template: str
    project_name: str
    skip_install: bool = False
    skip_git: bool = False
    package_manager: str | None = None


@dataclass(frozen=True)
class ScaffoldStep:
    """A named unit of work; action returns a short completion message."""

    title: str
    action: Callable[[], str]


@dataclass(frozen=True)
class StepOutcome:
    """A step that completed successfully."""

    title: str
    message: str


def run_steps(steps: Sequence[ScaffoldStep], feedback: UserFeedback) -> list[StepOutcome]:
    """Run steps in order until the first failure.

    Raises:
        ScaffoldStepFailure: Wrapping the first step error, with the step title
    """
    outcomes: list[StepOutcome] = []
    for step in steps:
        feedback.info(f"{step.title}...")
        logger.debug("Step started: %s", step.title)
        try:
            message = step.action()
        except Exception as e:
            logger.debug("Step failed: %s", step.title, exc_info=True)
            feedback.error(f"{step.title} - failed")
            raise ScaffoldStepFailure(step.title, e) from e
        feedback.success(message)
        outcomes.append(StepOutcome(title=step.title, message=message))
    return outcomes


def build_scaffold_steps(
    ctx: SeedContext,
    options: ScaffoldOptions,
    target_dir: Path,
) -> list[ScaffoldStep]:
    """Assemble the steps requested by options, in execution order."""

    def clone() -> str:
        ctx.cloner.clone(options.template, target_dir)
        return "Template cloned"

    def rewrite() -> str:
        rewrite_package_json(target_dir, options.project_name, runner=ctx.runner, env=ctx.env)
        return "Package configured"

    def install() -> str:
        pm = install_dependencies(
            ctx.runner,
            target_dir,
            options.package_manager,
            env=ctx.env,
            user_agent=ctx.config.user_agent,
        )
        return f"Installed with {pm}"

    def init_git() -> str:
        git = GitInitializer(ctx.runner, env=ctx.env)
        if git.initialize(target_dir) == "skipped":
            return "Skipped - git not found"
        git.commit_all(target_dir)
        return "Git initialized"

    steps = [
        ScaffoldStep("Cloning template", clone),
        ScaffoldStep("Rewriting package.json", rewrite),
    ]
    if not options.skip_install:
        steps.append(ScaffoldStep("Installing dependencies", install))
    if not options.skip_git:
        steps.append(ScaffoldStep("Initializing git repository", init_git))
    return steps


def scaffold_project(
    ctx: SeedContext,
    options: ScaffoldOptions,
    target_dir: Path,
) -> list[StepOutcome]:
    """Materialize a project from a template into target_dir.

    Raises:
        ScaffoldStepFailure: If any step fails; later steps do not run
    """
    steps = build_scaffold_steps(ctx, options, target_dir)
    return run_steps(steps, ctx.feedback)
