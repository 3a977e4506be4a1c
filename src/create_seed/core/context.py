"""Application context with dependency injection."""

import os
from dataclasses import dataclass, replace
from pathlib import Path

from create_seed.core.cloner.abc import TemplateCloner
from create_seed.core.cloner.real import RealTemplateCloner
from create_seed.core.config import SeedConfig
from create_seed.core.process.abc import ProcessRunner
from create_seed.core.process.real import RealProcessRunner
from create_seed.core.user_feedback import InteractiveFeedback, QuietFeedback, UserFeedback


@dataclass(frozen=True)
class SeedContext:
    """Immutable context holding all dependencies for create-seed operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    runner: ProcessRunner
    cloner: TemplateCloner
    feedback: UserFeedback
    config: SeedConfig
    cwd: Path  # Current working directory at CLI invocation
    env: dict[str, str]  # Environment snapshot handed to child processes

    def with_quiet_feedback(self) -> "SeedContext":
        """Return a copy whose feedback only shows warnings and errors."""
        return replace(self, feedback=QuietFeedback())

    @staticmethod
    def for_test(
        runner: ProcessRunner | None = None,
        cloner: TemplateCloner | None = None,
        feedback: UserFeedback | None = None,
        config: SeedConfig | None = None,
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
    ) -> "SeedContext":
        """Create test context with optional pre-configured integrations.

        Args:
            runner: Optional ProcessRunner. If None, creates empty FakeProcessRunner.
            cloner: Optional TemplateCloner. If None, creates empty FakeTemplateCloner.
            feedback: Optional UserFeedback. If None, uses QuietFeedback.
            config: Optional SeedConfig. If None, loads from an empty environment.
            cwd: Optional current working directory. If None, uses Path("/test/default/cwd").
            env: Optional child process environment. If None, uses {}.

        Returns:
            SeedContext with fakes for every unspecified dependency
        """
        from create_seed.core.cloner.fake import FakeTemplateCloner
        from create_seed.core.process.fake import FakeProcessRunner

        return SeedContext(
            runner=runner if runner is not None else FakeProcessRunner(),
            cloner=cloner if cloner is not None else FakeTemplateCloner(),
            feedback=feedback if feedback is not None else QuietFeedback(),
            config=config if config is not None else SeedConfig.from_env({}),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            env=env if env is not None else {},
        )


def create_context() -> SeedContext:
    """Create production context with real implementations.

    Called once at CLI entry point. Reads the process environment exactly once.
    """
    cwd = Path.cwd()
    env = dict(os.environ)
    runner = RealProcessRunner()
    return SeedContext(
        runner=runner,
        cloner=RealTemplateCloner(runner, cwd=cwd),
        feedback=InteractiveFeedback(),
        config=SeedConfig.from_env(env),
        cwd=cwd,
        env=env,
    )
