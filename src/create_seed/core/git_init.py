"""Version control initialization for scaffolded projects.

Git is optional: when it is not installed every operation reports
"skipped" instead of failing.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from create_seed.core.process.abc import ProcessRunner

DEFAULT_BRANCH = "main"
INITIAL_COMMIT_MESSAGE = "chore: initial commit"
FALLBACK_AUTHOR_NAME = "seed"
FALLBACK_AUTHOR_EMAIL = "seed@example.com"

InitResult = Literal["initialized", "skipped"]
CommitResult = Literal["committed", "skipped"]


@dataclass(frozen=True)
class GitIdentity:
    """Author and committer identity applied to git subcommands."""

    name: str
    email: str

    def as_env(self) -> dict[str, str]:
        return {
            "GIT_AUTHOR_NAME": self.name,
            "GIT_AUTHOR_EMAIL": self.email,
            "GIT_COMMITTER_NAME": self.name,
            "GIT_COMMITTER_EMAIL": self.email,
        }


class GitInitializer:
    """Runs git init/add/commit through a ProcessRunner."""

    def __init__(self, runner: ProcessRunner, *, env: Mapping[str, str]) -> None:
        self._runner = runner
        self._env = env

    def is_available(self) -> bool:
        return self._runner.is_installed("git")

    def resolve_identity(self) -> GitIdentity:
        """Read the global git identity, falling back to placeholders when unset."""
        name = self._runner.capture(["git", "config", "--global", "user.name"])
        email = self._runner.capture(["git", "config", "--global", "user.email"])
        return GitIdentity(
            name=name or FALLBACK_AUTHOR_NAME,
            email=email or FALLBACK_AUTHOR_EMAIL,
        )

    def _git_env(self) -> dict[str, str]:
        return {**self._env, **self.resolve_identity().as_env()}

    def initialize(self, target_dir: Path) -> InitResult:
        """Create a repository with an explicit default branch.

        Raises:
            ProcessFailure: If git init exits non-zero
        """
        if not self.is_available():
            return "skipped"

        self._runner.run(["git", "init", "-b", DEFAULT_BRANCH], cwd=target_dir, env=self._git_env())
        return "initialized"

    def commit_all(self, target_dir: Path) -> CommitResult:
        """Stage everything and record the initial commit.

        Raises:
            ProcessFailure: If git add or git commit exits non-zero
        """
        if not self.is_available():
            return "skipped"

        env = self._git_env()
        self._runner.run(["git", "add", "."], cwd=target_dir, env=env)
        self._runner.run(["git", "commit", "-m", INITIAL_COMMIT_MESSAGE], cwd=target_dir, env=env)
        return "committed"
