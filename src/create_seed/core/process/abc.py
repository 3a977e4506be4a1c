"""External process execution interface.

This module provides a clean abstraction over subprocess calls so that the
scaffold pipeline and registry builder can be tested without spawning real
package managers or git.

Architecture:
- ProcessRunner: Abstract base class defining the interface
- RealProcessRunner: Production implementation using subprocess
- FakeProcessRunner: In-memory implementation recording calls for tests
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path


class ProcessRunner(ABC):
    """Abstract interface for running external commands.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def run(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Run a command to completion, buffering its combined output.

        Args:
            cmd: Command and arguments to execute
            cwd: Working directory for the command
            env: Full environment for the child process. None inherits the
                current process environment.

        Raises:
            ProcessFailure: If the command exits non-zero or cannot be started
        """
        ...

    @abstractmethod
    def capture(self, cmd: Sequence[str], *, cwd: Path | None = None) -> str | None:
        """Run a command and return its stripped stdout.

        Best-effort: returns None when the command fails or is not installed.
        """
        ...

    @abstractmethod
    def is_installed(self, tool: str) -> bool:
        """Check whether an executable is available on PATH."""
        ...
