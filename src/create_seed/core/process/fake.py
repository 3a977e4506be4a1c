"""In-memory fake implementation of ProcessRunner for testing."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from create_seed.core.errors import ProcessFailure
from create_seed.core.process.abc import ProcessRunner


@dataclass(frozen=True)
class RunCall:
    """One recorded call to FakeProcessRunner.run()."""

    cmd: tuple[str, ...]
    cwd: Path | None
    env: dict[str, str] | None


class FakeProcessRunner(ProcessRunner):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.

    Examples:
        # git is installed and a global user name is configured
        >>> runner = FakeProcessRunner(
        ...     installed_tools={"git"},
        ...     captured={("git", "config", "--global", "user.name"): "Ada"},
        ... )

        # `bun install` fails with exit code 1
        >>> runner = FakeProcessRunner(failures={("bun", "install"): (1, "boom")})
    """

    def __init__(
        self,
        *,
        installed_tools: set[str] | None = None,
        captured: dict[tuple[str, ...], str] | None = None,
        failures: dict[tuple[str, ...], tuple[int, str]] | None = None,
    ) -> None:
        """Create FakeProcessRunner with pre-configured behavior.

        Args:
            installed_tools: Executables reported by is_installed()
            captured: Mapping of command tuple -> stdout returned by capture()
            failures: Mapping of command tuple -> (exit_code, output). run()
                raises ProcessFailure for these commands.
        """
        self._installed_tools = installed_tools or set()
        self._captured = captured or {}
        self._failures = failures or {}
        self._run_calls: list[RunCall] = []
        self._capture_calls: list[tuple[tuple[str, ...], Path | None]] = []

    @property
    def run_calls(self) -> list[RunCall]:
        """Get the list of run() calls that were made.

        This property is for test assertions only.
        """
        return self._run_calls.copy()

    @property
    def run_commands(self) -> list[tuple[str, ...]]:
        """Command tuples of every run() call, in order."""
        return [call.cmd for call in self._run_calls]

    @property
    def capture_calls(self) -> list[tuple[tuple[str, ...], Path | None]]:
        """Get the list of (cmd, cwd) capture() calls that were made."""
        return self._capture_calls.copy()

    def run(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Record the call and raise ProcessFailure if configured to fail."""
        key = tuple(cmd)
        recorded_env = dict(env) if env is not None else None
        self._run_calls.append(RunCall(cmd=key, cwd=cwd, env=recorded_env))
        if key in self._failures:
            exit_code, output = self._failures[key]
            raise ProcessFailure(key[0], key[1:], exit_code, output)

    def capture(self, cmd: Sequence[str], *, cwd: Path | None = None) -> str | None:
        """Record the call and return the configured stdout, if any."""
        key = tuple(cmd)
        self._capture_calls.append((key, cwd))
        return self._captured.get(key)

    def is_installed(self, tool: str) -> bool:
        """Return True for tools configured at construction time."""
        return tool in self._installed_tools
