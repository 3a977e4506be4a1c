"""Production ProcessRunner implementation using subprocess."""

import logging
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from create_seed.core.errors import ProcessFailure
from create_seed.core.process.abc import ProcessRunner

logger = logging.getLogger(__name__)


class RealProcessRunner(ProcessRunner):
    """Production implementation using subprocess.

    stdout and stderr of `run` are merged into one buffer so that a failure
    reports output in the order the tool wrote it.
    """

    def run(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Run a command to completion, raising ProcessFailure on non-zero exit."""
        command, *args = cmd
        logger.debug("Running %s in %s", " ".join(cmd), cwd)
        try:
            result = subprocess.run(
                list(cmd),
                cwd=cwd,
                env=dict(env) if env is not None else None,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError as e:
            raise ProcessFailure(command, args, 127, f"Command not found: {command}") from e

        if result.returncode != 0:
            raise ProcessFailure(command, args, result.returncode, result.stdout or "")

    def capture(self, cmd: Sequence[str], *, cwd: Path | None = None) -> str | None:
        """Run a command and return stripped stdout, or None on any failure."""
        try:
            result = subprocess.run(
                list(cmd),
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except (FileNotFoundError, NotADirectoryError):
            return None

        if result.returncode != 0:
            return None

        output = result.stdout.strip()
        return output or None

    def is_installed(self, tool: str) -> bool:
        """Check PATH for the executable."""
        return shutil.which(tool) is not None
