"""Error kinds raised by create-seed.

Every error that the CLI reports without a stack trace derives from
CreateSeedError. Conditions that degrade silently (git not installed, no
package.json to rewrite, malformed template directories during a scan) are
not represented here.
"""

from collections.abc import Sequence


class CreateSeedError(Exception):
    """Base class for predictable create-seed failures."""


class InvalidConfiguration(CreateSeedError, ValueError):
    """A configuration value (e.g. package manager name) is not recognized."""


class MalformedManifest(CreateSeedError):
    """A package.json exists but could not be parsed as a JSON object."""


class ProcessFailure(CreateSeedError):
    """An external command exited with a non-zero status.

    The message carries the command line, the exit code and the combined
    stdout/stderr output (trimmed, omitted when empty).
    """

    def __init__(self, command: str, args: Sequence[str], exit_code: int, output: str) -> None:
        self.command = command
        self.args_list = list(args)
        self.exit_code = exit_code
        self.output = output.strip()
        headline = " ".join([command, *self.args_list])
        lines = [f"{headline} failed with exit code {exit_code}"]
        if self.output:
            lines.append(self.output)
        super().__init__("\n".join(lines))


class ScaffoldStepFailure(CreateSeedError):
    """A named scaffold step failed; the underlying error is kept as __cause__."""

    def __init__(self, title: str, cause: BaseException) -> None:
        self.title = title
        self.cause = cause
        super().__init__(f"{title}: {cause}")


class TemplateCloneError(CreateSeedError):
    """A template reference could not be cloned into the target directory."""


class CatalogFetchError(CreateSeedError):
    """A template catalog is unreachable, unparseable or has the wrong shape."""


class RegistryStructuralError(CreateSeedError):
    """templates.json is missing, not valid JSON, or lacks a templates array."""
