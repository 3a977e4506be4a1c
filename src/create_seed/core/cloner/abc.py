"""Template cloning interface and template reference parsing.

Template references come in two shapes:
- gh:<owner>/<repo>[/<subpath>][#<ref>] - a directory inside a GitHub repository
- anything else - a local directory path
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from create_seed.core.errors import TemplateCloneError

GITHUB_PREFIXES = ("gh:", "github:")


@dataclass(frozen=True)
class TemplateSource:
    """A parsed template reference."""

    kind: Literal["github", "local"]
    location: str
    subpath: str | None = None
    ref: str | None = None

    @property
    def clone_url(self) -> str:
        return f"https://github.com/{self.location}.git"


def parse_template_ref(template_ref: str) -> TemplateSource:
    """Parse a template reference.

    Raises:
        TemplateCloneError: If a gh: reference lacks an owner or repository
    """
    for prefix in GITHUB_PREFIXES:
        if template_ref.startswith(prefix):
            return _parse_github_ref(template_ref, template_ref.removeprefix(prefix))
    return TemplateSource(kind="local", location=template_ref)


def _parse_github_ref(template_ref: str, body: str) -> TemplateSource:
    ref: str | None = None
    if "#" in body:
        body, ref = body.split("#", 1)
    parts = [part for part in body.split("/") if part]
    if len(parts) < 2:
        raise TemplateCloneError(
            f'Invalid template reference "{template_ref}". Expected gh:owner/repo[/path]'
        )
    owner, repo, *rest = parts
    return TemplateSource(
        kind="github",
        location=f"{owner}/{repo.removesuffix('.git')}",
        subpath="/".join(rest) or None,
        ref=ref or None,
    )


class TemplateCloner(ABC):
    """Abstract interface for materializing a template into a directory."""

    @abstractmethod
    def clone(self, template_ref: str, destination: Path) -> None:
        """Populate destination with the template's files.

        Args:
            template_ref: gh: reference or local directory path
            destination: Directory to create and fill

        Raises:
            TemplateCloneError: If the template cannot be found or copied
            ProcessFailure: If an underlying git command fails
        """
        ...
