"""Registry generation: templates.json and README.md from a scan of the root."""

import json
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from create_seed.core.errors import MalformedManifest
from create_seed.core.manifest import MANIFEST_FILENAME, read_manifest
from create_seed.core.process.abc import ProcessRunner
from create_seed.registry.models import (
    FALLBACK_REGISTRY_NAME,
    README_FILENAME,
    REGISTRY_FILENAME,
    Registry,
    RegistryMeta,
    RegistryTemplate,
)
from create_seed.registry.scanner import scan_root

logger = logging.getLogger(__name__)

GITHUB_REMOTE_RE = re.compile(r"github\.com[/:](.+?)(?:\.git)?$")
EXAMPLE_COMMAND = "bun x create-seed@latest my-app -t {template_id}"


def _read_root_manifest(root: Path) -> dict[str, Any] | None:
    manifest_path = root / MANIFEST_FILENAME
    if not manifest_path.exists():
        return None
    try:
        return read_manifest(manifest_path)
    except MalformedManifest as e:
        logger.debug("Ignoring root manifest: %s", e)
        return None


def identity_from_repository_field(repository: Any) -> str | None:
    """Interpret a package.json `repository` value as an owner/repo identity.

    Accepts an object with a `name` field, or a string containing a slash.
    """
    if isinstance(repository, dict):
        name = repository.get("name")
        return name if isinstance(name, str) and name else None
    if isinstance(repository, str) and "/" in repository:
        return repository
    return None


def identity_from_remote_url(url: str) -> str | None:
    """Extract owner/repo from a GitHub remote URL (https or ssh form).

    >>> identity_from_remote_url("git@github.com:beeman/templates.git")
    'beeman/templates'
    """
    match = GITHUB_REMOTE_RE.search(url.strip())
    return match.group(1) if match else None


def detect_repo_identity(root: Path, runner: ProcessRunner) -> str | None:
    """Resolve the owner/repo identity used to build template ids.

    The root package.json `repository` field wins. Only when the manifest
    declares no repository at all is the git origin remote consulted; a
    declared but unusable repository yields None.
    """
    manifest = _read_root_manifest(root)
    if manifest is not None and "repository" in manifest:
        return identity_from_repository_field(manifest["repository"])

    remote = runner.capture(["git", "remote", "get-url", "origin"], cwd=root)
    if remote is None:
        return None
    return identity_from_remote_url(remote)


def build_registry(templates: Iterable[RegistryTemplate], identity: str | None) -> Registry:
    """Assign ids to scanned templates: gh:<identity>/<path>, or the bare path."""
    return Registry(
        templates=tuple(
            t.with_id(f"gh:{identity}/{t.path}" if identity else t.path) for t in templates
        )
    )


def generate_registry(root: Path, runner: ProcessRunner) -> Registry:
    """Scan root and build its registry."""
    identity = detect_repo_identity(root, runner)
    logger.debug("Repository identity for %s: %s", root, identity)
    return build_registry(scan_root(root).templates, identity)


def read_registry_meta(root: Path) -> RegistryMeta:
    """Title and description for the README, from the root package.json."""
    manifest = _read_root_manifest(root) or {}
    name = manifest.get("name")
    description = manifest.get("description")
    return RegistryMeta(
        name=name if isinstance(name, str) and name else FALLBACK_REGISTRY_NAME,
        description=description if isinstance(description, str) else "",
    )


def generate_readme(root: Path, registry: Registry) -> str:
    """Render the README for a registry. Deterministic for a given input."""
    meta = read_registry_meta(root)

    lines = [f"# {meta.name}", ""]
    if meta.description:
        lines.extend([meta.description, ""])

    lines.extend(["## Available Templates", ""])

    for template in registry.templates:
        lines.extend([f"### `{template.path}`", ""])
        if template.description:
            lines.extend([template.description, ""])
        lines.extend(
            [
                "```bash",
                EXAMPLE_COMMAND.format(template_id=template.id),
                "```",
                "",
            ]
        )

    return "\n".join(lines)


def serialize_registry(registry: Registry) -> str:
    return json.dumps(registry.to_dict(), indent=2, ensure_ascii=False) + "\n"


def write_registry(root: Path, registry: Registry) -> Path:
    """Write templates.json under root and return its absolute path."""
    file_path = (root / REGISTRY_FILENAME).resolve()
    file_path.write_text(serialize_registry(registry), encoding="utf-8")
    return file_path


def write_readme(root: Path, content: str) -> Path:
    """Write README.md under root and return its absolute path."""
    file_path = (root / README_FILENAME).resolve()
    file_path.write_text(content, encoding="utf-8")
    return file_path
