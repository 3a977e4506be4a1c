"""package.json handling for scaffolded projects."""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from create_seed.core.errors import MalformedManifest, ProcessFailure
from create_seed.core.process.abc import ProcessRunner

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
RESET_VERSION = "0.0.0"
PROVENANCE_FIELDS = ("repository", "homepage", "bugs")
BIOME_CONFIG_FILENAMES = ("biome.json", "biome.jsonc")
RUN_SCRIPT_CANDIDATES = ("dev", "start", "build")


def read_manifest(path: Path) -> dict[str, Any]:
    """Parse a package.json file into a dict.

    Raises:
        MalformedManifest: If the file is not valid JSON or not a JSON object
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedManifest(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedManifest(f"{path} must contain a JSON object")
    return data


def dump_manifest(data: dict[str, Any]) -> str:
    """Serialize manifest data with two-space indentation and a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def project_name_from(name: str) -> str:
    """Return the final path segment of a project name or path.

    >>> project_name_from("/home/user/my-app")
    'my-app'
    >>> project_name_from("../projects/my-app")
    'my-app'
    """
    return Path(os.path.abspath(name)).name


def rewrite_package_json(
    target_dir: Path,
    project_name: str,
    *,
    runner: ProcessRunner | None = None,
    env: Mapping[str, str] | None = None,
) -> bool:
    """Give a cloned template's package.json a fresh project identity.

    Sets name and version, clears description and drops repository,
    homepage and bugs. When the project uses Biome and a runner is given,
    the file is formatted with Biome afterwards (best effort).

    Args:
        target_dir: Project directory
        project_name: New project name; only its final path segment is used
        runner: Optional runner used for Biome formatting
        env: Environment for the Biome process

    Returns:
        True if a manifest was rewritten, False if there was none

    Raises:
        MalformedManifest: If the existing package.json cannot be parsed
    """
    manifest_path = target_dir / MANIFEST_FILENAME
    if not manifest_path.exists():
        return False

    data = read_manifest(manifest_path)
    data["name"] = project_name_from(project_name)
    data["version"] = RESET_VERSION
    for field in PROVENANCE_FIELDS:
        data.pop(field, None)
    data["description"] = ""

    manifest_path.write_text(dump_manifest(data), encoding="utf-8")

    if runner is not None and _uses_biome(target_dir):
        _format_with_biome(runner, target_dir, env)

    return True


def _uses_biome(target_dir: Path) -> bool:
    return any((target_dir / name).exists() for name in BIOME_CONFIG_FILENAMES)


def _format_with_biome(
    runner: ProcessRunner, target_dir: Path, env: Mapping[str, str] | None
) -> None:
    try:
        runner.run(
            ["npx", "@biomejs/biome", "check", "--write", MANIFEST_FILENAME],
            cwd=target_dir,
            env=env,
        )
    except ProcessFailure as e:
        logger.warning("Failed to format %s with Biome: %s", MANIFEST_FILENAME, e)


def suggest_run_script(target_dir: Path) -> str | None:
    """Pick the script a user most likely wants to run first.

    Returns:
        The first of dev, start, build defined in package.json scripts, or
        None when there is no manifest, it is malformed, or none match
    """
    manifest_path = target_dir / MANIFEST_FILENAME
    if not manifest_path.exists():
        return None
    try:
        data = read_manifest(manifest_path)
    except MalformedManifest:
        return None

    scripts = data.get("scripts")
    if not isinstance(scripts, dict):
        return None
    for candidate in RUN_SCRIPT_CANDIDATES:
        if candidate in scripts:
            return candidate
    return None
