"""Consistency checks between templates.json, README.md and the filesystem.

Checks run in a fixed order and findings accumulate:
1. Structure of templates.json (missing, invalid JSON, no templates array).
   A structural problem is the only finding reported.
2. Per-template fields and paths, in registry order.
3. README.md presence and freshness against a regenerated README.
4. Orphaned template directories not listed in the registry, in scan order.
"""

import json
from pathlib import Path
from typing import Any

from create_seed.core.errors import RegistryStructuralError
from create_seed.core.manifest import MANIFEST_FILENAME
from create_seed.registry.builder import generate_readme
from create_seed.registry.models import (
    README_FILENAME,
    REGISTRY_FILENAME,
    Registry,
    ValidationFinding,
    ValidationReport,
)
from create_seed.registry.scanner import scan_templates

REGENERATE_COMMAND = "create-seed registry generate"


def load_registry_data(root: Path) -> dict[str, Any]:
    """Read templates.json and check its top-level shape.

    Raises:
        RegistryStructuralError: If the file is missing, not valid JSON, or
            has no `templates` array
    """
    file_path = root / REGISTRY_FILENAME
    if not file_path.exists():
        raise RegistryStructuralError(f"{REGISTRY_FILENAME} not found")

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RegistryStructuralError(f"{REGISTRY_FILENAME} is not valid JSON") from e

    if not isinstance(data, dict) or not isinstance(data.get("templates"), list):
        raise RegistryStructuralError("`templates` property is missing or not an array")
    return data


def load_registry(root: Path) -> Registry:
    """Load templates.json into a Registry.

    Raises:
        RegistryStructuralError: If the file is structurally unusable
    """
    return Registry.from_dict(load_registry_data(root))


def _check_entry(root: Path, entry: Any) -> list[ValidationFinding]:
    entry = entry if isinstance(entry, dict) else {}
    name = entry.get("name")
    path = entry.get("path")

    if not name:
        return [ValidationFinding("error", "Template missing required field: name", "field")]
    if not path:
        return [
            ValidationFinding("error", f'Template "{name}" missing required field: path', "field")
        ]

    findings: list[ValidationFinding] = []
    if not entry.get("id"):
        findings.append(
            ValidationFinding("error", f'Template "{name}" missing required field: id', "field")
        )
    if not entry.get("description"):
        findings.append(
            ValidationFinding("warning", f'Template "{name}" missing description', "field")
        )

    template_dir = root / str(path)
    if not template_dir.is_dir():
        findings.append(
            ValidationFinding("error", f'Template "{name}" path does not exist: {path}', "path")
        )
    elif not (template_dir / MANIFEST_FILENAME).exists():
        findings.append(
            ValidationFinding(
                "error", f'Template "{name}" has no {MANIFEST_FILENAME} in: {path}', "path"
            )
        )
    return findings


def _check_readme(root: Path, registry: Registry) -> list[ValidationFinding]:
    readme_path = root / README_FILENAME
    if not readme_path.exists():
        return [
            ValidationFinding(
                "warning",
                f"{README_FILENAME} not found - run `{REGENERATE_COMMAND}` to create",
                "readme",
            )
        ]

    expected = generate_readme(root, registry).encode("utf-8")
    if readme_path.read_bytes() != expected:
        return [
            ValidationFinding(
                "warning",
                f"{README_FILENAME} is out of date - run `{REGENERATE_COMMAND}` to update",
                "readme",
            )
        ]
    return []


def _check_orphans(root: Path, declared_paths: set[str]) -> list[ValidationFinding]:
    return [
        ValidationFinding("warning", f"Orphaned template not in registry: {t.path}", "orphan")
        for t in scan_templates(root)
        if t.path not in declared_paths
    ]


def validate_registry(root: Path) -> list[ValidationFinding]:
    """Cross-check templates.json against README.md and the template directories."""
    try:
        data = load_registry_data(root)
    except RegistryStructuralError as e:
        return [ValidationFinding("error", str(e), "structure")]

    entries: list[Any] = data["templates"]
    findings: list[ValidationFinding] = []
    for entry in entries:
        findings.extend(_check_entry(root, entry))

    findings.extend(_check_readme(root, Registry.from_dict(data)))

    declared_paths = {
        str(entry["path"]) for entry in entries if isinstance(entry, dict) and entry.get("path")
    }
    findings.extend(_check_orphans(root, declared_paths))
    return findings


def validate(root: Path) -> ValidationReport:
    """validate_registry wrapped in a report with error/warning counts."""
    return ValidationReport(findings=tuple(validate_registry(root)))
