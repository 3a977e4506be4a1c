"""Registry data types and their JSON form."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

REGISTRY_FILENAME = "templates.json"
README_FILENAME = "README.md"
FALLBACK_REGISTRY_NAME = "Templates"


def _text_field(entry: dict[str, Any], key: str) -> str:
    # null and non-string values read as empty
    value = entry.get(key)
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class RegistryTemplate:
    """One template directory directly under the registry root."""

    id: str
    name: str
    description: str
    path: str

    def with_id(self, template_id: str) -> "RegistryTemplate":
        return replace(self, id=template_id)

    def to_dict(self) -> dict[str, str]:
        # Key order is part of the persisted format
        return {
            "description": self.description,
            "id": self.id,
            "name": self.name,
            "path": self.path,
        }


@dataclass(frozen=True)
class Registry:
    """Ordered catalog of the templates under one root."""

    templates: tuple[RegistryTemplate, ...]

    @property
    def paths(self) -> frozenset[str]:
        return frozenset(t.path for t in self.templates)

    def to_dict(self) -> dict[str, Any]:
        return {"templates": [t.to_dict() for t in self.templates]}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Registry":
        """Build a Registry from well-formed templates.json data."""
        return Registry(
            templates=tuple(
                RegistryTemplate(
                    id=_text_field(entry, "id"),
                    name=_text_field(entry, "name"),
                    description=_text_field(entry, "description"),
                    path=_text_field(entry, "path"),
                )
                for entry in data["templates"]
                if isinstance(entry, dict)
            )
        )


@dataclass(frozen=True)
class RegistryMeta:
    """Title and description of a registry, from the root package.json."""

    name: str
    description: str


@dataclass(frozen=True)
class SkippedDirectory:
    """A child directory the scanner did not treat as a template."""

    path: Path
    reason: Literal["no-manifest", "malformed-manifest"]


@dataclass(frozen=True)
class ScanResult:
    """Templates found under a root plus the directories passed over."""

    templates: tuple[RegistryTemplate, ...]
    skipped: tuple[SkippedDirectory, ...]


Severity = Literal["error", "warning"]
FindingKind = Literal["structure", "field", "path", "readme", "orphan"]


@dataclass(frozen=True)
class ValidationFinding:
    """A single problem reported by registry validation.

    Errors mean the registry cannot be trusted as-is; warnings flag drift or
    missing polish.
    """

    severity: Severity
    message: str
    kind: FindingKind

    @property
    def is_error(self) -> bool:
        return self.severity == "error"


@dataclass(frozen=True)
class ValidationReport:
    """Findings split into errors and warnings."""

    findings: tuple[ValidationFinding, ...]

    @property
    def errors(self) -> list[ValidationFinding]:
        return [f for f in self.findings if f.severity == "error"]

    @property
    def warnings(self) -> list[ValidationFinding]:
        return [f for f in self.findings if f.severity == "warning"]

    @property
    def passed(self) -> bool:
        return not self.errors
