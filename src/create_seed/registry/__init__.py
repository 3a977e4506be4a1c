"""Template registry: scanning, generation and validation of templates.json."""

from create_seed.registry.builder import (
    build_registry,
    detect_repo_identity,
    generate_readme,
    generate_registry,
    read_registry_meta,
    write_readme,
    write_registry,
)
from create_seed.registry.models import (
    Registry,
    RegistryMeta,
    RegistryTemplate,
    ScanResult,
    SkippedDirectory,
    ValidationFinding,
    ValidationReport,
)
from create_seed.registry.scanner import scan_root, scan_templates
from create_seed.registry.validator import load_registry, validate, validate_registry

__all__ = [
    "Registry",
    "RegistryMeta",
    "RegistryTemplate",
    "ScanResult",
    "SkippedDirectory",
    "ValidationFinding",
    "ValidationReport",
    "build_registry",
    "detect_repo_identity",
    "generate_readme",
    "generate_registry",
    "load_registry",
    "read_registry_meta",
    "scan_root",
    "scan_templates",
    "validate",
    "validate_registry",
    "write_readme",
    "write_registry",
]
