"""Discovery of template directories under a registry root.

A direct child directory is a template iff it has a package.json at its top
level. Hidden directories and node_modules are never considered. Directories
whose manifest cannot be parsed are passed over rather than reported: they
show up in ScanResult.skipped for callers that want to mention them.
"""

import logging
from pathlib import Path

from create_seed.core.errors import MalformedManifest
from create_seed.core.manifest import MANIFEST_FILENAME, read_manifest
from create_seed.registry.models import RegistryTemplate, ScanResult, SkippedDirectory

logger = logging.getLogger(__name__)

DEPENDENCY_CACHE_DIRNAME = "node_modules"


def is_candidate_dir(path: Path) -> bool:
    """Check whether a child of the root may hold a template."""
    if not path.is_dir():
        return False
    if path.name.startswith("."):
        return False
    return path.name != DEPENDENCY_CACHE_DIRNAME


def template_sort_key(template: RegistryTemplate) -> tuple[str, str]:
    """Order by name ignoring case; names equal but for case put lowercase first."""
    return (template.name.casefold(), template.name.swapcase())


def read_template_info(template_dir: Path) -> RegistryTemplate:
    """Build a RegistryTemplate from a directory's package.json.

    Raises:
        MalformedManifest: If package.json cannot be parsed
    """
    manifest = read_manifest(template_dir / MANIFEST_FILENAME)
    name = manifest.get("name")
    description = manifest.get("description")
    return RegistryTemplate(
        id=template_dir.name,
        name=name if isinstance(name, str) and name else template_dir.name,
        description=description if isinstance(description, str) else "",
        path=template_dir.name,
    )


def scan_root(root: Path) -> ScanResult:
    """Scan the direct children of root for templates.

    Returns:
        Templates sorted by name, plus the candidate directories skipped
    """
    templates: list[RegistryTemplate] = []
    skipped: list[SkippedDirectory] = []

    for child in sorted(root.iterdir()):
        if not is_candidate_dir(child):
            continue
        if not (child / MANIFEST_FILENAME).is_file():
            skipped.append(SkippedDirectory(path=child, reason="no-manifest"))
            continue
        try:
            templates.append(read_template_info(child))
        except MalformedManifest as e:
            logger.debug("Skipping %s: %s", child, e)
            skipped.append(SkippedDirectory(path=child, reason="malformed-manifest"))

    templates.sort(key=template_sort_key)
    return ScanResult(templates=tuple(templates), skipped=tuple(skipped))


def scan_templates(root: Path) -> list[RegistryTemplate]:
    """Scan root and return only the templates found."""
    return list(scan_root(root).templates)
