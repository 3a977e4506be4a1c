"""Template catalog loading from a URL or a local templates.json."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx

from create_seed.core.errors import CatalogFetchError

DEFAULT_TEMPLATES_URL = "https://raw.githubusercontent.com/beeman/templates/main/templates.json"


@dataclass(frozen=True)
class Template:
    """A template offered by a catalog."""

    id: str
    name: str
    description: str


def is_local_source(source: str) -> bool:
    """Return True when source names a file rather than a URL."""
    if source.startswith(("http://", "https://")):
        return False
    return source.startswith(("./", "../", "/"))


def _load_local(source: str, cwd: Path) -> Any:
    path = (cwd / source).resolve()
    if not path.exists():
        raise CatalogFetchError(f"Templates file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CatalogFetchError(f"Templates file is not valid JSON: {path}") from e


def _load_remote(source: str, client: httpx.Client | None) -> Any:
    owns_client = client is None
    http = client if client is not None else httpx.Client(follow_redirects=True)
    try:
        response = http.get(source)
    except httpx.HTTPError as e:
        raise CatalogFetchError(f"Failed to fetch templates: {e}") from e
    finally:
        if owns_client:
            http.close()

    if not response.is_success:
        raise CatalogFetchError(
            f"Failed to fetch templates: {response.status_code} {response.reason_phrase}"
        )
    try:
        return response.json()
    except json.JSONDecodeError as e:
        raise CatalogFetchError(f"Templates response is not valid JSON: {source}") from e


def parse_catalog(data: Any) -> list[Template]:
    """Turn decoded catalog JSON into Template records.

    Raises:
        CatalogFetchError: If `templates` is missing or not an array
    """
    if not isinstance(data, dict) or not isinstance(data.get("templates"), list):
        raise CatalogFetchError(
            "Invalid template registry format: `templates` property is missing or not an array"
        )

    templates: list[Template] = []
    for entry in data["templates"]:
        if not isinstance(entry, dict):
            raise CatalogFetchError(
                "Invalid template registry format: template entry is not an object"
            )
        templates.append(
            Template(
                id=str(entry.get("id", "")),
                name=str(entry.get("name", "")),
                description=str(entry.get("description", "")),
            )
        )
    return templates


def fetch_templates(
    source: str,
    *,
    cwd: Path | None = None,
    client: httpx.Client | None = None,
) -> list[Template]:
    """Load a template catalog.

    Args:
        source: URL or local path (./, ../ or /) of a templates.json
        cwd: Base directory for relative local paths (defaults to Path.cwd())
        client: HTTP client to use; a short-lived one is created when None

    Raises:
        CatalogFetchError: If the source is unreachable, unparseable or malformed
    """
    if is_local_source(source):
        data = _load_local(source, cwd if cwd is not None else Path.cwd())
    else:
        data = _load_remote(source, client)
    return parse_catalog(data)
