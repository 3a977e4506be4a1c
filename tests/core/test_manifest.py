"""Tests for package.json rewriting and run script suggestion."""

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from create_seed.core.errors import MalformedManifest
from create_seed.core.manifest import (
    project_name_from,
    read_manifest,
    rewrite_package_json,
    suggest_run_script,
)
from create_seed.core.process.fake import FakeProcessRunner
from tests.test_utils.templates import read_json, write_manifest

BIOME_COMMAND = ("npx", "@biomejs/biome", "check", "--write", "package.json")


def _setup(tmp_path: Path, data: dict[str, Any]) -> Path:
    write_manifest(tmp_path, data)
    return tmp_path


def test_uses_basename_of_absolute_path(tmp_path: Path) -> None:
    target = _setup(tmp_path, {"name": "template-name", "version": "1.0.0"})

    rewrite_package_json(target, "/home/user/my-app")

    assert read_json(target / "package.json")["name"] == "my-app"


def test_uses_basename_of_relative_path(tmp_path: Path) -> None:
    target = _setup(tmp_path, {"name": "template-name", "version": "1.0.0"})

    rewrite_package_json(target, "../projects/my-app")

    assert read_json(target / "package.json")["name"] == "my-app"


def test_project_name_does_not_follow_symlinks(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "real-app").mkdir()
    (tmp_path / "my-app").symlink_to(tmp_path / "real-app")
    monkeypatch.chdir(tmp_path)

    assert project_name_from("my-app") == "my-app"


def test_simple_name(tmp_path: Path) -> None:
    target = _setup(tmp_path, {"name": "template-name", "version": "1.0.0"})

    assert rewrite_package_json(target, "my-app") is True

    assert read_json(target / "package.json")["name"] == "my-app"


def test_resets_version(tmp_path: Path) -> None:
    target = _setup(tmp_path, {"name": "template-name", "version": "1.2.3"})

    rewrite_package_json(target, "my-app")

    assert read_json(target / "package.json")["version"] == "0.0.0"


def test_clears_template_specific_fields(tmp_path: Path) -> None:
    target = _setup(
        tmp_path,
        {
            "bugs": "https://github.com/example/repo/issues",
            "description": "A template",
            "homepage": "https://example.com",
            "name": "template-name",
            "repository": "https://github.com/example/repo",
            "version": "1.0.0",
        },
    )

    rewrite_package_json(target, "my-app")

    pkg = read_json(target / "package.json")
    assert "repository" not in pkg
    assert "homepage" not in pkg
    assert "bugs" not in pkg
    assert pkg["description"] == ""


def test_rewrite_yields_exact_fresh_manifest(tmp_path: Path) -> None:
    target = _setup(
        tmp_path, {"name": "tpl", "version": "1.2.3", "repository": "x", "bugs": "y"}
    )

    rewrite_package_json(target, "/abs/path/my-app")

    assert read_json(target / "package.json") == {
        "name": "my-app",
        "version": "0.0.0",
        "description": "",
    }


def test_preserves_unrelated_fields_and_format(tmp_path: Path) -> None:
    """Other keys survive; output is two-space JSON with a trailing newline."""
    target = _setup(
        tmp_path,
        {"name": "t", "version": "1.0.0", "scripts": {"dev": "vite"}, "private": True},
    )

    rewrite_package_json(target, "my-app")

    text = (target / "package.json").read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert '\n  "scripts": {\n    "dev": "vite"\n  },' in text
    assert json.loads(text)["private"] is True


def test_missing_manifest_is_a_noop(tmp_path: Path) -> None:
    assert rewrite_package_json(tmp_path, "my-app") is False
    assert not (tmp_path / "package.json").exists()


def test_malformed_manifest_raises(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{ not json", encoding="utf-8")

    with pytest.raises(MalformedManifest):
        rewrite_package_json(tmp_path, "my-app")


def test_read_manifest_rejects_non_object(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(MalformedManifest, match="must contain a JSON object"):
        read_manifest(tmp_path / "package.json")


def test_biome_formats_when_configured(tmp_path: Path) -> None:
    target = _setup(tmp_path, {"name": "t", "version": "1.0.0"})
    (target / "biome.jsonc").write_text("{}", encoding="utf-8")
    runner = FakeProcessRunner()

    rewrite_package_json(target, "my-app", runner=runner)

    assert runner.run_commands == [BIOME_COMMAND]
    assert runner.run_calls[0].cwd == target


def test_biome_runs_with_given_environment(tmp_path: Path) -> None:
    target = _setup(tmp_path, {"name": "t", "version": "1.0.0"})
    (target / "biome.json").write_text("{}", encoding="utf-8")
    runner = FakeProcessRunner()

    rewrite_package_json(target, "my-app", runner=runner, env={"PATH": "/opt/node/bin"})

    assert runner.run_calls[0].env == {"PATH": "/opt/node/bin"}


def test_biome_skipped_without_config(tmp_path: Path) -> None:
    target = _setup(tmp_path, {"name": "t", "version": "1.0.0"})
    runner = FakeProcessRunner()

    rewrite_package_json(target, "my-app", runner=runner)

    assert runner.run_commands == []


def test_biome_failure_is_logged_not_raised(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    target = _setup(tmp_path, {"name": "t", "version": "1.0.0"})
    (target / "biome.json").write_text("{}", encoding="utf-8")
    runner = FakeProcessRunner(failures={BIOME_COMMAND: (1, "biome exploded")})

    with caplog.at_level(logging.WARNING, logger="create_seed.core.manifest"):
        assert rewrite_package_json(target, "my-app", runner=runner) is True

    assert "Failed to format package.json with Biome" in caplog.text
    assert read_json(target / "package.json")["name"] == "my-app"


@pytest.mark.parametrize(
    ("scripts", "expected"),
    [
        ({"build": "tsc", "start": "node .", "dev": "vite"}, "dev"),
        ({"build": "tsc", "start": "node ."}, "start"),
        ({"build": "tsc", "lint": "biome check"}, "build"),
        ({"lint": "biome check"}, None),
    ],
)
def test_suggest_run_script_prefers_dev_start_build(
    tmp_path: Path, scripts: dict[str, str], expected: str | None
) -> None:
    write_manifest(tmp_path, {"name": "app", "scripts": scripts})

    assert suggest_run_script(tmp_path) == expected


def test_suggest_run_script_tolerates_missing_or_malformed_manifest(tmp_path: Path) -> None:
    assert suggest_run_script(tmp_path) is None

    (tmp_path / "package.json").write_text("nope", encoding="utf-8")
    assert suggest_run_script(tmp_path) is None
