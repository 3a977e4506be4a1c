"""Tests for the create command."""

import json
from pathlib import Path

from click.testing import CliRunner

from create_seed.cli.cli import cli
from create_seed.core.cloner.fake import FakeTemplateCloner
from create_seed.core.config import SeedConfig
from create_seed.core.context import SeedContext
from create_seed.core.process.fake import FakeProcessRunner
from create_seed.core.user_feedback import InteractiveFeedback

TEMPLATE_FILES = {
    "package.json": json.dumps(
        {"name": "template", "version": "1.0.0", "scripts": {"build": "tsc", "dev": "vite"}}
    ),
}


def _catalog(cwd: Path) -> None:
    (cwd / "templates.json").write_text(
        json.dumps(
            {
                "templates": [
                    {"id": "gh:o/r/alpha", "name": "alpha", "description": "Alpha app"},
                    {"id": "gh:o/r/beta", "name": "beta", "description": "Beta app"},
                ]
            }
        ),
        encoding="utf-8",
    )


def _context(
    cwd: Path,
    *,
    runner: FakeProcessRunner | None = None,
    cloner: FakeTemplateCloner | None = None,
    env: dict[str, str] | None = None,
    feedback: InteractiveFeedback | None = None,
) -> SeedContext:
    environ = env or {}
    return SeedContext.for_test(
        runner=runner if runner is not None else FakeProcessRunner(installed_tools={"git"}),
        cloner=cloner if cloner is not None else FakeTemplateCloner(files=TEMPLATE_FILES),
        feedback=feedback,
        config=SeedConfig.from_env(environ),
        cwd=cwd,
        env=environ,
    )


def test_create_scaffolds_project_and_prints_next_steps() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        cwd = Path.cwd()
        process = FakeProcessRunner(installed_tools={"git"})
        cloner = FakeTemplateCloner(files=TEMPLATE_FILES)
        ctx = _context(cwd, runner=process, cloner=cloner)

        result = runner.invoke(cli, ["create", "my-app", "-t", "gh:o/r/alpha"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert cloner.clone_calls == [("gh:o/r/alpha", cwd.resolve() / "my-app")]
        assert process.run_commands[0] == ("bun", "install")
        assert "Next steps:" in result.output
        assert "cd my-app" in result.output
        assert "bun run dev" in result.output
        pkg = json.loads((cwd / "my-app" / "package.json").read_text(encoding="utf-8"))
        assert pkg["name"] == "my-app"


def test_create_with_skip_flags_runs_no_processes() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        process = FakeProcessRunner(installed_tools={"git"})
        ctx = _context(Path.cwd(), runner=process)

        result = runner.invoke(
            cli,
            ["create", "my-app", "-t", "./tpl", "--skip-install", "--skip-git", "--pm", "pnpm"],
            obj=ctx,
        )

        assert result.exit_code == 0, result.output
        assert process.run_commands == []
        assert "pnpm run dev" in result.output


def test_create_rejects_invalid_package_manager() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        cloner = FakeTemplateCloner(files=TEMPLATE_FILES)
        ctx = _context(Path.cwd(), cloner=cloner)

        result = runner.invoke(cli, ["create", "my-app", "-t", "./tpl", "--pm", "yarn"], obj=ctx)

        assert result.exit_code == 1
        assert 'Invalid package manager: "yarn"' in result.output
        assert cloner.clone_calls == []


def test_create_rejects_target_outside_cwd() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        cloner = FakeTemplateCloner(files=TEMPLATE_FILES)
        ctx = _context(Path.cwd(), cloner=cloner)

        result = runner.invoke(cli, ["create", "../escape", "-t", "./tpl"], obj=ctx)

        assert result.exit_code == 1
        assert "would target files outside the current directory" in result.output
        assert cloner.clone_calls == []


def test_create_rejects_current_directory_as_target() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        ctx = _context(Path.cwd())

        result = runner.invoke(cli, ["create", ".", "-t", "./tpl"], obj=ctx)

        assert result.exit_code == 1
        assert "would target files outside the current directory" in result.output


def test_create_dry_run_writes_nothing() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        cwd = Path.cwd()
        process = FakeProcessRunner(installed_tools={"git"})
        cloner = FakeTemplateCloner(files=TEMPLATE_FILES)
        ctx = _context(cwd, runner=process, cloner=cloner)

        result = runner.invoke(cli, ["create", "my-app", "-t", "gh:o/r/alpha", "-d"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert "Template:     gh:o/r/alpha" in result.output
        assert "PM:           auto-detect" in result.output
        assert "no files were created" in result.output
        assert not (cwd / "my-app").exists()
        assert cloner.clone_calls == []
        assert process.run_commands == []


def test_create_existing_directory_declined_keeps_it() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        cwd = Path.cwd()
        (cwd / "my-app").mkdir()
        (cwd / "my-app" / "keep.txt").write_text("mine", encoding="utf-8")
        cloner = FakeTemplateCloner(files=TEMPLATE_FILES)
        ctx = _context(cwd, cloner=cloner)

        result = runner.invoke(cli, ["create", "my-app", "-t", "./tpl"], obj=ctx, input="n\n")

        assert result.exit_code == 0, result.output
        assert "already exists. Overwrite?" in result.output
        assert "Cancelled." in result.output
        assert (cwd / "my-app" / "keep.txt").exists()
        assert cloner.clone_calls == []


def test_create_existing_directory_overwritten_with_yes() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        cwd = Path.cwd()
        (cwd / "my-app").mkdir()
        (cwd / "my-app" / "stale.txt").write_text("old", encoding="utf-8")
        ctx = _context(cwd)

        result = runner.invoke(
            cli, ["create", "my-app", "-t", "./tpl", "-y", "--skip-install"], obj=ctx
        )

        assert result.exit_code == 0, result.output
        assert "Removing existing" in result.output
        assert not (cwd / "my-app" / "stale.txt").exists()
        assert (cwd / "my-app" / "package.json").exists()


def test_create_step_failure_names_the_step() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        process = FakeProcessRunner(failures={("bun", "install"): (1, "ENOTFOUND registry")})
        ctx = _context(Path.cwd(), runner=process)

        result = runner.invoke(cli, ["create", "my-app", "-t", "./tpl"], obj=ctx)

        assert result.exit_code == 1
        assert "Failed: Installing dependencies: bun install failed with exit code 1" in (
            result.output
        )
        assert "Traceback" not in result.output
        assert "Next steps:" not in result.output


def test_create_step_failure_verbose_shows_traceback() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        ctx = _context(Path.cwd(), cloner=FakeTemplateCloner(should_fail=True))

        result = runner.invoke(cli, ["create", "my-app", "-t", "./tpl", "-v"], obj=ctx)

        assert result.exit_code == 1
        assert "Failed: Cloning template: Simulated clone failure" in result.output
        assert "Traceback" in result.output
        assert "TemplateCloneError" in result.output


def test_create_prompts_for_name_and_template_from_catalog() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        cwd = Path.cwd()
        _catalog(cwd)
        cloner = FakeTemplateCloner(files=TEMPLATE_FILES)
        ctx = _context(cwd, cloner=cloner, env={"TEMPLATES_URL": "./templates.json"})

        result = runner.invoke(
            cli,
            ["create", "--skip-install", "--skip-git"],
            obj=ctx,
            input="bad name!\nmy-app\n2\n",
        )

        assert result.exit_code == 0, result.output
        assert "Invalid characters in project name" in result.output
        assert "1. alpha - Alpha app" in result.output
        assert "3. Custom" in result.output
        assert cloner.clone_calls == [("gh:o/r/beta", cwd.resolve() / "my-app")]


def test_create_custom_template_choice() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        cwd = Path.cwd()
        _catalog(cwd)
        cloner = FakeTemplateCloner(files=TEMPLATE_FILES)
        ctx = _context(cwd, cloner=cloner)

        result = runner.invoke(
            cli,
            ["create", "my-app", "--templates-url", "./templates.json", "--skip-install"],
            obj=ctx,
            input="3\ngh:me/mine/starter\n",
        )

        assert result.exit_code == 0, result.output
        assert cloner.clone_calls[0][0] == "gh:me/mine/starter"


def test_create_unreachable_catalog_falls_back_to_custom_prompt() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        cloner = FakeTemplateCloner(files=TEMPLATE_FILES)
        ctx = _context(Path.cwd(), cloner=cloner)

        result = runner.invoke(
            cli,
            ["create", "my-app", "--templates-url", "./missing.json", "--skip-install"],
            obj=ctx,
            input="./local-template\n",
        )

        assert result.exit_code == 0, result.output
        assert "Select a template" not in result.output
        assert cloner.clone_calls[0][0] == "./local-template"


def test_create_reports_progress() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        ctx = _context(Path.cwd(), feedback=InteractiveFeedback())

        result = runner.invoke(cli, ["create", "my-app", "-t", "./tpl", "--skip-install"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert "Cloning template..." in result.output
        assert "Package configured" in result.output


def test_create_quiet_hides_progress() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        ctx = _context(Path.cwd(), feedback=InteractiveFeedback())

        result = runner.invoke(
            cli, ["create", "my-app", "-t", "./tpl", "-q", "--skip-install"], obj=ctx
        )

        assert result.exit_code == 0, result.output
        assert "Cloning template..." not in result.output
        assert "Next steps:" in result.output
