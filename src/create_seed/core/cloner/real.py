"""Production TemplateCloner using git for GitHub templates and copies for local ones."""

import logging
import shutil
import tempfile
from pathlib import Path

from create_seed.core.cloner.abc import TemplateCloner, TemplateSource, parse_template_ref
from create_seed.core.errors import TemplateCloneError
from create_seed.core.process.abc import ProcessRunner

logger = logging.getLogger(__name__)

# Version control metadata of the template source never reaches the project
COPY_IGNORE = shutil.ignore_patterns(".git")


class RealTemplateCloner(TemplateCloner):
    """Clones GitHub templates shallowly and copies the requested subdirectory."""

    def __init__(self, runner: ProcessRunner, *, cwd: Path) -> None:
        self._runner = runner
        self._cwd = cwd

    def clone(self, template_ref: str, destination: Path) -> None:
        source = parse_template_ref(template_ref)
        if source.kind == "github":
            self._clone_github(source, destination)
        else:
            self._copy_local(source, destination)

    def _clone_github(self, source: TemplateSource, destination: Path) -> None:
        if not self._runner.is_installed("git"):
            raise TemplateCloneError("git is required to clone GitHub templates")

        with tempfile.TemporaryDirectory(prefix="create-seed-") as tmp:
            checkout = Path(tmp) / "checkout"
            cmd = ["git", "clone", "--depth", "1"]
            if source.ref is not None:
                cmd.extend(["--branch", source.ref])
            cmd.extend([source.clone_url, str(checkout)])
            logger.debug("Cloning %s", source.clone_url)
            self._runner.run(cmd, cwd=Path(tmp))

            template_dir = checkout / source.subpath if source.subpath else checkout
            if not template_dir.is_dir():
                raise TemplateCloneError(
                    f"Template path not found in {source.location}: {source.subpath}"
                )
            _copy_tree(template_dir, destination)

    def _copy_local(self, source: TemplateSource, destination: Path) -> None:
        template_dir = (self._cwd / source.location).resolve()
        if not template_dir.is_dir():
            raise TemplateCloneError(f"Template directory not found: {template_dir}")
        _copy_tree(template_dir, destination)


def _copy_tree(source_dir: Path, destination: Path) -> None:
    shutil.copytree(source_dir, destination, ignore=COPY_IGNORE, dirs_exist_ok=True)
