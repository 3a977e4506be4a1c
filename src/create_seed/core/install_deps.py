"""Dependency installation for a freshly cloned template."""

import logging
from collections.abc import Mapping
from pathlib import Path

from create_seed.core.config import USER_AGENT_ENV_VAR
from create_seed.core.package_manager import LOCKFILES, PackageManager, resolve_package_manager
from create_seed.core.process.abc import ProcessRunner

logger = logging.getLogger(__name__)


def remove_foreign_lockfiles(target_dir: Path, pm: PackageManager) -> list[Path]:
    """Delete lockfiles belonging to package managers other than pm.

    Returns:
        Paths that were removed (missing lockfiles are skipped)
    """
    removed: list[Path] = []
    for other, lockfile in LOCKFILES.items():
        if other == pm:
            continue
        lock_path = target_dir / lockfile
        if lock_path.exists():
            lock_path.unlink()
            logger.debug("Removed %s lockfile %s", other, lock_path)
            removed.append(lock_path)
    return removed


def install_dependencies(
    runner: ProcessRunner,
    target_dir: Path,
    explicit: str | None = None,
    *,
    env: Mapping[str, str],
    user_agent: str | None = None,
) -> PackageManager:
    """Install dependencies in target_dir with the resolved package manager.

    The user agent variable is stripped from the child environment so that
    guards like `only-allow` are not confused by the tool that launched us.

    Args:
        runner: Process runner used for `<pm> install`
        target_dir: Project directory containing package.json
        explicit: Package manager requested by the user, if any
        env: Base environment for the child process
        user_agent: npm_config_user_agent captured at startup

    Returns:
        The package manager that performed the install

    Raises:
        InvalidConfiguration: If explicit is not a recognized name
        ProcessFailure: If the install command exits non-zero
    """
    pm = resolve_package_manager(explicit, target_dir, user_agent)
    remove_foreign_lockfiles(target_dir, pm)

    child_env = {k: v for k, v in env.items() if k != USER_AGENT_ENV_VAR}
    runner.run([pm.value, "install"], cwd=target_dir, env=child_env)

    return pm
