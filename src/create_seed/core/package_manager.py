"""Package manager selection for a target directory."""

import logging
from enum import StrEnum
from pathlib import Path

from create_seed.core.errors import InvalidConfiguration

logger = logging.getLogger(__name__)


class PackageManager(StrEnum):
    BUN = "bun"
    NPM = "npm"
    PNPM = "pnpm"

    @property
    def lockfile(self) -> str:
        """Lockfile name written by this package manager."""
        return LOCKFILES[self]


LOCKFILES: dict[PackageManager, str] = {
    PackageManager.BUN: "bun.lock",
    PackageManager.NPM: "package-lock.json",
    PackageManager.PNPM: "pnpm-lock.yaml",
}

# Lockfile sniffing order
LOCKFILE_ORDER: tuple[PackageManager, ...] = (
    PackageManager.BUN,
    PackageManager.NPM,
    PackageManager.PNPM,
)

# pnpm is checked first so that a "pnpm/..." agent never matches "npm"
USER_AGENT_ORDER: tuple[PackageManager, ...] = (
    PackageManager.PNPM,
    PackageManager.BUN,
    PackageManager.NPM,
)

DEFAULT_PACKAGE_MANAGER = PackageManager.BUN


def parse_package_manager(value: str) -> PackageManager:
    """Parse an explicit package manager name.

    Raises:
        InvalidConfiguration: If value is not bun, npm or pnpm
    """
    try:
        return PackageManager(value)
    except ValueError:
        valid = ", ".join(pm.value for pm in PackageManager)
        raise InvalidConfiguration(
            f'Invalid package manager: "{value}". Must be one of: {valid}'
        ) from None


def resolve_package_manager(
    explicit: str | None = None,
    target_dir: Path | None = None,
    user_agent: str | None = None,
) -> PackageManager:
    """Decide which package manager governs a target directory.

    Priority: explicit value, then a lockfile in target_dir, then the
    invoking tool's user agent (npm_config_user_agent), then bun.

    Args:
        explicit: Package manager requested by the user, if any
        target_dir: Directory to sniff for lockfiles
        user_agent: Value of npm_config_user_agent captured at startup

    Returns:
        The resolved PackageManager

    Raises:
        InvalidConfiguration: If explicit is not a recognized name
    """
    if explicit:
        return parse_package_manager(explicit)

    if target_dir is not None:
        for pm in LOCKFILE_ORDER:
            if (target_dir / pm.lockfile).exists():
                logger.debug("Detected %s from lockfile %s", pm, pm.lockfile)
                return pm

    agent = user_agent or ""
    for pm in USER_AGENT_ORDER:
        if agent.startswith(pm.value):
            logger.debug("Detected %s from user agent %r", pm, agent)
            return pm

    return DEFAULT_PACKAGE_MANAGER
