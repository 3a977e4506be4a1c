"""Configuration read once from the process environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from create_seed.core.catalog import DEFAULT_TEMPLATES_URL

TEMPLATES_URL_ENV_VAR = "TEMPLATES_URL"
USER_AGENT_ENV_VAR = "npm_config_user_agent"
DEBUG_ENV_VAR = "CREATE_SEED_DEBUG"


@dataclass(frozen=True)
class SeedConfig:
    """Immutable configuration loaded at the CLI entry point.

    Components never read the environment themselves; they receive these
    values as plain arguments.
    """

    templates_url: str
    user_agent: str | None
    debug: bool

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "SeedConfig":
        """Load configuration from environment variables."""
        env = os.environ if environ is None else environ
        return SeedConfig(
            templates_url=env.get(TEMPLATES_URL_ENV_VAR) or DEFAULT_TEMPLATES_URL,
            user_agent=env.get(USER_AGENT_ENV_VAR),
            debug=bool(env.get(DEBUG_ENV_VAR)),
        )
