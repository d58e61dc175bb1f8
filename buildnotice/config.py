"""Runtime configuration — env-driven via pydantic-settings.

Reads from a .env file and BUILDNOTICE_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class NoticeConfig(BaseSettings):
    """Notification settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export BUILDNOTICE_LOG_LEVEL=DEBUG
        export BUILDNOTICE_DEFAULT_ROBOT=ding_talk
        export BUILDNOTICE_AT_ALL=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BUILDNOTICE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Robot used by the CLI when --robot is not given
    default_robot: str = "lark"

    # Mention everybody in composed messages
    at_all: bool = False


# Module-level singleton — import as `from buildnotice.config import config`
config = NoticeConfig()
