"""Runtime settings for the rmg command line.

Every setting can come from the environment with the ``RMG_`` prefix
(e.g. ``RMG_LOG_LEVEL=DEBUG``) or from a ``.env`` file in the working
directory.  Command-line flags take precedence over both.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="RMG_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Minimum level for structured log output",
    )
    log_json: bool = Field(
        default=False,
        description="Render log entries as JSON instead of console text",
    )
    currency_symbol: str = Field(
        default="$",
        min_length=1,
        description="Symbol printed in front of amounts on receipts",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
