"""Configuration via pydantic-settings.

All config is sourced from environment variables prefixed with
``INFOSCHEMA_``, e.g. ``INFOSCHEMA_LOG_FORMAT=json``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from infoschema.names import Option


class Settings(BaseSettings):
    """infoschema settings.

    The catalog takes the dialect as an argument; these settings only feed
    the command-line tool and logging setup.
    """

    model_config = SettingsConfigDict(env_prefix="INFOSCHEMA_")

    # Observability
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Advertised in DATABASE_OPTIONS
    database_dialect: str = Option.GOOGLE_STANDARD_SQL

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {v!r}")
        return level

    @field_validator("database_dialect")
    @classmethod
    def validate_dialect_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("database_dialect must not be empty")
        return v


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the process-wide settings, read from the environment once."""
    return Settings()
