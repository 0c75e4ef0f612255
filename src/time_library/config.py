"""Configuration management for the Time Library.

Settings are read from the environment (prefix ``TIME_LIBRARY_``) or an
optional ``.env`` file and validated with pydantic-settings. Components
share one instance through ``get_config()``.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LibrarySettings(BaseSettings):
    """Runtime settings for the catalog and the demo entry point."""

    model_config = SettingsConfigDict(
        # Use TIME_LIBRARY_ prefix for all env vars
        env_prefix="TIME_LIBRARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    library_name: str = Field(
        default="time-library",
        description="Library name included in the demo startup log record",
        pattern=r"^[a-z0-9-]+$",
    )

    # === Logging ===

    debug: bool = Field(
        default=False,
        description="Force DEBUG logging regardless of log_level",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    # === Catalog behavior ===

    strict_timelines: bool = Field(
        default=False,
        description="Reject existence intervals whose end year precedes the start year",
    )

    default_year: int = Field(
        default=1899,
        description="Year used by the demo when no --year is given",
        ge=0,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level, with debug taking precedence."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: LibrarySettings | None = None


def get_config() -> LibrarySettings:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = LibrarySettings()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
