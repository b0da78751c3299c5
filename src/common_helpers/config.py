"""
Configuration module for common_helpers.

Settings are loaded from .env files and environment variables prefixed with
COMMON_HELPERS_, e.g. COMMON_HELPERS_CAPTURE_BACKTRACE=false.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings shared by the logging and error helpers."""

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # EnrichedError backtrace capture
    CAPTURE_BACKTRACE: bool = True
    BACKTRACE_LIMIT: int | None = Field(
        default=None,
        ge=1,
        description="Maximum number of stack frames kept in a backtrace (None keeps all)",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="COMMON_HELPERS_",
    )


# Create a single instance for the library to use
settings = Settings()
