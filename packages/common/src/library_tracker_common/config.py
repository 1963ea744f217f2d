"""Runtime configuration for library-tracker.

Values come from environment variables or a local ``.env`` file:

    ERROR_LOG_PATH   side log for record and I/O errors (default: errors.log)
    LOG_LEVEL        structured log threshold (default: WARNING)
    LOG_FORMAT       console or json (default: console)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ERROR_LOG_PATH = "errors.log"
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"console", "json"}


class Settings(BaseSettings):
    """Library tracker settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    error_log_path: str = DEFAULT_ERROR_LOG_PATH
    log_level: str = "WARNING"
    log_format: str = "console"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {v!r}")
        return fmt


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached; call cache_clear() to reload)."""
    return Settings()
