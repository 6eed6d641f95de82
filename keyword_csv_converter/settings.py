"""Configuration for the converter app.

Priority: keyword arguments > KEYWORD_CSV_* environment variables > .env file > defaults.
The conversion core takes everything as explicit arguments; only the app reads these.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .export import DEFAULT_FILE_NAME

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings.

    Environment variables:
        KEYWORD_CSV_HOST: Server host (default: 127.0.0.1)
        KEYWORD_CSV_PORT: Server port (default: 7860)
        KEYWORD_CSV_DEFAULT_FILE_NAME: Initial download file name (default: keywords)
        KEYWORD_CSV_EXPORT_DIR: Where downloads are written (default: system temp dir)
        KEYWORD_CSV_LOG_LEVEL: Logging level (default: INFO)
    """

    model_config = SettingsConfigDict(
        env_prefix="KEYWORD_CSV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    host: str = Field(default="127.0.0.1", description="Server host to bind to")
    port: int = Field(default=7860, ge=1, le=65535, description="Server port to bind to")
    default_file_name: str = Field(
        default=DEFAULT_FILE_NAME,
        description="File name (without extension) pre-filled in the UI",
    )
    export_dir: Optional[Path] = Field(
        default=None,
        description="Directory for exported CSV files; system temp dir when unset",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(_LOG_LEVELS))}")
        return v_upper


@lru_cache
def get_settings() -> Settings:
    """Get cached settings. Call get_settings.cache_clear() to reload."""
    return Settings()
