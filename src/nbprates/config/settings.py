# src/nbprates/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or an optional .env file.

Files that USE this module:
- nbprates.app (server host/port and logging configuration)
- nbprates.adapters.providers.nbp (base URL and HTTP timeout)
- nbprates.application.range_validator (maximum range length)
- nbprates.adapters.http.auth (shared system token)

Files that this module USES:
- nbprates.shared.validators (validation functions for settings)
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nbprates.shared.validators import validate_base_url


DEFAULT_NBP_URL = "https://api.nbp.pl/api/exchangerates/rates"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- NBP API ---
    nbp_url: str = Field(default=DEFAULT_NBP_URL, alias="APP_NBP_URL")
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Rate queries ---
    max_date_range_days: int = Field(default=7, alias="MAX_DATE_RANGE_DAYS", ge=1, le=367)

    # --- HTTP server ---
    system_token: str = Field(default="", alias="APP_SYSTEM_TOKEN")
    host: str = Field(default="127.0.0.1", alias="APP_HOST")
    port: int = Field(default=8000, alias="APP_PORT", ge=1, le=65535)

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="NBPRATES_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("nbp_url")
    @classmethod
    def validate_nbp_url(cls, v: str) -> str:
        """Validate the base URL and drop trailing slashes."""
        if not validate_base_url(v):
            raise ValueError("Invalid APP_NBP_URL, expected an absolute http(s) URL")
        return v.rstrip("/")


# Global settings instance
settings = Settings()
