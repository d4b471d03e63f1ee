"""
Application settings.

Values come from environment variables prefixed with ``FORECAST_`` (or a
``.env`` file in the working directory), e.g. ``FORECAST_LAT=39.74``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the CLI and flows."""

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "forecast-dashboard"
    app_env: str = "development"
    debug: bool = False
    api_port: int = Field(default=8000, ge=1, le=65535)

    # Default location (Denver, CO) used when `show` gets no query
    lat: float = Field(default=39.7392, ge=-90, le=90)
    lon: float = Field(default=-104.9903, ge=-180, le=180)

    user_agent: str = "forecast-dashboard/0.1 (noreply@example.com)"
    http_timeout: float = 30.0
    site_dir: str = "site"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
