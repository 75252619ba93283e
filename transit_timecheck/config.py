"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "transit-timecheck"
    log_level: str = "INFO"

    # Header staleness (W008)
    max_age_seconds: int = 65
    # Refresh interval between consecutive polls (W007)
    minimum_refresh_interval_seconds: int = 35

    # Used when no static schedule time zone is supplied
    default_timezone: str = "UTC"

    model_config = {"env_prefix": "TIMECHECK_"}


settings = Settings()
