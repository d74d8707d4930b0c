"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_EXPO_PUSH_URL = "https://exp.host/--/api/v2/push/send"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="Europe/Istanbul",
        description="IANA timezone name (or UTC offset) used for stored timestamps",
    )
    expo_push_url: str = Field(
        default=DEFAULT_EXPO_PUSH_URL,
        description="Endpoint of the Expo push notification service",
        min_length=1,
    )
    expo_access_token: str | None = Field(
        default=None,
        description="Optional Expo access token sent as a bearer credential",
    )
    push_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every push delivery request",
        gt=0,
    )
    dispatch_batch_size: int = Field(
        default=50,
        description="Number of queued notifications processed per dispatcher run",
        gt=0,
    )
    retry_limit: int = Field(
        default=20,
        description="Number of failed notifications re-queued per retry sweep",
        gt=0,
    )
    dispatch_interval_minutes: int = Field(
        default=5,
        description="Minutes between scheduled dispatcher runs",
        gt=0,
    )
    retry_interval_minutes: int = Field(
        default=60,
        description="Minutes between scheduled retry sweeps",
        gt=0,
    )
    scheduler_enabled: bool = Field(
        default=True,
        description="Run the dispatch and retry jobs inside the API process",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
