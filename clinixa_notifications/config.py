"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Notification engine configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    notifications_api_url: str = Field(
        default="http://localhost:5000/api",
        description="Base URL of the REST backend exposing the notification endpoints",
        min_length=1,
    )
    notifications_api_token: str | None = Field(
        default=None,
        description="Bearer token sent with every notification request",
    )
    notification_poll_interval_seconds: float = Field(
        default=30.0,
        description="Seconds between two background notification fetches",
        gt=0,
    )
    notification_toast_ttl_seconds: float = Field(
        default=5.0,
        description="Seconds a toast stays visible before it is cleared",
        gt=0,
    )
    notifications_request_timeout_seconds: float | None = Field(
        default=None,
        description="Optional total timeout applied by the HTTP transport",
        gt=0,
    )
    app_timezone: str = Field(
        default="Asia/Kolkata",
        description="IANA timezone (or UTC offset) used for naive server timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @model_validator(mode="after")
    def _normalize(self) -> "Settings":
        self.notifications_api_url = self.notifications_api_url.rstrip("/")
        if self.notifications_api_token is not None:
            self.notifications_api_token = self.notifications_api_token.strip() or None
        self.log_level = self.log_level.upper()
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
