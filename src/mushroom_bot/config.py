from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # Telegram
    bot_token: str = Field(default="")
    telegram_api_url: str = Field(default="https://api.telegram.org")
    telegram_timeout_seconds: float = Field(default=10.0, gt=0)
    telegram_webhook_secret: str | None = Field(default=None)

    # Google Cloud
    google_cloud_project: str | None = Field(default=None)
    language_code: str = Field(default="ru-RU")
    max_labels: int = Field(default=10, ge=1)
    image_download_timeout_seconds: float = Field(default=30.0, gt=0)

    # Translation of detected labels (disabled unless explicitly requested)
    translation_enabled: bool = False
    translation_source_language: str = Field(default="en-US")

    # Logging
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
