"""Application configuration and settings management."""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".." / ".env"),
        env_file_encoding="utf-8",
        env_prefix="BOOKING_",
        extra="ignore",
    )

    app_name: str = "Service Booking API"
    secret_key: str = "change-me"

    # Database
    database_url: str = "sqlite+aiosqlite:///./booking.db"

    # Security
    access_token_expire_minutes: int = 60 * 24 * 90
    token_salt: str = "booking-auth"
    allowed_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    ssl_cert_file: str | None = None
    ssl_key_file: str | None = None

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: List[str] | str) -> List[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
