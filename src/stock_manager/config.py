"""Application configuration."""

import os
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    api_url: str = Field(
        default="http://localhost:3000",
        validation_alias=AliasChoices("api_url", "NEXT_PUBLIC_API_URL"),
    )
    request_timeout_seconds: float = 10.0
    heartbeat_interval_seconds: float = 10.0
    credentials_path: str = "~/.stock_manager/credentials.json"
    min_password_length: int = 8
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        populate_by_name=True,
    )

    def resolved_api_url(self) -> str:
        """Return the API base URL without trailing slashes."""
        return normalize_base_url(self.api_url)

    def resolved_credentials_path(self) -> Path:
        """Return the credentials file path with the user directory expanded."""
        return Path(self.credentials_path).expanduser()


def normalize_base_url(raw: str) -> str:
    """Strip whitespace and trailing slashes from a base URL."""
    cleaned = raw.strip().rstrip("/")
    return cleaned or "http://localhost:3000"
