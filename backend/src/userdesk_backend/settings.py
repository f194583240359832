"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseSettings):
    """Centralized settings for the Userdesk backend service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "postgresql+psycopg://user:password@db:5432/mydb"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"
    cors_origins: list[str] = ["http://localhost:3000"]


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


__all__ = ["BackendSettings", "get_settings"]
