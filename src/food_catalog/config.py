"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Food Catalog"
    api_prefix: str = "/api/internal"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FOOD_CATALOG_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_prefix(raw: str) -> str:
    """Return an API prefix with one leading slash and no trailing slash."""
    cleaned = raw.strip().strip("/")
    if not cleaned:
        return ""
    return f"/{cleaned}"
