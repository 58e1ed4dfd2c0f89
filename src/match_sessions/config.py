"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "json"
    data_file: str = "data.json"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    cors_origins: str = "*"
    expose_secrets: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip() for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or ["*"]
