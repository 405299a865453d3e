"""
Unified configuration for the webinar service.

This module provides a single Settings class that consolidates all
environment variables used by the API and its collaborators.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for .env file loading (allows running from any CWD)
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Unified settings for the webinar service.

    Environment variables are loaded from .env file and can be overridden
    by actual environment variables.
    """

    # Service identification
    SERVICE_NAME: str = "webinar-hub"

    # PostgreSQL (content store)
    POSTGRES_DSN: str = "host=localhost port=5432 dbname=postgres user=postgres password=postgres"

    # Content store backend: "postgres" or "memory"
    WEBINAR_STORE: str = "postgres"

    # Identity provider tokens
    JWT_SECRET: str = ""
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TTL: int = 900  # 15 minutes

    # Anonymous viewers may browse open webinars
    ALLOW_ANONYMOUS: bool = True

    # App host/port
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8081

    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",  # Vite dev server
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        extra="ignore"
    )


# Global settings instance
settings = Settings()  # type: ignore
