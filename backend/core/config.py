"""core/config.py — Application configuration via Pydantic BaseSettings.

Loads environment variables from .env (and the OS environment).
Import `settings` from this module wherever configuration is needed.

Usage:
    from core.config import settings

    db_url = settings.database_url
    if settings.is_sqlite:
        ...
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env lives in the project root (one level above backend/)
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"
_DEFAULT_LOG_DIR = Path(__file__).parent.parent.parent / "logs"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./eventmi.db"

    # Application
    app_name: str = "Eventmi"
    version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "DEBUG"
    log_dir: str = str(_DEFAULT_LOG_DIR)

    allowed_origins: list[str] = [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, v: str) -> str:
        return v.upper()

    # SQLAlchemy requires "postgresql://" not "postgres://"
    @field_validator("database_url", mode="before")
    @classmethod
    def _normalize_postgres_scheme(cls, v: str) -> str:
        if v and v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


# Singleton — import this everywhere
settings = Settings()
