"""
Application settings for festplanner.

This module defines all configuration settings using Pydantic BaseSettings.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_database_url() -> str:
    state_dir = Path.home() / ".festplanner"
    return f"sqlite:///{state_dir / 'state.db'}"


class Settings(BaseSettings):
    """Main application settings using Pydantic BaseSettings."""

    # Catalog documents (festival export, read-only)
    catalog_path: str = Field(default="films.json", alias="FESTPLANNER_CATALOG")
    trailers_path: str | None = Field(default=None, alias="FESTPLANNER_TRAILERS")

    # Durable key/value storage for favorites and selected screenings
    database_url: str = Field(default_factory=_default_database_url, alias="DATABASE_URL")
    echo_sql: bool = Field(default=False, alias="ECHO_SQL")

    # Initial facet flags
    hide_industry: bool = Field(default=True, alias="FESTPLANNER_HIDE_INDUSTRY")

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")  # json|console
    env: str = Field(default="dev", alias="ENV")  # dev|prod|test

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


def _resolve_env_file() -> str | None:
    # 1) Explicit override
    explicit = os.getenv("FESTPLANNER_ENV_FILE")
    if explicit and Path(explicit).is_file():
        return explicit

    # 2) CWD .env
    cwd_env = Path.cwd() / ".env"
    if cwd_env.is_file():
        return str(cwd_env)

    # 3) Walk up from this file to find nearest .env
    here = Path(__file__).resolve()
    for parent in here.parents:
        candidate = parent / ".env"
        if candidate.is_file():
            return str(candidate)
    return None


# Global settings instance (load from best-effort .env discovery)
_env_file = _resolve_env_file()
settings = Settings(_env_file=_env_file) if _env_file else Settings()  # type: ignore[call-arg]
