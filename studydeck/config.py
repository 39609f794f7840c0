"""
Configuration and settings for the StudyDeck service.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(
        default="/api",
        validation_alias=AliasChoices("STUDYDECK_API_PREFIX", "api_prefix"),
    )

    # Presence selects the relational backend; absence keeps data in memory.
    database_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("STUDYDECK_LOG_LEVEL", "log_level"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
