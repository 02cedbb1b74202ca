"""
Configuration package for conlluedit.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    CHECK_HEADS: bool = True
    ALIGN_PADDING: int = 0

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
