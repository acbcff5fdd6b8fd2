"""
Configuration settings for the studydeck CLI.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # OpenAI Chat Completions
    # ========================================
    openai_api_key: str = Field(
        default="",
        description="OpenAI API key (read from OPENAI_API_KEY)",
    )
    openai_api_url: str = Field(
        default="https://api.openai.com/v1/chat/completions",
        description="Chat completions endpoint",
    )
    openai_model: str = Field(
        default="gpt-4.1-mini",
        description="Model used for summaries and flashcards",
    )
    openai_timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Request timeout for a single completion call",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="WARNING",
        description="Loguru level for stderr output",
    )

    @property
    def has_openai(self) -> bool:
        """Check if an OpenAI credential is configured."""
        return bool(self.openai_api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
