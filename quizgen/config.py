"""
Configuration settings for quizgen.

Uses Pydantic Settings for environment variable management with .env file support.
Variables are prefixed with QUIZGEN_ (e.g. QUIZGEN_PASS_PERCENTAGE=80).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="QUIZGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Quiz Attempts
    # ========================================
    pass_percentage: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Minimum score percentage that passes a quiz",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for option shuffling when the caller gives none (None = random)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    # ========================================
    # API Server
    # ========================================
    api_host: str = Field(
        default="127.0.0.1",
        description="API server host",
    )
    api_port: int = Field(
        default=8110,
        description="API server port",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
