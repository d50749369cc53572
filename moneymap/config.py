"""
Application configuration using Pydantic Settings.
"""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings


def get_env_file() -> str:
    """Determine which env file to use based on environment."""
    env = os.getenv("APP_ENV", "development")
    if env == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "MoneyMap"
    debug: bool = False
    log_level: str = "INFO"
    app_env: str = "development"

    # Public URL (for share links)
    base_url: str = "http://localhost:8000"

    # Calculator assumptions
    ppf_interest_rate: float = 7.1
    life_expectancy: int = 85
    corpus_multiple: float = 25.0  # 4% withdrawal rule
    cess_rate: float = 0.04

    class Config:
        env_file = get_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
