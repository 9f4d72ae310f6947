"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    DEBUG: bool = False
    LOG_LEVEL: str = "info"
    APP_VERSION: str = "1.0.0"

    # Validation
    REPORT_ALL_WARNINGS: bool = False  # One record per applicable warning instead of first match

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
