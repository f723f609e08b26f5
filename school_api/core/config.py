"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Store
    database_url: str = "sqlite:///school.db"

    # Drop and recreate both tables on every startup (destroys data).
    # When False, tables are created only if absent.
    reset_on_start: bool = False
    seed_sample_data: bool = True

    # App
    app_name: str = "School Records API"
    debug: bool = False
    log_level: str = "INFO"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
