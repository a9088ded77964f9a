"""
Centralized configuration for the kosync backend.

All settings are loaded from environment variables prefixed with KOSYNC_
(or a local .env file) with sensible defaults.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KOSYNC_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Kosync API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 7200
    reload: bool = False
    api_prefix: str = ""

    # CORS settings (empty disables the middleware)
    cors_origins: list[str] = []

    # Storage: "memory" or "supabase"
    store_backend: str = "memory"

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_users_table: str = "kosync_users"
    supabase_progress_table: str = "kosync_progress"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
