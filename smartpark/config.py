"""
Configuration settings for SmartPark.
Uses Pydantic for type-safe configuration management.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SMARTPARK_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "SmartPark"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./smartpark.db"
    database_echo: bool = False

    # Sessions
    session_cookie_name: str = "smartpark.sid"
    session_ttl_hours: int = 24  # absolute, not sliding

    # Security
    bcrypt_rounds: int = 12
    min_password_length: int = 6

    # Business rules
    max_amount: float = 1_000_000

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # API
    api_prefix: str = "/api"

    # Logging
    log_level: str = "INFO"
    log_requests: bool = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
