"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Blog REST API.
"""

from pathlib import Path

from pydantic_settings.main import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MAX_USERNAME_LENGTH = 50
MAX_TITLE_LENGTH = 100
# Usernames appear as a path segment in resource links
USERNAME_PATTERN = r"^[^/?#%\s]+$"

# Response constants
BLOG_NOT_FOUND_MESSAGE = "Error: Blog was not found!"
BLOG_TITLE_NOT_FOUND_MESSAGE = "Error: Blog title does not exist"
BLOG_ALREADY_EXISTS_MESSAGE = "Error: User contains blog with the same name"
USER_NOT_FOUND_MESSAGE = "Error: User was not found"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog REST API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_TO_FILE: bool = True
    LOG_FILE: str = "logs/app.log"
    LOG_LEVEL: str = "info"
    PRODUCTION_FRONTEND_URL: str | None = None

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./blogs.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds


settings = Settings()


class LimiterConfig(BaseSettings):
    """Rate limiter configuration (mapped onto `slowapi.Limiter` kwargs)."""

    model_config = SettingsConfigDict(env_prefix="RATE_LIMIT_", case_sensitive=False)

    enabled: bool = True
    default_limits: list[str] = ["100/minute"]
    storage_uri: str = "memory://"
    headers_enabled: bool = False
    strategy: str = "fixed-window"
