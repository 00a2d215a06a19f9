"""
Configuration for crawlstore.

All settings can be set via environment variables with the CRAWLSTORE_ prefix.
"""

from dataclasses import dataclass
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Main settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CRAWLSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Redis
    redis_url: str = "redis://localhost:6379/0"
    redis_address: str = "localhost:6379"
    redis_password: str | None = None
    redis_db: int = Field(default=0, ge=0)

    # Response cache
    cache_prefix: str = "crawlstore:cache"
    cache_expiration: float = Field(default=3600.0, gt=0)  # 1 hour

    # Crawl state
    storage_prefix: str = "crawlstore"
    visited_expiration: float = Field(default=0.0, ge=0)  # 0 = never expires

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"


@dataclass
class CacheConfig:
    """Response cache configuration."""

    prefix: str = "crawlstore:cache"
    expiration_seconds: float = 3600.0


@dataclass
class StorageConfig:
    """Crawl state storage configuration."""

    prefix: str = "crawlstore"
    address: str = "localhost:6379"
    password: str | None = None
    db: int = 0
    visited_expiration_seconds: float = 0.0


def load_config() -> StoreSettings:
    """Load configuration from environment variables."""
    return StoreSettings()
