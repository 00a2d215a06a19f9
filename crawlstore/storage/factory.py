"""
Factory for creating Redis clients and adapters from configuration.
"""

import redis.asyncio as redis

from crawlstore.cache.redis_cache import RedisCache
from crawlstore.config import CacheConfig, StorageConfig, StoreSettings
from crawlstore.storage.redis_storage import RedisStorage
from crawlstore.utils.logging import StoreLogger, setup_logging


def create_redis_client(settings: StoreSettings) -> redis.Redis:
    """
    Create a Redis async client from settings.

    The client works in bytes mode; the adapters decode where needed.
    """
    return redis.from_url(settings.redis_url, decode_responses=False)


def cache_config_from_settings(settings: StoreSettings) -> CacheConfig:
    """Extract cache configuration from settings."""
    return CacheConfig(
        prefix=settings.cache_prefix,
        expiration_seconds=settings.cache_expiration,
    )


def storage_config_from_settings(settings: StoreSettings) -> StorageConfig:
    """Extract storage configuration from settings."""
    return StorageConfig(
        prefix=settings.storage_prefix,
        address=settings.redis_address,
        password=settings.redis_password,
        db=settings.redis_db,
        visited_expiration_seconds=settings.visited_expiration,
    )


def create_cache(
    settings: StoreSettings,
    client: redis.Redis | None = None,
    logger: StoreLogger | None = None,
) -> RedisCache:
    """
    Create a response cache.

    Args:
        settings: Store settings.
        client: Existing Redis client. A new one is built from
            ``settings.redis_url`` when omitted.
        logger: Optional logger.

    Returns:
        Configured RedisCache.
    """
    config = cache_config_from_settings(settings)
    return RedisCache(
        client or create_redis_client(settings),
        prefix=config.prefix,
        expiration=config.expiration_seconds,
        logger=logger,
    )


def create_storage(
    settings: StoreSettings,
    client: redis.Redis | None = None,
    logger: StoreLogger | None = None,
) -> RedisStorage:
    """
    Create crawl state storage. Call initialize() before use.

    Without a client, the storage connects to ``settings.redis_address``
    itself and owns the connection.
    """
    config = storage_config_from_settings(settings)
    return RedisStorage(
        address=config.address,
        password=config.password,
        db=config.db,
        prefix=config.prefix,
        client=client,
        expires=config.visited_expiration_seconds,
        logger=logger,
    )


def configure_logging(settings: StoreSettings) -> None:
    """Apply the log level and format from settings."""
    setup_logging(settings.log_level, settings.log_format)
