"""Crawl state storage backed by Redis."""

from crawlstore.storage.factory import (
    configure_logging,
    create_cache,
    create_redis_client,
    create_storage,
)
from crawlstore.storage.redis_storage import RedisStorage

__all__ = [
    "RedisStorage",
    "configure_logging",
    "create_cache",
    "create_redis_client",
    "create_storage",
]
