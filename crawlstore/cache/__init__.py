"""Byte cache backed by Redis."""

from crawlstore.cache.base import Cache, ErrNotFound
from crawlstore.cache.redis_cache import RedisCache
from crawlstore.exceptions import NotFoundError

__all__ = [
    "Cache",
    "ErrNotFound",
    "NotFoundError",
    "RedisCache",
]
