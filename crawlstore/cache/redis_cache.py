"""
Redis-backed byte cache.

Stores raw response bodies under ``<prefix>:<key>`` with a fixed expiration
applied to every entry. Eviction is left to Redis.
"""

from datetime import timedelta

import redis.asyncio as redis

from crawlstore.exceptions import NotFoundError
from crawlstore.utils import metrics
from crawlstore.utils.logging import StoreLogger
from crawlstore.utils.time_utils import Expiration, to_milliseconds, to_timedelta


class RedisCache:
    """
    Redis implementation of the Cache protocol.

    Features:
    - Namespaced keys (``<prefix>:<key>``)
    - Uniform, mandatory TTL on every entry
    - Absent keys reported as NotFoundError rather than None
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        prefix: str,
        expiration: Expiration,
        logger: StoreLogger | None = None,
    ):
        """
        Initialize the cache.

        Args:
            redis_client: Redis async client (bytes mode).
            prefix: Namespace prefix for every key.
            expiration: TTL for every entry, as a timedelta or seconds.
        """
        ttl = to_timedelta(expiration)
        if ttl is None:
            raise ValueError("RedisCache requires a positive expiration")

        self.redis = redis_client
        self.prefix = prefix
        self.expiration: timedelta = ttl
        self.logger = logger or StoreLogger("redis_cache")

    def _key(self, key: str) -> str:
        """Get Redis key for a cache entry."""
        return f"{self.prefix}:{key}"

    async def get(self, key: str) -> bytes:
        """
        Get a cached value.

        Args:
            key: Cache key (without prefix).

        Returns:
            The stored bytes.

        Raises:
            NotFoundError: If the entry is absent or has expired.
            redis.RedisError: On any transport or protocol failure.
        """
        redis_key = self._key(key)
        with metrics.track_operation("cache_get"):
            data = await self.redis.get(redis_key)

        if data is None:
            metrics.CACHE_REQUESTS.labels(result="miss").inc()
            self.logger.cache_miss(redis_key)
            raise NotFoundError(redis_key)

        metrics.CACHE_REQUESTS.labels(result="hit").inc()
        return data

    async def put(self, key: str, value: bytes) -> None:
        """
        Store a value, resetting its expiration.

        Args:
            key: Cache key (without prefix).
            value: Bytes to store.
        """
        with metrics.track_operation("cache_put"):
            await self.redis.psetex(
                self._key(key), to_milliseconds(self.expiration), value
            )
