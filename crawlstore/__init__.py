"""
crawlstore

Redis adapters for crawler state: a TTL byte cache for responses and a
store for visited requests, cookies and the pending request queue.
"""

__version__ = "0.1.0"

from crawlstore.cache import Cache, RedisCache
from crawlstore.config import StoreSettings, load_config
from crawlstore.exceptions import (
    NotFoundError,
    QueueEmptyError,
    StoreConnectionError,
    StoreError,
    StoreNotInitializedError,
)
from crawlstore.storage import RedisStorage, create_cache, create_storage

__all__ = [
    "Cache",
    "NotFoundError",
    "QueueEmptyError",
    "RedisCache",
    "RedisStorage",
    "StoreConnectionError",
    "StoreError",
    "StoreNotInitializedError",
    "StoreSettings",
    "create_cache",
    "create_storage",
    "load_config",
]
