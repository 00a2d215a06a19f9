"""
Cache capability consumed by the crawler.
"""

from typing import Protocol

from crawlstore.exceptions import NotFoundError

# Re-exported so cache consumers can catch the miss sentinel from one place.
ErrNotFound = NotFoundError


class Cache(Protocol):
    """A byte cache keyed by string."""

    async def get(self, key: str) -> bytes:
        """Return the cached bytes, or raise NotFoundError."""
        ...

    async def put(self, key: str, value: bytes) -> None:
        """Store bytes under key, replacing any previous value."""
        ...
