"""
Redis storage backend for crawl state.

Keeps visited-request markers, per-host cookies and a FIFO request queue in
Redis under a shared namespace prefix, so one Redis database can serve
several independent crawls.
"""

import asyncio
from datetime import timedelta
from types import TracebackType

import redis.asyncio as redis

from crawlstore.exceptions import (
    QueueEmptyError,
    StoreConnectionError,
    StoreNotInitializedError,
)
from crawlstore.utils import metrics
from crawlstore.utils.logging import StoreLogger
from crawlstore.utils.time_utils import Expiration, to_milliseconds, to_timedelta
from crawlstore.utils.url_utils import get_host

MAX_REQUEST_ID = 2**64 - 1


class RedisStorage:
    """
    Redis-based crawl state storage.

    Key layout (``P`` is the prefix):
    - ``P:request:<id>``  visited marker, optional TTL
    - ``P:cookie:<host>`` cookie string, no TTL
    - ``P:queue``         list of pending request payloads
    """

    def __init__(
        self,
        address: str = "localhost:6379",
        password: str | None = None,
        db: int = 0,
        prefix: str = "",
        client: redis.Redis | None = None,
        expires: Expiration | None = None,
        logger: StoreLogger | None = None,
    ):
        """
        Initialize the storage. No connection is made until initialize().

        Args:
            address: Redis server address as ``host:port``.
            password: Redis password.
            db: Redis database number.
            prefix: Namespace prefix for every key.
            client: An existing Redis async client (bytes mode). When
                given, address/password/db are ignored and close() leaves
                the client open.
            expires: Expiration for visited markers. None or zero keeps
                them until cleared.
            logger: Logger instance.
        """
        self.address = address
        self.password = password
        self.db = db
        self.prefix = prefix
        self.client = client
        self.expires: timedelta | None = to_timedelta(expires)
        self.logger = logger or StoreLogger("redis_storage")

        self._owns_client = False
        # Only used for cookie methods and clear().
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> "RedisStorage":
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Keys
    # -------------------------------------------------------------------------

    def _request_key(self, request_id: int) -> str:
        return f"{self.prefix}:request:{request_id}"

    def _cookie_key(self, host: str) -> str:
        return f"{self.prefix}:cookie:{host}"

    def _queue_key(self) -> str:
        return f"{self.prefix}:queue"

    @property
    def _redis(self) -> redis.Redis:
        if self.client is None:
            raise StoreNotInitializedError("use storage")
        return self.client

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def initialize(self) -> None:
        """
        Connect (unless a client was supplied) and verify with PING.

        Raises:
            StoreConnectionError: If the server cannot be reached.
        """
        if self.client is None:
            host, _, port = self.address.rpartition(":")
            self.client = redis.Redis(
                host=host or "localhost",
                port=int(port) if port else 6379,
                password=self.password,
                db=self.db,
            )
            self._owns_client = True

        try:
            with metrics.track_operation("ping"):
                await self.client.ping()
        except redis.RedisError as e:
            self.logger.store_connection_failed(self.address, str(e))
            raise StoreConnectionError(self.address, str(e)) from e

        self.logger.store_connected(self.address, prefix=self.prefix)

    async def close(self) -> None:
        """Close the client if this storage created it."""
        if self._owns_client and self.client is not None:
            await self.client.aclose()
            self.client = None
            self._owns_client = False

    async def clear(self) -> int:
        """
        Remove every cookie, visited marker and the queue for this prefix.

        Keys are enumerated first; if either enumeration fails nothing is
        deleted. Not atomic against concurrent writers.

        Returns:
            Number of keys removed.
        """
        async with self._lock:
            client = self._redis
            with metrics.track_operation("keys"):
                cookie_keys = await client.keys(self._cookie_key("*"))
            with metrics.track_operation("keys"):
                request_keys = await client.keys(f"{self.prefix}:request:*")

            keys = [*cookie_keys, *request_keys, self._queue_key()]
            with metrics.track_operation("delete"):
                removed = await client.delete(*keys)

        metrics.QUEUE_SIZE.labels(prefix=self.prefix).set(0)
        self.logger.store_cleared(self.prefix, removed)
        return removed

    # -------------------------------------------------------------------------
    # Visited tracking
    # -------------------------------------------------------------------------

    async def mark_visited(self, request_id: int) -> None:
        """
        Mark a request as visited.

        Args:
            request_id: Unsigned 64-bit request identifier.
        """
        _check_request_id(request_id)
        px = to_milliseconds(self.expires) if self.expires else None
        with metrics.track_operation("visited_set"):
            await self._redis.set(self._request_key(request_id), "1", px=px)

    async def is_visited(self, request_id: int) -> bool:
        """
        Check whether a request was marked as visited.

        Args:
            request_id: Unsigned 64-bit request identifier.

        Returns:
            True if the marker exists.
        """
        _check_request_id(request_id)
        with metrics.track_operation("visited_get"):
            value = await self._redis.get(self._request_key(request_id))
        return value is not None

    # -------------------------------------------------------------------------
    # Cookies
    # -------------------------------------------------------------------------

    async def save_cookies(self, host: str, cookies: str) -> None:
        """
        Store the cookie string for a host, replacing any previous one.

        Args:
            host: Bare host or a URL on that host.
            cookies: Serialized cookies.
        """
        key = self._cookie_key(get_host(host))
        async with self._lock:
            with metrics.track_operation("cookie_set"):
                await self._redis.set(key, cookies)

    async def load_cookies(self, host: str) -> str:
        """
        Load the cookie string for a host.

        Args:
            host: Bare host or a URL on that host.

        Returns:
            The stored cookies, or an empty string if none are stored.

        Raises:
            UnicodeDecodeError: If the stored value is not valid UTF-8.
        """
        key = self._cookie_key(get_host(host))
        async with self._lock:
            with metrics.track_operation("cookie_get"):
                value = await self._redis.get(key)

        if value is None:
            return ""
        return value.decode() if isinstance(value, bytes) else value

    async def set_cookies(self, host: str, cookies: str) -> None:
        """Cookie-jar form of save_cookies(): errors are logged, not raised."""
        # TODO: drop once the cookie jar interface can report errors
        try:
            await self.save_cookies(host, cookies)
        except redis.RedisError as e:
            self.logger.cookie_write_failed(get_host(host), str(e))

    async def cookies(self, host: str) -> str:
        """Cookie-jar form of load_cookies(): read errors yield ""."""
        try:
            return await self.load_cookies(host)
        except (redis.RedisError, UnicodeDecodeError) as e:
            self.logger.cookie_read_failed(get_host(host), str(e))
            return ""

    # -------------------------------------------------------------------------
    # Queue
    # -------------------------------------------------------------------------

    async def enqueue(self, payload: bytes) -> None:
        """Append a serialized request to the tail of the queue."""
        with metrics.track_operation("queue_push"):
            await self._redis.rpush(self._queue_key(), payload)

    async def dequeue(self) -> bytes:
        """
        Pop the request at the head of the queue.

        Raises:
            QueueEmptyError: If the queue is empty.
        """
        with metrics.track_operation("queue_pop"):
            payload = await self._redis.lpop(self._queue_key())
        if payload is None:
            raise QueueEmptyError(self._queue_key())
        return payload

    async def size(self) -> int:
        """Get the number of queued requests."""
        with metrics.track_operation("queue_len"):
            length = await self._redis.llen(self._queue_key())
        metrics.QUEUE_SIZE.labels(prefix=self.prefix).set(length)
        return length

    # Names used by the queue and storage interfaces of the crawler.
    visited = mark_visited
    add_request = enqueue
    get_request = dequeue
    queue_size = size


def _check_request_id(request_id: int) -> None:
    if not isinstance(request_id, int) or isinstance(request_id, bool):
        raise TypeError(f"Request id must be an int, not {type(request_id).__name__}")
    if not 0 <= request_id <= MAX_REQUEST_ID:
        raise ValueError(f"Request id out of uint64 range: {request_id}")
