"""
Exception hierarchy for crawlstore.

All exceptions inherit from StoreError to allow catching every adapter-level
error. Transport failures are not wrapped: they surface as the client's own
``redis.exceptions.RedisError``.
"""

from datetime import datetime
from typing import Any


class StoreError(Exception):
    """Base exception for all crawlstore errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.utcnow()


# =============================================================================
# Lookup Errors
# =============================================================================


class NotFoundError(StoreError):
    """The requested key does not exist (or has expired)."""

    def __init__(self, key: str, message: str | None = None):
        super().__init__(message or f"not found: {key}", {"key": key})
        self.key = key


class QueueEmptyError(NotFoundError):
    """Dequeue was attempted on an empty request queue."""

    def __init__(self, key: str):
        super().__init__(key, f"queue is empty: {key}")


# =============================================================================
# Connection Errors
# =============================================================================


class StoreConnectionError(StoreError):
    """The store could not be reached during initialization."""

    def __init__(self, address: str, reason: str):
        super().__init__(
            f"Redis connection error: {reason}",
            {"address": address},
        )
        self.address = address
        self.reason = reason


class StoreNotInitializedError(StoreError):
    """An operation was issued before initialize() succeeded."""

    def __init__(self, operation: str):
        super().__init__(
            f"Cannot {operation}: storage is not initialized",
            {"operation": operation},
        )
        self.operation = operation
