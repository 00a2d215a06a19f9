"""Expiration helpers."""

from datetime import timedelta

Expiration = timedelta | float | int


def to_timedelta(expiration: Expiration | None) -> timedelta | None:
    """
    Normalize an expiration given in seconds or as a timedelta.

    Returns None for a missing or zero expiration, which the store
    treats as "persist indefinitely".
    """
    if expiration is None:
        return None
    if not isinstance(expiration, timedelta):
        expiration = timedelta(seconds=expiration)
    if expiration == timedelta(0):
        return None
    if expiration < timedelta(0):
        raise ValueError(f"Expiration must not be negative: {expiration}")
    return expiration


def to_milliseconds(expiration: timedelta) -> int:
    """Convert a timedelta to whole milliseconds, never rounding down to zero."""
    return max(1, int(expiration.total_seconds() * 1000))
