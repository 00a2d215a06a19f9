"""Utility modules for crawlstore."""

from crawlstore.utils.logging import StoreLogger, get_logger, setup_logging
from crawlstore.utils.time_utils import to_milliseconds, to_timedelta
from crawlstore.utils.url_utils import get_host

__all__ = [
    "StoreLogger",
    "get_host",
    "get_logger",
    "setup_logging",
    "to_milliseconds",
    "to_timedelta",
]
