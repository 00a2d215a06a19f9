"""
Structured logging for crawlstore.

Adapters log named events through StoreLogger; setup_logging() decides
where and how they are rendered.
"""

import logging
import sys
from typing import Any

import structlog

LOG_FORMATS = ("json", "console")


def _renderer(format_type: str) -> list[structlog.types.Processor]:
    """Final processors for the chosen output format."""
    if format_type == "json":
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def setup_logging(level: str = "INFO", format_type: str = "json") -> None:
    """
    Route adapter events through structlog onto stdlib logging.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_type: 'json' for one JSON object per line, 'console' for
            human-readable output.

    Raises:
        ValueError: If format_type is not one of LOG_FORMATS.
    """
    if format_type not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {format_type!r}")

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(stream=sys.stdout, format="%(message)s")
    # basicConfig is a no-op once the host app has installed handlers.
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderer(format_type),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        A bound structured logger.
    """
    return structlog.get_logger(name)


class StoreLogger:
    """
    Logger for store adapters with pre-defined event types.
    """

    def __init__(self, name: str = "crawlstore"):
        self._logger = get_logger(name)

    def store_connected(self, address: str, **kwargs: Any) -> None:
        """Log a successful connection check."""
        self._logger.info(
            "store_connected",
            event_type="lifecycle",
            address=address,
            **kwargs,
        )

    def store_connection_failed(self, address: str, error: str, **kwargs: Any) -> None:
        """Log a failed connection check."""
        self._logger.error(
            "store_connection_failed",
            event_type="lifecycle",
            address=address,
            error=error,
            **kwargs,
        )

    def store_cleared(self, prefix: str, keys_removed: int, **kwargs: Any) -> None:
        """Log a bulk clear."""
        self._logger.info(
            "store_cleared",
            event_type="lifecycle",
            prefix=prefix,
            keys_removed=keys_removed,
            **kwargs,
        )

    def cache_miss(self, key: str, **kwargs: Any) -> None:
        """Log a cache lookup that found nothing."""
        self._logger.debug(
            "cache_miss",
            event_type="cache",
            key=key,
            **kwargs,
        )

    def cookie_write_failed(self, host: str, error: str, **kwargs: Any) -> None:
        """Log a swallowed cookie write error."""
        self._logger.error(
            "cookie_write_failed",
            event_type="cookies",
            host=host,
            error=error,
            **kwargs,
        )

    def cookie_read_failed(self, host: str, error: str, **kwargs: Any) -> None:
        """Log a swallowed cookie read error."""
        self._logger.error(
            "cookie_read_failed",
            event_type="cookies",
            host=host,
            error=error,
            **kwargs,
        )

