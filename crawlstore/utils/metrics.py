"""
Prometheus metrics for crawlstore.

Provides instrumentation for Redis round trips made by the adapters.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import Counter, Gauge, Histogram

# =============================================================================
# Storage Metrics
# =============================================================================

REDIS_OPERATIONS = Counter(
    "crawlstore_redis_operations_total",
    "Redis operations by type",
    ["operation", "status"],
)

REDIS_LATENCY = Histogram(
    "crawlstore_redis_latency_seconds",
    "Redis operation latency",
    ["operation"],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25],
)

# =============================================================================
# Cache Metrics
# =============================================================================

CACHE_REQUESTS = Counter(
    "crawlstore_cache_requests_total",
    "Cache lookups by result",
    ["result"],
)

# =============================================================================
# Queue Metrics
# =============================================================================

QUEUE_SIZE = Gauge(
    "crawlstore_queue_size",
    "Number of pending requests in the queue",
    ["prefix"],
)


@contextmanager
def track_operation(operation: str) -> Iterator[None]:
    """Count and time a single Redis round trip."""
    start = time.perf_counter()
    try:
        yield
    except Exception:
        REDIS_OPERATIONS.labels(operation=operation, status="error").inc()
        raise
    else:
        REDIS_OPERATIONS.labels(operation=operation, status="success").inc()
    finally:
        REDIS_LATENCY.labels(operation=operation).observe(time.perf_counter() - start)
