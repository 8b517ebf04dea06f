"""
Prometheus metrics configuration.

Defines the counters and histograms exported on ``/metrics`` and the
``instrumented`` decorator that counts and times service operations.
"""

from __future__ import annotations

import functools
import time
from typing import Any, Awaitable, Callable, TypeVar

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from prometheus_client.registry import REGISTRY

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

# ============================================================================
# HTTP Request Metrics
# ============================================================================

http_requests_total = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint", "status_code"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_errors_total = Counter(
    "http_errors_total",
    "Total number of HTTP errors",
    ["method", "endpoint", "status_code"],
)

# ============================================================================
# Customer Data Service Operation Metrics
# ============================================================================

operations_total = Counter(
    "customerdataservice_operations_total",
    "Total number of customer data service operations",
    ["operation"],
)

operation_duration_seconds = Histogram(
    "customerdataservice_operation_duration_seconds",
    "Customer data service operation duration in seconds",
    ["operation"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

operation_errors_total = Counter(
    "customerdataservice_operation_errors_total",
    "Total number of failed customer data service operations",
    ["operation", "error"],  # error: 'emailexists', 'customernotfound', 'exception'
)


def record_operation_error(operation: str, error: str) -> None:
    """Increment the error counter of a service operation."""
    operation_errors_total.labels(operation=operation, error=error).inc()


def instrumented(operation: str) -> Callable[[F], F]:
    """Count and time every call of an async function under ``operation``.

    The call is counted whether it succeeds or raises.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            operations_total.labels(operation=operation).inc()
            start_time = time.perf_counter()
            try:
                return await func(*args, **kwargs)
            finally:
                operation_duration_seconds.labels(operation=operation).observe(time.perf_counter() - start_time)

        return wrapper  # type: ignore[return-value]

    return decorator


def get_metrics() -> bytes:
    """Render all registered metrics in the Prometheus text format."""
    return generate_latest(REGISTRY)


__all__ = [
    "CONTENT_TYPE_LATEST",
    "get_metrics",
    "http_errors_total",
    "http_request_duration_seconds",
    "http_requests_total",
    "instrumented",
    "operation_duration_seconds",
    "operation_errors_total",
    "operations_total",
    "record_operation_error",
]
