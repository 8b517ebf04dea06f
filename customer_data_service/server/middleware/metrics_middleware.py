"""
Metrics Middleware for FastAPI.

Records Prometheus metrics for every HTTP request, labelled by the matched
route template rather than the raw URL. Adds the processing time as an
``X-Process-Time`` header and warns about slow requests.
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from customer_data_service.core.logging_config import get_logger
from customer_data_service.core.metrics import (
    http_errors_total,
    http_request_duration_seconds,
    http_requests_total,
)

logger = get_logger(__name__)

SLOW_REQUEST_THRESHOLD_MS = 1000.0

# Label for requests that matched no route, so unknown URLs share one label set
UNMATCHED_ENDPOINT = "unmatched"


def _endpoint_label(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ENDPOINT)


def _record(method: str, endpoint: str, status_code: int, duration_s: float) -> None:
    labels = {"method": method, "endpoint": endpoint, "status_code": str(status_code)}
    http_requests_total.labels(**labels).inc()
    http_request_duration_seconds.labels(**labels).observe(duration_s)
    if status_code >= 400:
        http_errors_total.labels(**labels).inc()


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to collect HTTP request metrics for Prometheus."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Skip the metrics endpoint itself
        if request.url.path == "/metrics":
            return await call_next(request)

        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(
                f"API request failed: {method} {path}",
                exc_info=True,
                extra={"method": method, "path": path, "duration_ms": duration * 1000, "error": str(e)},
            )
            _record(method, _endpoint_label(request), 500, duration)
            raise

        duration = time.perf_counter() - start_time
        duration_ms = duration * 1000
        _record(method, _endpoint_label(request), response.status_code, duration)
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"

        if duration_ms > SLOW_REQUEST_THRESHOLD_MS:
            logger.warning(
                f"Slow API request: {method} {path} took {duration_ms:.2f}ms",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": duration_ms,
                    "status_code": response.status_code,
                },
            )

        return response
