"""
Middleware modules for the customer data service.

This package contains custom middleware for request metrics and logging.
"""

from .metrics_middleware import MetricsMiddleware

__all__ = ["MetricsMiddleware"]
