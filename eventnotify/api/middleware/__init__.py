"""API middleware for request logging and metrics."""

from eventnotify.api.middleware.logging_middleware import CORRELATION_HEADER, LoggingMiddleware
from eventnotify.api.middleware.metrics_middleware import MetricsMiddleware

__all__: list[str] = ["CORRELATION_HEADER", "LoggingMiddleware", "MetricsMiddleware"]
