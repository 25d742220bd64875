"""HTTP request metrics.

Every response is timed and counted per method, path and status; 4xx/5xx
responses are also counted with an ``error_type`` label.
"""

import time
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from eventnotify.infrastructure.monitoring.metrics import get_metrics_collector

_CLIENT_ERRORS = {
    400: "bad_request",
    404: "not_found",
    405: "method_not_allowed",
    408: "timeout",
    429: "rate_limited",
}

_SERVER_ERRORS = {
    500: "internal_error",
    502: "bad_gateway",
    503: "service_unavailable",
    504: "gateway_timeout",
}


def _classify_error_type(status_code: int) -> str:
    """Map an HTTP status code to an ``error_type`` label value."""
    if 400 <= status_code < 500:
        return _CLIENT_ERRORS.get(status_code, "client_error")
    if status_code >= 500:
        return _SERVER_ERRORS.get(status_code, "server_error")
    return "unknown"


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records duration, total and failed-request metrics for each response."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        labels = {"method": request.method, "endpoint": request.url.path}
        status = str(response.status_code)
        collector = get_metrics_collector()
        collector.observe_request_duration(duration=duration, **labels)
        collector.increment_requests(status=status, **labels)
        if response.status_code >= 400:
            collector.increment_failed_requests(
                status=status, error_type=_classify_error_type(response.status_code), **labels
            )

        return response
