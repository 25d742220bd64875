"""Request logging with correlation IDs.

Each request runs under the correlation ID from its X-Correlation-ID header
(or a fresh one), which is echoed back on the response. Completion is
logged with status and duration; for the SSE stream that happens when the
headers go out, while the stream itself stays open.
"""

import time
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from eventnotify.infrastructure.observability.correlation import (
    generate_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Binds a correlation ID to the request and logs its outcome."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        token = set_correlation_id(correlation_id)
        log = structlog.get_logger().bind(
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
        )
        log.debug("request_started")
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed", duration_ms=_elapsed_ms(start), error_type=type(exc).__name__
            )
            raise
        else:
            log.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(start),
            )
            response.headers[CORRELATION_HEADER] = correlation_id
            return response
        finally:
            reset_correlation_id(token)
