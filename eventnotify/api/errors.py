"""Exception handlers mapping boundary failures to ``400 {error}``.

Both service-level validation errors and request bodies FastAPI cannot parse
are reported with the same shape, and neither mutates any state.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from eventnotify.api.models.notifications import ErrorResponse
from eventnotify.domain.errors.validation import ValidationFailedError

log = structlog.get_logger()


def _describe_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request"


async def handle_validation_failed(request: Request, exc: Exception) -> JSONResponse:
    """Render a ValidationFailedError as 400 {error}."""
    assert isinstance(exc, ValidationFailedError)
    log.info("request_rejected", path=request.url.path, field=exc.field, error=str(exc))
    return JSONResponse(status_code=400, content=ErrorResponse(error=str(exc)).model_dump())


async def handle_request_validation(request: Request, exc: Exception) -> JSONResponse:
    """Render a malformed request body as 400 {error}."""
    assert isinstance(exc, RequestValidationError)
    message = _describe_request_errors(exc)
    log.info("request_rejected", path=request.url.path, error=message)
    return JSONResponse(status_code=400, content=ErrorResponse(error=message).model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the 400 handlers on an application."""
    app.add_exception_handler(ValidationFailedError, handle_validation_failed)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
