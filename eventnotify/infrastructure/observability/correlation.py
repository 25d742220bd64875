"""Request correlation IDs.

The current ID lives in a ContextVar. Each HTTP request sets it on entry and
restores the previous value on exit; asyncio tasks copy the context when they
are created, so delivery tasks scheduled by a publish request keep logging
under that request's ID after the response has gone out.
"""

from contextvars import ContextVar, Token
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the current correlation ID, or "" outside a request."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> Token[str]:
    """Make ``correlation_id`` current.

    Returns:
        Token for ``reset_correlation_id``.
    """
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token[str]) -> None:
    """Restore the correlation ID that was current before ``set_correlation_id``."""
    _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor stamping ``correlation_id`` onto log entries.

    An explicit ``correlation_id`` passed to the log call wins.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
