"""structlog configuration.

``configure_structlog`` is called once from the application lifespan. Output
is one JSON object per line in production and colored console lines
elsewhere; LOG_LEVEL (default INFO) sets the filtering level.

A production entry looks like:

    {"event": "event_published", "level": "info",
     "timestamp": "2026-01-01T00:00:00.000000Z",
     "correlation_id": "...", "event_id": "...", "notifications": 2}
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from eventnotify.infrastructure.observability.correlation import correlation_id_processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Resolve LOG_LEVEL to a logging level, INFO when unset or unknown."""
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper())
    return level if isinstance(level, int) else logging.INFO


def build_processors(environment: str) -> list[Processor]:
    """Processor chain for ``environment``, ending in its renderer."""
    renderer: Processor
    if environment == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog globally.

    Args:
        environment: 'production' for JSON output, anything else for console.
    """
    structlog.configure(
        processors=build_processors(environment),
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
