"""Bootstrap wiring: construction of the objects shared by the API layer."""

from eventnotify.bootstrap.event_notify import build_event_notify_service
from eventnotify.bootstrap.logging import configure_structlog
from eventnotify.bootstrap.metrics import (
    get_metrics_collector,
    get_metrics_exporter,
    reset_metrics,
)

__all__: list[str] = [
    "build_event_notify_service",
    "configure_structlog",
    "get_metrics_collector",
    "get_metrics_exporter",
    "reset_metrics",
]
