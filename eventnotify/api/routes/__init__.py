"""API route modules."""

from eventnotify.api.routes.events import router as events_router
from eventnotify.api.routes.events import stream_router
from eventnotify.api.routes.health import router as health_router
from eventnotify.api.routes.metrics import router as metrics_router
from eventnotify.api.routes.subscriptions import router as subscriptions_router

__all__: list[str] = [
    "events_router",
    "health_router",
    "metrics_router",
    "stream_router",
    "subscriptions_router",
]
