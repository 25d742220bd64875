"""FastAPI dependencies."""

from eventnotify.api.dependencies.event_notify import get_config, get_event_notify_service

__all__: list[str] = ["get_config", "get_event_notify_service"]
