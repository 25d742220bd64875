"""EventNotify API dependencies.

The service and config are created once by ``create_app`` and stored on
``app.state``; these dependencies hand them to route handlers. Tests can
swap either through ``app.dependency_overrides``.
"""

from fastapi import Request

from eventnotify.application.services.event_notify_service import EventNotifyService
from eventnotify.config.settings import EventNotifyConfig


def get_event_notify_service(request: Request) -> EventNotifyService:
    """Get the application's EventNotify service.

    Returns:
        The EventNotifyService shared by every request of this app.
    """
    return request.app.state.event_notify_service


def get_config(request: Request) -> EventNotifyConfig:
    """Get the application's configuration."""
    return request.app.state.config
