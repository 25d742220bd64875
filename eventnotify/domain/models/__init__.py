"""Domain models for EventNotify."""

from eventnotify.domain.models.notification import NotificationMessage
from eventnotify.domain.models.subscriber import Channel, Subscriber

__all__: list[str] = ["Channel", "NotificationMessage", "Subscriber"]
