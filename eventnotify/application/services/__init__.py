"""Application services for EventNotify."""

from eventnotify.application.services.delivery_dispatcher import (
    DEFAULT_MAX_DELAY_MS,
    DeliveryDispatcher,
)
from eventnotify.application.services.event_notify_service import (
    EventNotifyService,
    PublishResult,
)
from eventnotify.application.services.fan_out_bus import FanOutBus, Listener
from eventnotify.application.services.notification_builder import NotificationBuilder
from eventnotify.application.services.streaming_client_set import (
    HELLO_MESSAGE,
    StreamEventType,
    StreamingClientSet,
    StreamingConnection,
    StreamMessage,
)
from eventnotify.application.services.subscriber_registry import SubscriberRegistry

__all__: list[str] = [
    "DEFAULT_MAX_DELAY_MS",
    "DeliveryDispatcher",
    "EventNotifyService",
    "FanOutBus",
    "HELLO_MESSAGE",
    "Listener",
    "NotificationBuilder",
    "PublishResult",
    "StreamEventType",
    "StreamMessage",
    "StreamingClientSet",
    "StreamingConnection",
    "SubscriberRegistry",
]
