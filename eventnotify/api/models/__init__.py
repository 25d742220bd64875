"""API request/response models."""

from eventnotify.api.models.health import HealthResponse
from eventnotify.api.models.notifications import (
    DomainEventModel,
    ErrorResponse,
    NotificationModel,
    PublishRequest,
    PublishResponse,
    SubscribeRequest,
    SubscribeResponse,
    SubscriberListResponse,
    SubscriberModel,
    UnsubscribeRequest,
    UnsubscribeResponse,
)

__all__: list[str] = [
    "DomainEventModel",
    "ErrorResponse",
    "HealthResponse",
    "NotificationModel",
    "PublishRequest",
    "PublishResponse",
    "SubscribeRequest",
    "SubscribeResponse",
    "SubscriberListResponse",
    "SubscriberModel",
    "UnsubscribeRequest",
    "UnsubscribeResponse",
]
