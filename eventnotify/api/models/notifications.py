"""Subscription, publish and notification API models.

Wire format:
- camelCase keys (``userId``, ``latencyMs``, ``totalSubscribers``)
- timestamps as integer milliseconds since the Unix epoch

Request fields are deliberately optional: missing or blank values are
rejected by the service layer with a descriptive 400, not a schema error.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from eventnotify.domain.events.domain_event import DomainEvent
from eventnotify.domain.models.notification import NotificationMessage
from eventnotify.domain.models.subscriber import Subscriber


def to_epoch_ms(value: datetime) -> int:
    """Convert an aware datetime to integer epoch milliseconds."""
    return int(value.timestamp() * 1000)


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Requests
# =============================================================================


class SubscribeRequest(BaseModel):
    """Request body for POST /api/subscribe."""

    name: str | None = Field(default=None, description="Subscriber display name")
    channel: str | None = Field(default=None, description="email | sms | push")


class UnsubscribeRequest(BaseModel):
    """Request body for POST /api/unsubscribe."""

    id: str | None = Field(default=None, description="Subscriber id")


class PublishRequest(BaseModel):
    """Request body for POST /api/publish."""

    title: str | None = Field(default=None, description="Event title")
    type: str | None = Field(default=None, description="CREATED | UPDATED | CANCELLED")


# =============================================================================
# Responses
# =============================================================================


class ErrorResponse(BaseModel):
    """Body of every 400 response."""

    error: str


class SubscriberModel(CamelModel):
    id: str
    name: str
    channel: str

    @classmethod
    def from_domain(cls, subscriber: Subscriber) -> SubscriberModel:
        return cls(id=subscriber.id, name=subscriber.name, channel=subscriber.channel.value)


class SubscribeResponse(CamelModel):
    subscriber: SubscriberModel
    total: int


class UnsubscribeResponse(CamelModel):
    ok: bool = True
    total: int


class SubscriberListResponse(CamelModel):
    subscribers: list[SubscriberModel]
    total: int


class DomainEventModel(CamelModel):
    """Serialized DomainEvent."""

    id: str
    title: str
    type: str
    created_at: int = Field(description="Epoch milliseconds")

    @classmethod
    def from_domain(cls, event: DomainEvent) -> DomainEventModel:
        return cls(
            id=event.id,
            title=event.title,
            type=event.type.value,
            created_at=to_epoch_ms(event.created_at),
        )


class PublishResponse(CamelModel):
    event: DomainEventModel
    total_subscribers: int


class NotificationModel(CamelModel):
    """Serialized NotificationMessage as carried by SSE ``notification`` events."""

    id: str
    user_id: str
    user_name: str
    channel: str
    event_id: str
    event_title: str
    event_type: str
    sent_at: int = Field(description="Epoch milliseconds")
    latency_ms: int = Field(ge=0)
    rendered: str

    @classmethod
    def from_domain(cls, notification: NotificationMessage) -> NotificationModel:
        return cls(
            id=notification.id,
            user_id=notification.user_id,
            user_name=notification.user_name,
            channel=notification.channel.value,
            event_id=notification.event_id,
            event_title=notification.event_title,
            event_type=notification.event_type.value,
            sent_at=to_epoch_ms(notification.sent_at),
            latency_ms=notification.latency_ms,
            rendered=notification.rendered,
        )
