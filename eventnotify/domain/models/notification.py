"""Notification message domain model.

One NotificationMessage is built per (event, subscriber) pair at fan-out time.
It copies the fields it needs from both so it can be serialized and delivered
without holding on to either. It has no lifecycle beyond delivery.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from eventnotify.domain.events.domain_event import EventType
from eventnotify.domain.models.subscriber import Channel


def compute_latency_ms(created_at: datetime, sent_at: datetime) -> int:
    """Return whole milliseconds between event creation and render.

    Clamped at zero so clock skew never yields a negative latency.

    Args:
        created_at: Event creation time.
        sent_at: Notification render time.

    Returns:
        Non-negative latency in milliseconds.
    """
    elapsed = (sent_at - created_at).total_seconds() * 1000
    return max(0, int(elapsed))


@dataclass(frozen=True, eq=True)
class NotificationMessage:
    """Rendered notification for one subscriber - immutable.

    Attributes:
        id: Unique identifier (UUID4 string).
        user_id: Subscriber id.
        user_name: Subscriber display name.
        channel: Subscriber channel.
        event_id: Source event id.
        event_title: Source event title.
        event_type: Source event type.
        sent_at: Render timestamp.
        latency_ms: max(0, sent_at - event.created_at) in milliseconds.
        rendered: Channel-specific human-readable text.
    """

    id: str
    user_id: str
    user_name: str
    channel: Channel
    event_id: str
    event_title: str
    event_type: EventType
    sent_at: datetime
    latency_ms: int
    rendered: str

    def __post_init__(self) -> None:
        if self.latency_ms < 0:
            raise ValueError(f"latency_ms must be non-negative, got {self.latency_ms}")
