"""Notification builder - the per-subscriber reaction to an event.

Turns (subscriber, event) into a fully formed NotificationMessage: selects the
channel renderer, stamps the render time from the time authority and computes
latency against the event's creation time.

The only non-deterministic parts of a build are the generated id and the
render timestamp (and therefore latency).
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from uuid import uuid4

from eventnotify.application.ports.notification_metrics import NotificationMetricsPort
from eventnotify.application.ports.time_authority import TimeAuthorityProtocol
from eventnotify.application.services.fan_out_bus import Listener
from eventnotify.application.stubs.noop_notification_metrics import NoOpNotificationMetrics
from eventnotify.domain.events.domain_event import DomainEvent
from eventnotify.domain.models.notification import NotificationMessage, compute_latency_ms
from eventnotify.domain.models.subscriber import Channel, Subscriber
from eventnotify.domain.services.renderers import Renderer, select_renderer

RendererSelector = Callable[[Channel], Renderer]


class NotificationBuilder:
    """Builds notifications for subscribers.

    Example:
        >>> builder = NotificationBuilder(time_authority=SystemTimeAuthority())
        >>> listener = builder.bind(subscriber)
        >>> notification = listener(event)
    """

    def __init__(
        self,
        time_authority: TimeAuthorityProtocol,
        renderer_selector: RendererSelector = select_renderer,
        metrics: NotificationMetricsPort | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            time_authority: Source of render timestamps.
            renderer_selector: Channel -> renderer lookup.
            metrics: Optional metrics port.
        """
        self._time = time_authority
        self._select_renderer = renderer_selector
        self._metrics = metrics or NoOpNotificationMetrics()

    def build(self, subscriber: Subscriber, event: DomainEvent) -> NotificationMessage:
        """Render the notification for one subscriber.

        Args:
            subscriber: Recipient.
            event: Published event.

        Returns:
            Immutable NotificationMessage.

        Raises:
            UnsupportedChannelError: If the subscriber's channel has no renderer.
        """
        render = self._select_renderer(subscriber.channel)
        sent_at = self._time.utcnow()
        rendered = render(subscriber.name, event)
        latency_ms = compute_latency_ms(event.created_at, sent_at)

        notification = NotificationMessage(
            id=str(uuid4()),
            user_id=subscriber.id,
            user_name=subscriber.name,
            channel=subscriber.channel,
            event_id=event.id,
            event_title=event.title,
            event_type=event.type,
            sent_at=sent_at,
            latency_ms=latency_ms,
            rendered=rendered,
        )
        self._metrics.record_notification_built(subscriber.channel.value, latency_ms)
        return notification

    def bind(self, subscriber: Subscriber) -> Listener:
        """Return the listener that builds this subscriber's notifications."""
        return partial(self.build, subscriber)
