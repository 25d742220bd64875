"""EventNotify service - the single entry point for the HTTP layer.

Validates boundary input, then drives the pipeline:

    publish(title, type)
      -> DomainEvent stamped by the time authority
      -> FanOutBus.notify_all (one NotificationBuilder run per subscriber)
      -> DeliveryDispatcher.dispatch (delayed broadcast to streaming clients)

Every operation here is synchronous apart from ``drain_deliveries``; publish
returns as soon as deliveries are scheduled.

Developer Golden Rules:
1. VALIDATE FIRST - Rejected input raises before any state changes
2. UNKNOWN IDS ARE FINE - Unsubscribe is idempotent
3. PUBLISH NEVER WAITS - Delivery happens after publish has returned
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from eventnotify.application.ports.notification_metrics import NotificationMetricsPort
from eventnotify.application.ports.time_authority import TimeAuthorityProtocol
from eventnotify.application.services.delivery_dispatcher import DeliveryDispatcher
from eventnotify.application.services.fan_out_bus import FanOutBus
from eventnotify.application.services.notification_builder import (
    NotificationBuilder,
    RendererSelector,
)
from eventnotify.application.services.streaming_client_set import (
    StreamingClientSet,
    StreamingConnection,
)
from eventnotify.application.services.subscriber_registry import SubscriberRegistry
from eventnotify.application.stubs.noop_notification_metrics import NoOpNotificationMetrics
from eventnotify.domain.errors.validation import (
    InvalidEventError,
    InvalidSubscriptionError,
    InvalidUnsubscribeError,
)
from eventnotify.domain.events.domain_event import DomainEvent, EventType
from eventnotify.domain.models.notification import NotificationMessage
from eventnotify.domain.models.subscriber import Channel, Subscriber
from eventnotify.domain.services.renderers import select_renderer

log = structlog.get_logger()


@dataclass(frozen=True)
class PublishResult:
    """Outcome of one publish call.

    Attributes:
        event: The created event.
        notifications: Batch handed to the dispatcher, in fan-out order.
        total_subscribers: Listener count at publish time.
    """

    event: DomainEvent
    notifications: tuple[NotificationMessage, ...]
    total_subscribers: int


def _clean_text(value: object) -> str | None:
    """Return stripped text, or None if value is not a non-blank string."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


class EventNotifyService:
    """Facade over registry, fan-out, dispatch and streaming clients.

    Example:
        >>> service = EventNotifyService(time_authority=SystemTimeAuthority())
        >>> subscriber = service.subscribe("Ana", "email")
        >>> result = service.publish("X", "CREATED")  # inside a running loop
    """

    def __init__(
        self,
        time_authority: TimeAuthorityProtocol,
        dispatcher: DeliveryDispatcher | None = None,
        clients: StreamingClientSet | None = None,
        metrics: NotificationMetricsPort | None = None,
        renderer_selector: RendererSelector = select_renderer,
    ) -> None:
        """Initialize the service and wire the pipeline.

        Args:
            time_authority: Source of event and render timestamps.
            dispatcher: Delivery dispatcher (default: 120 ms max jitter).
            clients: Streaming client set.
            metrics: Optional metrics port shared by all components.
            renderer_selector: Channel -> renderer lookup.
        """
        self._time = time_authority
        self._metrics = metrics or NoOpNotificationMetrics()
        self._bus = FanOutBus(metrics=self._metrics)
        self._builder = NotificationBuilder(
            time_authority=time_authority,
            renderer_selector=renderer_selector,
            metrics=self._metrics,
        )
        self._registry = SubscriberRegistry(
            bus=self._bus, builder=self._builder, metrics=self._metrics
        )
        self._dispatcher = dispatcher or DeliveryDispatcher()
        self._clients = clients or StreamingClientSet(metrics=self._metrics)

    @property
    def registry(self) -> SubscriberRegistry:
        return self._registry

    @property
    def bus(self) -> FanOutBus:
        return self._bus

    @property
    def dispatcher(self) -> DeliveryDispatcher:
        return self._dispatcher

    @property
    def clients(self) -> StreamingClientSet:
        return self._clients

    # -------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------

    def subscribe(self, name: object, channel: object) -> Subscriber:
        """Register a subscriber.

        Args:
            name: Display name; surrounding whitespace is stripped.
            channel: One of email, sms, push.

        Returns:
            The new Subscriber.

        Raises:
            InvalidSubscriptionError: Empty name or unknown channel.
        """
        clean_name = _clean_text(name)
        if clean_name is None:
            raise InvalidSubscriptionError.missing_name()
        if not isinstance(channel, str) or channel not in Channel.values():
            raise InvalidSubscriptionError.invalid_channel(channel)

        return self._registry.add(clean_name, Channel(channel))

    def unsubscribe(self, subscriber_id: object) -> bool:
        """Remove a subscriber. Unknown ids are a no-op.

        Args:
            subscriber_id: Id returned by subscribe.

        Returns:
            True if a subscriber was removed.

        Raises:
            InvalidUnsubscribeError: Missing or empty id.
        """
        clean_id = _clean_text(subscriber_id)
        if clean_id is None:
            raise InvalidUnsubscribeError.missing_id()
        return self._registry.remove(clean_id)

    def list_subscribers(self) -> list[Subscriber]:
        return self._registry.list()

    def subscriber_count(self) -> int:
        return self._registry.count()

    # -------------------------------------------------------------------------
    # Publishing
    # -------------------------------------------------------------------------

    def publish(self, title: object, event_type: object) -> PublishResult:
        """Publish an event and schedule delivery of its notifications.

        Must be called from a running event loop. Returns before any
        notification reaches a streaming client.

        Args:
            title: Event title; surrounding whitespace is stripped.
            event_type: One of CREATED, UPDATED, CANCELLED.

        Returns:
            PublishResult with the event and its notification batch.

        Raises:
            InvalidEventError: Empty title or unknown type.
        """
        clean_title = _clean_text(title)
        if clean_title is None:
            raise InvalidEventError.missing_title()
        if not isinstance(event_type, str) or event_type not in EventType.__members__:
            raise InvalidEventError.invalid_type(event_type)

        event = DomainEvent.create(
            title=clean_title,
            event_type=EventType(event_type),
            created_at=self._time.utcnow(),
        )
        batch = self._bus.notify_all(event)
        self._dispatcher.dispatch(batch, self._clients.broadcast)
        self._metrics.record_event_published(event.type.value)

        total = self._registry.count()
        log.info(
            "event_published",
            event_id=event.id,
            event_type=event.type.value,
            notifications=len(batch),
            total_subscribers=total,
            streaming_clients=self._clients.count(),
        )
        return PublishResult(
            event=event,
            notifications=tuple(batch),
            total_subscribers=total,
        )

    # -------------------------------------------------------------------------
    # Streaming clients
    # -------------------------------------------------------------------------

    def connect_stream(self) -> StreamingConnection:
        """Open a streaming connection (welcome message already queued)."""
        return self._clients.add()

    def disconnect_stream(self, connection_id: str) -> bool:
        """Close a streaming connection. Idempotent."""
        return self._clients.remove(connection_id)

    async def drain_deliveries(self) -> None:
        """Wait for every scheduled delivery to fire."""
        await self._dispatcher.drain()
