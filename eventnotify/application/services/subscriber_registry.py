"""Subscriber registry - single source of truth for who is listening.

Every add stores the subscriber AND attaches its listener to the fan-out bus
in the same synchronous step; every remove detaches both. There is no await
between the two mutations, so a publish running on the same event loop can
never observe one without the other.
"""

from __future__ import annotations

import structlog

from eventnotify.application.ports.notification_metrics import NotificationMetricsPort
from eventnotify.application.services.fan_out_bus import FanOutBus
from eventnotify.application.services.notification_builder import NotificationBuilder
from eventnotify.application.stubs.noop_notification_metrics import NoOpNotificationMetrics
from eventnotify.domain.models.subscriber import Channel, Subscriber

log = structlog.get_logger()


class SubscriberRegistry:
    """Registry of active subscribers kept in lockstep with the bus.

    Attributes:
        _subscribers: Subscribers keyed by id, in insertion order.
        _bus: Fan-out bus owning one listener per subscriber.
        _builder: Builder used to bind each subscriber's listener.
    """

    def __init__(
        self,
        bus: FanOutBus,
        builder: NotificationBuilder,
        metrics: NotificationMetricsPort | None = None,
    ) -> None:
        self._subscribers: dict[str, Subscriber] = {}
        self._bus = bus
        self._builder = builder
        self._metrics = metrics or NoOpNotificationMetrics()

    def add(self, name: str, channel: Channel) -> Subscriber:
        """Register a subscriber and its listener.

        Args:
            name: Validated, non-empty display name.
            channel: Validated channel.

        Returns:
            The new Subscriber with a fresh id.
        """
        subscriber = Subscriber.create(name=name, channel=channel)
        self._bus.attach(subscriber.id, self._builder.bind(subscriber))
        self._subscribers[subscriber.id] = subscriber
        self._metrics.set_active_subscribers(self.count())

        log.info(
            "subscriber_added",
            subscriber_id=subscriber.id,
            channel=subscriber.channel.value,
            total=self.count(),
        )
        return subscriber

    def remove(self, subscriber_id: str) -> bool:
        """Remove a subscriber and its listener.

        Idempotent: removing an unknown id is a no-op.

        Args:
            subscriber_id: Id to remove.

        Returns:
            True if a subscriber was removed.
        """
        subscriber = self._subscribers.pop(subscriber_id, None)
        self._bus.detach(subscriber_id)
        if subscriber is None:
            log.debug("subscriber_remove_unknown", subscriber_id=subscriber_id)
            return False

        self._metrics.set_active_subscribers(self.count())
        log.info("subscriber_removed", subscriber_id=subscriber_id, total=self.count())
        return True

    def get(self, subscriber_id: str) -> Subscriber | None:
        """Return a subscriber by id, or None."""
        return self._subscribers.get(subscriber_id)

    def list(self) -> list[Subscriber]:
        """Return a snapshot of subscribers in insertion order."""
        return list(self._subscribers.values())

    def count(self) -> int:
        """Return the number of active listeners in the bus."""
        return self._bus.count()

    def __contains__(self, subscriber_id: object) -> bool:
        return subscriber_id in self._subscribers
