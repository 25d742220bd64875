"""Fan-out bus for per-subscriber listeners.

Holds exactly one listener per subscriber id and, on publish, invokes every
listener to collect the batch of notifications for that event.

Developer Golden Rules:
1. SNAPSHOT FIRST - Iterate a copy of the listener mapping so a concurrent
   detach can never raise mid-iteration
2. ISOLATE FAILURES - One failing listener is logged and skipped; the rest
   still run and publish never fails because of it
3. NO SYNTHESIS - A failed listener contributes nothing to the batch

Only SubscriberRegistry attaches and detaches listeners, which keeps the
listener set and the subscriber set equal in membership.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from eventnotify.application.ports.notification_metrics import NotificationMetricsPort
from eventnotify.application.stubs.noop_notification_metrics import NoOpNotificationMetrics
from eventnotify.domain.events.domain_event import DomainEvent
from eventnotify.domain.models.notification import NotificationMessage

log = structlog.get_logger()

Listener = Callable[[DomainEvent], NotificationMessage]


class FanOutBus:
    """Index of subscriber id -> listener with isolated fan-out.

    Attributes:
        _listeners: Listeners keyed by subscriber id, in registration order.
        _metrics: Metrics port for build failures.
    """

    def __init__(self, metrics: NotificationMetricsPort | None = None) -> None:
        self._listeners: dict[str, Listener] = {}
        self._metrics = metrics or NoOpNotificationMetrics()

    def attach(self, listener_id: str, listener: Listener) -> None:
        """Register the listener for a subscriber id.

        Args:
            listener_id: Subscriber id.
            listener: Callable producing the subscriber's notification.

        Raises:
            ValueError: If a listener is already attached under this id.
        """
        if listener_id in self._listeners:
            raise ValueError(f"Listener already attached for id {listener_id}")
        self._listeners[listener_id] = listener

    def detach(self, listener_id: str) -> bool:
        """Remove the listener for a subscriber id.

        Args:
            listener_id: Subscriber id.

        Returns:
            True if a listener was removed, False if none was attached.
        """
        return self._listeners.pop(listener_id, None) is not None

    def notify_all(self, event: DomainEvent) -> list[NotificationMessage]:
        """Invoke every listener for an event.

        Args:
            event: The published event.

        Returns:
            One notification per listener that succeeded, in registration order.
        """
        snapshot = list(self._listeners.items())
        batch: list[NotificationMessage] = []

        for listener_id, listener in snapshot:
            try:
                batch.append(listener(event))
            except Exception as e:
                log.exception(
                    "notification_build_failed",
                    listener_id=listener_id,
                    event_id=event.id,
                    error_type=type(e).__name__,
                )
                self._metrics.record_build_failure()

        return batch

    def count(self) -> int:
        """Return the number of attached listeners."""
        return len(self._listeners)

    def listener_ids(self) -> list[str]:
        """Return attached ids in registration order."""
        return list(self._listeners)

    def __contains__(self, listener_id: object) -> bool:
        return listener_id in self._listeners
