"""Delivery dispatcher - randomized, independent, non-blocking delivery.

Each notification of a publish batch becomes its own asyncio task that sleeps
a random delay in ``[0, max_delay_ms)`` and then hands the notification to the
delivery callback. ``dispatch`` itself never awaits, so the publish call
returns to its caller before any delivery happens.

Ordering:
    - Delivery order within one batch does not follow fan-out order.
    - Deliveries from different publish calls may interleave.

The callback runs at fire time, not at schedule time: whoever is connected
when the delay elapses receives the notification. Scheduled deliveries are
never cancelled; a closed connection simply ignores them.
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Callable, Iterable

import structlog

from eventnotify.domain.models.notification import NotificationMessage

log = structlog.get_logger()

# Exclusive upper bound of the per-notification jitter, in milliseconds
DEFAULT_MAX_DELAY_MS = 120

Deliver = Callable[[NotificationMessage], object]


class DeliveryDispatcher:
    """Schedules delayed delivery tasks on the running event loop.

    Attributes:
        _max_delay_ms: Exclusive upper bound of the delay.
        _rng: Random source for delays (seed it in tests).
        _pending: In-flight delivery tasks.
    """

    def __init__(
        self,
        max_delay_ms: int = DEFAULT_MAX_DELAY_MS,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            max_delay_ms: Exclusive upper bound of the delay (must be >= 1).
            rng: Optional random source.

        Raises:
            ValueError: If max_delay_ms is below 1.
        """
        if max_delay_ms < 1:
            raise ValueError(f"max_delay_ms must be at least 1, got {max_delay_ms}")
        self._max_delay_ms = max_delay_ms
        self._rng = rng or random.Random()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def max_delay_ms(self) -> int:
        return self._max_delay_ms

    def next_delay_ms(self) -> int:
        """Draw the next delay in ``[0, max_delay_ms)``."""
        return self._rng.randrange(self._max_delay_ms)

    def dispatch(
        self,
        batch: Iterable[NotificationMessage],
        deliver: Deliver,
    ) -> list[asyncio.Task[None]]:
        """Schedule independent delivery of every notification in a batch.

        Must be called from a running event loop. Does not suspend.

        Args:
            batch: Notifications from one publish call.
            deliver: Callback invoked once per notification at fire time.

        Returns:
            The scheduled tasks, one per notification.
        """
        loop = asyncio.get_running_loop()
        tasks: list[asyncio.Task[None]] = []

        for notification in batch:
            delay_ms = self.next_delay_ms()
            task = loop.create_task(
                self._deliver_after(notification, delay_ms, deliver),
                name=f"deliver-{notification.id}",
            )
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)
            tasks.append(task)

        return tasks

    async def _deliver_after(
        self,
        notification: NotificationMessage,
        delay_ms: int,
        deliver: Deliver,
    ) -> None:
        await asyncio.sleep(delay_ms / 1000)
        try:
            reached = deliver(notification)
        except Exception as e:
            log.warning(
                "notification_delivery_failed",
                notification_id=notification.id,
                event_id=notification.event_id,
                error=str(e),
            )
            return

        log.debug(
            "notification_delivered",
            notification_id=notification.id,
            event_id=notification.event_id,
            delay_ms=delay_ms,
            connections=reached,
        )

    def pending_count(self) -> int:
        """Return the number of deliveries still waiting to fire."""
        return len(self._pending)

    async def drain(self) -> None:
        """Wait until every scheduled delivery has fired."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
