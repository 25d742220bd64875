"""Bootstrap wiring for the EventNotify service.

The service owns every piece of in-memory state (subscribers, listeners,
streaming connections), so the app factory builds exactly one per app.
"""

from __future__ import annotations

from random import Random

from eventnotify.application.ports.notification_metrics import NotificationMetricsPort
from eventnotify.application.ports.time_authority import TimeAuthorityProtocol
from eventnotify.application.services.delivery_dispatcher import DeliveryDispatcher
from eventnotify.application.services.event_notify_service import EventNotifyService
from eventnotify.bootstrap.metrics import get_metrics_collector
from eventnotify.config.settings import EventNotifyConfig
from eventnotify.infrastructure.adapters.system_time_authority import SystemTimeAuthority


def build_event_notify_service(
    config: EventNotifyConfig,
    *,
    time_authority: TimeAuthorityProtocol | None = None,
    metrics: NotificationMetricsPort | None = None,
    rng: Random | None = None,
) -> EventNotifyService:
    """Create a fully wired service from configuration.

    Args:
        config: Runtime configuration (delivery delay bound).
        time_authority: Clock override, system UTC clock by default.
        metrics: Metrics sink, the process Prometheus collector by default.
        rng: Random source for delivery delays.

    Returns:
        A new EventNotifyService with empty registries.
    """
    return EventNotifyService(
        time_authority=time_authority or SystemTimeAuthority(),
        dispatcher=DeliveryDispatcher(max_delay_ms=config.max_delivery_delay_ms, rng=rng),
        metrics=metrics if metrics is not None else get_metrics_collector(),
    )
