"""No-op notification metrics used when no backend is wired in."""

from __future__ import annotations

from eventnotify.application.ports.notification_metrics import NotificationMetricsPort


class NoOpNotificationMetrics(NotificationMetricsPort):
    """Discards every observation."""

    def record_event_published(self, event_type: str) -> None:
        pass

    def record_notification_built(self, channel: str, latency_ms: int) -> None:
        pass

    def record_build_failure(self) -> None:
        pass

    def record_delivery(self, connections: int) -> None:
        pass

    def set_active_subscribers(self, count: int) -> None:
        pass

    def set_streaming_connections(self, count: int) -> None:
        pass
