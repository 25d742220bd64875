"""Notification metrics port definition.

Lets the application layer record fan-out and delivery metrics without
depending on the metrics backend. The Prometheus implementation lives in
eventnotify.infrastructure.monitoring.metrics; NoOpNotificationMetrics is the
default when nothing is injected.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class NotificationMetricsPort(ABC):
    """Abstract interface for notification pipeline metrics."""

    @abstractmethod
    def record_event_published(self, event_type: str) -> None:
        """Count one published domain event.

        Args:
            event_type: CREATED, UPDATED or CANCELLED.
        """
        ...

    @abstractmethod
    def record_notification_built(self, channel: str, latency_ms: int) -> None:
        """Count one built notification and observe its latency.

        Args:
            channel: Subscriber channel.
            latency_ms: Render latency in milliseconds.
        """
        ...

    @abstractmethod
    def record_build_failure(self) -> None:
        """Count one listener that failed during fan-out."""
        ...

    @abstractmethod
    def record_delivery(self, connections: int) -> None:
        """Count deliveries of one notification.

        Args:
            connections: Number of streaming connections that received it.
        """
        ...

    @abstractmethod
    def set_active_subscribers(self, count: int) -> None:
        """Set the current number of registered subscribers."""
        ...

    @abstractmethod
    def set_streaming_connections(self, count: int) -> None:
        """Set the current number of open streaming connections."""
        ...
