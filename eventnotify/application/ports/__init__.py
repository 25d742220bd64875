"""Ports (interfaces) the application layer depends on."""

from eventnotify.application.ports.notification_metrics import NotificationMetricsPort
from eventnotify.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = ["NotificationMetricsPort", "TimeAuthorityProtocol"]
