"""In-memory stand-ins for application ports."""

from eventnotify.application.stubs.noop_notification_metrics import NoOpNotificationMetrics

__all__: list[str] = ["NoOpNotificationMetrics"]
