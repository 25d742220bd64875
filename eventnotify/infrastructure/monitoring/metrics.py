"""Prometheus metrics for EventNotify.

Two families share one CollectorRegistry per collector:

Operational
    uptime_seconds, service_starts_total, http_request_duration_seconds,
    http_requests_total, http_requests_failed_total

Notification pipeline
    active_subscribers, streaming_connections, events_published_total,
    notifications_built_total, notification_build_failures_total,
    notifications_delivered_total, notification_latency_seconds

Every series carries ``service`` and ``environment`` labels, read from the
SERVICE_NAME and ENVIRONMENT environment variables when the collector is built.
"""

import os
import threading
import time

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

from eventnotify.application.ports.notification_metrics import NotificationMetricsPort

METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

DEFAULT_SERVICE_NAME = "eventnotify-api"

BASE_LABELS = ("service", "environment")

# Request duration, 10 ms to 10 s
REQUEST_DURATION_BUCKETS = (0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)

# Render latency, 1 ms to 1 s
LATENCY_BUCKETS = (0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0)

_collector_lock = threading.Lock()


class MetricsCollector(NotificationMetricsPort):
    """Owns the Prometheus metric objects and the registry they live in.

    Attributes:
        startup_times: Wall-clock start time per recorded service name.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Create every metric in ``registry`` (a fresh one by default)."""
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")
        self._service_name = os.environ.get("SERVICE_NAME", DEFAULT_SERVICE_NAME)
        self.startup_times: dict[str, float] = {}

        self.uptime_seconds = self._gauge("uptime_seconds", "Seconds since service start")
        self.service_starts_total = self._counter(
            "service_starts_total", "Total number of service starts"
        )
        self.http_request_duration_seconds = self._histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            REQUEST_DURATION_BUCKETS,
            "method",
            "endpoint",
        )
        self.http_requests_total = self._counter(
            "http_requests_total", "Total HTTP requests", "method", "endpoint", "status"
        )
        self.http_requests_failed_total = self._counter(
            "http_requests_failed_total",
            "Total failed HTTP requests (4xx, 5xx)",
            "method",
            "endpoint",
            "status",
            "error_type",
        )

        self.active_subscribers = self._gauge(
            "active_subscribers", "Current number of registered subscribers"
        )
        self.streaming_connections = self._gauge(
            "streaming_connections", "Current number of open SSE connections"
        )
        self.events_published_total = self._counter(
            "events_published_total", "Total domain events published", "event_type"
        )
        self.notifications_built_total = self._counter(
            "notifications_built_total", "Total notifications built during fan-out", "channel"
        )
        self.notification_build_failures_total = self._counter(
            "notification_build_failures_total", "Total listeners that failed during fan-out"
        )
        self.notifications_delivered_total = self._counter(
            "notifications_delivered_total",
            "Total notifications queued on streaming connections",
        )
        self.notification_latency_seconds = self._histogram(
            "notification_latency_seconds",
            "Time between event creation and notification render",
            LATENCY_BUCKETS,
            "channel",
        )

    # Metric factories

    def _counter(self, name: str, documentation: str, *labels: str) -> Counter:
        return Counter(
            name=name,
            documentation=documentation,
            labelnames=[*BASE_LABELS, *labels],
            registry=self._registry,
        )

    def _gauge(self, name: str, documentation: str, *labels: str) -> Gauge:
        return Gauge(
            name=name,
            documentation=documentation,
            labelnames=[*BASE_LABELS, *labels],
            registry=self._registry,
        )

    def _histogram(
        self, name: str, documentation: str, buckets: tuple[float, ...], *labels: str
    ) -> Histogram:
        return Histogram(
            name=name,
            documentation=documentation,
            labelnames=[*BASE_LABELS, *labels],
            buckets=buckets,
            registry=self._registry,
        )

    def _labels(self, service: str | None = None) -> dict[str, str]:
        return {"service": service or self._service_name, "environment": self._environment}

    # Operational

    def record_startup(self, service: str) -> None:
        """Remember when ``service`` started and count the start."""
        self.startup_times[service] = time.time()
        self.service_starts_total.labels(**self._labels(service)).inc()

    def get_uptime_seconds(self, service: str) -> float:
        """Seconds since ``service`` started, 0.0 if it never did."""
        started = self.startup_times.get(service)
        return 0.0 if started is None else time.time() - started

    def update_uptime_gauges(self) -> None:
        for service in self.startup_times:
            self.uptime_seconds.labels(**self._labels(service)).set(
                self.get_uptime_seconds(service)
            )

    def observe_request_duration(self, method: str, endpoint: str, duration: float) -> None:
        self.http_request_duration_seconds.labels(
            **self._labels(), method=method, endpoint=endpoint
        ).observe(duration)

    def increment_requests(self, method: str, endpoint: str, status: str) -> None:
        self.http_requests_total.labels(
            **self._labels(), method=method, endpoint=endpoint, status=status
        ).inc()

    def increment_failed_requests(
        self, method: str, endpoint: str, status: str, error_type: str = "http_error"
    ) -> None:
        """Count a 4xx/5xx response.

        Args:
            method: HTTP method.
            endpoint: Request path.
            status: Status code as a string.
            error_type: Classification from the metrics middleware.
        """
        self.http_requests_failed_total.labels(
            **self._labels(),
            method=method,
            endpoint=endpoint,
            status=status,
            error_type=error_type,
        ).inc()

    # NotificationMetricsPort

    def record_event_published(self, event_type: str) -> None:
        self.events_published_total.labels(**self._labels(), event_type=event_type).inc()

    def record_notification_built(self, channel: str, latency_ms: int) -> None:
        self.notifications_built_total.labels(**self._labels(), channel=channel).inc()
        self.notification_latency_seconds.labels(**self._labels(), channel=channel).observe(
            latency_ms / 1000
        )

    def record_build_failure(self) -> None:
        self.notification_build_failures_total.labels(**self._labels()).inc()

    def record_delivery(self, connections: int) -> None:
        if connections > 0:
            self.notifications_delivered_total.labels(**self._labels()).inc(connections)

    def set_active_subscribers(self, count: int) -> None:
        self.active_subscribers.labels(**self._labels()).set(count)

    def set_streaming_connections(self, count: int) -> None:
        self.streaming_connections.labels(**self._labels()).set(count)

    def get_registry(self) -> CollectorRegistry:
        return self._registry


_metrics_collector: MetricsCollector | None = None


def get_metrics_collector() -> MetricsCollector:
    """Return the process-wide collector, creating it on first use."""
    global _metrics_collector
    if _metrics_collector is None:
        with _collector_lock:
            if _metrics_collector is None:
                _metrics_collector = MetricsCollector()
    return _metrics_collector


def generate_metrics() -> bytes:
    """Render the process-wide registry in Prometheus text format.

    Uptime gauges are refreshed first so every scrape sees current values.
    """
    collector = get_metrics_collector()
    collector.update_uptime_gauges()
    return generate_latest(collector.get_registry())


def reset_metrics_collector() -> None:
    """Drop the process-wide collector (tests only)."""
    global _metrics_collector
    with _collector_lock:
        _metrics_collector = None
