"""Bootstrap wiring for Prometheus metrics.

The collector itself is the infrastructure singleton; this module adds the
exporter the /metrics route renders through.
"""

from __future__ import annotations

from eventnotify.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    MetricsCollector,
    generate_metrics,
    get_metrics_collector as _get_infra_collector,
    reset_metrics_collector,
)


class PrometheusMetricsExporter:
    """Renders the process-wide registry in exposition format."""

    content_type = METRICS_CONTENT_TYPE

    def generate_metrics(self) -> bytes:
        return generate_metrics()


_metrics_exporter: PrometheusMetricsExporter | None = None


def get_metrics_collector() -> MetricsCollector:
    return _get_infra_collector()


def get_metrics_exporter() -> PrometheusMetricsExporter:
    global _metrics_exporter
    if _metrics_exporter is None:
        _metrics_exporter = PrometheusMetricsExporter()
    return _metrics_exporter


def reset_metrics() -> None:
    """Drop the exporter and collector singletons (tests only)."""
    global _metrics_exporter
    _metrics_exporter = None
    reset_metrics_collector()
