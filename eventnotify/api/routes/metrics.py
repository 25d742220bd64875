"""Metrics endpoint for Prometheus scraping."""

from fastapi import APIRouter, Response

from eventnotify.bootstrap.metrics import get_metrics_exporter

router = APIRouter(tags=["metrics"])


@router.get(
    "/metrics",
    summary="Prometheus metrics endpoint",
    description="Returns operational and pipeline metrics in Prometheus exposition format.",
    response_class=Response,
    responses={
        200: {
            "description": "Metrics in Prometheus format",
            "content": {"text/plain": {}},
        }
    },
)
async def get_metrics() -> Response:
    """Get metrics in Prometheus format.

    Returns:
        Response with the exposition text; uptime gauges are refreshed first.
    """
    exporter = get_metrics_exporter()
    return Response(content=exporter.generate_metrics(), media_type=exporter.content_type)
