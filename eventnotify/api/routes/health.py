"""Health check endpoint for the EventNotify API."""

from fastapi import APIRouter, Depends

from eventnotify.api.dependencies.event_notify import get_event_notify_service
from eventnotify.api.models.health import HealthResponse
from eventnotify.application.services.event_notify_service import EventNotifyService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    service: EventNotifyService = Depends(get_event_notify_service),
) -> HealthResponse:
    """Return health status.

    Returns:
        Health status with current subscriber, stream and delivery counts.
    """
    return HealthResponse(
        status="healthy",
        subscribers=service.subscriber_count(),
        streaming_clients=service.clients.count(),
        pending_deliveries=service.dispatcher.pending_count(),
    )
