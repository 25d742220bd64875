"""Subscription endpoints.

POST /api/subscribe    register a subscriber (201)
POST /api/unsubscribe  remove a subscriber; unknown ids are a no-op
GET  /api/subscribers  list current subscribers in registration order

Validation failures surface as ``400 {"error": ...}`` through the exception
handlers installed by the app factory.
"""

from fastapi import APIRouter, Depends, status

from eventnotify.api.dependencies.event_notify import get_event_notify_service
from eventnotify.api.models.notifications import (
    ErrorResponse,
    SubscribeRequest,
    SubscribeResponse,
    SubscriberListResponse,
    SubscriberModel,
    UnsubscribeRequest,
    UnsubscribeResponse,
)
from eventnotify.application.services.event_notify_service import EventNotifyService

router = APIRouter(prefix="/api", tags=["subscriptions"])


@router.post(
    "/subscribe",
    response_model=SubscribeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Missing name or invalid channel"}},
)
async def subscribe(
    request_data: SubscribeRequest,
    service: EventNotifyService = Depends(get_event_notify_service),
) -> SubscribeResponse:
    """Register a subscriber and attach its notification builder.

    Args:
        request_data: Name and delivery channel.
        service: EventNotify service (injected).

    Returns:
        The created subscriber and the new subscriber total.
    """
    subscriber = service.subscribe(request_data.name, request_data.channel)
    return SubscribeResponse(
        subscriber=SubscriberModel.from_domain(subscriber),
        total=service.subscriber_count(),
    )


@router.post(
    "/unsubscribe",
    response_model=UnsubscribeResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing id"}},
)
async def unsubscribe(
    request_data: UnsubscribeRequest,
    service: EventNotifyService = Depends(get_event_notify_service),
) -> UnsubscribeResponse:
    """Remove a subscriber by id."""
    service.unsubscribe(request_data.id)
    return UnsubscribeResponse(ok=True, total=service.subscriber_count())


@router.get("/subscribers", response_model=SubscriberListResponse)
async def list_subscribers(
    service: EventNotifyService = Depends(get_event_notify_service),
) -> SubscriberListResponse:
    subscribers = [SubscriberModel.from_domain(s) for s in service.list_subscribers()]
    return SubscriberListResponse(subscribers=subscribers, total=len(subscribers))
