"""Event publication and notification stream endpoints.

POST /api/publish  create an event and fan it out to every subscriber
GET  /events       Server-Sent Events stream of delivered notifications

Stream frames:
    event: hello          data: {"ok": true, "message": "SSE connected"}
    event: notification   data: <NotificationModel JSON>
    : keepalive           (comment, sent after an idle interval)
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator

import structlog
from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse

from eventnotify.api.dependencies.event_notify import get_config, get_event_notify_service
from eventnotify.api.models.notifications import (
    DomainEventModel,
    ErrorResponse,
    NotificationModel,
    PublishRequest,
    PublishResponse,
)
from eventnotify.application.services.event_notify_service import EventNotifyService
from eventnotify.application.services.streaming_client_set import StreamMessage
from eventnotify.config.settings import EventNotifyConfig
from eventnotify.domain.models.notification import NotificationMessage

log = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["events"])
stream_router = APIRouter(tags=["events"])


@router.post(
    "/publish",
    response_model=PublishResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing title or invalid type"}},
)
async def publish(
    request_data: PublishRequest,
    service: EventNotifyService = Depends(get_event_notify_service),
) -> PublishResponse:
    """Publish an event to all current subscribers.

    Returns as soon as delivery is scheduled; notifications reach stream
    clients afterwards, each after its own random delay.

    Args:
        request_data: Event title and type.
        service: EventNotify service (injected).

    Returns:
        The created event and the number of subscribers at publish time.
    """
    result = service.publish(request_data.title, request_data.type)
    return PublishResponse(
        event=DomainEventModel.from_domain(result.event),
        total_subscribers=result.total_subscribers,
    )


def to_sse_frame(message: StreamMessage) -> dict[str, str]:
    """Convert a queued stream message to an sse_starlette event dict."""
    if isinstance(message.payload, NotificationMessage):
        model = NotificationModel.from_domain(message.payload)
        return {
            "event": message.event.value,
            "id": model.id,
            "data": model.model_dump_json(by_alias=True),
        }
    return {"event": message.event.value, "data": json.dumps(dict(message.payload))}


async def stream_frames(
    service: EventNotifyService,
    keepalive_seconds: float,
) -> AsyncIterator[dict[str, str]]:
    """Yield SSE frames for one connection until the client goes away.

    The connection is registered when iteration starts and removed in
    ``finally``, which runs on client disconnect (task cancellation) as
    well as on explicit ``aclose()``.

    Args:
        service: EventNotify service owning the streaming client set.
        keepalive_seconds: Idle seconds before a keepalive comment.

    Yields:
        Event dicts understood by EventSourceResponse.
    """
    connection = service.connect_stream()
    try:
        while True:
            try:
                message = await asyncio.wait_for(
                    connection.queue.get(), timeout=keepalive_seconds
                )
            except asyncio.TimeoutError:
                yield {"comment": "keepalive"}
                continue
            yield to_sse_frame(message)
    finally:
        service.disconnect_stream(connection.id)


@stream_router.get(
    "/events",
    summary="Notification stream",
    description="Server-Sent Events stream. Sends a hello event on connect, then "
    "one notification event per delivered notification.",
    response_class=EventSourceResponse,
)
async def stream_events(
    service: EventNotifyService = Depends(get_event_notify_service),
    config: EventNotifyConfig = Depends(get_config),
) -> EventSourceResponse:
    """Open a notification stream for this client."""
    return EventSourceResponse(
        stream_frames(service, config.sse_keepalive_seconds),
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
