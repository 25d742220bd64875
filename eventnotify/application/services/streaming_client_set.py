"""Streaming client set - open Server-Sent Events connections.

Each connection owns an unbounded asyncio.Queue drained by its SSE response
generator. Broadcasting puts one message on every open connection's queue
(message passing, no direct writes to client transports).

Lifecycle:
    add()     -> connection registered, one ``hello`` message queued
    broadcast -> ``notification`` message queued on every open connection
    remove()  -> connection closed and forgotten; later broadcasts skip it
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

import structlog

from eventnotify.application.ports.notification_metrics import NotificationMetricsPort
from eventnotify.application.stubs.noop_notification_metrics import NoOpNotificationMetrics
from eventnotify.domain.models.notification import NotificationMessage

log = structlog.get_logger()

HELLO_MESSAGE = "SSE connected"


class StreamEventType(str, Enum):
    """SSE event names sent to streaming clients."""

    HELLO = "hello"
    NOTIFICATION = "notification"


@dataclass(frozen=True)
class StreamMessage:
    """One SSE frame waiting in a connection queue.

    Attributes:
        event: SSE event name.
        payload: Notification for ``notification`` frames, plain mapping otherwise.
    """

    event: StreamEventType
    payload: NotificationMessage | Mapping[str, object]


class StreamingConnection:
    """A single open streaming client.

    The ``closed`` flag is the connection's cancellation token: once set,
    every later offer is ignored, including deliveries scheduled before the
    client went away.
    """

    def __init__(self, connection_id: str) -> None:
        self.id = connection_id
        self.queue: asyncio.Queue[StreamMessage] = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def offer(self, message: StreamMessage) -> bool:
        """Queue a message unless the connection is closed.

        Returns:
            True if the message was queued.
        """
        if self._closed:
            return False
        self.queue.put_nowait(message)
        return True


class StreamingClientSet:
    """Registry of open streaming connections.

    Attributes:
        _connections: Open connections keyed by id.
        _metrics: Metrics port for connection and delivery counts.
    """

    def __init__(self, metrics: NotificationMetricsPort | None = None) -> None:
        self._connections: dict[str, StreamingConnection] = {}
        self._metrics = metrics or NoOpNotificationMetrics()

    def add(self) -> StreamingConnection:
        """Register a new connection and queue its welcome message.

        Returns:
            The new connection.
        """
        connection = StreamingConnection(str(uuid4()))
        self._connections[connection.id] = connection
        connection.offer(
            StreamMessage(
                event=StreamEventType.HELLO,
                payload={"ok": True, "message": HELLO_MESSAGE},
            )
        )
        self._metrics.set_streaming_connections(self.count())

        log.info("sse_connection_registered", connection_id=connection.id, total=self.count())
        return connection

    def remove(self, connection_id: str) -> bool:
        """Close and forget a connection. Idempotent.

        Args:
            connection_id: Id of the connection to remove.

        Returns:
            True if the connection was open.
        """
        connection = self._connections.pop(connection_id, None)
        if connection is None:
            return False

        connection.close()
        self._metrics.set_streaming_connections(self.count())
        log.info("sse_connection_closed", connection_id=connection_id, total=self.count())
        return True

    def broadcast(self, notification: NotificationMessage) -> int:
        """Queue a notification on every currently open connection.

        Iterates a snapshot, so a connection removed mid-broadcast neither
        skips nor duplicates delivery to the others.

        Args:
            notification: Notification to deliver.

        Returns:
            Number of connections that received it.
        """
        message = StreamMessage(event=StreamEventType.NOTIFICATION, payload=notification)
        reached = 0
        for connection in list(self._connections.values()):
            if connection.offer(message):
                reached += 1

        self._metrics.record_delivery(reached)
        return reached

    def get(self, connection_id: str) -> StreamingConnection | None:
        return self._connections.get(connection_id)

    def count(self) -> int:
        return len(self._connections)

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._connections
