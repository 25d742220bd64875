"""FastAPI application entry point for EventNotify."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from eventnotify import __version__
from eventnotify.api.errors import register_exception_handlers
from eventnotify.api.middleware import LoggingMiddleware, MetricsMiddleware
from eventnotify.api.routes import (
    events_router,
    health_router,
    metrics_router,
    stream_router,
    subscriptions_router,
)
from eventnotify.application.services.event_notify_service import EventNotifyService
from eventnotify.bootstrap.event_notify import build_event_notify_service
from eventnotify.bootstrap.logging import configure_structlog
from eventnotify.bootstrap.metrics import get_metrics_collector
from eventnotify.config.settings import EventNotifyConfig

log = structlog.get_logger()

SERVICE_NAME = "api"


def create_app(
    config: EventNotifyConfig | None = None,
    service: EventNotifyService | None = None,
) -> FastAPI:
    """Build the EventNotify application.

    Args:
        config: Runtime configuration, read from the environment by default.
        service: Pre-built service (tests); built from config by default.

    Returns:
        Configured FastAPI application. The service is available as
        ``app.state.event_notify_service``.
    """
    config = config or EventNotifyConfig.from_environment()
    service = service or build_event_notify_service(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_structlog(config.environment)
        get_metrics_collector().record_startup(SERVICE_NAME)
        log.info(
            "eventnotify_started",
            version=__version__,
            environment=config.environment,
            max_delivery_delay_ms=config.max_delivery_delay_ms,
        )

        yield

        pending = service.dispatcher.pending_count()
        await service.drain_deliveries()
        log.info("eventnotify_stopped", drained_deliveries=pending)

    app = FastAPI(
        title="EventNotify API",
        description="Subscribe, publish and stream event notifications",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.event_notify_service = service

    # Added last runs first: LoggingMiddleware sets the correlation ID
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(subscriptions_router)
    app.include_router(events_router)
    app.include_router(stream_router)
    app.include_router(health_router)
    app.include_router(metrics_router)

    if config.static_dir:
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")

    return app


app = create_app()
