"""Fixtures for API tests: a real app wired to the test service."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from eventnotify.api.main import create_app
from eventnotify.application.services.event_notify_service import EventNotifyService
from eventnotify.config.settings import TEST_EVENTNOTIFY_CONFIG
from eventnotify.infrastructure.monitoring.metrics import reset_metrics_collector


@pytest.fixture
def app(service: EventNotifyService) -> FastAPI:
    reset_metrics_collector()
    return create_app(config=TEST_EVENTNOTIFY_CONFIG, service=service)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Client sharing one event loop across requests (lifespan included)."""
    with TestClient(app) as test_client:
        yield test_client
