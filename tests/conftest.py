"""
Pytest configuration and shared fixtures for EventNotify tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Time-dependent tests use FakeTimeAuthority, never the wall clock
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from __future__ import annotations

import random

import pytest

from eventnotify.application.services.delivery_dispatcher import DeliveryDispatcher
from eventnotify.application.services.event_notify_service import EventNotifyService
from tests.helpers import FakeTimeAuthority, RecordingMetrics

# Short jitter keeps delivery tests fast while still exercising the delay path
TEST_MAX_DELAY_MS = 5


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from eventnotify import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Clock frozen at 2026-01-01T00:00:00Z."""
    return FakeTimeAuthority()


@pytest.fixture
def recording_metrics() -> RecordingMetrics:
    return RecordingMetrics()


@pytest.fixture
def dispatcher() -> DeliveryDispatcher:
    """Dispatcher with a seeded random source."""
    return DeliveryDispatcher(max_delay_ms=TEST_MAX_DELAY_MS, rng=random.Random(72))


@pytest.fixture
def service(
    fake_time_authority: FakeTimeAuthority,
    dispatcher: DeliveryDispatcher,
    recording_metrics: RecordingMetrics,
) -> EventNotifyService:
    """Fully wired service on fake time and recording metrics."""
    return EventNotifyService(
        time_authority=fake_time_authority,
        dispatcher=dispatcher,
        metrics=recording_metrics,
    )
