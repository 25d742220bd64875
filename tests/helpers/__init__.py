"""Test helpers shared across unit and integration tests."""

from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.recording_metrics import RecordingMetrics

__all__: list[str] = ["FakeTimeAuthority", "RecordingMetrics"]
