"""Unit tests for EventNotifyConfig."""

import pytest

from eventnotify.config.settings import (
    DEFAULT_EVENTNOTIFY_CONFIG,
    TEST_EVENTNOTIFY_CONFIG,
    EventNotifyConfig,
)

ENV_KEYS = (
    "EVENTNOTIFY_HOST",
    "EVENTNOTIFY_PORT",
    "EVENTNOTIFY_MAX_DELIVERY_DELAY_MS",
    "EVENTNOTIFY_SSE_KEEPALIVE_SECONDS",
    "EVENTNOTIFY_STATIC_DIR",
    "ENVIRONMENT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestDefaults:
    def test_defaults(self) -> None:
        config = EventNotifyConfig()

        assert config.port == 3000
        assert config.max_delivery_delay_ms == 120
        assert config.sse_keepalive_seconds == 30.0
        assert config.static_dir is None
        assert not config.is_production

    def test_from_environment_without_overrides(self) -> None:
        assert EventNotifyConfig.from_environment() == DEFAULT_EVENTNOTIFY_CONFIG

    def test_test_config_uses_short_delays(self) -> None:
        assert TEST_EVENTNOTIFY_CONFIG.max_delivery_delay_ms < 120
        assert TEST_EVENTNOTIFY_CONFIG.environment == "test"


class TestFromEnvironment:
    def test_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: object) -> None:
        monkeypatch.setenv("EVENTNOTIFY_HOST", "127.0.0.1")
        monkeypatch.setenv("EVENTNOTIFY_PORT", "8080")
        monkeypatch.setenv("EVENTNOTIFY_MAX_DELIVERY_DELAY_MS", "50")
        monkeypatch.setenv("EVENTNOTIFY_SSE_KEEPALIVE_SECONDS", "2.5")
        monkeypatch.setenv("EVENTNOTIFY_STATIC_DIR", str(tmp_path))
        monkeypatch.setenv("ENVIRONMENT", "production")

        config = EventNotifyConfig.from_environment()

        assert config.host == "127.0.0.1"
        assert config.port == 8080
        assert config.max_delivery_delay_ms == 50
        assert config.sse_keepalive_seconds == 2.5
        assert config.static_dir == str(tmp_path)
        assert config.is_production

    def test_invalid_numbers_fall_back_to_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVENTNOTIFY_PORT", "not-a-port")
        monkeypatch.setenv("EVENTNOTIFY_SSE_KEEPALIVE_SECONDS", "soon")

        config = EventNotifyConfig.from_environment()

        assert config.port == 3000
        assert config.sse_keepalive_seconds == 30.0

    def test_blank_static_dir_is_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVENTNOTIFY_STATIC_DIR", "  ")

        assert EventNotifyConfig.from_environment().static_dir is None


class TestValidation:
    @pytest.mark.parametrize("port", [0, 70000])
    def test_port_range(self, port: int) -> None:
        with pytest.raises(ValueError, match="port"):
            EventNotifyConfig(port=port)

    def test_delay_bound_positive(self) -> None:
        with pytest.raises(ValueError, match="max_delivery_delay_ms"):
            EventNotifyConfig(max_delivery_delay_ms=0)

    def test_keepalive_positive(self) -> None:
        with pytest.raises(ValueError, match="sse_keepalive_seconds"):
            EventNotifyConfig(sse_keepalive_seconds=0)
