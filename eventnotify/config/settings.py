"""EventNotify service configuration.

Defines runtime settings with environment variable overrides.

Environment Variables:
- EVENTNOTIFY_HOST: Bind address (default: 0.0.0.0)
- EVENTNOTIFY_PORT: Listening port (default: 3000)
- EVENTNOTIFY_MAX_DELIVERY_DELAY_MS: Exclusive upper bound of delivery jitter (default: 120)
- EVENTNOTIFY_SSE_KEEPALIVE_SECONDS: Idle seconds before a keepalive comment (default: 30.0)
- EVENTNOTIFY_STATIC_DIR: Optional directory served at / (default: unset)
- ENVIRONMENT: 'production' for JSON logs, anything else for console (default: development)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_optional_str_env(key: str) -> str | None:
    value = os.environ.get(key, "").strip()
    return value or None


@dataclass(frozen=True)
class EventNotifyConfig:
    """Configuration for the EventNotify service.

    All values can be overridden via environment variables.

    Attributes:
        host: Address uvicorn binds to.
        port: Listening port. Default: 3000.
        max_delivery_delay_ms: Exclusive upper bound of the random delay
            applied to each delivery. Default: 120 (delays of 0..119 ms).
        sse_keepalive_seconds: Idle time before the stream sends a
            keepalive comment. Default: 30 seconds.
        static_dir: Optional directory of static UI files served at /.
        environment: Deployment environment; selects the log renderer.
    """

    host: str = "0.0.0.0"
    port: int = 3000
    max_delivery_delay_ms: int = 120
    sse_keepalive_seconds: float = 30.0
    static_dir: str | None = None
    environment: str = "development"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be in 1..65535, got {self.port}")
        if self.max_delivery_delay_ms < 1:
            raise ValueError(
                f"max_delivery_delay_ms must be at least 1, got {self.max_delivery_delay_ms}"
            )
        if self.sse_keepalive_seconds <= 0:
            raise ValueError(
                f"sse_keepalive_seconds must be positive, got {self.sse_keepalive_seconds}"
            )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> EventNotifyConfig:
        """Create config from environment variables with defaults.

        Returns:
            EventNotifyConfig with values from environment or defaults.
        """
        return cls(
            host=os.environ.get("EVENTNOTIFY_HOST", "0.0.0.0"),
            port=_get_int_env("EVENTNOTIFY_PORT", 3000),
            max_delivery_delay_ms=_get_int_env("EVENTNOTIFY_MAX_DELIVERY_DELAY_MS", 120),
            sse_keepalive_seconds=_get_float_env("EVENTNOTIFY_SSE_KEEPALIVE_SECONDS", 30.0),
            static_dir=_get_optional_str_env("EVENTNOTIFY_STATIC_DIR"),
            environment=os.environ.get("ENVIRONMENT", "development"),
        )


# Default config (matches the environment-free defaults)
DEFAULT_EVENTNOTIFY_CONFIG = EventNotifyConfig()

# Testing config with short delays so delivery tests finish quickly
TEST_EVENTNOTIFY_CONFIG = EventNotifyConfig(
    port=3999,
    max_delivery_delay_ms=5,
    sse_keepalive_seconds=0.1,
    environment="test",
)
