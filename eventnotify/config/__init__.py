"""Configuration module for EventNotify.

Available Configurations:
- EventNotifyConfig: server, delivery jitter, streaming and logging settings
"""

from eventnotify.config.settings import (
    DEFAULT_EVENTNOTIFY_CONFIG,
    TEST_EVENTNOTIFY_CONFIG,
    EventNotifyConfig,
)

__all__ = [
    "EventNotifyConfig",
    "DEFAULT_EVENTNOTIFY_CONFIG",
    "TEST_EVENTNOTIFY_CONFIG",
]
