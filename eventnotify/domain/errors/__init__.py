"""Domain errors for EventNotify.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from EventNotifyError.
"""

from eventnotify.domain.errors.rendering import UnsupportedChannelError
from eventnotify.domain.errors.validation import (
    InvalidEventError,
    InvalidSubscriptionError,
    InvalidUnsubscribeError,
    ValidationFailedError,
)

__all__: list[str] = [
    "InvalidEventError",
    "InvalidSubscriptionError",
    "InvalidUnsubscribeError",
    "UnsupportedChannelError",
    "ValidationFailedError",
]
