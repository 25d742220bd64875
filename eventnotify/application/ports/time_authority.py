"""Clock port.

Event creation times and notification render times are both read from an
injected TimeAuthorityProtocol, never from ``datetime.now()``, so latency is
exact under test. SystemTimeAuthority is the production adapter;
tests use FakeTimeAuthority from tests/helpers.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Source of timestamps for the notification pipeline."""

    @abstractmethod
    def now(self) -> datetime:
        """Current time, timezone-aware."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Current time as a timezone-aware UTC datetime."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Monotonic seconds; only differences between readings are meaningful."""
        ...
