"""Subscriber domain model.

A subscriber is a named recipient listening on exactly one channel. The id is
the only stable handle: changing name or channel is modeled as unsubscribe
followed by subscribe.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import uuid4


class Channel(str, Enum):
    """Delivery medium for a notification."""

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """Return the recognised channel values in declaration order."""
        return tuple(member.value for member in cls)


@dataclass(frozen=True, eq=True)
class Subscriber:
    """Active subscriber - immutable.

    Attributes:
        id: Unique identifier generated at subscribe time (UUID4 string).
        name: Non-empty display name.
        channel: Channel the subscriber listens on.
    """

    id: str
    name: str
    channel: Channel

    @classmethod
    def create(cls, name: str, channel: Channel) -> Subscriber:
        """Create a subscriber with a freshly generated id."""
        return cls(id=str(uuid4()), name=name, channel=channel)
