"""Domain event entity.

A DomainEvent is the titled occurrence a publisher announces. Every active
subscriber gets one notification per event. Events are immutable once created
and are only referenced (never mutated) by the notifications built from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import uuid4


class EventType(str, Enum):
    """Kind of change a domain event announces.

    Types:
        CREATED: Something new exists
        UPDATED: Something existing changed
        CANCELLED: Something was called off
    """

    CREATED = "CREATED"
    UPDATED = "UPDATED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True, eq=True)
class DomainEvent:
    """Published domain event - immutable.

    Attributes:
        id: Unique identifier generated at publish time (UUID4 string).
        title: Non-empty human-readable title.
        type: Kind of change (CREATED, UPDATED, CANCELLED).
        created_at: When the event was published (timezone-aware UTC).
    """

    id: str
    title: str
    type: EventType
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate event fields.

        Raises:
            ValueError: If title is empty or created_at is naive.
        """
        if not self.title:
            raise ValueError("DomainEvent title must be non-empty")
        if self.created_at.tzinfo is None:
            raise ValueError("DomainEvent created_at must be timezone-aware")

    @classmethod
    def create(
        cls,
        title: str,
        event_type: EventType,
        created_at: datetime,
    ) -> DomainEvent:
        """Create a new event with a freshly generated id.

        Args:
            title: Event title.
            event_type: Kind of change.
            created_at: Publish timestamp from the time authority.

        Returns:
            New DomainEvent instance.
        """
        return cls(
            id=str(uuid4()),
            title=title,
            type=event_type,
            created_at=created_at,
        )
