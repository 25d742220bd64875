"""Domain events that trigger notifications."""

from eventnotify.domain.events.domain_event import DomainEvent, EventType

__all__: list[str] = ["DomainEvent", "EventType"]
