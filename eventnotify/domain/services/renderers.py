"""Per-channel notification renderers.

Each channel maps to a pure render function through a dispatch table. Adding a
channel means adding a Channel member and one entry in ``_RENDERERS``; the
fan-out and delivery code never changes.

Usage:
    render = select_renderer(Channel.EMAIL)
    text = render("Ana", event)  # '📧 Email to Ana: Event "X" (CREATED)'
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from eventnotify.domain.errors.rendering import UnsupportedChannelError
from eventnotify.domain.events.domain_event import DomainEvent
from eventnotify.domain.models.subscriber import Channel

Renderer = Callable[[str, DomainEvent], str]


def _format(prefix: str, subscriber_name: str, event: DomainEvent) -> str:
    return f'{prefix} to {subscriber_name}: Event "{event.title}" ({event.type.value})'


def render_email(subscriber_name: str, event: DomainEvent) -> str:
    return _format("📧 Email", subscriber_name, event)


def render_sms(subscriber_name: str, event: DomainEvent) -> str:
    return _format("📱 SMS", subscriber_name, event)


def render_push(subscriber_name: str, event: DomainEvent) -> str:
    return _format("🔔 Push", subscriber_name, event)


_RENDERERS: Mapping[Channel, Renderer] = MappingProxyType(
    {
        Channel.EMAIL: render_email,
        Channel.SMS: render_sms,
        Channel.PUSH: render_push,
    }
)


def render_table() -> Mapping[Channel, Renderer]:
    """Return the read-only channel -> renderer table."""
    return _RENDERERS


def select_renderer(channel: Channel | str) -> Renderer:
    """Return the render function for a channel.

    Args:
        channel: A Channel member or its string value.

    Returns:
        Pure function ``(subscriber_name, event) -> text``.

    Raises:
        UnsupportedChannelError: If no renderer exists for the channel.
    """
    try:
        return _RENDERERS[Channel(channel)]
    except (KeyError, ValueError):
        raise UnsupportedChannelError(channel) from None
