"""Rendering errors.

An unsupported channel reaching the renderer selector is a programming error:
channels are validated at the boundary before a subscriber is ever stored.
"""

from eventnotify.domain.exceptions import EventNotifyError


class UnsupportedChannelError(EventNotifyError):
    """Raised when no renderer is registered for a channel.

    Attributes:
        channel: The channel value that had no renderer.
    """

    def __init__(self, channel: object) -> None:
        super().__init__(f"Unsupported channel: {channel!r}")
        self.channel = channel
