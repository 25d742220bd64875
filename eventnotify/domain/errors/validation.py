"""Boundary validation errors.

Raised when input handed to the service layer does not describe a valid
subscription, unsubscription or event. These are reported back to the caller
synchronously and never leave partial state behind.

Usage:
    raise InvalidSubscriptionError.invalid_channel("fax")
"""

from __future__ import annotations

from eventnotify.domain.exceptions import EventNotifyError


class ValidationFailedError(EventNotifyError):
    """Base class for rejected input.

    Attributes:
        field: Name of the offending field.
    """

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidSubscriptionError(ValidationFailedError):
    """Raised when a subscribe request has an empty name or unknown channel."""

    @classmethod
    def missing_name(cls) -> InvalidSubscriptionError:
        return cls("name is required", field="name")

    @classmethod
    def invalid_channel(cls, channel: object) -> InvalidSubscriptionError:
        return cls(
            f"invalid channel {channel!r} (expected email|sms|push)",
            field="channel",
        )


class InvalidUnsubscribeError(ValidationFailedError):
    """Raised when an unsubscribe request carries no subscriber id."""

    @classmethod
    def missing_id(cls) -> InvalidUnsubscribeError:
        return cls("id is required", field="id")


class InvalidEventError(ValidationFailedError):
    """Raised when a publish request has an empty title or unknown type."""

    @classmethod
    def missing_title(cls) -> InvalidEventError:
        return cls("title is required", field="title")

    @classmethod
    def invalid_type(cls, event_type: object) -> InvalidEventError:
        return cls(
            f"invalid type {event_type!r} (expected CREATED|UPDATED|CANCELLED)",
            field="type",
        )
