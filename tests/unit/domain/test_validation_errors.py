"""Unit tests for boundary validation errors."""

from eventnotify.domain.errors import (
    InvalidEventError,
    InvalidSubscriptionError,
    InvalidUnsubscribeError,
    ValidationFailedError,
)
from eventnotify.domain.exceptions import EventNotifyError


def test_hierarchy() -> None:
    assert issubclass(ValidationFailedError, EventNotifyError)
    for cls in (InvalidSubscriptionError, InvalidUnsubscribeError, InvalidEventError):
        assert issubclass(cls, ValidationFailedError)


def test_missing_name_message() -> None:
    error = InvalidSubscriptionError.missing_name()
    assert str(error) == "name is required"
    assert error.field == "name"


def test_invalid_channel_names_value_and_choices() -> None:
    error = InvalidSubscriptionError.invalid_channel("fax")
    assert "'fax'" in str(error)
    assert "email|sms|push" in str(error)
    assert error.field == "channel"


def test_missing_id_message() -> None:
    assert str(InvalidUnsubscribeError.missing_id()) == "id is required"


def test_event_errors() -> None:
    assert InvalidEventError.missing_title().field == "title"
    error = InvalidEventError.invalid_type("DELETED")
    assert "'DELETED'" in str(error)
    assert "CREATED|UPDATED|CANCELLED" in str(error)
