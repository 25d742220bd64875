"""Unit tests for NotificationBuilder."""

from datetime import timedelta

import pytest

from eventnotify.application.services.notification_builder import NotificationBuilder
from eventnotify.domain.errors.rendering import UnsupportedChannelError
from eventnotify.domain.events.domain_event import DomainEvent, EventType
from eventnotify.domain.models.subscriber import Channel, Subscriber
from eventnotify.domain.services.renderers import Renderer, select_renderer
from tests.helpers import FakeTimeAuthority, RecordingMetrics


@pytest.fixture
def ana() -> Subscriber:
    return Subscriber.create("Ana", Channel.EMAIL)


@pytest.fixture
def event(fake_time_authority: FakeTimeAuthority) -> DomainEvent:
    return DomainEvent.create("X", EventType.CREATED, fake_time_authority.utcnow())


class TestBuild:
    def test_builds_complete_message(
        self, fake_time_authority: FakeTimeAuthority, ana: Subscriber, event: DomainEvent
    ) -> None:
        builder = NotificationBuilder(time_authority=fake_time_authority)

        message = builder.build(ana, event)

        assert message.id
        assert message.user_id == ana.id
        assert message.user_name == "Ana"
        assert message.channel is Channel.EMAIL
        assert message.event_id == event.id
        assert message.event_title == "X"
        assert message.event_type is EventType.CREATED
        assert message.sent_at == fake_time_authority.utcnow()
        assert message.latency_ms == 0
        assert message.rendered == '📧 Email to Ana: Event "X" (CREATED)'

    def test_latency_measured_from_event_creation(
        self, fake_time_authority: FakeTimeAuthority, ana: Subscriber, event: DomainEvent
    ) -> None:
        builder = NotificationBuilder(time_authority=fake_time_authority)
        fake_time_authority.advance(delta=timedelta(milliseconds=42))

        assert builder.build(ana, event).latency_ms == 42

    def test_sent_at_taken_after_renderer_selection(
        self, fake_time_authority: FakeTimeAuthority, ana: Subscriber, event: DomainEvent
    ) -> None:
        def slow_selector(channel: Channel) -> Renderer:
            fake_time_authority.advance(seconds=0.25)
            return select_renderer(channel)

        builder = NotificationBuilder(
            time_authority=fake_time_authority, renderer_selector=slow_selector
        )

        assert builder.build(ana, event).latency_ms == 250

    def test_each_build_gets_new_id(
        self, fake_time_authority: FakeTimeAuthority, ana: Subscriber, event: DomainEvent
    ) -> None:
        builder = NotificationBuilder(time_authority=fake_time_authority)

        assert builder.build(ana, event).id != builder.build(ana, event).id

    def test_unsupported_channel_propagates(
        self, fake_time_authority: FakeTimeAuthority, ana: Subscriber, event: DomainEvent
    ) -> None:
        def no_renderers(channel: Channel) -> Renderer:
            raise UnsupportedChannelError(channel)

        builder = NotificationBuilder(
            time_authority=fake_time_authority, renderer_selector=no_renderers
        )

        with pytest.raises(UnsupportedChannelError):
            builder.build(ana, event)

    def test_records_metrics(
        self, fake_time_authority: FakeTimeAuthority, ana: Subscriber, event: DomainEvent
    ) -> None:
        metrics = RecordingMetrics()
        builder = NotificationBuilder(time_authority=fake_time_authority, metrics=metrics)

        builder.build(ana, event)
        builder.build(Subscriber.create("Bo", Channel.PUSH), event)

        assert metrics.notifications_built == {"email": 1, "push": 1}
        assert metrics.latencies_ms == [0, 0]


def test_bind_returns_listener_for_subscriber(
    fake_time_authority: FakeTimeAuthority, ana: Subscriber, event: DomainEvent
) -> None:
    builder = NotificationBuilder(time_authority=fake_time_authority)
    listener = builder.bind(ana)

    message = listener(event)

    assert message.user_id == ana.id
    assert message.rendered.startswith("📧 Email to Ana")


def test_clock_behind_event_gives_zero_latency(
    fake_time_authority: FakeTimeAuthority, ana: Subscriber, event: DomainEvent
) -> None:
    builder = NotificationBuilder(time_authority=fake_time_authority)
    fake_time_authority.set_time(event.created_at - timedelta(seconds=2))

    assert builder.build(ana, event).latency_ms == 0
