"""Unit tests for SubscriberRegistry."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from eventnotify.application.services.fan_out_bus import FanOutBus
from eventnotify.application.services.notification_builder import NotificationBuilder
from eventnotify.application.services.subscriber_registry import SubscriberRegistry
from eventnotify.domain.events.domain_event import DomainEvent, EventType
from eventnotify.domain.models.subscriber import Channel
from tests.helpers import FakeTimeAuthority, RecordingMetrics


@pytest.fixture
def bus() -> FanOutBus:
    return FanOutBus()


@pytest.fixture
def registry(
    bus: FanOutBus, fake_time_authority: FakeTimeAuthority, recording_metrics: RecordingMetrics
) -> SubscriberRegistry:
    builder = NotificationBuilder(time_authority=fake_time_authority)
    return SubscriberRegistry(bus=bus, builder=builder, metrics=recording_metrics)


class TestAdd:
    def test_add_stores_and_attaches(self, registry: SubscriberRegistry, bus: FanOutBus) -> None:
        ana = registry.add("Ana", Channel.EMAIL)

        assert ana in registry.list()
        assert ana.id in registry
        assert ana.id in bus
        assert registry.get(ana.id) == ana

    def test_counts_follow_adds(
        self, registry: SubscriberRegistry, recording_metrics: RecordingMetrics
    ) -> None:
        registry.add("Ana", Channel.EMAIL)
        registry.add("Bo", Channel.SMS)

        assert registry.count() == 2
        assert recording_metrics.active_subscribers == 2

    def test_list_keeps_insertion_order(self, registry: SubscriberRegistry) -> None:
        names = ["Ana", "Bo", "Cy"]
        for name in names:
            registry.add(name, Channel.PUSH)

        assert [s.name for s in registry.list()] == names

    def test_same_name_twice_gives_two_subscribers(self, registry: SubscriberRegistry) -> None:
        first = registry.add("Ana", Channel.EMAIL)
        second = registry.add("Ana", Channel.EMAIL)

        assert first.id != second.id
        assert registry.count() == 2

    def test_bound_listener_builds_for_that_subscriber(
        self, registry: SubscriberRegistry, bus: FanOutBus
    ) -> None:
        ana = registry.add("Ana", Channel.SMS)
        event = DomainEvent.create(
            "X", EventType.UPDATED, datetime(2026, 1, 1, tzinfo=timezone.utc)
        )

        (message,) = bus.notify_all(event)

        assert message.user_id == ana.id
        assert message.rendered == '📱 SMS to Ana: Event "X" (UPDATED)'


class TestRemove:
    def test_remove_detaches_both(self, registry: SubscriberRegistry, bus: FanOutBus) -> None:
        ana = registry.add("Ana", Channel.EMAIL)

        assert registry.remove(ana.id) is True
        assert ana.id not in registry
        assert ana.id not in bus
        assert registry.count() == 0

    def test_remove_unknown_is_noop(
        self, registry: SubscriberRegistry, recording_metrics: RecordingMetrics
    ) -> None:
        registry.add("Ana", Channel.EMAIL)

        assert registry.remove("missing") is False
        assert registry.count() == 1
        assert recording_metrics.active_subscribers == 1

    def test_remove_twice(self, registry: SubscriberRegistry) -> None:
        ana = registry.add("Ana", Channel.EMAIL)

        assert registry.remove(ana.id) is True
        assert registry.remove(ana.id) is False

    def test_count_reads_bus(self, fake_time_authority: FakeTimeAuthority) -> None:
        bus = MagicMock(spec=FanOutBus)
        bus.count.return_value = 7
        registry = SubscriberRegistry(
            bus=bus, builder=NotificationBuilder(time_authority=fake_time_authority)
        )

        assert registry.count() == 7
