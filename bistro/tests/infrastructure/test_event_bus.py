"""
Tests for the in-memory event bus.
"""

import logging

import pytest

from bistro.domain.directory import (
    CollectionReplaced,
    DirectoryChanged,
    EntityAdded,
    EntityKind,
)
from bistro.infrastructure.events import InMemoryEventBus

from ..factories import build_person


def added_event(name: str = "Alice Pauline") -> EntityAdded:
    return EntityAdded(entity_kind=EntityKind.PERSON, entity=build_person(name))


class TestSubscription:
    def test_handler_receives_published_event(self, event_bus):
        received = []
        event_bus.subscribe(EntityAdded, received.append)
        event = added_event()

        event_bus.publish(event)

        assert received == [event]

    def test_base_type_subscription_receives_subclasses(self, event_bus):
        received = []
        event_bus.subscribe(DirectoryChanged, received.append)

        event_bus.publish(added_event())
        event_bus.publish(CollectionReplaced(entity_kind=EntityKind.CUSTOMER, size=0))

        assert [type(event) for event in received] == [EntityAdded, CollectionReplaced]

    def test_unrelated_handler_not_called(self, event_bus):
        received = []
        event_bus.subscribe(CollectionReplaced, received.append)

        event_bus.publish(added_event())

        assert received == []

    def test_duplicate_subscription_is_ignored(self, event_bus):
        received = []
        event_bus.subscribe(EntityAdded, received.append)
        event_bus.subscribe(EntityAdded, received.append)

        event_bus.publish(added_event())

        assert len(received) == 1
        assert event_bus.get_handler_count(EntityAdded) == 1

    def test_handler_on_base_and_subclass_called_once(self, event_bus):
        received = []
        event_bus.subscribe(EntityAdded, received.append)
        event_bus.subscribe(DirectoryChanged, received.append)

        event_bus.publish(added_event())

        assert len(received) == 1

    def test_unsubscribe(self, event_bus):
        received = []
        event_bus.subscribe(EntityAdded, received.append)
        event_bus.unsubscribe(EntityAdded, received.append)

        event_bus.publish(added_event())

        assert received == []
        assert event_bus.get_handler_count(EntityAdded) == 0

    def test_clear_handlers(self, event_bus):
        event_bus.subscribe(EntityAdded, lambda event: None)
        event_bus.subscribe(CollectionReplaced, lambda event: None)

        event_bus.clear_handlers(EntityAdded)
        assert event_bus.get_handler_count(EntityAdded) == 0
        assert event_bus.get_handler_count(CollectionReplaced) == 1

        event_bus.clear_handlers()
        assert event_bus.get_handler_count(CollectionReplaced) == 0


class TestHandlerFailures:
    def test_failing_handler_does_not_stop_delivery(self, event_bus, caplog):
        received = []

        def failing_handler(event):
            raise RuntimeError("boom")

        event_bus.subscribe(EntityAdded, failing_handler)
        event_bus.subscribe(EntityAdded, received.append)

        with caplog.at_level(logging.ERROR, logger="bistro.infrastructure.events"):
            event_bus.publish(added_event())

        assert len(received) == 1
        assert "Error handling event EntityAdded" in caplog.text


class TestHistory:
    def test_history_is_kept_in_order(self, event_bus):
        first = added_event("A")
        second = CollectionReplaced(entity_kind=EntityKind.PERSON, size=1)

        event_bus.publish(first)
        event_bus.publish(second)

        assert event_bus.get_event_history() == [first, second]
        assert event_bus.get_event_history(CollectionReplaced) == [second]
        assert event_bus.get_event_history(DirectoryChanged) == [first, second]

    def test_history_is_bounded(self):
        bus = InMemoryEventBus(max_history_size=2)
        events = [added_event(name) for name in ("A", "B", "C")]

        for event in events:
            bus.publish(event)

        assert bus.get_event_history() == events[1:]

    def test_clear_history(self, event_bus):
        event_bus.publish(added_event())

        event_bus.clear_event_history()

        assert event_bus.get_event_history() == []

    @pytest.mark.parametrize("size", [0, 5])
    def test_history_size_is_configurable(self, size):
        bus = InMemoryEventBus(max_history_size=size)
        for name in ("A", "B", "C"):
            bus.publish(added_event(name))

        assert len(bus.get_event_history()) == min(size, 3)
