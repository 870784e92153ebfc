"""Tests for the event bus."""

from gridiron.events.bus import EventBus
from gridiron.events.types import GameEvent, ScoringEvent, TurnoverEvent


class TestEventBus:
    """Tests for EventBus."""

    def test_subscribe_and_emit(self):
        bus = EventBus()
        received = []
        bus.subscribe(ScoringEvent, received.append)

        event = ScoringEvent(team_id=1, points=6)
        bus.emit(event)
        bus.emit(TurnoverEvent())

        assert received == [event]

    def test_base_class_sees_subclasses(self):
        """Subscribing to GameEvent should receive every event."""
        bus = EventBus()
        received = []
        bus.subscribe(GameEvent, received.append)

        bus.emit(ScoringEvent(points=3))
        bus.emit(TurnoverEvent(turnover_type="INT"))

        assert len(received) == 2

    def test_specific_handlers_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(GameEvent, lambda e: order.append("base"))
        bus.subscribe(ScoringEvent, lambda e: order.append("scoring"))

        bus.emit(ScoringEvent())

        assert order == ["scoring", "base"]

    def test_unsubscribe_callable(self):
        bus = EventBus()
        received = []
        unsubscribe = bus.subscribe(ScoringEvent, received.append)

        unsubscribe()
        bus.emit(ScoringEvent())

        assert received == []
        assert bus.handler_count(ScoringEvent) == 0

    def test_handler_count_and_clear(self):
        bus = EventBus()
        bus.subscribe(ScoringEvent, lambda e: None)
        bus.subscribe(TurnoverEvent, lambda e: None)

        assert bus.handler_count() == 2
        assert bus.handler_count(ScoringEvent) == 1

        bus.clear()
        assert bus.handler_count() == 0

    def test_handler_may_unsubscribe_during_emit(self):
        bus = EventBus()
        received = []

        def once(event):
            received.append(event)
            unsubscribe()

        unsubscribe = bus.subscribe(ScoringEvent, once)
        bus.emit(ScoringEvent())
        bus.emit(ScoringEvent())

        assert len(received) == 1
