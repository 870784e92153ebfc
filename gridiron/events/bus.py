"""Event bus for pub/sub communication."""

from collections import defaultdict
from typing import Callable, Optional, TypeVar

from gridiron.events.types import GameEvent

T = TypeVar("T", bound=GameEvent)
EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    Pub/sub bus that decouples the simulation from whoever is watching it.

    Handlers subscribe to an event class and also receive its subclasses,
    so subscribing to ``GameEvent`` sees everything.

    Example:
        bus = EventBus()
        bus.subscribe(ScoringEvent, lambda e: print(e.points))
        bus.emit(ScoringEvent(points=6))
    """

    def __init__(self) -> None:
        self._handlers: dict[type[GameEvent], list[EventHandler]] = defaultdict(list)

    def subscribe(
        self,
        event_type: type[T],
        handler: Callable[[T], None],
    ) -> Callable[[], None]:
        """
        Register a handler for an event type and its subclasses.

        Args:
            event_type: The type of event to handle
            handler: Callback that receives the event

        Returns:
            A callable that removes the subscription
        """
        self._handlers[event_type].append(handler)
        return lambda: self.unsubscribe(event_type, handler)

    def unsubscribe(
        self,
        event_type: type[T],
        handler: Callable[[T], None],
    ) -> None:
        """Remove a handler for an event type."""
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

    def emit(self, event: GameEvent) -> None:
        """
        Deliver an event to every matching handler.

        Handlers for the most specific type run first, then handlers for
        each base class in method resolution order.
        """
        for cls in type(event).__mro__:
            if cls is object:
                break
            for handler in list(self._handlers.get(cls, ())):
                handler(event)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()

    def handler_count(self, event_type: Optional[type[GameEvent]] = None) -> int:
        """Number of registered handlers, for one type or in total."""
        if event_type is None:
            return sum(len(handlers) for handlers in self._handlers.values())
        return len(self._handlers.get(event_type, ()))
