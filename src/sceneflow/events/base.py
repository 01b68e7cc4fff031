"""Event system for decoupled notification of scene changes.

This module provides a small publish/subscribe event bus. The transition
controller publishes a SceneTransitionEvent on it after every completed
transition, and the bus itself can act as an external event source for
scene-scoped handlers through bus_subscriber().

Example usage:
    event_bus = EventBus()

    def on_transition(event: SceneTransitionEvent) -> None:
        print(f"{event.from_scene} -> {event.to_scene}")

    event_bus.subscribe(SceneTransitionEvent, on_transition)
    event_bus.publish(SceneTransitionEvent("Menu", "Play"))
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class Event:
    """Base event class."""


@dataclass
class SceneTransitionEvent(Event):
    """Fired after a transition has finished running the new scene's setup handlers.

    Attributes:
        from_scene: Scene that was active before the transition, or None for
            the first transition.
        to_scene: Scene made active by the transition.
    """

    from_scene: str | None
    to_scene: str

    def get_event_data(self) -> dict[str, Any]:
        """Get the event payload as a dictionary."""
        return {"from_scene": self.from_scene, "to_scene": self.to_scene}


class EventBus:
    """Central event bus for publish/subscribe event handling.

    Handlers are keyed by exact event type and called synchronously in the
    order they were subscribed.

    Thread safety: This implementation is NOT thread-safe. All subscribe,
    publish, and unsubscribe calls should happen on the main game thread.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no registered listeners."""
        self.listeners: dict[type[Event], list[Callable[[Event], Any]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], Any]) -> None:
        """Subscribe a handler to an event type.

        The same handler can be subscribed multiple times, and will be called
        once for each subscription.

        Args:
            event_type: The type of event to listen for.
            handler: Callback taking the event as its only argument.
        """
        self.listeners.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], Any]) -> None:
        """Remove every subscription of ``handler`` to ``event_type``.

        Does nothing if the handler is not subscribed.
        """
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all handlers subscribed to its exact type.

        If a handler raises an exception, it propagates and the remaining
        handlers are not called.
        """
        for handler in tuple(self.listeners.get(type(event), ())):
            handler(event)

    def clear(self) -> None:
        """Remove all handlers for all event types."""
        self.listeners.clear()


def bus_subscriber(event_bus: EventBus, event_type: type[Event]) -> Callable[[Callable[[Event], Any]], None]:
    """Build a one-argument subscribe function for ``event_type`` on ``event_bus``.

    Example:
        dispatcher.bind_scoped_event("Play", bus_subscriber(bus, CoinCollectedEvent), on_coin)
    """
    return functools.partial(event_bus.subscribe, event_type)
