"""Module for events."""

from sceneflow.events.base import Event, EventBus, SceneTransitionEvent, bus_subscriber

__all__ = [
    "Event",
    "EventBus",
    "SceneTransitionEvent",
    "bus_subscriber",
]
