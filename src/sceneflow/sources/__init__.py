"""External event sources that scene-scoped handlers can be bound to."""

from sceneflow.sources.base import EventSource
from sceneflow.sources.counter import Counter, Direction
from sceneflow.sources.input import ButtonEdge, ButtonSource
from sceneflow.sources.overlap import OverlapSource
from sceneflow.sources.tick import IntervalSource, TickSource

__all__ = [
    "ButtonEdge",
    "ButtonSource",
    "Counter",
    "Direction",
    "EventSource",
    "IntervalSource",
    "OverlapSource",
    "TickSource",
]
