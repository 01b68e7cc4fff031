"""Threshold counter source for scores, lives and countdowns."""

from __future__ import annotations

import logging
from enum import Enum, auto

from sceneflow.sources.base import EventSource

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Direction in which the counter must cross its threshold to fire."""

    UP = auto()  # Fires when value rises to or above threshold (score)
    DOWN = auto()  # Fires when value falls to or below threshold (lives, countdown)


class Counter(EventSource):
    """Numeric value that fires with its new value when it reaches a threshold.

    Firing is edge-triggered: it happens on the change that brings the value
    to the threshold (or past it), and the counter must move back to the other
    side before it can fire again. A counter created at or past its threshold
    counts as already reached: with the defaults (value 0, threshold 0, DOWN)
    it fires only after rising above zero and coming back down.

    Example:
        lives = Counter(value=3, threshold=0, direction=Direction.DOWN)
        dispatcher.bind_scoped_event("Play", lives.subscribe, lambda value: dispatcher.transition_to("GameOver"))
        lives.change(-1)
    """

    def __init__(self, value: float = 0, threshold: float = 0, direction: Direction = Direction.DOWN) -> None:
        """Initialize the counter."""
        super().__init__()
        self.value = value
        self.threshold = threshold
        self.direction = direction

    def reached(self) -> bool:
        """Whether the current value is at or past the threshold."""
        if self.direction is Direction.UP:
            return self.value >= self.threshold
        return self.value <= self.threshold

    def set(self, value: float) -> None:
        """Set the value, firing if this change reaches the threshold."""
        was_reached = self.reached()
        self.value = value
        if self.reached() and not was_reached:
            logger.debug("Counter reached threshold %s with value %s", self.threshold, value)
            self.emit(value)

    def change(self, delta: float) -> None:
        """Add ``delta`` to the value, firing if this change reaches the threshold."""
        self.set(self.value + delta)
