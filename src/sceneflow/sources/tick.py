"""Frame and interval sources driven by the host's update loop."""

from __future__ import annotations

import logging

import arcade

from sceneflow.conf import settings
from sceneflow.sources.base import EventSource

logger = logging.getLogger(__name__)


class TickSource(EventSource):
    """Fires once per update with the frame's ``delta_time``.

    Either feed it from a view's on_update() or let arcade's clock drive it
    through attach().
    """

    def __init__(self) -> None:
        """Initialize a detached tick source."""
        super().__init__()
        self.attached = False

    def update(self, delta_time: float) -> None:
        """Emit ``delta_time`` to all subscribers."""
        self.emit(delta_time)

    def attach(self, interval: float | None = None) -> None:
        """Schedule update() on arcade's clock.

        Args:
            interval: Seconds between calls. If None, uses settings.SCENE_TICK_INTERVAL.
        """
        if self.attached:
            return
        if interval is None:
            interval = settings.SCENE_TICK_INTERVAL
        arcade.schedule(self.update, interval)
        self.attached = True
        logger.debug("TickSource attached to arcade clock (interval=%.3f)", interval)

    def detach(self) -> None:
        """Remove update() from arcade's clock."""
        if not self.attached:
            return
        arcade.unschedule(self.update)
        self.attached = False
        logger.debug("TickSource detached from arcade clock")


class IntervalSource(EventSource):
    """Fires once per elapsed ``interval`` seconds of accumulated update time.

    Emits the interval length. Several firings can happen in one update if a
    long frame covers more than one interval.
    """

    def __init__(self, interval: float) -> None:
        """Initialize the source.

        Args:
            interval: Seconds between firings. Must be positive.

        Raises:
            ValueError: If ``interval`` is not positive.
        """
        if interval <= 0:
            msg = f"IntervalSource interval must be positive, got {interval}"
            raise ValueError(msg)
        super().__init__()
        self.interval = interval
        self.elapsed = 0.0

    def update(self, delta_time: float) -> None:
        """Advance the timer and emit for every completed interval."""
        self.elapsed += delta_time
        while self.elapsed >= self.interval:
            self.elapsed -= self.interval
            self.emit(self.interval)
