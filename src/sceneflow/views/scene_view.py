"""Arcade view that drives a SceneDispatcher.

SceneView is the glue between arcade's window callbacks and the event sources
that scene-scoped handlers are bound to. Every frame it feeds the tick source,
interval sources and overlap sources; every key event goes to the button
sources. Which handlers actually run is decided by the dispatcher's active
scene.

Example usage:
    dispatcher = SceneDispatcher()
    view = SceneView(dispatcher, initial_scene="Menu")
    start = view.add_button(ButtonSource([arcade.key.ENTER]))

    @dispatcher.on_button("Menu", start)
    def start_game(symbol: int) -> None:
        dispatcher.transition_to("Play")

    window.show_view(view)
    arcade.run()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade

from sceneflow.sources import ButtonSource, IntervalSource, OverlapSource, TickSource

if TYPE_CHECKING:
    from sceneflow.dispatcher import SceneDispatcher

logger = logging.getLogger(__name__)


class SceneView(arcade.View):
    """View forwarding arcade callbacks to scene-scoped event sources.

    Attributes:
        dispatcher: The dispatcher whose active scene gates all handlers.
        initial_scene: Scene entered the first time the view is shown.
        ticks: Per-frame source fed from on_update().
        buttons: Sources fed from on_key_press() and on_key_release().
        intervals: Sources advanced from on_update().
        overlaps: Sources checked from on_update().
        started: Whether the initial transition has happened.
    """

    def __init__(
        self,
        dispatcher: SceneDispatcher,
        initial_scene: str | None = None,
        *,
        window: arcade.Window | None = None,
    ) -> None:
        """Initialize the view.

        Args:
            dispatcher: Dispatcher owning the scenes.
            initial_scene: Scene to enter on first show. If None, no transition
                is made and the host is expected to call transition_to() itself.
                Any other value, including the empty string, is entered as given.
            window: Window to attach to. If None, uses the current arcade window.
        """
        super().__init__(window)
        self.dispatcher = dispatcher
        self.initial_scene = initial_scene
        self.ticks = TickSource()
        self.buttons: list[ButtonSource] = []
        self.intervals: list[IntervalSource] = []
        self.overlaps: list[OverlapSource] = []
        self.started = False

    def add_button(self, source: ButtonSource) -> ButtonSource:
        """Feed ``source`` from this view's key callbacks."""
        self.buttons.append(source)
        return source

    def add_interval(self, source: IntervalSource) -> IntervalSource:
        """Advance ``source`` from this view's on_update()."""
        self.intervals.append(source)
        return source

    def add_overlap(self, source: OverlapSource) -> OverlapSource:
        """Check ``source`` from this view's on_update()."""
        self.overlaps.append(source)
        return source

    def on_show_view(self) -> None:
        """Enter the initial scene the first time the view is shown."""
        if self.started:
            return
        self.started = True
        if self.initial_scene is not None:
            logger.info("SceneView: entering initial scene '%s'", self.initial_scene)
            self.dispatcher.transition_to(self.initial_scene)

    def on_update(self, delta_time: float) -> None:
        """Fire per-frame, interval and overlap sources (arcade lifecycle callback)."""
        self.ticks.update(delta_time)
        for interval in self.intervals:
            interval.update(delta_time)
        for overlap in self.overlaps:
            overlap.update(delta_time)

    def on_key_press(self, symbol: int, modifiers: int) -> bool | None:
        """Forward key presses to the button sources (arcade lifecycle callback)."""
        handled = False
        for button in self.buttons:
            handled = button.on_key_press(symbol, modifiers) or handled
        return True if handled else None

    def on_key_release(self, symbol: int, modifiers: int) -> bool | None:
        """Forward key releases to the button sources (arcade lifecycle callback)."""
        handled = False
        for button in self.buttons:
            handled = button.on_key_release(symbol, modifiers) or handled
        return True if handled else None
