"""Sceneflow - scene lifecycle and scene-scoped event dispatch for Arcade games.

Handlers are grouped into named scenes. Entering a scene runs its setup
handlers, leaving it runs its cleanup handlers, and event handlers bound to a
scene only fire while that scene is active.

Quick start:
    import arcade

    from sceneflow import ButtonSource, SceneDispatcher, create_window

    dispatcher = SceneDispatcher()
    start = ButtonSource([arcade.key.ENTER])

    @dispatcher.on_setup("Menu")
    def show_menu() -> None:
        print("Press ENTER")

    @dispatcher.on_button("Menu", start)
    def start_game(symbol: int) -> None:
        dispatcher.transition_to("Play")

    if __name__ == "__main__":
        window = create_window(dispatcher, "Menu")
        window.scene_view.add_button(start)
        arcade.run()
"""

__version__ = "0.1.0"

from sceneflow.conf import settings
from sceneflow.dispatcher import SceneDispatcher
from sceneflow.events import Event, EventBus, SceneTransitionEvent, bus_subscriber
from sceneflow.helpers import create_dispatcher, create_window, run_scenes, setup_logging
from sceneflow.scenes import (
    HandlerKind,
    ReentryPolicy,
    RepeatPolicy,
    Scene,
    ScopedHandler,
)
from sceneflow.sources import (
    ButtonEdge,
    ButtonSource,
    Counter,
    Direction,
    EventSource,
    IntervalSource,
    OverlapSource,
    TickSource,
)
from sceneflow.views import SceneView

__all__ = [
    "ButtonEdge",
    "ButtonSource",
    "Counter",
    "Direction",
    "Event",
    "EventBus",
    "EventSource",
    "HandlerKind",
    "IntervalSource",
    "OverlapSource",
    "ReentryPolicy",
    "RepeatPolicy",
    "Scene",
    "SceneDispatcher",
    "SceneTransitionEvent",
    "SceneView",
    "ScopedHandler",
    "TickSource",
    "__version__",
    "bus_subscriber",
    "create_dispatcher",
    "create_window",
    "run_scenes",
    "settings",
]
