"""Helper functions for creating and running Sceneflow games.

Users can choose between the simple run_scenes() function or create_window()
for more control over the game initialization.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade
from rich.logging import RichHandler

from sceneflow.conf import settings
from sceneflow.dispatcher import SceneDispatcher
from sceneflow.views import SceneView

if TYPE_CHECKING:
    from sceneflow.events import EventBus


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the game.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            If None, uses settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_dispatcher(event_bus: EventBus | None = None) -> SceneDispatcher:
    """Create a SceneDispatcher configured from settings.

    Args:
        event_bus: Optional bus receiving SceneTransitionEvent.

    Returns:
        A new dispatcher with no active scene.
    """
    return SceneDispatcher(
        event_bus=event_bus,
        reentry_policy=settings.SCENE_REENTRY_POLICY,
        repeat_policy=settings.SCENE_REPEAT_POLICY,
    )


def create_window(dispatcher: SceneDispatcher, initial_scene: str | None = None) -> arcade.Window:
    """Create an arcade window showing a SceneView for ``dispatcher``.

    Args:
        dispatcher: Dispatcher whose scenes the window hosts.
        initial_scene: Scene entered when the view is shown. If None, uses
            settings.INITIAL_SCENE (an empty setting means no initial transition).

    Returns:
        The window, with the SceneView attached as ``window.scene_view``.

    Side effects:
        - Configures logging via setup_logging()
        - Creates arcade.Window instance
    """
    setup_logging()
    if initial_scene is None:
        initial_scene = settings.INITIAL_SCENE or None

    window = arcade.Window(settings.SCREEN_WIDTH, settings.SCREEN_HEIGHT, settings.WINDOW_TITLE)
    view = SceneView(dispatcher, initial_scene, window=window)
    window.scene_view = view  # type: ignore[attr-defined]
    window.show_view(view)
    return window


def run_scenes(dispatcher: SceneDispatcher, initial_scene: str | None = None) -> None:
    """Create the window and run the arcade event loop until it closes.

    Example:
        dispatcher = create_dispatcher()

        @dispatcher.on_setup("Menu")
        def show_title() -> None:
            ...

        if __name__ == "__main__":
            run_scenes(dispatcher, "Menu")
    """
    create_window(dispatcher, initial_scene)
    arcade.run()
