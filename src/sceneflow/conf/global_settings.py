"""Default settings for Sceneflow.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from sceneflow.conf import global_settings

    # Override framework defaults
    INITIAL_SCENE = "Menu"
    SCENE_REPEAT_POLICY = "ignore"
"""

# Window settings
SCREEN_WIDTH = 1280
"""Width of the game window in pixels."""

SCREEN_HEIGHT = 720
"""Height of the game window in pixels."""

WINDOW_TITLE = "Sceneflow Game"
"""Title displayed in the window title bar."""

# Scene settings
INITIAL_SCENE = ""
"""Scene entered when the scene view is first shown (empty string for none)."""

SCENE_REENTRY_POLICY = "nested"
"""How transition_to() behaves when called from inside a setup/cleanup handler.

"nested" runs the inner transition immediately on the call stack, then resumes
the outer handler list. "deferred" queues the inner transition until the outer
one has finished.
"""

SCENE_REPEAT_POLICY = "rerun"
"""What transition_to() does when asked for the scene that is already active.

"rerun" runs the scene's cleanup and then its setup again. "ignore" skips it.
"""

SCENE_TICK_INTERVAL = 0.0
"""Interval in seconds passed to arcade.schedule when a TickSource attaches (0 = every frame)."""

# Logging settings
LOG_LEVEL = "INFO"
"""Root log level used by setup_logging()."""
