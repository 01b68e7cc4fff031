"""Registry of known scenes.

Scenes are identified purely by name. A scene is created the first time any
registration or transition call mentions it and is never removed, so every
handler list that refers to a scene stays valid for the life of the process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scene:
    """A named mode of the host application.

    Attributes:
        name: Unique scene identifier. Never validated or normalized.
    """

    name: str


class SceneRegistry:
    """Set of scenes that have ever been referenced.

    Example:
        registry = SceneRegistry()
        registry.ensure_exists("Menu")
        registry.exists("Menu")  # True
        registry.exists("Play")  # False
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._scenes: dict[str, Scene] = {}

    def ensure_exists(self, name: str) -> Scene:
        """Create an entry for ``name`` if absent.

        Calling this for a name that already exists is a no-op and returns the
        existing entry.

        Args:
            name: Scene identifier.

        Returns:
            The Scene for ``name``.
        """
        scene = self._scenes.get(name)
        if scene is None:
            scene = Scene(name)
            self._scenes[name] = scene
            logger.debug("Created scene '%s'", name)
        return scene

    def exists(self, name: str) -> bool:
        """Return True iff ``name`` has ever been referenced."""
        return name in self._scenes

    def get(self, name: str) -> Scene | None:
        """Get the Scene for ``name``, or None if it was never referenced."""
        return self._scenes.get(name)

    def names(self) -> list[str]:
        """Get all known scene names."""
        return list(self._scenes)

    def __contains__(self, name: object) -> bool:
        return name in self._scenes

    def __len__(self) -> int:
        return len(self._scenes)
