"""Per-scene setup and cleanup handler lists."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sceneflow.scenes.registry import SceneRegistry

logger = logging.getLogger(__name__)

# Zero-argument lifecycle callback
SceneCallback = Callable[[], object]


class HandlerKind(Enum):
    """Lifecycle phase a handler belongs to."""

    SETUP = "setup"  # Runs after the scene becomes active
    CLEANUP = "cleanup"  # Runs before the scene stops being active


class HandlerRegistry:
    """Append-only handler lists keyed by (scene, kind).

    Registration order is invocation order. Lists never shrink, and registering
    a handler for one scene never touches another scene's lists. Every
    registration auto-creates its scene in the shared SceneRegistry.
    """

    def __init__(self, scene_registry: SceneRegistry) -> None:
        """Initialize with the scene registry shared with the dispatcher.

        Args:
            scene_registry: Registry that receives auto-created scenes.
        """
        self._scene_registry = scene_registry
        self._handlers: dict[tuple[str, HandlerKind], list[SceneCallback]] = {}

    def register(self, name: str, kind: HandlerKind, callback: SceneCallback) -> SceneCallback:
        """Append ``callback`` to the ``kind`` list of scene ``name``.

        The same callable may be registered more than once; it then runs once
        per registration.

        Args:
            name: Scene identifier.
            kind: SETUP or CLEANUP.
            callback: Zero-argument callable.

        Returns:
            The callback, unchanged.
        """
        self._scene_registry.ensure_exists(name)
        self._handlers.setdefault((name, kind), []).append(callback)
        logger.debug(
            "Registered %s handler %s for scene '%s'",
            kind.value,
            getattr(callback, "__qualname__", repr(callback)),
            name,
        )
        return callback

    def register_setup(self, name: str, callback: SceneCallback) -> SceneCallback:
        """Append a setup handler for scene ``name``."""
        return self.register(name, HandlerKind.SETUP, callback)

    def register_cleanup(self, name: str, callback: SceneCallback) -> SceneCallback:
        """Append a cleanup handler for scene ``name``."""
        return self.register(name, HandlerKind.CLEANUP, callback)

    def handlers_for(self, name: str, kind: HandlerKind) -> tuple[SceneCallback, ...]:
        """Snapshot of the handlers registered for (``name``, ``kind``).

        Handlers registered while the returned snapshot is being run are not
        part of it; they take effect from the next transition.
        """
        return tuple(self._handlers.get((name, kind), ()))
