"""Scene-scoped subscriptions.

Any external event source that exposes ``subscribe(handler)`` can be gated by
scene identity through ScopedSubscriptionAdapter.bind(). The adapter wraps the
handler in a ScopedHandler that forwards its arguments untouched, but only when
the bound scene is the active scene at the moment the source fires. The check
is made fresh on every call, so a transition between two firings immediately
changes which scoped handlers are live.

Example:
    adapter = ScopedSubscriptionAdapter(scene_registry, controller.get_current_scene_name)

    ticks = TickSource()
    adapter.bind("Play", ticks.subscribe, lambda delta_time: player.move(delta_time))

Bindings cannot be cancelled. A binding whose scene is inactive costs one
comparison per firing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sceneflow.scenes.registry import SceneRegistry

logger = logging.getLogger(__name__)

# Collaborator-supplied subscribe operation
SubscribeFunc = Callable[[Callable[..., Any]], object]


class ScopedHandler:
    """Callable wrapper that forwards to ``handler`` only while ``scene`` is active.

    Attributes:
        scene: Scene this handler is bound to.
        handler: The wrapped callable, invoked with the source's arguments.
    """

    def __init__(self, scene: str, handler: Callable[..., Any], current_scene: Callable[[], str | None]) -> None:
        """Initialize the wrapper.

        Args:
            scene: Scene that gates delivery.
            handler: Callable to forward to.
            current_scene: Zero-argument reader for the active scene.
        """
        self.scene = scene
        self.handler = handler
        self._current_scene = current_scene

    def is_live(self) -> bool:
        """Whether a firing right now would reach the handler."""
        return self._current_scene() == self.scene

    def __call__(self, *args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
        """Forward to the handler if the bound scene is active, else do nothing.

        Returns:
            The handler's return value, or None when gated out.
        """
        if self._current_scene() == self.scene:
            return self.handler(*args, **kwargs)
        return None

    def __repr__(self) -> str:
        name = getattr(self.handler, "__qualname__", repr(self.handler))
        return f"ScopedHandler(scene={self.scene!r}, handler={name})"


class ScopedSubscriptionAdapter:
    """Binds handlers to external event sources, gated by the active scene.

    The adapter only ever reads the active scene through the reader it was
    given; it has no way to change it.
    """

    def __init__(self, scene_registry: SceneRegistry, current_scene: Callable[[], str | None]) -> None:
        """Initialize the adapter.

        Args:
            scene_registry: Registry that receives auto-created scenes.
            current_scene: Zero-argument reader for the active scene.
        """
        self._scene_registry = scene_registry
        self._current_scene = current_scene
        self._bindings: list[ScopedHandler] = []

    @property
    def bindings(self) -> tuple[ScopedHandler, ...]:
        """All scoped handlers created so far, in binding order."""
        return tuple(self._bindings)

    def bind(self, name: str, subscribe: SubscribeFunc, handler: Callable[..., Any]) -> ScopedHandler:
        """Subscribe a scene-gated wrapper of ``handler`` via ``subscribe``.

        Args:
            name: Scene that gates delivery. Auto-created if never seen.
            subscribe: The source's subscribe operation. Called exactly once
                with the wrapper.
            handler: Callable receiving whatever arguments the source emits.

        Returns:
            The ScopedHandler that was subscribed.
        """
        self._scene_registry.ensure_exists(name)
        wrapped = ScopedHandler(name, handler, self._current_scene)
        subscribe(wrapped)
        self._bindings.append(wrapped)
        logger.debug("Bound %r", wrapped)
        return wrapped
