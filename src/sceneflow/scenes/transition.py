"""Scene transition protocol.

TransitionController owns the active-scene cell and is its only writer. A
transition runs in three strictly ordered steps:

1. The outgoing scene's cleanup handlers, in registration order, while the
   active scene still reads as the outgoing scene.
2. The active scene is set to the incoming scene.
3. The incoming scene's setup handlers, in registration order.

Handler exceptions are not caught. A failing cleanup handler leaves the
outgoing scene active; a failing setup handler leaves the incoming scene
active with its setup only partly run. Neither case is rolled back.

Two policies cover the cases where callers may reasonably want different
behavior:

- RepeatPolicy decides whether a transition to the already-active scene reruns
  its cleanup and setup (RERUN) or is skipped (IGNORE).
- ReentryPolicy decides what transition_to() does when called from inside a
  setup or cleanup handler. NESTED runs the inner transition to completion on
  the spot and then resumes the outer handler list, so the outer scene's
  remaining setup handlers run while the inner scene is already active.
  DEFERRED queues the inner request and runs queued requests in FIFO order
  once the outer transition has finished.

When an event bus is supplied, each transition publishes a SceneTransitionEvent
after its setup handlers have run, provided the scene it entered is still
active. A transition superseded by a nested one publishes nothing, so the last
event on the bus always names the active scene.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING

from sceneflow.events.base import SceneTransitionEvent
from sceneflow.scenes.handlers import HandlerKind

if TYPE_CHECKING:
    from sceneflow.events.base import EventBus
    from sceneflow.scenes.handlers import HandlerRegistry
    from sceneflow.scenes.registry import SceneRegistry

logger = logging.getLogger(__name__)


class _Policy(Enum):
    @classmethod
    def from_setting(cls, value: str | _Policy) -> _Policy:
        """Resolve a policy from a settings string or an existing member.

        Raises:
            ValueError: If ``value`` names no member.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            accepted = ", ".join(repr(member.value) for member in cls)
            msg = f"Invalid {cls.__name__} {value!r}; expected one of {accepted}"
            raise ValueError(msg) from None


class ReentryPolicy(_Policy):
    """Handling of transition_to() calls made from inside a handler."""

    NESTED = "nested"
    DEFERRED = "deferred"


class RepeatPolicy(_Policy):
    """Handling of transition_to() for the scene that is already active."""

    RERUN = "rerun"
    IGNORE = "ignore"


class TransitionController:
    """Owns the current scene and runs cleanup/switch/setup sequences.

    Attributes:
        reentry_policy: How nested transition requests are handled.
        repeat_policy: How transitions to the active scene are handled.
    """

    def __init__(
        self,
        scene_registry: SceneRegistry,
        handler_registry: HandlerRegistry,
        *,
        reentry_policy: ReentryPolicy = ReentryPolicy.NESTED,
        repeat_policy: RepeatPolicy = RepeatPolicy.RERUN,
        event_bus: EventBus | None = None,
    ) -> None:
        """Initialize with no active scene.

        Args:
            scene_registry: Registry that receives auto-created scenes.
            handler_registry: Source of setup and cleanup handlers.
            reentry_policy: Policy for transitions requested by handlers.
            repeat_policy: Policy for transitions to the active scene.
            event_bus: Optional bus that receives a SceneTransitionEvent after
                each completed transition.
        """
        self._scene_registry = scene_registry
        self._handler_registry = handler_registry
        self._event_bus = event_bus
        self.reentry_policy = reentry_policy
        self.repeat_policy = repeat_policy

        self._current: str | None = None
        self._depth = 0
        self._pending: deque[str] = deque()

    @property
    def current_scene(self) -> str | None:
        """Name of the active scene, or None before the first transition."""
        return self._current

    @property
    def in_transition(self) -> bool:
        """Whether a transition is currently running."""
        return self._depth > 0

    def get_current_scene_name(self) -> str | None:
        """Get the name of the active scene, or None before the first transition."""
        return self._current

    def transition_to(self, name: str) -> None:
        """Make ``name`` the active scene.

        Runs the outgoing scene's cleanup handlers, switches the active scene,
        then runs the incoming scene's setup handlers. Any name may follow any
        name, including itself (see RepeatPolicy).

        Args:
            name: Scene identifier. Auto-created if never seen.
        """
        self._scene_registry.ensure_exists(name)

        if self._depth and self.reentry_policy is ReentryPolicy.DEFERRED:
            self._pending.append(name)
            logger.debug("Deferred transition to '%s' until '%s' finishes", name, self._current)
            return

        self._depth += 1
        try:
            self._perform(name)
            if self._depth == 1:
                while self._pending:
                    self._perform(self._pending.popleft())
        finally:
            self._depth -= 1
            if not self._depth and self._pending:
                logger.warning("Dropping %d deferred transition(s) after a failed transition", len(self._pending))
                self._pending.clear()

    def _perform(self, name: str) -> None:
        old = self._current

        if old == name and self.repeat_policy is RepeatPolicy.IGNORE:
            logger.debug("Scene '%s' is already active, ignoring transition", name)
            return

        if old is not None:
            for handler in self._handler_registry.handlers_for(old, HandlerKind.CLEANUP):
                handler()

        self._current = name
        logger.info("Scene transition: %s -> %s", old, name)

        for handler in self._handler_registry.handlers_for(name, HandlerKind.SETUP):
            handler()

        if not self._event_bus:
            return
        if self._current != name:
            # A nested transition replaced this one and already published its own event
            logger.debug("Not publishing %s -> %s, scene is now '%s'", old, name, self._current)
            return
        self._event_bus.publish(SceneTransitionEvent(from_scene=old, to_scene=name))
