"""Scene dispatcher: the one object applications talk to.

SceneDispatcher owns a scene registry, the per-scene setup and cleanup handler
lists, the transition controller, and the scoped subscription adapter. Nothing
is module-global, so independent dispatchers can coexist (one per test, for
instance).

Example:
    dispatcher = SceneDispatcher()
    ticks = TickSource()

    @dispatcher.on_setup("Menu")
    def reset_score() -> None:
        score.set(0)

    @dispatcher.on_cleanup("Menu")
    def clear_menu() -> None:
        menu_sprites.clear()

    @dispatcher.on_update("Play", ticks)
    def move(delta_time: float) -> None:
        player.update(delta_time)

    dispatcher.transition_to("Menu")
    dispatcher.transition_to("Play")
    dispatcher.get_current_scene_name()  # "Play"
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from sceneflow.conf import settings
from sceneflow.events.base import bus_subscriber
from sceneflow.scenes import (
    HandlerRegistry,
    ReentryPolicy,
    RepeatPolicy,
    SceneRegistry,
    ScopedSubscriptionAdapter,
    TransitionController,
)

if TYPE_CHECKING:
    from sceneflow.events.base import Event, EventBus
    from sceneflow.scenes import SceneCallback, ScopedHandler, SubscribeFunc
    from sceneflow.sources import ButtonSource, Counter, IntervalSource, OverlapSource, TickSource

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class SceneDispatcher:
    """Scene lifecycle and scene-scoped event dispatch for one host application.

    Attributes:
        scenes: Registry of every scene referenced so far.
        handlers: Setup and cleanup handler lists.
        controller: Owner of the active scene and the transition protocol.
        adapter: Factory for scene-gated event subscriptions.
        event_bus: Optional bus receiving SceneTransitionEvent.
    """

    def __init__(
        self,
        *,
        event_bus: EventBus | None = None,
        reentry_policy: ReentryPolicy | str | None = None,
        repeat_policy: RepeatPolicy | str | None = None,
    ) -> None:
        """Initialize an empty dispatcher with no active scene.

        Args:
            event_bus: Bus to publish SceneTransitionEvent on after each transition.
            reentry_policy: Policy for transitions requested by handlers. If None,
                uses settings.SCENE_REENTRY_POLICY.
            repeat_policy: Policy for transitions to the active scene. If None,
                uses settings.SCENE_REPEAT_POLICY.

        Raises:
            ValueError: If a policy string is not recognized.
        """
        if reentry_policy is None:
            reentry_policy = settings.SCENE_REENTRY_POLICY
        if repeat_policy is None:
            repeat_policy = settings.SCENE_REPEAT_POLICY

        self.event_bus = event_bus
        self.scenes = SceneRegistry()
        self.handlers = HandlerRegistry(self.scenes)
        self.controller = TransitionController(
            self.scenes,
            self.handlers,
            reentry_policy=ReentryPolicy.from_setting(reentry_policy),
            repeat_policy=RepeatPolicy.from_setting(repeat_policy),
            event_bus=event_bus,
        )
        self.adapter = ScopedSubscriptionAdapter(self.scenes, self.controller.get_current_scene_name)

    # Core operations

    def scene_exists(self, name: str) -> bool:
        """Return True iff ``name`` has been referenced by any registration or transition."""
        return self.scenes.exists(name)

    def transition_to(self, name: str) -> None:
        """Clean up the active scene, make ``name`` active, then set it up."""
        self.controller.transition_to(name)

    def get_current_scene_name(self) -> str | None:
        """Get the active scene name, or None before the first transition."""
        return self.controller.get_current_scene_name()

    def register_setup_handler(self, name: str, callback: SceneCallback) -> SceneCallback:
        """Run ``callback`` every time scene ``name`` is entered."""
        return self.handlers.register_setup(name, callback)

    def register_cleanup_handler(self, name: str, callback: SceneCallback) -> SceneCallback:
        """Run ``callback`` every time scene ``name`` is left."""
        return self.handlers.register_cleanup(name, callback)

    def bind_scoped_event(self, name: str, subscribe: SubscribeFunc, handler: Callable[..., Any]) -> ScopedHandler:
        """Subscribe ``handler`` through ``subscribe``, delivering only while ``name`` is active.

        Args:
            name: Scene that gates delivery.
            subscribe: An event source's subscribe operation.
            handler: Callable receiving the source's arguments unchanged.

        Returns:
            The scene-gated wrapper that was subscribed.
        """
        return self.adapter.bind(name, subscribe, handler)

    # Decorator forms

    def on_setup(self, name: str) -> Callable[[F], F]:
        """Decorator registering a setup handler for scene ``name``."""

        def decorator(func: F) -> F:
            self.register_setup_handler(name, func)
            return func

        return decorator

    def on_cleanup(self, name: str) -> Callable[[F], F]:
        """Decorator registering a cleanup handler for scene ``name``."""

        def decorator(func: F) -> F:
            self.register_cleanup_handler(name, func)
            return func

        return decorator

    def scoped(self, name: str, subscribe: SubscribeFunc) -> Callable[[F], F]:
        """Decorator binding a scene-scoped handler through ``subscribe``."""

        def decorator(func: F) -> F:
            self.bind_scoped_event(name, subscribe, func)
            return func

        return decorator

    # Typed shortcuts per source kind

    def on_update(self, name: str, source: TickSource) -> Callable[[F], F]:
        """Per-frame handler ``(delta_time)`` while ``name`` is active."""
        return self.scoped(name, source.subscribe)

    def on_interval(self, name: str, source: IntervalSource) -> Callable[[F], F]:
        """Periodic handler ``(interval)`` while ``name`` is active."""
        return self.scoped(name, source.subscribe)

    def on_button(self, name: str, source: ButtonSource) -> Callable[[F], F]:
        """Button edge handler ``(symbol)`` while ``name`` is active."""
        return self.scoped(name, source.subscribe)

    def on_overlap(self, name: str, source: OverlapSource) -> Callable[[F], F]:
        """Overlap handler ``(sprite, other)`` while ``name`` is active."""
        return self.scoped(name, source.subscribe)

    def on_threshold(self, name: str, source: Counter) -> Callable[[F], F]:
        """Threshold handler ``(value)`` while ``name`` is active."""
        return self.scoped(name, source.subscribe)

    def on_event(self, name: str, event_bus: EventBus, event_type: type[Event]) -> Callable[[F], F]:
        """Event bus handler ``(event)`` for ``event_type`` while ``name`` is active."""
        return self.scoped(name, bus_subscriber(event_bus, event_type))
