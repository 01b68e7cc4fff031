"""Scene registry, handler lists, transitions and scene-scoped subscriptions."""

from sceneflow.scenes.handlers import HandlerKind, HandlerRegistry, SceneCallback
from sceneflow.scenes.registry import Scene, SceneRegistry
from sceneflow.scenes.scoped import ScopedHandler, ScopedSubscriptionAdapter, SubscribeFunc
from sceneflow.scenes.transition import ReentryPolicy, RepeatPolicy, TransitionController

__all__ = [
    "HandlerKind",
    "HandlerRegistry",
    "ReentryPolicy",
    "RepeatPolicy",
    "Scene",
    "SceneCallback",
    "SceneRegistry",
    "ScopedHandler",
    "ScopedSubscriptionAdapter",
    "SubscribeFunc",
    "TransitionController",
]
