"""Lazily loaded project settings.

Defaults come from ``sceneflow.conf.global_settings``. A project overrides them
with upper-case names in its own settings module, found through the
SCENEFLOW_SETTINGS_MODULE environment variable (default: ``settings``).

Usage:
    # settings.py in your game project
    INITIAL_SCENE = "Menu"
    SCENE_REENTRY_POLICY = "deferred"

    # game code
    from sceneflow.conf import settings

    settings.SCENE_REENTRY_POLICY  # "deferred"

Scene policy names are checked when settings load and whenever they are
changed, so a typo fails at startup instead of at the first dispatcher.
"""

from __future__ import annotations

import importlib
import logging
import os
from types import ModuleType
from typing import Any

from sceneflow.conf import global_settings
from sceneflow.scenes.transition import ReentryPolicy, RepeatPolicy

logger = logging.getLogger(__name__)

SETTINGS_MODULE_ENV = "SCENEFLOW_SETTINGS_MODULE"

# Settings whose values must name a member of the given policy enum
POLICY_SETTINGS = {
    "SCENE_REENTRY_POLICY": ReentryPolicy,
    "SCENE_REPEAT_POLICY": RepeatPolicy,
}


def _upper_names(module: ModuleType) -> dict[str, Any]:
    return {name: getattr(module, name) for name in dir(module) if name.isupper()}


def _check(name: str, value: Any) -> None:  # noqa: ANN401
    policy = POLICY_SETTINGS.get(name)
    if policy is not None:
        policy.from_setting(value)


class Settings:
    """Attribute container holding defaults plus overrides."""

    def __init__(self, **overrides: Any) -> None:  # noqa: ANN401
        """Start from global_settings and apply ``overrides``.

        Raises:
            ValueError: If an override names an unknown scene policy.
        """
        for name, value in _upper_names(global_settings).items():
            setattr(self, name, value)
        self.update(overrides)

    def update(self, values: dict[str, Any]) -> None:
        """Validate and apply ``values``."""
        for name, value in values.items():
            _check(name, value)
        for name, value in values.items():
            setattr(self, name, value)


class LazySettings:
    """Proxy that builds Settings from the project module on first access."""

    def __init__(self) -> None:
        """Initialize the proxy without loading anything."""
        self.__dict__["_wrapped"] = None

    def _load(self) -> Settings:
        module_name = os.environ.get(SETTINGS_MODULE_ENV, "settings")
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            if exc.name != module_name:
                raise
            logger.debug("No settings module '%s', using defaults", module_name)
            wrapped = Settings()
        else:
            wrapped = Settings(**_upper_names(module))
        self.__dict__["_wrapped"] = wrapped
        return wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        wrapped = self._wrapped or self._load()
        return getattr(wrapped, name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value after validating it."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
            return
        wrapped = self._wrapped or self._load()
        wrapped.update({name: value})

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Override settings without reading the project module (useful for testing).

        Example:
            settings.configure(SCENE_REPEAT_POLICY="ignore")

        Raises:
            ValueError: If an option names an unknown scene policy.
        """
        if self._wrapped is None:
            self.__dict__["_wrapped"] = Settings(**options)
        else:
            self._wrapped.update(options)


# Global singleton instance
settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
