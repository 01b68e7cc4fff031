"""Base class for external event sources.

An event source is anything that exposes ``subscribe(handler)`` and later
calls each handler with source-specific arguments whenever its own condition
fires. Scene-scoped handlers are bound to sources through
SceneDispatcher.bind_scoped_event() and its typed shortcuts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class EventSource:
    """Minimal subscribe/emit event source.

    Handlers are called synchronously in subscription order. A handler that
    raises stops the remaining handlers for that emission and the exception
    propagates to whoever called emit().

    Example:
        source = EventSource()
        source.subscribe(lambda value: print(value))
        source.emit(42)  # prints 42
    """

    def __init__(self) -> None:
        """Initialize a source with no subscribers."""
        self._handlers: list[Callable[..., Any]] = []

    @property
    def subscriber_count(self) -> int:
        """Number of subscribed handlers."""
        return len(self._handlers)

    def subscribe(self, handler: Callable[..., Any]) -> None:
        """Call ``handler`` every time this source fires."""
        self._handlers.append(handler)

    def emit(self, *args: Any) -> None:  # noqa: ANN401
        """Call every subscribed handler with ``args``."""
        for handler in tuple(self._handlers):
            handler(*args)
