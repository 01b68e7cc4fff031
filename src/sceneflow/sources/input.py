"""Edge-detected keyboard button source."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from sceneflow.sources.base import EventSource


class ButtonEdge(Enum):
    """Which key edge fires the source."""

    PRESSED = auto()
    RELEASED = auto()


class ButtonSource(EventSource):
    """Fires with the key symbol when one of ``keys`` changes state.

    Held keys do not re-fire: an OS key-repeat press for a key that is already
    down is ignored.

    Example:
        jump = ButtonSource([arcade.key.SPACE, arcade.key.W])
        dispatcher.bind_scoped_event("Play", jump.subscribe, lambda symbol: player.jump())

        # In the view
        def on_key_press(self, symbol, modifiers):
            jump.on_key_press(symbol, modifiers)
    """

    def __init__(self, keys: Iterable[int], edge: ButtonEdge = ButtonEdge.PRESSED) -> None:
        """Initialize the source.

        Args:
            keys: arcade.key constants this button responds to.
            edge: Whether to fire on press or on release.
        """
        super().__init__()
        self.keys = frozenset(keys)
        self.edge = edge
        self._held: set[int] = set()

    def is_held(self, symbol: int | None = None) -> bool:
        """Whether ``symbol`` (or any of this button's keys) is currently down."""
        if symbol is None:
            return bool(self._held)
        return symbol in self._held

    def on_key_press(self, symbol: int, modifiers: int) -> bool:  # noqa: ARG002
        """Handle a key press.

        Returns:
            True if ``symbol`` belongs to this button, False otherwise.
        """
        if symbol not in self.keys:
            return False
        if symbol in self._held:
            return True
        self._held.add(symbol)
        if self.edge is ButtonEdge.PRESSED:
            self.emit(symbol)
        return True

    def on_key_release(self, symbol: int, modifiers: int) -> bool:  # noqa: ARG002
        """Handle a key release.

        Returns:
            True if ``symbol`` belongs to this button, False otherwise.
        """
        if symbol not in self.keys:
            return False
        if symbol not in self._held:
            return True
        self._held.discard(symbol)
        if self.edge is ButtonEdge.RELEASED:
            self.emit(symbol)
        return True
