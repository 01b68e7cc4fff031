"""Sprite overlap source."""

from __future__ import annotations

from typing import TYPE_CHECKING

import arcade

from sceneflow.sources.base import EventSource

if TYPE_CHECKING:
    from collections.abc import Iterable


class OverlapSource(EventSource):
    """Fires with ``(sprite, other)`` when a sprite starts overlapping another.

    A pair fires once when the overlap begins and re-arms once the two sprites
    separate. Pairs are tracked by the sprite objects themselves, so a sprite
    that is removed and replaced never inherits the old one's overlap state.
    Checks happen in update(), which the host calls every frame.

    Attributes:
        sprites: Sprites whose overlaps are tracked (e.g. the player list).
        others: Sprite list they are checked against (e.g. coins or enemies).
    """

    def __init__(self, sprites: Iterable[arcade.Sprite], others: arcade.SpriteList) -> None:
        """Initialize the source."""
        super().__init__()
        self.sprites = sprites
        self.others = others
        self._touching: set[tuple[arcade.Sprite, arcade.Sprite]] = set()

    def update(self, delta_time: float = 0.0) -> None:  # noqa: ARG002
        """Check for new overlaps and emit one event per newly touching pair."""
        touching: set[tuple[arcade.Sprite, arcade.Sprite]] = set()
        started: list[tuple[arcade.Sprite, arcade.Sprite]] = []
        for sprite in list(self.sprites):
            for other in arcade.check_for_collision_with_list(sprite, self.others):
                pair = (sprite, other)
                touching.add(pair)
                if pair not in self._touching:
                    started.append(pair)
        self._touching = touching
        for sprite, other in started:
            self.emit(sprite, other)
