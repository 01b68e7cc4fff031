"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sceneflow.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        SCREEN_WIDTH=1280,
        SCREEN_HEIGHT=720,
        WINDOW_TITLE="Test",
        INITIAL_SCENE="",
        SCENE_REENTRY_POLICY="nested",
        SCENE_REPEAT_POLICY="rerun",
        SCENE_TICK_INTERVAL=0.0,
        LOG_LEVEL="DEBUG",
    )
    yield
    settings._wrapped = None

