"""Unit tests for SceneView."""

import unittest
from unittest.mock import MagicMock

import arcade

from sceneflow.dispatcher import SceneDispatcher
from sceneflow.sources import ButtonSource, IntervalSource, OverlapSource
from sceneflow.views import SceneView


class TestSceneView(unittest.TestCase):
    """Test SceneView forwarding."""

    def setUp(self) -> None:
        """Create a view over a fresh dispatcher and a placeholder window."""
        self.dispatcher = SceneDispatcher()
        self.view = SceneView(self.dispatcher, "Menu", window=MagicMock())

    def test_show_enters_initial_scene_once(self) -> None:
        """Test that the initial transition happens on the first show only."""
        setup = MagicMock()
        self.dispatcher.register_setup_handler("Menu", setup)

        self.view.on_show_view()
        self.view.on_show_view()

        setup.assert_called_once_with()
        assert self.dispatcher.get_current_scene_name() == "Menu"

    def test_show_without_initial_scene(self) -> None:
        """Test that no transition happens when no initial scene is given."""
        view = SceneView(self.dispatcher, window=MagicMock())

        view.on_show_view()

        assert self.dispatcher.get_current_scene_name() is None
        assert view.started is True

    def test_empty_initial_scene_is_entered(self) -> None:
        """Test that an empty scene name is a real scene, not a missing one."""
        setup = MagicMock()
        self.dispatcher.register_setup_handler("", setup)
        view = SceneView(self.dispatcher, "", window=MagicMock())

        view.on_show_view()

        setup.assert_called_once_with()
        assert self.dispatcher.get_current_scene_name() == ""

    def test_update_feeds_scoped_tick_handlers(self) -> None:
        """Test that on_update reaches tick handlers of the active scene only."""
        play_frames: list[float] = []
        menu_frames: list[float] = []
        self.dispatcher.on_update("Play", self.view.ticks)(play_frames.append)
        self.dispatcher.on_update("Menu", self.view.ticks)(menu_frames.append)
        self.view.on_show_view()

        self.view.on_update(0.1)
        self.dispatcher.transition_to("Play")
        self.view.on_update(0.2)

        assert menu_frames == [0.1]
        assert play_frames == [0.2]

    def test_update_advances_intervals_and_overlaps(self) -> None:
        """Test that registered interval and overlap sources are updated each frame."""
        interval = self.view.add_interval(IntervalSource(0.5))
        overlap = self.view.add_overlap(MagicMock(spec=OverlapSource))
        handler = MagicMock()
        interval.subscribe(handler)

        self.view.on_update(0.5)

        handler.assert_called_once_with(0.5)
        overlap.update.assert_called_once_with(0.5)

    def test_key_events_reach_buttons(self) -> None:
        """Test that key callbacks drive button sources and report handling."""
        start = self.view.add_button(ButtonSource([arcade.key.ENTER]))
        self.dispatcher.on_button("Menu", start)(lambda symbol: self.dispatcher.transition_to("Play"))
        self.view.on_show_view()

        assert self.view.on_key_press(arcade.key.A, 0) is None
        assert self.view.on_key_press(arcade.key.ENTER, 0) is True
        assert self.view.on_key_release(arcade.key.ENTER, 0) is True

        assert self.dispatcher.get_current_scene_name() == "Play"


if __name__ == "__main__":
    unittest.main()
