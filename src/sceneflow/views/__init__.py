"""Arcade views for hosting scenes."""

from sceneflow.views.scene_view import SceneView

__all__ = ["SceneView"]
