"""Data models for navigation routes and scenes."""

from pynavscenes.models.route import NavigationRoute, NavigationState
from pynavscenes.models.scene import NavigationScene, scene_key_for

__all__ = [
    "NavigationRoute",
    "NavigationScene",
    "NavigationState",
    "scene_key_for",
]
