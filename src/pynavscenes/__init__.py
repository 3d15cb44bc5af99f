"""pynavscenes - Scene list reduction for navigation state transitions."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pynavscenes")
except PackageNotFoundError:
    __version__ = "0+local"
from pynavscenes.config import ReducerConfig
from pynavscenes.exceptions import (
    DuplicateSceneKeyError,
    NavSceneConfigError,
    NavSceneError,
)
from pynavscenes.models import (
    NavigationRoute,
    NavigationScene,
    NavigationState,
    scene_key_for,
)
from pynavscenes.scenes import (
    SceneTracker,
    SceneTransition,
    are_scenes_shallow_equal,
    compare_key,
    compare_scenes,
    reduce_scenes,
)

__all__ = [
    "__version__",
    "DuplicateSceneKeyError",
    "NavSceneConfigError",
    "NavSceneError",
    "NavigationRoute",
    "NavigationScene",
    "NavigationState",
    "ReducerConfig",
    "SceneTracker",
    "SceneTransition",
    "are_scenes_shallow_equal",
    "compare_key",
    "compare_scenes",
    "reduce_scenes",
    "scene_key_for",
]
