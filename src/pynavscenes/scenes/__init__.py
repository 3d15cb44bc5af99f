"""Scene reduction layer.

:func:`~pynavscenes.scenes.reducer.reduce_scenes` is the only component
that derives scenes from navigation states; everything else here wraps or
summarizes its output.
"""

from pynavscenes.scenes.reducer import (
    are_scenes_shallow_equal,
    compare_key,
    compare_scenes,
    reduce_scenes,
)
from pynavscenes.scenes.tracker import SceneTracker
from pynavscenes.scenes.transition import SceneTransition

__all__ = [
    "SceneTracker",
    "SceneTransition",
    "are_scenes_shallow_equal",
    "compare_key",
    "compare_scenes",
    "reduce_scenes",
]
