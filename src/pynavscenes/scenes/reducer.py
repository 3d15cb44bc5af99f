"""Deterministic scene list reducer.

Turns ``(previous scenes, next state, previous state)`` into the scene
list a transitioner renders:

* every child of the next state gets a fresh scene,
* children that just disappeared are kept one more cycle as stale scenes
  so their exit transition can run,
* scenes that did not change are returned as the *same* objects, so a
  renderer can memoize on identity.

The output is sorted by index, then by :func:`compare_key`.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Sequence

from pynavscenes._logfmt import describe_scenes
from pynavscenes.config import ReducerConfig
from pynavscenes.exceptions import DuplicateSceneKeyError
from pynavscenes.models.route import NavigationState
from pynavscenes.models.scene import NavigationScene, scene_key_for

_logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ReducerConfig()


def compare_key(one: str, two: str) -> int:
    """Order keys by length first, then lexicographically.

    Keeps numeric-looking keys in creation order (``"9"`` before ``"11"``).
    Never returns ``0``; output keys are unique so ties cannot happen.
    """
    delta = len(one) - len(two)
    if delta > 0:
        return 1
    if delta < 0:
        return -1
    return 1 if one > two else -1


def compare_scenes(one: NavigationScene, two: NavigationScene) -> int:
    """Order scenes by index, then by :func:`compare_key` on their keys."""
    if one.index > two.index:
        return 1
    if one.index < two.index:
        return -1
    return compare_key(one.key, two.key)


def are_scenes_shallow_equal(one: NavigationScene, two: NavigationScene) -> bool:
    """Return ``True`` when *two* can be replaced by *one* without a re-render."""
    return (
        one.key == two.key
        and one.index == two.index
        and one.is_stale == two.is_stale
        and one.route is two.route
        and one.route.key == two.route.key
    )


def reduce_scenes(
    scenes: Sequence[NavigationScene],
    next_state: NavigationState,
    prev_state: NavigationState | None = None,
    *,
    config: ReducerConfig | None = None,
) -> list[NavigationScene]:
    """Compute the scene list for *next_state*.

    Parameters
    ----------
    scenes : Sequence[NavigationScene]
        Scenes returned by the previous call (``[]`` initially).
    next_state : NavigationState
        The state to render.
    prev_state : NavigationState or None
        The state *scenes* was computed from.  Without it no scene can
        become stale.
    config : ReducerConfig or None
        Reducer options; defaults to ``ReducerConfig()``.

    Returns
    -------
    list[NavigationScene]
        The new scene list.  When *prev_state* is *next_state* (same
        object) this is *scenes* itself.

    Raises
    ------
    DuplicateSceneKeyError
        Two children of *next_state* derive the same scene key.
    """
    if prev_state is next_state:
        _logger.debug("Navigation state unchanged; reusing %d scenes", len(scenes))
        return scenes  # type: ignore[return-value]

    prefix = (config or _DEFAULT_CONFIG).scene_key_prefix

    prev_scenes: dict[str, NavigationScene] = {}
    stale_scenes: dict[str, NavigationScene] = {}
    for scene in scenes:
        if scene.is_stale:
            stale_scenes[scene.key] = scene
        prev_scenes[scene.key] = scene

    fresh_scenes: dict[str, NavigationScene] = {}
    for index, route in enumerate(next_state.children):
        key = scene_key_for(route, prefix)
        if key in fresh_scenes:
            _logger.debug("Duplicate scene key %s at children[%d]", key, index)
            raise DuplicateSceneKeyError(
                f'navigation_state.children[{index}].key "{key}" conflicts with another child',
                key=key,
                index=index,
            )
        # A stale scene whose route is back is revived.
        stale_scenes.pop(key, None)
        fresh_scenes[key] = NavigationScene(key=key, index=index, is_stale=False, route=route)

    if prev_state is not None:
        for index, route in enumerate(prev_state.children):
            key = scene_key_for(route, prefix)
            if key in fresh_scenes:
                continue
            stale_scenes[key] = NavigationScene(key=key, index=index, is_stale=True, route=route)

    next_scenes: list[NavigationScene] = []
    reused = 0
    for candidate in (*stale_scenes.values(), *fresh_scenes.values()):
        prev_scene = prev_scenes.get(candidate.key)
        if prev_scene is not None and are_scenes_shallow_equal(prev_scene, candidate):
            # Scenes are immutable, so the old object is safe to hand back.
            next_scenes.append(prev_scene)
            reused += 1
        else:
            next_scenes.append(candidate)

    next_scenes.sort(key=functools.cmp_to_key(compare_scenes))
    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug(
            "Reduced scenes fresh=%d stale=%d reused=%d -> %s",
            len(fresh_scenes),
            len(stale_scenes),
            reused,
            describe_scenes(next_scenes),
        )
    return next_scenes
