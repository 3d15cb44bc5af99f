from __future__ import annotations

import logging

import pytest

from pynavscenes.config import ReducerConfig
from pynavscenes.exceptions import DuplicateSceneKeyError
from pynavscenes.models.route import NavigationRoute, NavigationState
from pynavscenes.scenes.tracker import SceneTracker


def _state(*routes: NavigationRoute, index: int = 0) -> NavigationState:
    return NavigationState(index=index, children=routes)


def test_initial_state_is_reduced_immediately() -> None:
    tracker = SceneTracker(NavigationState.from_keys(["a", "b"], index=1))

    assert [scene.key for scene in tracker.scenes] == ["scene_a", "scene_b"]
    assert tracker.active_scene is not None
    assert tracker.active_scene.key == "scene_b"
    assert tracker.last_transition is not None
    assert tracker.last_transition.entering == ("scene_a", "scene_b")


def test_empty_tracker() -> None:
    tracker = SceneTracker()

    assert tracker.state is None
    assert tracker.scenes == ()
    assert tracker.active_scene is None
    assert tracker.last_transition is None


def test_update_tracks_stale_and_fresh_scenes() -> None:
    a, b = NavigationRoute(key="a"), NavigationRoute(key="b")
    tracker = SceneTracker(_state(a, b, index=1))
    next_state = _state(a)

    scenes = tracker.update(next_state)

    assert tracker.state is next_state
    assert tuple(scenes) == tracker.scenes
    assert [scene.key for scene in tracker.fresh_scenes] == ["scene_a"]
    assert [scene.key for scene in tracker.stale_scenes] == ["scene_b"]
    assert tracker.active_scene is not None
    assert tracker.active_scene.key == "scene_a"
    assert tracker.last_transition is not None
    assert tracker.last_transition.exiting == ("scene_b",)
    assert tracker.last_transition.reused == ("scene_a",)


def test_same_state_twice_is_noop() -> None:
    state = NavigationState.from_keys(["a"])
    tracker = SceneTracker(state)
    before = tracker.scenes

    tracker.update(state)

    assert all(x is y for x, y in zip(tracker.scenes, before, strict=True))
    assert tracker.last_transition is not None
    assert tracker.last_transition.is_noop


def test_duplicate_keys_leave_tracker_untouched() -> None:
    state = NavigationState.from_keys(["a"])
    tracker = SceneTracker(state)
    before = tracker.scenes
    transition = tracker.last_transition

    with pytest.raises(DuplicateSceneKeyError):
        tracker.update(NavigationState.from_keys(["b", "b"]))

    assert tracker.state is state
    assert tracker.scenes == before
    assert tracker.last_transition is transition


def test_discard_stale_prunes_exited_scenes() -> None:
    a, b = NavigationRoute(key="a"), NavigationRoute(key="b")
    tracker = SceneTracker(_state(a, b))
    tracker.update(_state(b))

    discarded = tracker.discard_stale()

    assert [scene.key for scene in discarded] == ["scene_a"]
    assert [scene.key for scene in tracker.scenes] == ["scene_b"]
    assert tracker.discard_stale() == ()


def test_stale_scene_revived_after_discard_is_fresh() -> None:
    a, b = NavigationRoute(key="a"), NavigationRoute(key="b")
    tracker = SceneTracker(_state(a, b))
    tracker.update(_state(b))
    tracker.discard_stale()

    tracker.update(_state(a, b))

    assert [(scene.key, scene.is_stale) for scene in tracker.scenes] == [("scene_a", False), ("scene_b", False)]
    assert tracker.last_transition is not None
    assert tracker.last_transition.entering == ("scene_a",)


def test_reset() -> None:
    tracker = SceneTracker(NavigationState.from_keys(["a"]))

    tracker.reset()

    assert tracker.state is None
    assert tracker.scenes == ()
    assert tracker.last_transition is None


def test_custom_config_is_used() -> None:
    tracker = SceneTracker(NavigationState.from_keys(["a"]), config=ReducerConfig(scene_key_prefix="v_"))

    assert tracker.config.scene_key_prefix == "v_"
    assert tracker.scenes[0].key == "v_a"


def test_transition_logging(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="pynavscenes.scenes.tracker")
    tracker = SceneTracker(config=ReducerConfig(log_transitions=True))

    tracker.update(NavigationState.from_keys(["a", "b"]))

    assert "entering=[scene_a, scene_b]" in caplog.text


def test_transition_logging_disabled_by_default(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="pynavscenes.scenes.tracker")
    tracker = SceneTracker()

    tracker.update(NavigationState.from_keys(["a"]))

    assert "Scene transition" not in caplog.text
