"""Stateful wrapper around :func:`reduce_scenes`.

The reducer itself is stateless: callers have to hand back the previous
scenes and state on every call.  :class:`SceneTracker` keeps both between
calls, which is what a transitioner component does between renders.
"""

from __future__ import annotations

import logging

from pynavscenes._logfmt import describe_keys
from pynavscenes.config import ReducerConfig
from pynavscenes.models.route import NavigationState
from pynavscenes.models.scene import NavigationScene
from pynavscenes.scenes.reducer import reduce_scenes
from pynavscenes.scenes.transition import SceneTransition

_logger = logging.getLogger(__name__)


class SceneTracker:
    """Keeps the current scene list in step with successive navigation states.

    Not thread-safe; callers own synchronization.
    """

    def __init__(
        self,
        initial_state: NavigationState | None = None,
        *,
        config: ReducerConfig | None = None,
    ) -> None:
        self._config = config or ReducerConfig()
        self._state: NavigationState | None = None
        self._scenes: list[NavigationScene] = []
        self._last_transition: SceneTransition | None = None
        if initial_state is not None:
            self.update(initial_state)

    @property
    def config(self) -> ReducerConfig:
        return self._config

    @property
    def state(self) -> NavigationState | None:
        return self._state

    @property
    def scenes(self) -> tuple[NavigationScene, ...]:
        return tuple(self._scenes)

    @property
    def fresh_scenes(self) -> tuple[NavigationScene, ...]:
        return tuple(scene for scene in self._scenes if not scene.is_stale)

    @property
    def stale_scenes(self) -> tuple[NavigationScene, ...]:
        return tuple(scene for scene in self._scenes if scene.is_stale)

    @property
    def active_scene(self) -> NavigationScene | None:
        """The live scene at the current state's active index, if any."""
        if self._state is None:
            return None
        for scene in self._scenes:
            if not scene.is_stale and scene.index == self._state.index:
                return scene
        return None

    @property
    def last_transition(self) -> SceneTransition | None:
        return self._last_transition

    def update(self, next_state: NavigationState) -> list[NavigationScene]:
        """Reduce *next_state* against the tracked scenes and remember the result.

        On :class:`~pynavscenes.exceptions.DuplicateSceneKeyError` the
        tracker is left untouched and the error propagates.
        """
        previous = self._scenes
        scenes = reduce_scenes(previous, next_state, self._state, config=self._config)
        transition = SceneTransition.between(previous, scenes)

        self._scenes = list(scenes)
        self._state = next_state
        self._last_transition = transition

        if self._config.log_transitions:
            _logger.debug(
                "Scene transition entering=%s exiting=%s removed=%s reused=%d changed=%d",
                describe_keys(transition.entering),
                describe_keys(transition.exiting),
                describe_keys(transition.removed),
                len(transition.reused),
                len(transition.changed),
            )
        return scenes

    def discard_stale(self) -> tuple[NavigationScene, ...]:
        """Drop stale scenes once their exit transitions have finished.

        The reducer carries stale scenes forward until their route comes
        back, so whoever runs the exit animation prunes them here.
        Returns the discarded scenes.
        """
        stale = self.stale_scenes
        if stale:
            self._scenes = [scene for scene in self._scenes if not scene.is_stale]
            _logger.debug("Discarded %d stale scene(s)", len(stale))
        return stale

    def reset(self) -> None:
        """Forget all scenes and the tracked state."""
        self._state = None
        self._scenes = []
        self._last_transition = None
