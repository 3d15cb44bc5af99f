"""Summary of what changed between two scene lists."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from pynavscenes.models.scene import NavigationScene


class SceneTransition(BaseModel):
    """Scene keys grouped by what happened to them in one reduction."""

    model_config = ConfigDict(frozen=True)

    entering: tuple[str, ...] = Field(default=(), description="Newly live scenes (new or revived)")
    exiting: tuple[str, ...] = Field(default=(), description="Scenes that just became stale")
    removed: tuple[str, ...] = Field(default=(), description="Scenes dropped from the list")
    reused: tuple[str, ...] = Field(default=(), description="Scenes returned as the same object")
    changed: tuple[str, ...] = Field(default=(), description="Scenes rebuilt as a new object, live or still stale")

    @property
    def is_noop(self) -> bool:
        return not (self.entering or self.exiting or self.removed or self.changed)

    @classmethod
    def between(
        cls,
        previous: Sequence[NavigationScene],
        current: Sequence[NavigationScene],
    ) -> SceneTransition:
        """Compare two scene lists by key and identity."""
        prev_by_key = {scene.key: scene for scene in previous}
        current_keys = {scene.key for scene in current}

        entering: list[str] = []
        exiting: list[str] = []
        reused: list[str] = []
        changed: list[str] = []
        for scene in current:
            prev_scene = prev_by_key.get(scene.key)
            if prev_scene is scene:
                reused.append(scene.key)
            elif scene.is_stale:
                if prev_scene is None or not prev_scene.is_stale:
                    exiting.append(scene.key)
                else:
                    changed.append(scene.key)
            elif prev_scene is None or prev_scene.is_stale:
                entering.append(scene.key)
            else:
                changed.append(scene.key)

        removed = [scene.key for scene in previous if scene.key not in current_keys]
        return cls(
            entering=tuple(entering),
            exiting=tuple(exiting),
            removed=tuple(removed),
            reused=tuple(reused),
            changed=tuple(changed),
        )
