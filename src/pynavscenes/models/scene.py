"""Scene model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pynavscenes._constants import SCENE_KEY_PREFIX
from pynavscenes.models.route import NavigationRoute


def scene_key_for(route: NavigationRoute, prefix: str = SCENE_KEY_PREFIX) -> str:
    """Derive the scene key for *route* (``"a"`` -> ``"scene_a"``)."""
    return prefix + route.key


class NavigationScene(BaseModel):
    """A renderable unit derived from a route.

    ``route`` is borrowed, never copied: pydantic keeps model instances
    as-is on validation, so ``scene.route is route`` holds for the route
    object the scene was built from.  Renderers rely on that, and on the
    identity of the scene itself, to skip unchanged scenes.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    key: str
    """Scene key, ``prefix + route.key``."""
    index: int
    """Position of the route among its parent's children when last seen."""
    is_stale: bool = False
    """``True`` while the route is gone but kept around for its exit transition."""
    route: NavigationRoute
    """Route the scene was derived from."""
