"""Navigation route and state models.

A :class:`NavigationRoute` is the opaque unit the scene reducer works
with: only its ``key`` matters, any other payload rides along as extra
fields.  A :class:`NavigationState` is itself a route that owns an
ordered tuple of child routes plus the index of the active child, so
states nest into a tree.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pynavscenes._constants import ROOT_STATE_KEY


class NavigationRoute(BaseModel):
    """A route identified by a key unique among its siblings."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
    )

    key: str = Field(..., description="Route key, unique among siblings")

    @field_validator("key")
    @classmethod
    def _require_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("route key must be non-blank")
        return value


class NavigationState(NavigationRoute):
    """A tree node holding ordered child routes and the active index."""

    key: str = Field(default=ROOT_STATE_KEY, description="State key")
    index: int = Field(default=0, description="Position of the active child")
    children: tuple[NavigationRoute, ...] = Field(default_factory=tuple)

    @field_validator("children", mode="before")
    @classmethod
    def _nest_child_states(cls, value: Any) -> Any:
        """Load nested dicts carrying ``children`` as states, not plain routes."""
        if not isinstance(value, (list, tuple)):
            return value
        return tuple(
            NavigationState.model_validate(item) if isinstance(item, Mapping) and "children" in item else item
            for item in value
        )

    @classmethod
    def from_keys(
        cls,
        keys: Iterable[str],
        *,
        index: int = 0,
        key: str = ROOT_STATE_KEY,
    ) -> NavigationState:
        """Build a flat state whose children are bare routes with *keys*."""
        return cls(key=key, index=index, children=tuple(NavigationRoute(key=k) for k in keys))

    @property
    def active_route(self) -> NavigationRoute | None:
        """The child at ``index``, or ``None`` when out of range."""
        if 0 <= self.index < len(self.children):
            return self.children[self.index]
        return None
