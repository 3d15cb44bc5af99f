"""Reducer configuration for pynavscenes."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pynavscenes._constants import ENV_LOG_TRANSITIONS, ENV_SCENE_KEY_PREFIX, SCENE_KEY_PREFIX
from pynavscenes.exceptions import NavSceneConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ReducerConfig:
    """Scene reducer configuration.

    Parameters
    ----------
    scene_key_prefix : str
        Prefix used to derive a scene key from a route key.  Defaults to
        ``"scene_"`` so route ``"a"`` becomes scene ``"scene_a"``.
    log_transitions : bool
        Emit a one-line DEBUG summary of every tracked transition
        (entering, exiting and reused scenes).
    """

    scene_key_prefix: str = SCENE_KEY_PREFIX
    log_transitions: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.scene_key_prefix, str) or not self.scene_key_prefix:
            raise NavSceneConfigError(f"scene_key_prefix must be a non-empty string, got {self.scene_key_prefix!r}")

    @classmethod
    def from_env(cls, **overrides: Any) -> ReducerConfig:
        """Create configuration from environment variables.

        Reads ``NAVSCENES_SCENE_KEY_PREFIX`` and
        ``NAVSCENES_LOG_TRANSITIONS``. Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ReducerConfig
            Populated configuration.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        prefix_env = env.get(ENV_SCENE_KEY_PREFIX)
        if prefix_env is not None:
            config_kwargs["scene_key_prefix"] = prefix_env

        if "log_transitions" not in overrides:
            config_kwargs["log_transitions"] = _env_bool(env.get(ENV_LOG_TRANSITIONS), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
