"""Internal constants shared across the library."""

#: Prefix prepended to a route key to derive its scene key.
SCENE_KEY_PREFIX = "scene_"

#: Default root key for navigation states built without an explicit key.
ROOT_STATE_KEY = "root"

# ------------------------------------------------------------------
# Environment variables read by ReducerConfig.from_env
# ------------------------------------------------------------------

ENV_SCENE_KEY_PREFIX = "NAVSCENES_SCENE_KEY_PREFIX"
ENV_LOG_TRANSITIONS = "NAVSCENES_LOG_TRANSITIONS"
