"""Helpers for compact debug logging.

Scene lists can be long and routes may carry large payloads.  This module
renders scenes as short ``key@index`` tokens so DEBUG logs stay readable
without dumping route internals.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pynavscenes.models.scene import NavigationScene


def describe_scene(scene: NavigationScene) -> str:
    """Return ``key@index``, suffixed with ``*`` for stale scenes."""
    marker = "*" if scene.is_stale else ""
    return f"{scene.key}@{scene.index}{marker}"


def describe_keys(keys: Iterable[str], *, max_items: int = 20) -> str:
    """Return a bracketed, comma separated list of *keys*.

    Lists longer than *max_items* are truncated with a ``+N more`` tail.
    """
    items = list(keys)
    shown = items[:max_items]
    hidden = len(items) - len(shown)
    if hidden > 0:
        shown.append(f"…+{hidden} more")
    return "[" + ", ".join(shown) + "]"


def describe_scenes(scenes: Sequence[NavigationScene], *, max_items: int = 20) -> str:
    """Same as :func:`describe_keys`, with scenes rendered by :func:`describe_scene`."""
    return describe_keys((describe_scene(scene) for scene in scenes), max_items=max_items)
