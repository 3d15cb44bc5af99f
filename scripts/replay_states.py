#!/usr/bin/env python3
"""Replay a sequence of navigation states and print the scene list after each.

The input is a JSON list of navigation state objects::

    [
      {"index": 0, "children": [{"key": "a"}]},
      {"index": 1, "children": [{"key": "a"}, {"key": "b"}]}
    ]

Usage
-----
    python scripts/replay_states.py states.json
    python scripts/replay_states.py --verbose states.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pynavscenes import DuplicateSceneKeyError, NavigationState, ReducerConfig, SceneTracker


def _format_scene_row(key: str, index: int, is_stale: bool, reused: bool) -> str:
    flags = []
    if is_stale:
        flags.append("stale")
    if reused:
        flags.append("reused")
    suffix = f"  ({', '.join(flags)})" if flags else ""
    return f"  {index:>3}  {key}{suffix}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay navigation states through the scene reducer.")
    parser.add_argument("states", help="JSON file holding a list of navigation states")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    raw_states = json.loads(Path(args.states).read_text(encoding="utf-8"))
    if not isinstance(raw_states, list):
        print("Expected a JSON list of navigation states.", file=sys.stderr)
        sys.exit(2)

    overrides: dict[str, Any] = {"log_transitions": True} if args.verbose else {}
    tracker = SceneTracker(config=ReducerConfig.from_env(**overrides))
    for step, raw in enumerate(raw_states):
        try:
            scenes = tracker.update(NavigationState.model_validate(raw))
        except (DuplicateSceneKeyError, ValidationError) as err:
            print(f"Step {step}: {err}", file=sys.stderr)
            sys.exit(1)

        transition = tracker.last_transition
        reused = set(transition.reused) if transition is not None else set()
        print(f"Step {step}: {len(scenes)} scene(s)")
        for scene in scenes:
            print(_format_scene_row(scene.key, scene.index, scene.is_stale, scene.key in reused))
        print()


if __name__ == "__main__":
    main()
