from __future__ import annotations

import pynavscenes


def test_public_api_exports() -> None:
    for name in pynavscenes.__all__:
        assert hasattr(pynavscenes, name), name


def test_worked_example_through_public_api() -> None:
    a = pynavscenes.NavigationRoute(key="a")
    b = pynavscenes.NavigationRoute(key="b")
    first = pynavscenes.NavigationState(children=[a, b])
    second = pynavscenes.NavigationState(children=[b])

    scenes = pynavscenes.reduce_scenes([], first)
    scenes = pynavscenes.reduce_scenes(scenes, second, first)

    assert [(s.key, s.index, s.is_stale) for s in scenes] == [
        ("scene_a", 0, True),
        ("scene_b", 0, False),
    ]
