from __future__ import annotations

import pytest

from fruitrush.core.geometry import Rect, clamp, inflate, is_placeable, overlaps


@pytest.mark.parametrize(
    ("b", "expected"),
    [
        (Rect(5, 5, 10, 10), True),  # partial overlap
        (Rect(2, 2, 2, 2), True),  # contained
        (Rect(10, 0, 10, 10), False),  # touching right edge
        (Rect(0, 10, 10, 10), False),  # touching bottom edge
        (Rect(-10, -10, 10, 10), False),  # touching corner
        (Rect(30, 30, 5, 5), False),  # far away
    ],
)
def test_overlaps_is_strict(b: Rect, expected: bool) -> None:
    a = Rect(0, 0, 10, 10)
    assert overlaps(a, b) is expected
    assert overlaps(b, a) is expected


def test_is_placeable_checks_every_obstacle() -> None:
    obstacles = [Rect(0, 0, 50, 50), Rect(100, 100, 50, 50)]
    assert is_placeable(60, 0, 30, 30, obstacles)
    assert not is_placeable(120, 120, 10, 10, obstacles)
    assert is_placeable(0, 0, 10, 10, [])


def test_is_placeable_skips_excluded_instances() -> None:
    blocker = Rect(0, 0, 50, 50)
    other = Rect(0, 0, 50, 50)
    assert not is_placeable(10, 10, 5, 5, [blocker])
    assert is_placeable(10, 10, 5, 5, [blocker], exclude=[blocker])
    # Exclusion is by identity, not equality
    assert not is_placeable(10, 10, 5, 5, [blocker, other], exclude=[blocker])


def test_inflate_grows_every_side() -> None:
    grown = inflate(Rect(50, 280, 40, 40), 50)
    assert grown == Rect(0, 230, 140, 140)


def test_clamp_and_contains_point() -> None:
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10
    assert clamp(5, 0, 10) == 5

    r = Rect(10, 10, 20, 20)
    assert r.contains_point(10, 10)
    assert r.contains_point(30, 30)
    assert not r.contains_point(31, 20)
