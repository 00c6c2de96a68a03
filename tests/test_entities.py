from __future__ import annotations

import pytest

from fruitrush.game.entities import Axis, CHEESE, Obstacle


def _obstacle(axis: Axis, pos: float, move_dir: int, speed: float = 3) -> Obstacle:
    x, y = (pos, 200) if axis == Axis.HORIZONTAL else (200, pos)
    return Obstacle(
        x=x, y=y, kind=CHEESE, axis=axis, speed=speed,
        patrol_min=100, patrol_max=300, move_dir=move_dir,
    )


def _pos(o: Obstacle) -> float:
    return o.x if o.axis == Axis.HORIZONTAL else o.y


@pytest.mark.parametrize("axis", list(Axis))
def test_bounce_at_max(axis: Axis) -> None:
    o = _obstacle(axis, 299, move_dir=1)
    assert o.advance() is True
    assert _pos(o) == 300
    assert o.move_dir == -1

    # Moves back inbound on the next tick without another flip
    assert o.advance() is False
    assert _pos(o) == 297
    assert o.move_dir == -1


@pytest.mark.parametrize("axis", list(Axis))
def test_bounce_at_min(axis: Axis) -> None:
    o = _obstacle(axis, 101, move_dir=-1)
    assert o.advance() is True
    assert _pos(o) == 100
    assert o.move_dir == 1


@pytest.mark.parametrize("axis", list(Axis))
def test_position_never_leaves_patrol_window(axis: Axis) -> None:
    o = _obstacle(axis, 200, move_dir=1, speed=7)
    flips = 0
    for _ in range(500):
        before = o.move_dir
        o.advance()
        flips += before != o.move_dir
        assert 100 <= _pos(o) <= 300
    assert flips > 0


def test_only_patrol_axis_changes() -> None:
    o = _obstacle(Axis.VERTICAL, 200, move_dir=1)
    o.advance()
    assert o.x == 200
    assert o.y == 203


def test_stationary_obstacle_does_not_move() -> None:
    o = _obstacle(Axis.HORIZONTAL, 200, move_dir=1)
    o.is_moving = False
    assert o.advance() is False
    assert o.x == 200
