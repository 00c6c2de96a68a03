"""Axis-aligned rectangle helpers used for collision and placement."""

from dataclasses import dataclass
from typing import Iterable, Protocol


class Boxed(Protocol):
    """Anything with an x/y position and a width/height."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Plain rectangle value (top-left origin)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_point(self, px: float, py: float) -> bool:
        """Inclusive point test, used for button hit-testing."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if value < lo else hi if value > hi else value


def inflate(box: Boxed, margin: float) -> Rect:
    """Grow a box by margin on every side."""
    return Rect(
        box.x - margin,
        box.y - margin,
        box.width + 2 * margin,
        box.height + 2 * margin,
    )


def overlaps(a: Boxed, b: Boxed) -> bool:
    """Strict AABB overlap. Touching edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def is_placeable(
    x: float,
    y: float,
    width: float,
    height: float,
    obstacles: Iterable[Boxed],
    exclude: Iterable[Boxed] = (),
) -> bool:
    """Check that a candidate rectangle overlaps none of the obstacles.

    Instances listed in ``exclude`` are skipped (identity comparison).
    """
    candidate = Rect(x, y, width, height)
    skipped = {id(o) for o in exclude}

    for obstacle in obstacles:
        if id(obstacle) in skipped:
            continue
        if overlaps(candidate, obstacle):
            return False

    return True
