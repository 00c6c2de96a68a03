"""Game entity dataclasses and type palettes."""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Facing direction of the player."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Axis(Enum):
    """Motion axis of an obstacle."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class EntityKind:
    """A named fruit or obstacle type with its display glyph."""
    name: str
    emoji: str


APPLE = EntityKind("apple", "🍎")
BANANA = EntityKind("banana", "🍌")
ORANGE = EntityKind("orange", "🍊")
MANGO = EntityKind("mango", "🥭")
PINEAPPLE = EntityKind("pineapple", "🍍")

FRUIT_TYPES: tuple[EntityKind, ...] = (APPLE, BANANA, ORANGE, MANGO, PINEAPPLE)

METEOR = EntityKind("meteor", "☄️")
CHEESE = EntityKind("cheese", "🧀")
LIGHTNING = EntityKind("lightning", "⚡")

OBSTACLE_TYPES_EASY: tuple[EntityKind, ...] = (METEOR, CHEESE)
OBSTACLE_TYPES_MEDIUM_HARD: tuple[EntityKind, ...] = (METEOR, CHEESE, LIGHTNING)


@dataclass
class Player:
    """Henry the dinosaur."""
    x: float
    y: float
    width: float = 40
    height: float = 40
    speed: float = 4.0
    direction: Direction = Direction.RIGHT
    is_moving: bool = False
    animation_frame: int = 0  # 0-3 walk cycle
    animation_counter: float = 0.0  # pixels walked since last frame change


@dataclass
class Obstacle:
    """A hazard patrolling back and forth along one axis."""
    x: float
    y: float
    kind: EntityKind
    axis: Axis
    speed: float
    patrol_min: float
    patrol_max: float
    width: float = 50
    height: float = 50
    move_dir: int = 1  # +1 or -1
    is_moving: bool = True

    def advance(self) -> bool:
        """Move one tick along the patrol axis.

        Returns True if the obstacle bounced off a patrol bound.
        """
        if not self.is_moving:
            return False

        attr = "x" if self.axis == Axis.HORIZONTAL else "y"
        pos = getattr(self, attr) + self.speed * self.move_dir

        bounced = False
        if pos <= self.patrol_min:
            pos = self.patrol_min
            bounced = self.move_dir != 1
            self.move_dir = 1
        elif pos >= self.patrol_max:
            pos = self.patrol_max
            bounced = self.move_dir != -1
            self.move_dir = -1

        setattr(self, attr, pos)
        return bounced


@dataclass
class Fruit:
    """Collectible that restores health."""
    x: float
    y: float
    kind: EntityKind
    health_value: int = 5
    width: float = 30
    height: float = 30
