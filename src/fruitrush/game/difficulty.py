"""Difficulty presets."""

from dataclasses import dataclass
from enum import Enum

from fruitrush.game.entities import (
    EntityKind,
    OBSTACLE_TYPES_EASY,
    OBSTACLE_TYPES_MEDIUM_HARD,
)


class DifficultyLevel(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


@dataclass(frozen=True)
class DifficultyConfig:
    """Immutable gameplay preset selected once per run."""
    level: DifficultyLevel
    obstacle_count: int
    obstacle_speed: float
    initial_time: float
    time_bonus_per_fruit: float
    obstacle_types: tuple[EntityKind, ...]
    description: str = ""


DIFFICULTY_CONFIGS: dict[DifficultyLevel, DifficultyConfig] = {
    DifficultyLevel.EASY: DifficultyConfig(
        level=DifficultyLevel.EASY,
        obstacle_count=10,
        obstacle_speed=1,
        initial_time=120,
        time_bonus_per_fruit=5,
        obstacle_types=OBSTACLE_TYPES_EASY,
        description="Learn to Play",
    ),
    DifficultyLevel.MEDIUM: DifficultyConfig(
        level=DifficultyLevel.MEDIUM,
        obstacle_count=12,
        obstacle_speed=2,
        initial_time=120,
        time_bonus_per_fruit=3,
        obstacle_types=OBSTACLE_TYPES_MEDIUM_HARD,
        description="Get Skilled",
    ),
    DifficultyLevel.HARD: DifficultyConfig(
        level=DifficultyLevel.HARD,
        obstacle_count=15,
        obstacle_speed=3,
        initial_time=90,
        time_bonus_per_fruit=2,
        obstacle_types=OBSTACLE_TYPES_MEDIUM_HARD,
        description="Prove Yourself",
    ),
}


def get_difficulty(name: "str | DifficultyLevel") -> DifficultyConfig:
    """Look up a preset by name (case-insensitive).

    Raises:
        ValueError: If the name is not one of EASY, MEDIUM, HARD.
    """
    if isinstance(name, DifficultyLevel):
        return DIFFICULTY_CONFIGS[name]

    try:
        level = DifficultyLevel(name.strip().upper())
    except ValueError:
        valid = ", ".join(l.value for l in DifficultyLevel)
        raise ValueError(f"Unknown difficulty {name!r} (expected one of {valid})") from None

    return DIFFICULTY_CONFIGS[level]
