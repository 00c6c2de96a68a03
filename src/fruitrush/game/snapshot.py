"""Read-only view of the simulation handed to renderers."""

from dataclasses import dataclass
from typing import Optional

from fruitrush.core.state import Phase
from fruitrush.game.difficulty import DifficultyConfig
from fruitrush.game.entities import Fruit, Obstacle, Player


def format_time(seconds: float) -> str:
    """Format whole seconds as MM:SS."""
    total = max(0, int(seconds))
    mins, secs = divmod(total, 60)
    return f"{mins:02d}:{secs:02d}"


@dataclass(frozen=True)
class GameSnapshot:
    """Copy of run state taken right after a step.

    Entities are copies; mutating them has no effect on the simulation.
    """
    phase: Phase
    difficulty: Optional[DifficultyConfig]
    player: Player
    obstacles: tuple[Obstacle, ...]
    fruit: Optional[Fruit]
    health: int
    max_health: int
    time_remaining: float
    fruits_collected: int
    fruits_to_win: int
    time_warning: bool
    completion_time: Optional[float]
    arena_width: int
    arena_height: int
    tick: int = 0

    @property
    def health_fraction(self) -> float:
        return self.health / self.max_health if self.max_health else 0.0

    @property
    def timer_text(self) -> str:
        return format_time(self.time_remaining)
