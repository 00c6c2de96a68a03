"""Randomized placement of obstacles and fruit.

Both placements use bounded rejection sampling. Running out of attempts
is not an error: obstacle generation returns fewer obstacles than asked
for, and fruit spawning falls back to the last sampled position.
"""

import math
import random
import logging
from typing import List, Optional, Sequence

from fruitrush.core.geometry import Rect, inflate, is_placeable, overlaps
from fruitrush.game.difficulty import DifficultyConfig
from fruitrush.game.entities import Axis, Fruit, FRUIT_TYPES, Obstacle, Player
from fruitrush.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class Spawner:
    """Places obstacles and fruit inside the arena.

    All randomness comes from the injected ``random.Random`` so layouts
    are reproducible for a given seed.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()

    def generate_obstacles(
        self, config: DifficultyConfig, player: Player
    ) -> List[Obstacle]:
        """Generate the obstacle layout for a new run."""
        arena = self.settings.arena
        spawn = self.settings.spawn
        size = self.settings.items.obstacle_size

        obstacles: List[Obstacle] = []
        keep_out = inflate(player, spawn.player_start_margin)

        logger.info(
            f"Generating {config.obstacle_count} obstacles "
            f"(speed {config.obstacle_speed}px/tick)"
        )

        attempts = 0
        while len(obstacles) < config.obstacle_count and attempts < spawn.max_obstacle_attempts:
            attempts += 1

            x = self.rng.randint(spawn.obstacle_margin_x, arena.width - size - spawn.obstacle_margin_x)
            y = self.rng.randint(spawn.obstacle_margin_y, arena.height - size - spawn.obstacle_margin_y)

            # Don't spawn near player start
            if overlaps(Rect(x, y, size, size), keep_out):
                continue

            if not is_placeable(x, y, size, size, obstacles):
                continue

            axis = Axis.HORIZONTAL if self.rng.random() > 0.5 else Axis.VERTICAL
            kind = self.rng.choice(config.obstacle_types)

            if axis == Axis.HORIZONTAL:
                origin, far_edge = x, arena.width
            else:
                origin, far_edge = y, arena.height

            patrol_min = max(spawn.patrol_edge_margin, origin - spawn.patrol_range)
            patrol_max = min(far_edge - size - spawn.patrol_edge_margin, origin + spawn.patrol_range)

            obstacles.append(Obstacle(
                x=x,
                y=y,
                kind=kind,
                axis=axis,
                speed=config.obstacle_speed,
                patrol_min=patrol_min,
                patrol_max=patrol_max,
                width=size,
                height=size,
            ))
            logger.debug(f"Placed {kind.name} at ({x}, {y}) - {axis.value}")

        if len(obstacles) < config.obstacle_count:
            logger.warning(
                f"Obstacle budget exhausted: placed {len(obstacles)}/"
                f"{config.obstacle_count} after {attempts} attempts"
            )
        else:
            logger.info(f"Generated {len(obstacles)} obstacles")

        return obstacles

    def spawn_fruit(self, player: Player, obstacles: Sequence[Obstacle]) -> Fruit:
        """Pick a fruit position clear of obstacles and away from the player."""
        arena = self.settings.arena
        spawn = self.settings.spawn
        items = self.settings.items
        size = items.fruit_size

        kind = self.rng.choice(FRUIT_TYPES)

        x = y = 0
        valid = False
        attempts = 0
        while not valid and attempts < spawn.max_fruit_attempts:
            attempts += 1

            x = self.rng.randint(spawn.fruit_margin, arena.width - size - spawn.fruit_margin)
            y = self.rng.randint(spawn.fruit_margin, arena.height - size - spawn.fruit_margin)

            player_dist = math.hypot(player.x - x, player.y - y)
            valid = (
                is_placeable(x, y, size, size, obstacles)
                and player_dist > spawn.min_fruit_distance
            )

        if not valid:
            logger.warning(
                f"Fruit budget exhausted after {attempts} attempts; "
                f"using last candidate ({x}, {y})"
            )

        logger.debug(f"Spawned {kind.name} at ({x}, {y})")

        return Fruit(
            x=x,
            y=y,
            kind=kind,
            health_value=items.health_per_fruit,
            width=size,
            height=size,
        )
