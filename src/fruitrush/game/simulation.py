"""Fruit Rush simulation.

One ``GameSimulation`` owns everything a run mutates: the phase, the
player, the obstacle list, the current fruit, health and the countdown.
Hosts feed it input samples through ``step`` and read it back through
``snapshot``; nothing here draws.
"""

import math
import random
import logging
from dataclasses import replace
from typing import List, Optional

from fruitrush.core.events import Event, EventBus, EventType
from fruitrush.core.geometry import clamp, overlaps
from fruitrush.core.state import Phase, PhaseContext, PhaseMachine
from fruitrush.game.difficulty import DifficultyConfig, DifficultyLevel, get_difficulty
from fruitrush.game.entities import Direction, Fruit, Obstacle, Player
from fruitrush.game.input import DirectionalKeys
from fruitrush.game.snapshot import GameSnapshot, format_time
from fruitrush.game.spawner import Spawner
from fruitrush.settings import Settings, get_settings

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000.0


class GameSimulation:
    """Single simulation context for a Fruit Rush session.

    Lifecycle:
        1. select_difficulty(name) - reset the run and generate a level
        2. step(keys, delta_ms) - advance one tick while PLAYING
        3. restart() - back to difficulty selection after WON/LOST
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.rng = rng or random.Random(self.settings.seed)
        self.event_bus = event_bus or EventBus()

        self.phase_machine = PhaseMachine()
        self.phase_machine.add_listener(self._on_phase_changed)
        self.spawner = Spawner(self.settings, self.rng)

        self.player = self._new_player()
        self.obstacles: List[Obstacle] = []
        self.fruit: Optional[Fruit] = None
        self.difficulty: Optional[DifficultyConfig] = None

        # Run state
        self.health = 0
        self.fruits_collected = 0
        self.time_remaining = 0.0
        self.completion_time: Optional[float] = None
        self.tick_count = 0
        self._second_accumulator = 0.0
        self._warned = False

    @property
    def phase(self) -> Phase:
        return self.phase_machine.phase

    # ----------------------------
    # Phase transitions
    # ----------------------------

    def select_difficulty(self, name: "str | DifficultyLevel") -> bool:
        """Start a new run on the given difficulty.

        Returns False (and changes nothing) unless the game is waiting
        for a difficulty choice.

        Raises:
            ValueError: For an unknown difficulty name.
        """
        config = get_difficulty(name)

        if self.phase != Phase.SELECTING_DIFFICULTY:
            logger.warning(f"Ignoring difficulty {config.level.value} during {self.phase.name}")
            return False

        logger.info(f"Initializing game on {config.level.value} difficulty...")
        self.difficulty = config
        self._reset_run(config)

        self.obstacles = self.spawner.generate_obstacles(config, self.player)
        self.fruit = self.spawner.spawn_fruit(self.player, self.obstacles)

        self._emit(EventType.DIFFICULTY_SELECTED, difficulty=config.level.value)
        self._emit(EventType.LEVEL_GENERATED, obstacles=len(self.obstacles))
        self._emit(EventType.FRUIT_SPAWNED, kind=self.fruit.kind.name, x=self.fruit.x, y=self.fruit.y)

        self.phase_machine.transition(Phase.PLAYING, difficulty=config.level.value)

        logger.info(
            f"Game ready: {len(self.obstacles)} obstacles, "
            f"time {format_time(config.initial_time)}, "
            f"+{config.time_bonus_per_fruit:g}s per fruit"
        )
        return True

    def restart(self) -> bool:
        """Return to difficulty selection after a finished run."""
        if not self.phase.is_terminal:
            logger.debug(f"Restart ignored during {self.phase.name}")
            return False

        logger.info("Returning to difficulty select...")
        self._emit(EventType.RESTART_REQUESTED, previous=self.phase.name)
        self.difficulty = None
        return self.phase_machine.transition(Phase.SELECTING_DIFFICULTY)

    def _reset_run(self, config: DifficultyConfig) -> None:
        self.health = 0
        self.fruits_collected = 0
        self.time_remaining = float(config.initial_time)
        self.completion_time = None
        self.tick_count = 0
        self._second_accumulator = 0.0
        self._warned = False

        self.player = self._new_player()
        self.obstacles = []
        self.fruit = None

    def _new_player(self) -> Player:
        start_x, start_y = self.settings.player_start
        size = self.settings.player.size
        return Player(
            x=start_x,
            y=start_y,
            width=size,
            height=size,
            speed=self.settings.player.speed,
        )

    # ----------------------------
    # Simulation step
    # ----------------------------

    def clamp_delta(self, delta_ms: float) -> float:
        """Bound a frame delta to [0, max_frame_delta_ms]."""
        if not math.isfinite(delta_ms):
            return 0.0
        return clamp(delta_ms, 0.0, self.settings.loop.max_frame_delta_ms)

    def step(self, keys: DirectionalKeys, delta_ms: float) -> None:
        """Advance one tick. No-op unless PLAYING."""
        if self.phase != Phase.PLAYING:
            return

        delta_ms = self.clamp_delta(delta_ms)

        self._apply_input(keys)
        self._update_timer(delta_ms)
        self._update_obstacles()
        self._check_fruit()
        self._evaluate_outcome()

        self.tick_count += 1
        self._emit(EventType.TICK, delta=delta_ms, tick=self.tick_count)

    def _apply_input(self, keys: DirectionalKeys) -> None:
        player = self.player
        old_x, old_y = player.x, player.y

        moved = False
        new_direction = player.direction

        # Horizontal input wins; vertical only when no horizontal key is held.
        # Left and right both apply when held together; right is applied last.
        if keys.horizontal:
            if keys.left:
                player.x -= player.speed
                new_direction = Direction.LEFT
                moved = True
            if keys.right:
                player.x += player.speed
                new_direction = Direction.RIGHT
                moved = True
        else:
            if keys.up:
                player.y -= player.speed
                new_direction = Direction.UP
                moved = True
            if keys.down:
                player.y += player.speed
                new_direction = Direction.DOWN
                moved = True

        if moved:
            player.direction = new_direction
            player.is_moving = True

            player.animation_counter += player.speed
            if player.animation_counter >= self.settings.player.animation_step:
                player.animation_frame = (player.animation_frame + 1) % self.settings.player.animation_frames
                player.animation_counter = 0.0
        else:
            player.is_moving = False
            player.animation_frame = 0

        arena = self.settings.arena
        player.x = clamp(player.x, 0, arena.width - player.width)
        player.y = clamp(player.y, 0, arena.height - player.height)

        for obstacle in self.obstacles:
            if overlaps(player, obstacle):
                player.x = old_x
                player.y = old_y
                player.is_moving = False
                player.animation_frame = 0
                logger.debug(f"Move blocked by {obstacle.kind.name}")
                self._emit(EventType.MOVE_BLOCKED, kind=obstacle.kind.name)
                break

    def _update_timer(self, delta_ms: float) -> None:
        self._second_accumulator += delta_ms

        # Carry the remainder so the countdown does not drift
        while self._second_accumulator >= MS_PER_SECOND:
            self._second_accumulator -= MS_PER_SECOND
            self.time_remaining -= 1

            if self.time_remaining <= 0:
                self.time_remaining = 0.0
                logger.info("TIME UP!")
                self._emit(EventType.TIME_UP)
                break

        if not self._warned and self.time_remaining <= self.settings.items.warning_time:
            self._warned = True
            logger.info(f"Hurry! {format_time(self.time_remaining)} left")
            self._emit(EventType.TIMER_WARNING, time_remaining=self.time_remaining)

    def _update_obstacles(self) -> None:
        for obstacle in self.obstacles:
            obstacle.advance()

    def _check_fruit(self) -> None:
        fruit = self.fruit
        if fruit is None or not overlaps(self.player, fruit):
            return

        max_health = self.settings.items.max_health
        bonus = self.difficulty.time_bonus_per_fruit if self.difficulty else 0

        old_health = self.health
        self.health = int(clamp(self.health + fruit.health_value, 0, max_health))
        self.fruits_collected += 1
        self.time_remaining += bonus

        logger.info(
            f"Collected {fruit.kind.name}: health {old_health}% -> {self.health}%, "
            f"time +{bonus:g}s ({format_time(self.time_remaining)})"
        )
        self._emit(
            EventType.FRUIT_COLLECTED,
            kind=fruit.kind.name,
            health=self.health,
            fruits_collected=self.fruits_collected,
        )

        if self.health < max_health:
            self.fruit = self.spawner.spawn_fruit(self.player, self.obstacles)
            self._emit(EventType.FRUIT_SPAWNED, kind=self.fruit.kind.name, x=self.fruit.x, y=self.fruit.y)
        else:
            self.fruit = None

    def _evaluate_outcome(self) -> None:
        max_health = self.settings.items.max_health

        if self.health >= max_health:
            initial = self.difficulty.initial_time if self.difficulty else 0
            self.completion_time = max(0.0, initial - self.time_remaining)
            logger.info(f"VICTORY! Henry is full! Final time: {format_time(self.completion_time)}")
            self.phase_machine.transition(Phase.WON)
        elif self.time_remaining <= 0:
            logger.info(
                f"DEFEAT! Time ran out at {self.health}% health "
                f"({self.fruits_collected}/{self.settings.items.fruits_to_win} fruits)"
            )
            self.phase_machine.transition(Phase.LOST)

    # ----------------------------
    # Observation
    # ----------------------------

    def snapshot(self) -> GameSnapshot:
        """Copy the current state for rendering."""
        items = self.settings.items
        return GameSnapshot(
            phase=self.phase,
            difficulty=self.difficulty,
            player=replace(self.player),
            obstacles=tuple(replace(o) for o in self.obstacles),
            fruit=replace(self.fruit) if self.fruit else None,
            health=self.health,
            max_health=items.max_health,
            time_remaining=self.time_remaining,
            fruits_collected=self.fruits_collected,
            fruits_to_win=items.fruits_to_win,
            time_warning=self.time_remaining <= items.warning_time,
            completion_time=self.completion_time,
            arena_width=self.settings.arena.width,
            arena_height=self.settings.arena.height,
            tick=self.tick_count,
        )

    def _on_phase_changed(self, old: Phase, new: Phase, context: PhaseContext) -> None:
        self._emit(
            EventType.PHASE_CHANGED,
            old=old.name,
            new=new.name,
            difficulty=context.difficulty,
        )

    def _emit(self, event_type: EventType, **data) -> None:
        self.event_bus.emit(Event(event_type, data=data))
