"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested groups use a double underscore, e.g. FRUITRUSH_PLAYER__SPEED=6.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ArenaSettings(BaseModel):
    """Playfield size in pixels."""

    width: int = Field(default=800, gt=0)
    height: int = Field(default=600, gt=0)


class PlayerSettings(BaseModel):
    """Player movement and animation."""

    speed: float = Field(default=4.0, gt=0)
    size: int = Field(default=40, gt=0)
    start_x: float = 50.0

    # Pixels walked per animation frame advance
    animation_step: float = Field(default=8.0, gt=0)
    animation_frames: int = Field(default=4, gt=0)


class ItemSettings(BaseModel):
    """Fruit, obstacle and health tuning."""

    fruit_size: int = Field(default=30, gt=0)
    obstacle_size: int = Field(default=50, gt=0)
    health_per_fruit: int = Field(default=5, gt=0)
    max_health: int = Field(default=100, gt=0)
    fruits_to_win: int = 20
    warning_time: float = 30.0


class SpawnSettings(BaseModel):
    """Rejection-sampling budgets and placement margins."""

    max_obstacle_attempts: int = Field(default=100, ge=1)
    max_fruit_attempts: int = Field(default=50, ge=1)
    min_fruit_distance: float = 80.0

    # Keep-out margin around the player's starting rectangle
    player_start_margin: int = 50
    patrol_range: int = 100

    obstacle_margin_x: int = 150
    obstacle_margin_y: int = 50
    patrol_edge_margin: int = 50
    fruit_margin: int = 20


class LoopSettings(BaseModel):
    """Fixed-step scheduler timing."""

    fps: int = Field(default=60, gt=0)
    max_frame_delta_ms: float = Field(default=1000.0, gt=0)

    # Display refresh cap for the pygame host
    refresh_rate: int = Field(default=120, gt=0)

    @property
    def frame_ms(self) -> float:
        """Milliseconds per simulation tick."""
        return 1000.0 / self.fps


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="FRUITRUSH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    seed: Optional[int] = None

    # Simulator window
    window_title: str = "Henry's Fruit Rush"
    window_scale: float = Field(default=1.0, gt=0)

    # Nested settings
    arena: ArenaSettings = Field(default_factory=ArenaSettings)
    player: PlayerSettings = Field(default_factory=PlayerSettings)
    items: ItemSettings = Field(default_factory=ItemSettings)
    spawn: SpawnSettings = Field(default_factory=SpawnSettings)
    loop: LoopSettings = Field(default_factory=LoopSettings)

    @model_validator(mode="after")
    def _check_arena_fits(self) -> "Settings":
        """Reject arenas too small for the spawn margins and item sizes."""
        arena, spawn, items = self.arena, self.spawn, self.items

        needed = [
            ("width", items.obstacle_size + 2 * spawn.obstacle_margin_x),
            ("height", items.obstacle_size + 2 * spawn.obstacle_margin_y),
            ("width", items.obstacle_size + 2 * spawn.patrol_edge_margin),
            ("height", items.obstacle_size + 2 * spawn.patrol_edge_margin),
            ("width", items.fruit_size + 2 * spawn.fruit_margin),
            ("height", items.fruit_size + 2 * spawn.fruit_margin),
            ("width", self.player.start_x + self.player.size),
            ("height", self.player.size),
        ]
        for side, minimum in needed:
            if getattr(arena, side) < minimum:
                raise ValueError(
                    f"Arena {side} {getattr(arena, side)} is too small, need at least {minimum:g}"
                )
        return self

    @property
    def player_start(self) -> tuple[float, float]:
        """Player spawn point: left edge, vertically centered."""
        return (
            self.player.start_x,
            self.arena.height / 2 - self.player.size / 2,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
