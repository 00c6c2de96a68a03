"""Snapshot renderer.

Turns a ``GameSnapshot`` into an RGB numpy frame. Text (timer, titles,
button labels) is left to the host, which has real fonts.
"""

import logging
from typing import Optional

from fruitrush.core.state import Phase
from fruitrush.game.entities import Direction, Player
from fruitrush.game.snapshot import GameSnapshot
from fruitrush.graphics.layout import ScreenLayout
from fruitrush.graphics.primitives import (
    Buffer, Color, dim, draw_circle, draw_rect, new_buffer
)

logger = logging.getLogger(__name__)

# Mars terrain palette
TERRAIN_BASE = (204, 102, 51)
TERRAIN_PATCH = (160, 82, 45)
TERRAIN_ROCK = (139, 115, 85)

PLAYER_COLOR = (60, 170, 80)
PLAYER_FACING = (20, 60, 30)
HUD_BG = (51, 51, 51)
BORDER = (0, 0, 0)

HEALTH_LOW = (255, 107, 107)
HEALTH_MID = (255, 217, 61)
HEALTH_HIGH = (107, 207, 127)

KIND_COLORS: dict[str, Color] = {
    "apple": (220, 40, 40),
    "banana": (250, 220, 60),
    "orange": (255, 150, 30),
    "mango": (255, 190, 70),
    "pineapple": (230, 200, 40),
    "meteor": (90, 70, 120),
    "cheese": (255, 210, 90),
    "lightning": (120, 180, 255),
}
DEFAULT_KIND_COLOR = (200, 200, 200)

# Health bar geometry
BAR_X, BAR_Y, BAR_W, BAR_H = 20, 20, 200, 30

WALK_BOUNCE = 2


def health_color(health: int) -> Color:
    """Red below 50, yellow below 80, green otherwise."""
    if health < 50:
        return HEALTH_LOW
    if health < 80:
        return HEALTH_MID
    return HEALTH_HIGH


class GameRenderer:
    """Draws snapshots into a reusable frame buffer."""

    def __init__(self, width: int = 800, height: int = 600) -> None:
        self.width = width
        self.height = height
        self.layout = ScreenLayout(width, height)
        self._background: Optional[Buffer] = None

    def render(self, snapshot: GameSnapshot) -> Buffer:
        """Render a full frame for the snapshot's phase."""
        buffer = self._terrain().copy()

        if snapshot.phase == Phase.SELECTING_DIFFICULTY:
            self._draw_difficulty_select(buffer)
            return buffer

        for obstacle in snapshot.obstacles:
            self._draw_kind_box(buffer, obstacle.x, obstacle.y, obstacle.width, obstacle.height, obstacle.kind.name)

        if snapshot.fruit is not None:
            fruit = snapshot.fruit
            draw_circle(
                buffer,
                int(fruit.x + fruit.width / 2),
                int(fruit.y + fruit.height / 2),
                int(min(fruit.width, fruit.height) / 2),
                KIND_COLORS.get(fruit.kind.name, DEFAULT_KIND_COLOR),
            )

        self._draw_player(buffer, snapshot.player)
        self._draw_health_bar(buffer, snapshot)

        if snapshot.phase.is_terminal:
            dim(buffer, 0.7)
            button = self.layout.restart_button()
            self._draw_button(buffer, button.rect.x, button.rect.y, button.rect.width, button.rect.height, button.color)

        return buffer

    def _terrain(self) -> Buffer:
        if self._background is not None:
            return self._background

        buffer = new_buffer(self.width, self.height, TERRAIN_BASE)

        for i in range(25):
            size = 30 + (i % 3) * 15
            draw_rect(buffer, (i * 137) % self.width, (i * 89) % self.height, size, size, TERRAIN_PATCH)

        for i in range(40):
            radius = 8 + (i % 4) * 4
            draw_circle(buffer, (i * 163) % self.width, (i * 127) % self.height, radius, TERRAIN_ROCK)

        self._background = buffer
        logger.debug(f"Terrain cached ({self.width}x{self.height})")
        return buffer

    def _draw_difficulty_select(self, buffer: Buffer) -> None:
        dim(buffer, 0.85)
        for button in self.layout.difficulty_buttons():
            r = button.rect
            self._draw_button(buffer, r.x, r.y, r.width, r.height, button.color)

    def _draw_button(self, buffer: Buffer, x: float, y: float, w: float, h: float, color: Color) -> None:
        draw_rect(buffer, int(x), int(y), int(w), int(h), color)
        draw_rect(buffer, int(x), int(y), int(w), int(h), BORDER, filled=False, thickness=3)

    def _draw_kind_box(self, buffer: Buffer, x: float, y: float, w: float, h: float, kind: str) -> None:
        color = KIND_COLORS.get(kind, DEFAULT_KIND_COLOR)
        draw_rect(buffer, int(x), int(y), int(w), int(h), color)
        draw_rect(buffer, int(x), int(y), int(w), int(h), BORDER, filled=False, thickness=2)

    def _draw_player(self, buffer: Buffer, player: Player) -> None:
        x, y = int(player.x), int(player.y)
        w, h = int(player.width), int(player.height)

        # Walk cycle: frames 1 and 3 lift the body slightly
        if player.is_moving and player.animation_frame in (1, 3):
            y -= WALK_BOUNCE

        draw_rect(buffer, x, y, w, h, PLAYER_COLOR)

        # Mark the facing edge
        edge = max(3, w // 8)
        if player.direction == Direction.RIGHT:
            draw_rect(buffer, x + w - edge, y, edge, h, PLAYER_FACING)
        elif player.direction == Direction.LEFT:
            draw_rect(buffer, x, y, edge, h, PLAYER_FACING)
        elif player.direction == Direction.UP:
            draw_rect(buffer, x, y, w, edge, PLAYER_FACING)
        else:
            draw_rect(buffer, x, y + h - edge, w, edge, PLAYER_FACING)

    def _draw_health_bar(self, buffer: Buffer, snapshot: GameSnapshot) -> None:
        draw_rect(buffer, BAR_X, BAR_Y, BAR_W, BAR_H, HUD_BG)

        fill_w = int(BAR_W * snapshot.health_fraction)
        if fill_w > 0:
            draw_rect(buffer, BAR_X, BAR_Y, fill_w, BAR_H, health_color(snapshot.health))

        draw_rect(buffer, BAR_X, BAR_Y, BAR_W, BAR_H, BORDER, filled=False, thickness=2)
