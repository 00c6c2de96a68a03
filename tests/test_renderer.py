from __future__ import annotations

import logging

import numpy as np
import pytest

from fruitrush.game.entities import APPLE, Axis, Direction, Fruit, METEOR, Obstacle
from fruitrush.game.input import NO_KEYS
from fruitrush.game.simulation import GameSimulation
from fruitrush.game.difficulty import DifficultyLevel
from fruitrush.graphics.layout import BUTTON_COLORS
from fruitrush.graphics.renderer import (
    HEALTH_HIGH,
    HEALTH_LOW,
    HEALTH_MID,
    HUD_BG,
    KIND_COLORS,
    PLAYER_COLOR,
    PLAYER_FACING,
    GameRenderer,
    health_color,
)


@pytest.fixture()
def renderer() -> GameRenderer:
    return GameRenderer(800, 600)


def _pixel(frame: np.ndarray, x: int, y: int) -> tuple[int, int, int]:
    return tuple(int(c) for c in frame[y, x])


def test_frame_shape(renderer: GameRenderer, sim: GameSimulation) -> None:
    frame = renderer.render(sim.snapshot())
    assert frame.shape == (600, 800, 3)
    assert frame.dtype == np.uint8


def test_difficulty_buttons_drawn(renderer: GameRenderer, sim: GameSimulation) -> None:
    frame = renderer.render(sim.snapshot())
    assert _pixel(frame, 400, 285) == BUTTON_COLORS[DifficultyLevel.EASY]
    assert _pixel(frame, 400, 375) == BUTTON_COLORS[DifficultyLevel.MEDIUM]
    assert _pixel(frame, 400, 465) == BUTTON_COLORS[DifficultyLevel.HARD]


def test_player_and_facing_edge(renderer: GameRenderer, empty_arena: GameSimulation) -> None:
    frame = renderer.render(empty_arena.snapshot())
    assert _pixel(frame, 70, 300) == PLAYER_COLOR
    assert _pixel(frame, 88, 300) == PLAYER_FACING

    empty_arena.player.direction = Direction.LEFT
    frame = renderer.render(empty_arena.snapshot())
    assert _pixel(frame, 51, 300) == PLAYER_FACING
    assert _pixel(frame, 88, 300) == PLAYER_COLOR


def test_items_drawn(renderer: GameRenderer, empty_arena: GameSimulation) -> None:
    empty_arena.fruit = Fruit(x=400, y=400, kind=APPLE)
    empty_arena.obstacles = [
        Obstacle(x=600, y=100, kind=METEOR, axis=Axis.VERTICAL, speed=1, patrol_min=50, patrol_max=200)
    ]
    frame = renderer.render(empty_arena.snapshot())
    assert _pixel(frame, 415, 415) == KIND_COLORS["apple"]
    assert _pixel(frame, 625, 125) == KIND_COLORS["meteor"]


def test_health_bar(renderer: GameRenderer, empty_arena: GameSimulation) -> None:
    frame = renderer.render(empty_arena.snapshot())
    assert _pixel(frame, 25, 35) == HUD_BG

    empty_arena.health = 45
    frame = renderer.render(empty_arena.snapshot())
    assert _pixel(frame, 25, 35) == HEALTH_LOW
    # Bar fills 90 of 200 pixels
    assert _pixel(frame, 150, 35) == HUD_BG


def test_game_over_shows_restart_button(renderer: GameRenderer, empty_arena: GameSimulation) -> None:
    empty_arena.health = 100
    empty_arena.step(NO_KEYS, 0)
    frame = renderer.render(empty_arena.snapshot())
    assert _pixel(frame, 400, 405) == (107, 207, 127)


def test_background_is_not_mutated(renderer: GameRenderer, empty_arena: GameSimulation) -> None:
    first = renderer.render(empty_arena.snapshot()).copy()
    empty_arena.player.x = 500
    renderer.render(empty_arena.snapshot())
    empty_arena.player.x = 50
    again = renderer.render(empty_arena.snapshot())
    assert np.array_equal(first, again)


@pytest.mark.parametrize(
    "health, expected",
    [(0, HEALTH_LOW), (49, HEALTH_LOW), (50, HEALTH_MID), (79, HEALTH_MID), (80, HEALTH_HIGH), (100, HEALTH_HIGH)],
)
def test_health_color_bands(health: int, expected: tuple[int, int, int]) -> None:
    assert health_color(health) == expected



def test_terrain_is_built_once(
    renderer: GameRenderer, sim: GameSimulation, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG, logger="fruitrush.graphics.renderer")
    renderer.render(sim.snapshot())
    renderer.render(sim.snapshot())
    cached = [r for r in caplog.records if "Terrain cached" in r.getMessage()]
    assert len(cached) == 1
