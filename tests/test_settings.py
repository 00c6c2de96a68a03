from __future__ import annotations

import pytest
from pydantic import ValidationError

from fruitrush.settings import ArenaSettings, Settings


def test_defaults(settings: Settings) -> None:
    assert (settings.arena.width, settings.arena.height) == (800, 600)
    assert settings.player.speed == 4
    assert settings.player.size == 40
    assert settings.items.max_health == 100
    assert settings.items.health_per_fruit == 5
    assert settings.items.fruits_to_win == 20
    assert settings.spawn.max_obstacle_attempts == 100
    assert settings.spawn.max_fruit_attempts == 50
    assert settings.seed is None
    assert not settings.debug


def test_derived_values(settings: Settings) -> None:
    assert settings.loop.frame_ms == pytest.approx(1000 / 60)
    assert settings.player_start == (50, 280)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRUITRUSH_DEBUG", "true")
    monkeypatch.setenv("FRUITRUSH_SEED", "42")
    monkeypatch.setenv("FRUITRUSH_ARENA__WIDTH", "1024")
    monkeypatch.setenv("FRUITRUSH_PLAYER__SPEED", "6")

    settings = Settings(_env_file=None)

    assert settings.debug
    assert settings.seed == 42
    assert settings.arena.width == 1024
    assert settings.arena.height == 600
    assert settings.player.speed == 6


def test_unprefixed_variables_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WIDTH", "10")
    monkeypatch.setenv("SPEED", "99")
    settings = Settings(_env_file=None)
    assert settings.arena.width == 800
    assert settings.player.speed == 4


@pytest.mark.parametrize(
    "name, value",
    [
        ("FRUITRUSH_ARENA__WIDTH", "300"),
        ("FRUITRUSH_ARENA__HEIGHT", "120"),
        ("FRUITRUSH_SPAWN__OBSTACLE_MARGIN_X", "400"),
    ],
)
def test_arena_too_small_for_spawning_is_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError, match="too small"):
        Settings(_env_file=None)


def test_smallest_valid_arena_is_accepted() -> None:
    settings = Settings(_env_file=None, arena=ArenaSettings(width=350, height=150))
    assert (settings.arena.width, settings.arena.height) == (350, 150)
