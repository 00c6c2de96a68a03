from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from fruitrush.core.events import EventBus
from fruitrush.game.simulation import GameSimulation
from fruitrush.settings import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def make_sim(settings: Settings, bus: EventBus) -> Callable[..., GameSimulation]:
    def _make(seed: int = 1234) -> GameSimulation:
        return GameSimulation(settings, rng=random.Random(seed), event_bus=bus)

    return _make


@pytest.fixture()
def sim(make_sim: Callable[..., GameSimulation]) -> GameSimulation:
    return make_sim()


@pytest.fixture()
def empty_arena(sim: GameSimulation) -> GameSimulation:
    """A PLAYING Easy run with no obstacles and no fruit, for hand-built scenarios."""
    sim.select_difficulty("EASY")
    sim.obstacles = []
    sim.fruit = None
    return sim
