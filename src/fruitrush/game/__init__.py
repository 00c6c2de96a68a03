"""Fruit Rush game simulation."""

from fruitrush.game.difficulty import DifficultyConfig, DifficultyLevel, get_difficulty
from fruitrush.game.entities import Axis, Direction, Fruit, Obstacle, Player
from fruitrush.game.input import DirectionalKeys
from fruitrush.game.loop import FixedStepLoop
from fruitrush.game.simulation import GameSimulation
from fruitrush.game.snapshot import GameSnapshot, format_time
from fruitrush.game.spawner import Spawner

__all__ = [
    "DifficultyConfig",
    "DifficultyLevel",
    "get_difficulty",
    "Axis",
    "Direction",
    "Fruit",
    "Obstacle",
    "Player",
    "DirectionalKeys",
    "FixedStepLoop",
    "GameSimulation",
    "GameSnapshot",
    "format_time",
    "Spawner",
]
