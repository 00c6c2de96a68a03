"""Desktop simulator host for Fruit Rush."""

from .input import ArrowKeys
from .window import GameWindow, WindowConfig

__all__ = ["ArrowKeys", "GameWindow", "WindowConfig"]
