"""Frame rendering for Fruit Rush."""

from fruitrush.graphics.layout import Button, ScreenLayout
from fruitrush.graphics.renderer import GameRenderer, health_color

__all__ = ["Button", "ScreenLayout", "GameRenderer", "health_color"]
