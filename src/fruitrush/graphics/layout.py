"""Button geometry for the selection and game-over screens.

Shared by the renderer (to draw buttons) and the window (to hit-test
clicks), so both always agree on where a button is.
"""

from dataclasses import dataclass
from typing import Optional

from fruitrush.core.geometry import Rect
from fruitrush.game.difficulty import DifficultyLevel

# Difficulty menu
BUTTON_WIDTH = 400
BUTTON_HEIGHT = 70
BUTTON_START_Y = 250
BUTTON_SPACING = 90

# Game-over screen
RESTART_WIDTH = 200
RESTART_HEIGHT = 50
RESTART_OFFSET_Y = 80

BUTTON_COLORS = {
    DifficultyLevel.EASY: (107, 207, 127),
    DifficultyLevel.MEDIUM: (255, 217, 61),
    DifficultyLevel.HARD: (255, 107, 107),
}


@dataclass(frozen=True)
class Button:
    """A clickable rectangle with a label."""
    rect: Rect
    label: str
    color: tuple[int, int, int]
    level: Optional[DifficultyLevel] = None


class ScreenLayout:
    """Button placement for a given arena size."""

    def __init__(self, width: int = 800, height: int = 600) -> None:
        self.width = width
        self.height = height

    def difficulty_buttons(self) -> list[Button]:
        x = self.width / 2 - BUTTON_WIDTH / 2
        buttons = []
        for index, level in enumerate(DifficultyLevel):
            y = BUTTON_START_Y + index * BUTTON_SPACING
            buttons.append(Button(
                rect=Rect(x, y, BUTTON_WIDTH, BUTTON_HEIGHT),
                label=level.value,
                color=BUTTON_COLORS[level],
                level=level,
            ))
        return buttons

    def restart_button(self) -> Button:
        return Button(
            rect=Rect(
                self.width / 2 - RESTART_WIDTH / 2,
                self.height / 2 + RESTART_OFFSET_Y,
                RESTART_WIDTH,
                RESTART_HEIGHT,
            ),
            label="Play Again",
            color=(107, 207, 127),
        )

    def hit_difficulty(self, px: float, py: float) -> Optional[DifficultyLevel]:
        """Return the difficulty whose button contains the point, if any."""
        for button in self.difficulty_buttons():
            if button.rect.contains_point(px, py):
                return button.level
        return None

    def hit_restart(self, px: float, py: float) -> bool:
        return self.restart_button().rect.contains_point(px, py)
