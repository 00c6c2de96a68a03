"""
Keyboard input tracking for the simulator.

The window forwards arrow key down/up events here; the simulation
samples the held set once per tick.
"""

import logging

from fruitrush.game.input import DirectionalKeys

logger = logging.getLogger(__name__)

DIRECTIONS = ("up", "down", "left", "right")


class ArrowKeys:
    """
    Tracks which of the four arrow keys are currently held.

    Press state is controlled by the simulator window based on
    keyboard events.
    """

    def __init__(self) -> None:
        self._held: dict[str, bool] = {d: False for d in DIRECTIONS}

    def press(self, direction: str) -> None:
        """Called by the window when an arrow key goes down."""
        if direction not in self._held:
            raise ValueError(f"Unknown direction: {direction}")
        self._held[direction] = True

    def release(self, direction: str) -> None:
        """Called by the window when an arrow key goes up."""
        if direction not in self._held:
            raise ValueError(f"Unknown direction: {direction}")
        self._held[direction] = False

    def release_all(self) -> None:
        """Drop every held key (e.g. on focus loss)."""
        if any(self._held.values()):
            logger.debug("Releasing held arrow keys")
        for direction in DIRECTIONS:
            self._held[direction] = False

    def sample(self) -> DirectionalKeys:
        """Immutable snapshot of the held keys for one tick."""
        return DirectionalKeys(**self._held)
