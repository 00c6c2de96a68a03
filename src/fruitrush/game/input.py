"""Directional input sample consumed by the simulation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectionalKeys:
    """Which arrow keys are held at the moment a tick is sampled."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @property
    def horizontal(self) -> bool:
        return self.left or self.right


NO_KEYS = DirectionalKeys()
