"""
Phase state machine for a Fruit Rush run.

States:
    SELECTING_DIFFICULTY: Waiting for the player to pick Easy/Medium/Hard
    PLAYING: A run is in progress
    WON: Health reached the maximum
    LOST: The countdown reached zero first
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Macro-state of a run."""
    SELECTING_DIFFICULTY = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        """Won/Lost wait for an explicit restart."""
        return self in (Phase.WON, Phase.LOST)


@dataclass
class PhaseContext:
    """Context data carried alongside the phase."""
    difficulty: str | None = None


PhaseListener = Callable[[Phase, Phase, PhaseContext], None]


class PhaseMachine:
    """
    Owns the current phase and guards transitions.

    Only the transitions listed in VALID_TRANSITIONS are allowed;
    anything else is refused and logged.
    """

    VALID_TRANSITIONS: list[tuple[Phase, Phase]] = [
        # Difficulty chosen
        (Phase.SELECTING_DIFFICULTY, Phase.PLAYING),

        # Run outcome
        (Phase.PLAYING, Phase.WON),
        (Phase.PLAYING, Phase.LOST),

        # Restart action
        (Phase.WON, Phase.SELECTING_DIFFICULTY),
        (Phase.LOST, Phase.SELECTING_DIFFICULTY),
    ]

    def __init__(self, initial_phase: Phase = Phase.SELECTING_DIFFICULTY) -> None:
        self._phase = initial_phase
        self._context = PhaseContext()
        self._listeners: list[PhaseListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"PhaseMachine initialized with phase: {initial_phase.name}")

    @property
    def phase(self) -> Phase:
        """Get current phase."""
        return self._phase

    @property
    def context(self) -> PhaseContext:
        """Get current context."""
        return self._context

    def can_transition(self, to_phase: Phase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._phase, to_phase) in self._valid_transitions

    def transition(self, to_phase: Phase, difficulty: str | None = None) -> bool:
        """
        Attempt to transition to a new phase.

        Args:
            to_phase: Target phase
            difficulty: Difficulty name to record (entering PLAYING)

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_phase):
            logger.warning(
                f"Invalid transition: {self._phase.name} -> {to_phase.name}"
            )
            return False

        old_phase = self._phase
        self._phase = to_phase

        if to_phase == Phase.PLAYING:
            self._context.difficulty = difficulty
        elif to_phase == Phase.SELECTING_DIFFICULTY:
            self._context.difficulty = None

        logger.info(f"Phase transition: {old_phase.name} -> {to_phase.name}")

        for listener in self._listeners:
            try:
                listener(old_phase, to_phase, self._context)
            except Exception as e:
                logger.error(f"Error in phase listener: {e}")

        return True

    def add_listener(self, callback: PhaseListener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)
