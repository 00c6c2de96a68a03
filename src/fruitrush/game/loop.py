"""Fixed-step game loop gate.

The host calls ``on_frame`` once per display refresh with a monotonic
timestamp. A simulation step runs only once a full frame interval has
passed; the remainder carries over so the tick rate does not drift.
Dropped frames slow the simulation down instead of triggering
catch-up steps.
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class FixedStepLoop:
    """Timestamp-driven scheduler running at most one step per callback."""

    def __init__(
        self,
        step: Callable[[float], None],
        render: Optional[Callable[[], None]] = None,
        frame_ms: float = 1000.0 / 60,
        max_delta_ms: float = 1000.0,
    ) -> None:
        if frame_ms <= 0:
            raise ValueError("frame_ms must be positive")

        self._step = step
        self._render = render
        self.frame_ms = frame_ms
        self.max_delta_ms = max_delta_ms

        self._last_time: Optional[float] = None
        self.tick_count = 0

    def reset(self) -> None:
        """Forget the time base; the next frame only re-anchors."""
        self._last_time = None

    def on_frame(self, timestamp_ms: float) -> bool:
        """Handle one display refresh.

        Args:
            timestamp_ms: Monotonically increasing time in milliseconds

        Returns:
            True if a simulation step ran
        """
        if self._last_time is None:
            self._last_time = timestamp_ms
            return False

        delta = timestamp_ms - self._last_time

        if delta < 0:
            # Clock went backwards; re-anchor without stepping
            logger.debug(f"Non-monotonic timestamp ({delta:.1f}ms), re-anchoring")
            self._last_time = timestamp_ms
            return False

        if delta < self.frame_ms:
            return False

        self._last_time = timestamp_ms - (delta % self.frame_ms)

        self._step(min(delta, self.max_delta_ms))
        if self._render is not None:
            self._render()

        self.tick_count += 1
        return True
