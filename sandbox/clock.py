import logging
import math

import sandbox as S

logger = logging.getLogger(__name__)


class FixedClock:
    """Turns variable frame times into a whole number of fixed ticks."""

    def __init__(self, timestep: float = S.FIXED_DT,
                 max_ticks: int = S.MAX_TICKS_PER_FRAME):
        if not (timestep > 0 and math.isfinite(timestep)):
            raise ValueError(f"timestep must be positive and finite, got {timestep!r}")
        self.timestep = timestep
        self.max_ticks = max_ticks
        self._accumulated = 0.0

    def advance(self, frame_dt: float) -> int:
        if not math.isfinite(frame_dt) or frame_dt < 0:
            logger.warning("ignoring frame time %r", frame_dt)
            return 0
        self._accumulated += frame_dt
        ticks = int(self._accumulated // self.timestep)
        if ticks > self.max_ticks:
            logger.debug("dropping %d ticks of backlog", ticks - self.max_ticks)
            ticks = self.max_ticks
            self._accumulated = 0.0
        else:
            self._accumulated -= ticks * self.timestep
        return ticks

    @property
    def overstep(self) -> float:
        """Fraction of a tick accumulated but not yet run, in [0, 1)."""
        return self._accumulated / self.timestep

    def reset(self):
        self._accumulated = 0.0
