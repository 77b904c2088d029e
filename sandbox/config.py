"""
Simulation configuration.

A `Configuration` is an immutable snapshot: every tick receives one and reads
it fresh. The editor side holds a `ConfigStore` and publishes a new snapshot
per change, so readers never observe a half-written value.
"""

import logging
import math
import threading
from dataclasses import dataclass, replace, astuple
from typing import Optional, Tuple

import sandbox as S

logger = logging.getLogger(__name__)


def _clip(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


@dataclass(frozen=True)
class Configuration:
    gravity: float = S.GRAVITY
    particle_radius: float = S.PARTICLE_RADIUS
    half_extents: Tuple[float, float] = S.HALF_EXTENTS
    clamp_to_boundary: bool = False

    @classmethod
    def from_window(cls, width: float, height: float, **overrides) -> 'Configuration':
        """Initial snapshot from window extents (half-extents = size / 2)."""
        return cls(half_extents=(width / 2.0, height / 2.0), **overrides).clamped()

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in
                   (self.gravity, self.particle_radius, *self.half_extents))

    def clamped(self) -> 'Configuration':
        """Pull every field back into its valid range. Never raises."""
        hw = max(float(self.half_extents[0]), 0.0)
        hh = max(float(self.half_extents[1]), 0.0)
        gravity = _clip(float(self.gravity), *S.GRAVITY_RANGE)
        radius = _clip(float(self.particle_radius), *S.RADIUS_RANGE)
        # contact offset is radius / 2, keep it inside the box
        radius = min(radius, 2.0 * min(hw, hh))
        out = replace(self, gravity=gravity, particle_radius=radius,
                      half_extents=(hw, hh))
        if astuple(out) != astuple(self):
            logger.debug("clamped configuration %s -> %s", self, out)
        return out

    def boundary(self, axis: int) -> float:
        """Distance from the center to the contact plane on `axis`."""
        return max(self.half_extents[axis] - self.particle_radius / 2.0, 0.0)


class ConfigStore:
    """Single writer, many readers. Writes swap in a new clamped snapshot."""

    def __init__(self, config: Optional[Configuration] = None):
        self._lock = threading.Lock()
        self._config = (config or Configuration()).clamped()
        self.version = 0

    def snapshot(self) -> Configuration:
        with self._lock:
            return self._config

    def update(self, **changes) -> Configuration:
        with self._lock:
            candidate = replace(self._config, **changes)
            if not candidate.is_finite():
                logger.warning("rejected non-finite configuration write %s", changes)
                return self._config
            candidate = candidate.clamped()
            if candidate != self._config:
                self._config = candidate
                self.version += 1
            return self._config

    def reset(self, config: Optional[Configuration] = None) -> Configuration:
        with self._lock:
            self._config = (config or Configuration()).clamped()
            self.version += 1
            return self._config
