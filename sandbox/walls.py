"""
Boundary walls: identity, derived geometry and change-gated sync.

Walls are visual. Collision reads boundary scalars from the Configuration,
never from these objects.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

import sandbox as S
from sandbox.config import Configuration

logger = logging.getLogger(__name__)


class WallLocation(Enum):
    LEFT = 'left'
    RIGHT = 'right'
    TOP = 'top'
    BOTTOM = 'bottom'

    @property
    def axis(self) -> int:
        return 0 if self in (WallLocation.LEFT, WallLocation.RIGHT) else 1

    @property
    def sign(self) -> int:
        return -1 if self in (WallLocation.LEFT, WallLocation.BOTTOM) else 1


@dataclass
class Wall:
    location: WallLocation
    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    size: np.ndarray = field(default_factory=lambda: np.zeros(2))


def wall_position(location: WallLocation,
                  half_extents: Tuple[float, float]) -> np.ndarray:
    hw, hh = half_extents
    if location is WallLocation.LEFT:
        return np.array([-hw / 2.0, 0.0])
    if location is WallLocation.RIGHT:
        return np.array([hw / 2.0, 0.0])
    if location is WallLocation.BOTTOM:
        return np.array([0.0, -hh / 2.0])
    return np.array([0.0, hh / 2.0])


def wall_size(location: WallLocation, half_extents: Tuple[float, float],
              thickness: float = S.WALL_THICKNESS) -> np.ndarray:
    hw, hh = half_extents
    if location.axis == 0:
        return np.array([thickness, hh * 2.0 + thickness])
    return np.array([hw * 2.0 + thickness, thickness])


def location_from_position(position: Sequence[float]) -> WallLocation:
    """Legacy identity rule for untagged walls. Ambiguous at the origin."""
    x, y = position[0], position[1]
    if x < 0:
        return WallLocation.LEFT
    if x > 0:
        return WallLocation.RIGHT
    if y < 0:
        return WallLocation.BOTTOM
    return WallLocation.TOP


def spawn_walls(config: Configuration,
                thickness: float = S.WALL_THICKNESS) -> List[Wall]:
    return [Wall(location=loc,
                 position=wall_position(loc, config.half_extents),
                 size=wall_size(loc, config.half_extents, thickness))
            for loc in WallLocation]


class BoundarySync:
    """Rewrites wall geometry only when the configuration value changes."""

    def __init__(self, thickness: float = S.WALL_THICKNESS):
        self.thickness = thickness
        self._last: Optional[Configuration] = None

    def mark_dirty(self):
        self._last = None

    def sync(self, walls: List[Wall], config: Configuration) -> bool:
        if self._last is not None and config == self._last:
            return False
        for wall in walls:
            wall.position[:] = wall_position(wall.location, config.half_extents)
            wall.size[:] = wall_size(wall.location, config.half_extents,
                                     self.thickness)
        self._last = config
        logger.debug("synced %d walls to half extents %s",
                     len(walls), config.half_extents)
        return True
