import numpy as np
from typing import Dict, List, Optional

from sandbox.walls import WallLocation


def mechanical_energy(states, gravity, floor=0.0):
    """Per-unit-mass energy summed over particles. states: (T, N, 4)."""
    vel = states[:, :, 2:]
    kinetic = 0.5 * (vel ** 2).sum(axis=(1, 2))
    potential = gravity * (states[:, :, 1] - floor).sum(axis=1)
    return kinetic + potential


def _select(bounces: List[Dict], particle_id: Optional[int] = None,
            wall: Optional[WallLocation] = None) -> List[Dict]:
    return [b for b in bounces
            if (particle_id is None or b['particle_id'] == particle_id)
            and (wall is None or b['wall'] is wall)]


def first_bounce_time(bounces: List[Dict],
                      wall: Optional[WallLocation] = None) -> Optional[float]:
    hits = _select(bounces, wall=wall)
    return hits[0]['time'] if hits else None


def bounce_speeds(bounces: List[Dict], particle_id: int = 0,
                  wall: Optional[WallLocation] = None) -> np.ndarray:
    return np.array([b['speed'] for b in _select(bounces, particle_id, wall)])
