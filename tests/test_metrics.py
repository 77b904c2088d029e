import numpy as np
import pytest

from sandbox.metrics import mechanical_energy, first_bounce_time, bounce_speeds
from sandbox.walls import WallLocation


def test_mechanical_energy():
    states = np.array([[[0.0, 10.0, 3.0, 4.0]],
                       [[0.0, 0.0, 0.0, 0.0]]])
    energy = mechanical_energy(states, gravity=2.0, floor=-5.0)
    assert energy == pytest.approx([12.5 + 30.0, 10.0])


def test_bounce_queries():
    bounces = [
        {'time': 1.0, 'tick': 50, 'particle_id': 0, 'wall': WallLocation.LEFT, 'speed': 3.0},
        {'time': 2.0, 'tick': 100, 'particle_id': 1, 'wall': WallLocation.BOTTOM, 'speed': 4.0},
        {'time': 3.0, 'tick': 150, 'particle_id': 0, 'wall': WallLocation.BOTTOM, 'speed': 5.0},
    ]
    assert first_bounce_time(bounces) == 1.0
    assert first_bounce_time(bounces, WallLocation.BOTTOM) == 2.0
    assert first_bounce_time(bounces, WallLocation.TOP) is None
    assert list(bounce_speeds(bounces)) == [3.0, 5.0]
    assert list(bounce_speeds(bounces, particle_id=0, wall=WallLocation.BOTTOM)) == [5.0]
