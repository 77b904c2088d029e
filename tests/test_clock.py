import pytest

from sandbox.clock import FixedClock


def test_accumulates_partial_frames():
    clock = FixedClock(timestep=0.25, max_ticks=8)
    assert clock.advance(0.5) == 2
    assert clock.advance(0.125) == 0
    assert clock.overstep == pytest.approx(0.5)
    assert clock.advance(0.125) == 1
    assert clock.overstep == 0.0


def test_backlog_is_capped():
    clock = FixedClock(timestep=0.25, max_ticks=8)
    assert clock.advance(10.0) == 8
    assert clock.overstep == 0.0


@pytest.mark.parametrize("frame_dt", [float('nan'), float('inf'), -1.0])
def test_bad_frame_times_are_ignored(frame_dt):
    clock = FixedClock(timestep=0.25)
    assert clock.advance(frame_dt) == 0
    assert clock.advance(0.25) == 1


@pytest.mark.parametrize("timestep", [0.0, -0.1, float('nan')])
def test_timestep_must_be_positive(timestep):
    with pytest.raises(ValueError):
        FixedClock(timestep=timestep)
