import pytest

pygame = pytest.importorskip("pygame")

from sandbox.config import Configuration
from sandbox.engine import Simulation, Particle
from sandbox.renderer import Renderer, AppearanceConfig


@pytest.fixture
def renderer():
    return Renderer(AppearanceConfig(width=200, height=100))


def test_world_origin_is_window_center(renderer):
    assert renderer.world_to_pixel(0.0, 0.0) == (100, 50)
    assert renderer.world_to_pixel(10.0, 20.0) == (110, 30)


def test_render_draws_particle_at_center(renderer):
    config = Configuration(particle_radius=10.0, half_extents=(100.0, 50.0))
    sim = Simulation(config)
    sim.initialize([Particle()])
    frame = renderer.render(sim, config)
    assert frame.shape == (100, 200, 3)
    assert tuple(frame[50, 100]) == renderer.config.particle_color
