"""
2D particle sandbox core.

- Particles in a rectangular box centered on the origin
- Constant downward gravity, lossless wall reflection
- Fixed tick: integrate -> gravity -> walls (position lags gravity by one tick)
- Unconstrained update: wall geometry sync, only when the config changed
"""

import copy
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Dict, Tuple

import numpy as np

import sandbox as S
from sandbox.config import Configuration
from sandbox.walls import Wall, WallLocation, BoundarySync, spawn_walls

logger = logging.getLogger(__name__)


@dataclass
class Particle:
    """Kinematic state only. Planar: z is always 0."""
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    particle_id: int = 0

    @property
    def position(self) -> np.ndarray:
        return np.array([self.x, self.y, 0.0])

    @position.setter
    def position(self, p: np.ndarray):
        self.x, self.y = float(p[0]), float(p[1])

    @property
    def velocity(self) -> np.ndarray:
        return np.array([self.vx, self.vy, 0.0])

    @velocity.setter
    def velocity(self, v: np.ndarray):
        self.vx, self.vy = float(v[0]), float(v[1])

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    @property
    def state(self) -> np.ndarray:
        return np.array([self.x, self.y, self.vx, self.vy])


@dataclass
class Reflection:
    particle_id: int
    wall: WallLocation
    speed: float


# Systems

def integrate(particles: List[Particle], dt: float):
    for p in particles:
        p.x += p.vx * dt
        p.y += p.vy * dt


def apply_gravity(particles: List[Particle], config: Configuration, dt: float):
    for p in particles:
        p.vy -= config.gravity * dt


def reflect(particle: Particle, location: WallLocation, boundary: float,
            clamp: bool = False) -> Optional[Reflection]:
    """
    Point the velocity component on `location.axis` back inside when the
    particle is strictly past `location.sign * boundary`.
    """
    coords = [particle.x, particle.y]
    vels = [particle.vx, particle.vy]
    axis, sign = location.axis, location.sign
    if sign * coords[axis] <= boundary:
        return None
    if clamp:
        coords[axis] = sign * boundary
    event = None
    if sign * vels[axis] > 0:
        event = Reflection(particle.particle_id, location, abs(vels[axis]))
        vels[axis] = -vels[axis]
    particle.x, particle.y = coords
    particle.vx, particle.vy = vels
    return event


def reflect_walls(particles: List[Particle],
                  config: Configuration) -> List[Reflection]:
    events = []
    for p in particles:
        for location in WallLocation:
            event = reflect(p, location, config.boundary(location.axis),
                            clamp=config.clamp_to_boundary)
            if event is not None:
                events.append(event)
    return events


def _valid_dt(dt: float) -> bool:
    return math.isfinite(dt) and dt >= 0


class Simulation:
    """
    Owns particles and walls. The host drives it:
    fixed_update() once per fixed tick, update() once per frame.
    """

    def __init__(self, config: Configuration, n_particles: int = S.N_PARTICLES,
                 seed: Optional[int] = None):
        config = config.clamped()
        self.n_particles = n_particles
        self.rng = np.random.RandomState(seed)
        self.particles: List[Particle] = []
        self.walls: List[Wall] = spawn_walls(config)
        self.geometry = BoundarySync()
        self.geometry.sync(self.walls, config)
        self.time: float = 0.0
        self.tick_count: int = 0
        self.bounce_log: List[Dict] = []
        self._spawn_config = config

    def initialize(self, particles: Optional[List[Particle]] = None,
                   config: Optional[Configuration] = None) -> List[Particle]:
        """Random spawns land inside `config` (or the startup config)."""
        if config is not None:
            self._spawn_config = config.clamped()
        if particles is not None:
            self.particles = [copy.deepcopy(p) for p in particles]
        else:
            self.particles = [self._create_random_particle(i)
                              for i in range(self.n_particles)]
        self.time = 0.0
        self.tick_count = 0
        self.bounce_log = []
        return self.particles

    def _create_random_particle(self, particle_id: int) -> Particle:
        bx = self._spawn_config.boundary(0)
        by = self._spawn_config.boundary(1)
        x = self.rng.uniform(-bx, bx)
        y = self.rng.uniform(-by, by)
        speed = self.rng.uniform(*S.SPEED_RANGE)
        angle = self.rng.uniform(0, 2 * np.pi)
        return Particle(x=x, y=y, vx=speed * np.cos(angle),
                        vy=speed * np.sin(angle), particle_id=particle_id)

    def fixed_update(self, config: Configuration, dt: float) -> bool:
        if not _valid_dt(dt) or not config.is_finite():
            logger.warning("skipping tick %d: dt=%r config=%s",
                           self.tick_count, dt, config)
            return False
        config = config.clamped()
        integrate(self.particles, dt)
        apply_gravity(self.particles, config, dt)
        events = reflect_walls(self.particles, config)
        self.time += dt
        self.tick_count += 1
        for e in events:
            self.bounce_log.append({
                'time': self.time, 'tick': self.tick_count,
                'particle_id': e.particle_id, 'wall': e.wall, 'speed': e.speed,
            })
        return True

    def update(self, config: Configuration, dt: float) -> bool:
        """Per-frame update. Returns True when wall geometry was rewritten."""
        if not _valid_dt(dt) or not config.is_finite():
            logger.warning("skipping frame update: dt=%r config=%s", dt, config)
            return False
        return self.geometry.sync(self.walls, config.clamped())

    # State access

    def get_state(self) -> np.ndarray:
        """(n_particles, 4) → [x, y, vx, vy]"""
        return np.array([p.state for p in self.particles]).reshape(-1, 4)

    def set_state(self, state: np.ndarray):
        state = np.asarray(state, dtype=float)
        if state.shape != (len(self.particles), 4):
            raise ValueError(f"expected state of shape ({len(self.particles)}, 4), "
                             f"got {state.shape}")
        for i, p in enumerate(self.particles):
            p.x, p.y, p.vx, p.vy = (float(v) for v in state[i])

    # Render sink

    def particle_positions(self) -> np.ndarray:
        """(n_particles, 3), z = 0."""
        return np.array([p.position for p in self.particles]).reshape(-1, 3)

    def wall_geometry(self) -> Dict[WallLocation, Tuple[np.ndarray, np.ndarray]]:
        return {w.location: (w.position.copy(), w.size.copy()) for w in self.walls}

    # Energy (per unit mass)

    def kinetic_energy(self) -> float:
        return sum(0.5 * (p.vx**2 + p.vy**2) for p in self.particles)

    def potential_energy(self, config: Configuration) -> float:
        floor = -config.boundary(1)
        return sum(config.gravity * (p.y - floor) for p in self.particles)

    def total_energy(self, config: Configuration) -> float:
        return self.kinetic_energy() + self.potential_energy(config)


def generate_trajectory(config: Configuration,
                        particles: Optional[List[Particle]] = None,
                        n_steps: int = S.N_STEPS, dt: float = S.FIXED_DT,
                        seed: Optional[int] = S.SEED) -> Dict:
    """Returns dict with states, times, energy, bounces, config."""
    sim = Simulation(config, seed=seed)
    sim.initialize(particles)

    states = [sim.get_state()]
    times = [sim.time]
    energy = [sim.total_energy(config)]

    for _ in range(n_steps):
        sim.fixed_update(config, dt)
        states.append(sim.get_state())
        times.append(sim.time)
        energy.append(sim.total_energy(config))

    return {
        'states': np.array(states),
        'times': np.array(times),
        'energy': np.array(energy),
        'bounces': sim.bounce_log,
        'config': config,
    }
