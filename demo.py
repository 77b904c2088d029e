"""
Interactive sandbox — the host loop.
Run: python demo.py --gravity 100

Keys:
  UP / DOWN     gravity +/- 10
  RIGHT / LEFT  particle radius +/- 2
  ] / [         grow / shrink the box by 20
  C             toggle boundary clamping
  R             reset particles
  Q             quit
"""
import argparse
import logging

import sandbox as S
from sandbox.clock import FixedClock
from sandbox.config import Configuration, ConfigStore
from sandbox.engine import Simulation, Particle
from sandbox.renderer import Renderer, AppearanceConfig
import pygame


def parse_args():
    parser = argparse.ArgumentParser(description="2D particle sandbox (pygame host)")
    parser.add_argument("--width", type=int, default=S.WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=S.WINDOW_HEIGHT)
    parser.add_argument("--gravity", type=float, default=S.GRAVITY)
    parser.add_argument("--radius", type=float, default=S.PARTICLE_RADIUS)
    parser.add_argument("--particles", type=int, default=S.N_PARTICLES,
                        help="Random particles to spawn; 1 drops a single particle from the center.")
    parser.add_argument("--timestep", type=float, default=S.FIXED_DT,
                        help="Fixed tick length in seconds.")
    parser.add_argument("--fps", type=int, default=S.FPS)
    parser.add_argument("--seed", type=int, default=S.SEED)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args()


def handle_key(key, store: ConfigStore):
    cfg = store.snapshot()
    hw, hh = cfg.half_extents
    if key == pygame.K_UP:
        store.update(gravity=cfg.gravity + 10)
    elif key == pygame.K_DOWN:
        store.update(gravity=cfg.gravity - 10)
    elif key == pygame.K_RIGHT:
        store.update(particle_radius=cfg.particle_radius + 2)
    elif key == pygame.K_LEFT:
        store.update(particle_radius=cfg.particle_radius - 2)
    elif key == pygame.K_RIGHTBRACKET:
        store.update(half_extents=(hw + 20, hh + 20))
    elif key == pygame.K_LEFTBRACKET:
        store.update(half_extents=(hw - 20, hh - 20))
    elif key == pygame.K_c:
        store.update(clamp_to_boundary=not cfg.clamp_to_boundary)


def main():
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    store = ConfigStore(Configuration(
        gravity=args.gravity, particle_radius=args.radius,
        half_extents=(args.width / 2.0, args.height / 2.0)))
    sim = Simulation(store.snapshot(), n_particles=args.particles, seed=args.seed)
    start = [Particle()] if args.particles == 1 else None
    sim.initialize(start)
    clock = FixedClock(timestep=args.timestep)
    renderer = Renderer(AppearanceConfig(width=args.width, height=args.height))

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption('Particle Sandbox')
    frame_clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q:
                    running = False
                elif event.key == pygame.K_r:
                    sim.initialize(start, store.snapshot())
                    clock.reset()
                else:
                    handle_key(event.key, store)

        frame_dt = frame_clock.tick(args.fps) / 1000.0
        for _ in range(clock.advance(frame_dt)):
            sim.fixed_update(store.snapshot(), clock.timestep)
        config = store.snapshot()
        sim.update(config, frame_dt)

        renderer.draw(screen, sim, config)
        pygame.display.set_caption(
            f'Particle Sandbox  g={config.gravity:.0f}  r={config.particle_radius:.0f}  '
            f'box={config.half_extents[0]:.0f}x{config.half_extents[1]:.0f}  '
            f'bounces={len(sim.bounce_log)}')
        pygame.display.flip()

    pygame.quit()
    print(f"Ticks: {sim.tick_count}  Bounces: {len(sim.bounce_log)}")


if __name__ == "__main__":
    main()
