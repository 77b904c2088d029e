import argparse
import logging
import os

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from sandbox.config import Configuration
from sandbox.engine import generate_trajectory, Particle
from sandbox.metrics import mechanical_energy, first_bounce_time, bounce_speeds
from sandbox.walls import WallLocation


def evaluate(gravity=100.0, radius=30.0, half_extents=(700.0, 400.0),
             dt=0.02, n_steps=2000, clamp=False, out_dir='results/plots'):
    config = Configuration(gravity=gravity, particle_radius=radius,
                           half_extents=half_extents,
                           clamp_to_boundary=clamp).clamped()
    traj = generate_trajectory(config, [Particle()], n_steps=n_steps, dt=dt)

    floor = -config.boundary(1)
    expected = np.sqrt(2 * (-floor) / gravity) if gravity > 0 else float('inf')
    t_first = first_bounce_time(traj['bounces'], WallLocation.BOTTOM)
    speeds = bounce_speeds(traj['bounces'], wall=WallLocation.BOTTOM)
    energy = mechanical_energy(traj['states'], gravity, floor)

    print(f"Floor at y={floor:.1f}, expected first bounce ~{expected:.3f}s")
    print(f"First bounce: {t_first}")
    print(f"Bounces: {len(speeds)}  speeds: {np.round(speeds[:6], 2)}")
    print(f"Energy drift: {energy[-1] - energy[0]:.4f} "
          f"({100 * (energy[-1] - energy[0]) / max(energy[0], 1e-9):.2f}%)")

    os.makedirs(out_dir, exist_ok=True)

    plt.figure(figsize=(10, 5))
    plt.plot(traj['times'], traj['states'][:, 0, 1], label='y', color='black')
    plt.axhline(floor, color='red', linestyle='--', label='contact plane')
    plt.xlabel('t [s]')
    plt.title(f'Drop: g={gravity}, dt={dt}')
    plt.legend()
    plt.savefig(os.path.join(out_dir, 'bounce_height.png'))
    plt.close()

    plt.figure(figsize=(10, 5))
    plt.plot(traj['times'], energy, label='Mechanical energy')
    plt.xlabel('t [s]')
    plt.title('Energy (per unit mass)')
    plt.legend()
    plt.savefig(os.path.join(out_dir, 'bounce_energy.png'))
    plt.close()

    print(f"Plots saved to {out_dir}/")
    return traj


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Drop a particle and plot its bounces")
    parser.add_argument("--gravity", type=float, default=100.0)
    parser.add_argument("--radius", type=float, default=30.0)
    parser.add_argument("--dt", type=float, default=0.02)
    parser.add_argument("--steps", type=int, default=2000)
    parser.add_argument("--clamp", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper())
    evaluate(gravity=args.gravity, radius=args.radius, dt=args.dt,
             n_steps=args.steps, clamp=args.clamp)
