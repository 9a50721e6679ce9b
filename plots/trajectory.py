import sys
import os
import argparse
import matplotlib.pyplot as plt

current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
sys.path.append(project_root)

from simulation.simulator import run_simulation
import config as c

def plot_trajectory(trajectory, save_path):
    """Time series (left) and phase portrait (right) of one run."""
    t = trajectory.t
    prey, predator = trajectory.y[:, 0], trajectory.y[:, 1]

    plt.rcParams.update({'font.size': 12, 'font.family': 'sans-serif'})
    fig = plt.figure(figsize=(16, 6), dpi=150)
    gs = fig.add_gridspec(1, 2)

    ax1 = fig.add_subplot(gs[0, 0])
    ax1.plot(t, prey, label='Prey', linewidth=2)
    ax1.plot(t, predator, label='Predator', linestyle='--', linewidth=2)
    ax1.set_title('(a) Population vs Time', fontweight='bold')
    ax1.set_xlabel('Time')
    ax1.set_ylabel('Density')
    ax1.grid(True, linestyle='--', alpha=0.6)
    ax1.legend(loc='best')

    ax2 = fig.add_subplot(gs[0, 1])
    ax2.plot(prey, predator, color='purple', linewidth=2)
    ax2.plot(prey[0], predator[0], marker='o', color='black', label='Start')
    ax2.set_title('(b) Phase Portrait', fontweight='bold')
    ax2.set_xlabel('Prey')
    ax2.set_ylabel('Predator')
    ax2.grid(True, linestyle='--', alpha=0.6)
    ax2.legend(loc='best')

    plt.tight_layout()
    plt.savefig(save_path)
    plt.close(fig)
    print(f"Plot saved to: {save_path}")

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--prey", type=float, default=40.0)
    ap.add_argument("--predator", type=float, default=9.0)
    ap.add_argument("--steps", type=int, default=c.STEPS * 10)
    args = ap.parse_args()

    traj = run_simulation(args.prey, args.predator, steps=args.steps)
    plot_trajectory(traj, os.path.join(current_dir, "trajectory.png"))
