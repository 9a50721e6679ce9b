import argparse
import sys

import config as c
from errors import InvalidArgumentError
from simulation.init_utils import prompt_initial_state
from simulation.report import format_table, save_trajectory
from simulation.simulator import run_simulation

def build_parser():
    ap = argparse.ArgumentParser(description="Lotka-Volterra predator-prey simulation (fixed-step RK4).")
    ap.add_argument("--prey", type=float, help="initial prey density (prompted if omitted)")
    ap.add_argument("--predator", type=float, help="initial predator density (prompted if omitted)")
    ap.add_argument("--t0", type=float, default=c.T0)
    ap.add_argument("--dt", type=float, default=c.DT)
    ap.add_argument("--steps", type=int, default=c.STEPS)
    ap.add_argument("--precision", type=int, default=c.TABLE_PRECISION, help="decimals in the printed table")
    ap.add_argument("--csv", help="also save the trajectory to this CSV file")
    return ap

def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        # 1. 初始状态
        if args.prey is None or args.predator is None:
            prey, predator = prompt_initial_state()
        else:
            prey, predator = args.prey, args.predator

        # 2. 运行模拟
        trajectory = run_simulation(prey, predator, t0=args.t0, dt=args.dt, steps=args.steps)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # 3. 输出
    sys.stdout.write(format_table(trajectory, precision=args.precision))

    if args.csv:
        df = save_trajectory(trajectory, args.csv, float_format=c.CSV_FLOAT_FORMAT)
        # stdout 只输出表格
        print(f"Saved {len(df)} rows to {args.csv}", file=sys.stderr)

    return 0

if __name__ == "__main__":
    sys.exit(main())
