import sys
import os

current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
sys.path.append(project_root)

from simulation.scanner import Scanner
import config as c

def run_experiment():
    print("=== Experiment 2: Rate Coefficient Sensitivity ===")

    multipliers = [0.5, 0.75, 1.0, 1.25, 1.5]
    param_dict = {name: multipliers for name in ("a", "b", "d", "g")}

    scanner = Scanner(steps=c.STEPS * 5)
    out_csv = os.path.join(project_root, c.RESULTS_DIR, "exp_02_sensitivity.csv")
    df = scanner.run_parameter_scan(param_dict, prey=40.0, predator=9.0, output=out_csv)

    print(f"\n{'Param':<6} | {'Mult':<6} | {'Peak Prey':<10} | {'Peak Predator'}")
    print("-" * 45)
    for _, row in df.iterrows():
        print(f"{row['Param']:<6} | {row['Multiplier']:<6} | {row['Peak_Prey']:<10.2f} | {row['Peak_Predator']:.2f}")

if __name__ == "__main__":
    run_experiment()
