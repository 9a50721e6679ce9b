import sys
import os

# 路径修正
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
sys.path.append(project_root)

from simulation.scanner import Scanner
import config as c

def run_experiment():
    print("=== Experiment 1: Initial Density Matrix Scan ===")
    print("Question: how far from equilibrium (prey=10, predator=5) do the cycles swing?")

    # 1. 定义扫描矩阵
    prey_levels = [5.0, 10.0, 20.0, 40.0, 80.0]
    predator_levels = [2.0, 5.0, 9.0, 15.0]

    # 2. 矩阵扫描 (每个 case 一次独立 solve)
    scanner = Scanner(t0=c.T0, dt=c.DT, steps=c.STEPS * 5, workers=4)
    out_csv = os.path.join(project_root, c.RESULTS_DIR, "exp_01_initial_conditions.csv")
    df = scanner.run_initial_condition_scan(prey_levels, predator_levels, output=out_csv)

    # 3. 数据分析
    print("\n=== Peak Prey Matrix ===")
    print(df.pivot(index="Prey_Start", columns="Predator_Start", values="Peak_Prey"))

    print("\n=== Peak Predator Matrix ===")
    print(df.pivot(index="Prey_Start", columns="Predator_Start", values="Peak_Predator"))

if __name__ == "__main__":
    run_experiment()
