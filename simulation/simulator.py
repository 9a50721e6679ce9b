import numpy as np
import config as c

from models.lotka_volterra import LotkaVolterra
from solver import solve

def run_simulation(prey, predator, t0=c.T0, dt=c.DT, steps=c.STEPS, param_overrides=None):
    """
    运行单次捕食者-被捕食者模拟。
    输入: 初始密度 prey/predator, 积分参数, 可选的速率系数覆盖
    输出: Trajectory (steps + 1 个 (t, y) 点)
    """
    # 1. 初始化系统
    system = LotkaVolterra()
    if param_overrides:
        system = system.with_overrides(**param_overrides)

    # 2. 积分
    return solve(system, t0, [prey, predator], dt, steps)

def summarize(trajectory):
    """Per-run metrics used by the scanner and the experiments."""
    y = trajectory.y
    prey, predator = y[:, 0], y[:, 1]

    # 发散时保留 NaN/inf，由 Diverged 标记
    return {
        "Final_Prey": prey[-1],
        "Final_Predator": predator[-1],
        "Peak_Prey": np.max(prey),
        "Peak_Predator": np.max(predator),
        "Min_Prey": np.min(prey),
        "Min_Predator": np.min(predator),
        "Diverged": not bool(np.all(np.isfinite(y))),
    }
