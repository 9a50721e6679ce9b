import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import fields

import pandas as pd
import config as c
from errors import InvalidArgumentError
from models.lotka_volterra import LotkaVolterra
from simulation.simulator import run_simulation, summarize

class Scanner:
    def __init__(self, t0=c.T0, dt=c.DT, steps=c.STEPS, workers=1):
        self.t0 = t0
        self.dt = dt
        self.steps = steps
        # 每个 case 是一次完整的 solve，彼此无共享状态，可并行
        self.workers = workers

    def run_initial_condition_scan(self, prey_levels, predator_levels, output=None):
        """
        模式1: 初始密度扫描 (Prey x Predator)
        """
        print(f"\n>>> Starting Initial Condition Scan (Prey x Predator)...")
        print(f"Prey: {list(prey_levels)}, Predator: {list(predator_levels)}")

        cases = [
            {
                "scan_type": "Initial",
                "prey": prey,
                "predator": predator,
                "param_overrides": None,
                "extra_data": None,
            }
            for prey in prey_levels
            for predator in predator_levels
        ]
        return self._run_cases(cases, output)

    def run_parameter_scan(self, param_dict, prey, predator, output=None):
        """
        模式2: 速率系数敏感度扫描
        param_dict: { 'a': [multiplier1, multiplier2, ...], 'g': [...] }
        """
        print(f"\n>>> Starting Coefficient Scan (Sensitivity)...")

        base = LotkaVolterra()
        names = {f.name for f in fields(base)}
        unknown = sorted(set(param_dict) - names)
        if unknown:
            raise InvalidArgumentError(f"Unknown Lotka-Volterra coefficient(s): {', '.join(unknown)}")

        cases = []
        for param_name, multipliers in param_dict.items():
            base_val = getattr(base, param_name)

            for mult in multipliers:
                val = base_val * mult
                tag = f"{param_name} x{mult}"
                cases.append({
                    "scan_type": f"Coefficient ({tag})",
                    "prey": prey,
                    "predator": predator,
                    "param_overrides": {param_name: val},
                    "extra_data": {"Param": param_name, "Multiplier": mult, "Value": val},
                })

        return self._run_cases(cases, output)

    def _run_cases(self, cases, output):
        if self.workers > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                # map 保持输入顺序
                results = list(pool.map(lambda case: self._run_single_case(**case), cases))
        else:
            results = [self._run_single_case(**case) for case in cases]

        df = pd.DataFrame(results)
        if output is not None:
            self._save_results(df, output)
        return df

    def _run_single_case(self, scan_type, prey, predator, param_overrides=None, extra_data=None):
        """内部通用执行逻辑"""
        trajectory = run_simulation(
            prey, predator,
            t0=self.t0, dt=self.dt, steps=self.steps,
            param_overrides=param_overrides,
        )
        metrics = summarize(trajectory)

        record = {
            "Type": scan_type,
            "Prey_Start": prey,
            "Predator_Start": predator,
        }
        # 合并额外的参数信息（如果是系数扫描）
        if extra_data:
            record.update(extra_data)
        record.update(metrics)

        print(f"[{scan_type[:15]:<15}] Prey0:{prey:8.2f} | Pred0:{predator:8.2f} | "
              f"Peak prey:{metrics['Peak_Prey']:10.2f} | Diverged:{metrics['Diverged']}")
        return record

    def _save_results(self, df, filename):
        if df.empty:
            print("No results to save.")
            return

        out_dir = os.path.dirname(filename)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        df.to_csv(filename, index=False)
        print(f"Saved results to {filename}")
