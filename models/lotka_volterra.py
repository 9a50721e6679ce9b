# models/lotka_volterra.py

from dataclasses import dataclass, fields, replace

import numpy as np

import config as c
from errors import InvalidArgumentError


@dataclass(frozen=True)
class LotkaVolterra:
    """
    Predator-prey vector field f(t, y) -> dy/dt.

    y[0]: prey density
    y[1]: predator density

    a: prey growth rate
    b: predation rate
    d: predator growth from predation
    g: predator death rate
    """
    a: float = c.A
    b: float = c.B
    d: float = c.D
    g: float = c.G

    n_states = 2

    def __call__(self, t: float, y: np.ndarray) -> np.ndarray:
        if len(y) != self.n_states:
            raise InvalidArgumentError(f"Lotka-Volterra state has 2 components, got {len(y)}")
        prey, predator = y[0], y[1]
        return np.array([
            self.a * prey - self.b * prey * predator,      # d(prey)/dt
            self.d * prey * predator - self.g * predator,  # d(predator)/dt
        ])

    def with_overrides(self, **params) -> "LotkaVolterra":
        names = {f.name for f in fields(self)}
        unknown = sorted(set(params) - names)
        if unknown:
            raise InvalidArgumentError(f"Unknown Lotka-Volterra coefficient(s): {', '.join(unknown)}")
        values = {}
        for k, v in params.items():
            try:
                values[k] = float(v)
            except (TypeError, ValueError):
                raise InvalidArgumentError(f"Coefficient {k} must be a real number, got {v!r}") from None
        return replace(self, **values)

    def equilibrium(self) -> np.ndarray:
        # 非平凡不动点: prey = g/d, predator = a/b
        return np.array([self.g / self.d, self.a / self.b])


# 参考配置 (a=0.1, b=0.02, d=0.01, g=0.1)
lotka_volterra = LotkaVolterra()
