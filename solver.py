import math
import numbers
from dataclasses import dataclass

import numpy as np
import pandas as pd

import config as c
from errors import InvalidArgumentError


def _as_state(y0) -> np.ndarray:
    try:
        raw = np.asarray(y0)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"initial state must be numeric: {exc}") from exc
    # None、字符串等 object 元素不接受
    if raw.dtype.kind not in "iuf":
        raise InvalidArgumentError(f"initial state must be numeric, got {y0!r}")
    y = np.array(raw, dtype=c.STATE_DTYPE)
    if y.ndim != 1 or y.size == 0:
        raise InvalidArgumentError(f"initial state must be a non-empty 1-D vector, got shape {y.shape}")
    return y


def _evaluate(f, t: float, y: np.ndarray) -> np.ndarray:
    dy = np.asarray(f(t, y), dtype=c.STATE_DTYPE)
    if dy.shape != y.shape:
        raise InvalidArgumentError(f"evaluator returned shape {dy.shape} for state of shape {y.shape}")
    return dy


def rk4_step(f, t: float, y: np.ndarray, dt: float) -> np.ndarray:
    """
    One classical Runge-Kutta step of size dt from (t, y).
    f(t, y) -> dy/dt, same shape as y. Returns a new array.
    """
    k1 = _evaluate(f, t, y)
    k2 = _evaluate(f, t + dt / 2, y + dt * k1 / 2)
    k3 = _evaluate(f, t + dt / 2, y + dt * k2 / 2)
    k4 = _evaluate(f, t + dt, y + dt * k3)

    return y + dt * (k1 + 2 * k2 + 2 * k3 + k4) / 6


class RK4Solver:
    def __init__(self, t0, y0):
        self.t = float(t0)
        self.state = _as_state(y0)

    def step(self, system, dt):
        """
        system: callable system(t, y) -> np.array, 与 y 同形状
        推进一步后返回新的 state
        """
        self.state = rk4_step(system, self.t, self.state, dt)
        # 时间按累加推进 (与参考程序一致，包括浮点漂移)
        self.t += dt
        return self.state


@dataclass(eq=False)
class Trajectory:
    """
    Ordered (time, state) snapshots of one integration.

    t: shape (steps + 1,)
    y: shape (steps + 1, N)
    """
    t: np.ndarray
    y: np.ndarray

    def __len__(self):
        return len(self.t)

    def __getitem__(self, i):
        return self.t[i], self.y[i]

    def __iter__(self):
        return zip(self.t, self.y)

    @property
    def n_states(self) -> int:
        return self.y.shape[1]

    def to_frame(self, columns=c.STATE_COLUMNS) -> pd.DataFrame:
        if len(columns) != self.n_states:
            raise InvalidArgumentError(f"{len(columns)} column names for {self.n_states} state components")
        df = pd.DataFrame(self.y, columns=list(columns))
        df.insert(0, "Time", self.t)
        return df


def _check_steps(steps) -> int:
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
        raise InvalidArgumentError(f"steps must be an integer, got {steps!r}")
    if steps < 0:
        raise InvalidArgumentError(f"steps must be >= 0, got {steps}")
    return int(steps)


def _check_dt(dt) -> float:
    try:
        dt = float(dt)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"dt must be a real number, got {dt!r}") from exc
    if dt == 0.0 or not math.isfinite(dt):
        raise InvalidArgumentError(f"dt must be finite and nonzero, got {dt}")
    return dt


def solve(evaluator, t0, y0, dt, steps) -> Trajectory:
    """
    Integrate evaluator(t, y) from (t0, y0) with `steps` fixed RK4 steps of size dt.

    Returns a Trajectory of steps + 1 entries, the first being (t0, y0).
    Negative dt integrates backward. Non-finite values are returned as-is.
    """
    steps = _check_steps(steps)
    dt = _check_dt(dt)

    solver = RK4Solver(t0, y0)
    n = solver.state.size
    expected = getattr(evaluator, "n_states", None)
    if expected is not None and expected != n:
        raise InvalidArgumentError(f"evaluator expects {expected} state components, got {n}")

    ts = np.empty(steps + 1, dtype=c.STATE_DTYPE)
    ys = np.empty((steps + 1, n), dtype=c.STATE_DTYPE)
    ts[0] = solver.t
    ys[0] = solver.state

    for i in range(1, steps + 1):
        ys[i] = solver.step(evaluator, dt)
        ts[i] = solver.t

    return Trajectory(t=ts, y=ys)
