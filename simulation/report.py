import os

import config as c
from errors import InvalidArgumentError

def _column_names(trajectory, columns):
    if columns is None:
        if trajectory.n_states == len(c.STATE_COLUMNS):
            return list(c.STATE_COLUMNS)
        return [f"y{i}" for i in range(trajectory.n_states)]
    if len(columns) != trajectory.n_states:
        raise InvalidArgumentError(f"{len(columns)} column names for {trajectory.n_states} state components")
    return list(columns)

def format_table(trajectory, columns=None, precision=c.TABLE_PRECISION) -> str:
    """
    Tab separated table, one row per trajectory entry:

        Time\tPrey\tPredator
        0.00\t40.00\t9.00
        ...
    """
    names = _column_names(trajectory, columns)
    lines = ["\t".join(["Time"] + names)]
    for t, y in trajectory:
        lines.append("\t".join(f"{v:.{precision}f}" for v in (t, *y)))
    return "\n".join(lines) + "\n"

def save_trajectory(trajectory, path, columns=None, float_format=None):
    df = trajectory.to_frame(_column_names(trajectory, columns))

    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    df.to_csv(path, index=False, float_format=float_format)
    return df
