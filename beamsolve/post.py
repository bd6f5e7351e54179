# reactions, peak values, tabular export

import numpy as np
import pandas as pd
from typing import Dict

from .solver import BeamResult

FIELDS = ('v', 'm', 'theta', 'y')


def compute_reactions(result: BeamResult) -> Dict[str, Dict[str, float]]:
    """
    Group the solved reactions by support.

    Parameters:
    -----------
    result : BeamResult
        Output of solve_beam / Beam.solve

    Returns:
    --------
    Dict[str, Dict[str, float]]
        Mapping of support label to {'x', 'R', 'M'}:
        - 'left' / 'right' for fixed ends (force R upward, moment M)
        - 'pin_0', 'pin_1', ... for pins (M is always 0)
    """
    sol = result.solution
    out = {}
    if 'p0' in sol:
        out['left'] = {'x': 0.0, 'R': sol['p0'], 'M': sol['m0']}

    pin_names = sorted((k for k in sol if k.startswith('pin_')), key=lambda k: int(k[4:]))
    pin_xs = sorted({p.x for p in result.grid if p.is_pin})
    for name, x in zip(pin_names, pin_xs):
        out[name] = {'x': float(x), 'R': sol[name], 'M': 0.0}

    if 'pL' in sol:
        out['right'] = {'x': result.length, 'R': sol['pL'], 'M': sol['mL']}
    return out


def peak_values(result: BeamResult) -> Dict[str, Dict[str, float]]:
    """
    Largest absolute value of each field and where it occurs.

    Returns:
    --------
    Dict[str, Dict[str, float]]
        {'v': {'value', 'x'}, 'm': ..., 'theta': ..., 'y': ...}
        'value' keeps its sign.
    """
    x = result.x
    out = {}
    for name in FIELDS:
        values = getattr(result, name)
        i = int(np.argmax(np.abs(values)))
        out[name] = {'value': float(values[i]), 'x': float(x[i])}
    return out


def results_to_dataframe(result: BeamResult, include_bar: bool = False) -> pd.DataFrame:
    """
    One row per grid point.

    Columns: x, relation, point_load, pin, fixed_anchor, v, m, theta, y
    (plus vbar, mbar, thetabar, ybar when include_bar is True).
    """
    rows = []
    for p in result.grid:
        row = {
            'x': p.x,
            'relation': p.relation,
            'point_load': p.is_point_load,
            'pin': p.is_pin,
            'fixed_anchor': p.is_fixed_anchor,
            'v': p.v,
            'm': p.m,
            'theta': p.theta,
            'y': p.y,
        }
        if include_bar:
            row.update({'vbar': p.vbar, 'mbar': p.mbar, 'thetabar': p.thetabar, 'ybar': p.ybar})
        rows.append(row)
    return pd.DataFrame(rows)
