# beamsolve/kernel/integrate.py
"""
PARTICULAR SOLUTION: Integrating the Applied Loads
==================================================

PURPOSE:
--------
Compute, at every grid point, the shear, moment, slope and deflection the
beam would show under the applied loads ALONE, ignoring every unknown
reaction. These are the "bar" values (vbar, mbar, thetabar, ybar). The
reactions are superposed later, once the linear system has been solved.

DIFFERENTIAL RELATIONS:
-----------------------
With the load density w(x) positive downward:

    dV/dx     = w
    dM/dx     = V
    dθ/dx     = M / EI
    dy/dx     = θ

All four bar values start at zero on the first grid point.

QUADRATURE (positive-width interval [a, b]):
--------------------------------------------
The interval is split into 4 equal sub-steps with nodes s0..s4.

    V, M  : composite trapezoid over the 4 sub-steps
    θ     : Simpson 1/3 on [s0, s2] (midpoint s1) and on [s2, s4] (midpoint s3)
    y     : Simpson 1/3 on [s0, s4] with θ(s2) as the midpoint value

For a uniform load every step is exact: V is linear, M quadratic, θ cubic
and y quartic.

ZERO-WIDTH INTERVALS:
---------------------
    point load (-1 → +1)       : V jumps by the load, M/θ/y carry over
    pin or fixed anchor        : everything carries over
    anything else              : malformed grid → InternalInvariantError
"""

import logging
from typing import Callable, List

import numpy as np

from ..errors import InternalInvariantError
from ..model import GridPoint

logger = logging.getLogger(__name__)

SUBDIVISIONS = 4


def _trapezoid_cumulative(f: np.ndarray, h: float, start: float) -> np.ndarray:
    """Running composite-trapezoid integral of samples f with spacing h."""
    out = np.empty_like(f)
    out[0] = start
    out[1:] = start + np.cumsum(0.5 * h * (f[:-1] + f[1:]))
    return out


def _integrate_span(a: GridPoint, b: GridPoint, load_fn: Callable[[float], float], EI: float) -> None:
    width = b.x - a.x
    h = width / SUBDIVISIONS

    xs = [a.x + k * h for k in range(SUBDIVISIONS)] + [b.x]
    w = np.array([float(load_fn(x)) for x in xs], dtype=float)

    v = _trapezoid_cumulative(w, h, a.vbar)
    m = _trapezoid_cumulative(v, h, a.mbar)

    half = 2.0 * h
    theta_mid = a.thetabar + half / 6.0 * (m[0] + 4.0 * m[1] + m[2]) / EI
    theta_end = theta_mid + half / 6.0 * (m[2] + 4.0 * m[3] + m[4]) / EI

    y_end = a.ybar + width / 6.0 * (a.thetabar + 4.0 * theta_mid + theta_end)

    b.vbar = float(v[-1])
    b.mbar = float(m[-1])
    b.thetabar = float(theta_end)
    b.ybar = float(y_end)


def integrate_particular(
    grid: List[GridPoint],
    load_fn: Callable[[float], float],
    EI: float,
) -> List[GridPoint]:
    """
    Fill vbar, mbar, thetabar, ybar on every grid point (in place).

    Parameters:
    -----------
    grid : List[GridPoint]
        Output of build_grid
    load_fn : Callable[[float], float]
        Continuous load density w(x), downward positive
    EI : float
        Flexural rigidity (> 0)

    Returns:
    --------
    List[GridPoint]
        The same grid, for chaining

    Raises:
    -------
    InternalInvariantError
        If two consecutive points share x without being a feature pair
    """
    if not grid:
        return grid

    first = grid[0]
    first.vbar = first.mbar = first.thetabar = first.ybar = 0.0

    for a, b in zip(grid[:-1], grid[1:]):
        if b.x > a.x:
            _integrate_span(a, b, load_fn, EI)
            continue

        if b.x == a.x and a.is_point_load and a.relation == -1:
            b.vbar = a.vbar + a.load
        elif b.x == a.x and (a.is_pin or a.is_fixed_anchor):
            b.vbar = a.vbar
        else:
            raise InternalInvariantError(
                f"Unrecognised grid interval [{a.x!r}, {b.x!r}] "
                f"(relation {a.relation} → {b.relation}); grid is malformed."
            )
        b.mbar = a.mbar
        b.thetabar = a.thetabar
        b.ybar = a.ybar

    last = grid[-1]
    logger.debug(
        "Particular solution at x=%g: vbar=%g mbar=%g thetabar=%g ybar=%g",
        last.x, last.vbar, last.mbar, last.thetabar, last.ybar,
    )
    return grid
