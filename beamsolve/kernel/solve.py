# beamsolve/kernel/solve.py
"""Dense reaction solve with ill-conditioning detection, and superposition."""

import logging
from typing import Dict, List

import numpy as np

from ..errors import SolveError
from ..model import GridPoint
from .assemble import LinearSystem, M, THETA, V, Y, unit_response
from .dof import UnknownLayout

logger = logging.getLogger(__name__)


def solve_linear(system: LinearSystem, cond_limit: float = 1e12) -> Dict[str, float]:
    """
    Solve A·u = b for the named unknowns.

    Rows and columns are equilibrated first (each scaled by its largest
    entry) so that the conditioning check is not dominated by units: the
    deflection rows carry 1/EI while the equilibrium rows are O(L).

    Args:
        system: Assembled reaction system
        cond_limit: Max condition number of the equilibrated matrix

    Returns:
        Dict mapping unknown name to its solved value

    Raises:
        SolveError: If the beam is under- or mis-constrained
            (zero row/column, cond > cond_limit, or singular matrix)
    """
    A, b = system.A, system.b

    row_max = np.max(np.abs(A), axis=1)
    if np.any(row_max == 0.0):
        raise SolveError(
            "Unstable system: an equilibrium condition involves no unknowns. Check supports."
        )
    Ar = A / row_max[:, None]

    col_max = np.max(np.abs(Ar), axis=0)
    if np.any(col_max == 0.0):
        missing = [name for name, c in zip(system.unknowns, col_max) if c == 0.0]
        raise SolveError(
            f"Unstable system: unknowns {missing} are not constrained. Check supports."
        )
    As = Ar / col_max[None, :]

    cond = np.linalg.cond(As)
    if not np.isfinite(cond) or cond > cond_limit:
        raise SolveError(
            f"Unstable system (cond={cond:.2e}). Check supports. Need cond < {cond_limit:.0e}."
        )

    try:
        z = np.linalg.solve(As, b / row_max)
    except np.linalg.LinAlgError as e:
        raise SolveError(f"Singular reaction system: {e}") from e

    u = z / col_max
    logger.debug("Solved %d unknowns (cond=%.2e)", len(u), cond)
    return {name: float(value) for name, value in zip(system.unknowns, u)}


def _acts_on(point: GridPoint, x_j: float) -> bool:
    """A reaction at x_j acts on points past it, and on the +1 side at x_j."""
    return point.x > x_j or (point.x == x_j and point.relation == +1)


def superpose(
    grid: List[GridPoint],
    layout: UnknownLayout,
    solution: Dict[str, float],
    EI: float,
) -> List[GridPoint]:
    """
    Fill the final v, m, theta, y on every grid point (in place).

    Each field is its bar value plus the unit response of every reaction
    that has acted by x, scaled by the solved reaction, plus the slope and
    deflection constants.
    """
    c3 = solution["c3"]
    c4 = solution["c4"]

    for point in grid:
        fields = np.array([point.vbar, point.mbar, point.thetabar, point.ybar], dtype=float)
        for reaction in layout.reactions:
            if _acts_on(point, reaction.x):
                fields += solution[reaction.name] * unit_response(reaction.kind, reaction.x, point.x, EI)
        fields[THETA] += c3
        fields[Y] += c3 * point.x + c4

        point.v = float(fields[V])
        point.m = float(fields[M])
        point.theta = float(fields[THETA])
        point.y = float(fields[Y])

    return grid
