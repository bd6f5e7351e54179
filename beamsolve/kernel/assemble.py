# beamsolve/kernel/assemble.py
"""
ASSEMBLY: Building the Reaction System A·u = b
==============================================

PURPOSE:
--------
The particular solution satisfies the load equations but none of the
support conditions. Each support condition becomes one linear equation in
the unknown reactions and integration constants u (see dof.py):

    left fixed    y(0) = 0,  θ(0) = 0
    pin at x_i    y(x_i) = 0
    right fixed   y(L) = 0,  θ(L) = 0
    always        M(L) = 0,  V(L) = 0

UNIT RESPONSES:
---------------
Every equation is written from the same building block: the response at x
of a unit reaction located at x_j ≤ x. With x measured from the reaction
(d = x - x_j):

    unit upward force    V = -1,  M = -d,  θ = -d²/(2EI),  y = -d³/(6EI)
    unit moment          V =  0,  M =  1,  θ =  d/EI,      y =  d²/(2EI)

and c3, c4 add θ += c3, y += c3·x + c4. A field value at x is therefore

    field(x) = field_bar(x) + Σ_unknowns coeff · u

and the condition field(x) = 0 is the row  coeff · u = -field_bar(x).

For a pin at x_i the y row expands to

    m0·x_i²/(2EI) - p0·x_i³/(6EI) - Σ_{j<i} pin_j·(x_i-x_j)³/(6EI) + c3·x_i + c4 = -ybar(x_i)

and for the free-end equilibrium rows

    m0 - p0·L - Σ pin_j·(L-x_j) + mL = -mbar(L)
    -p0 - Σ pin_j - pL              = -vbar(L)
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ..errors import PhysicalError
from ..model import FIXED, GridPoint
from .dof import FORCE, UnknownLayout

logger = logging.getLogger(__name__)

# Field indices into a response vector
V, M, THETA, Y = 0, 1, 2, 3
FIELD_NAMES = ("v", "m", "theta", "y")


@dataclass
class LinearSystem:
    """Square reaction system with labelled columns."""
    A: np.ndarray
    b: np.ndarray
    unknowns: List[str]


def flexural_rigidity(moment: float, modulus: float) -> float:
    """
    EI from its two factors.

    Raises:
    -------
    PhysicalError
        If either factor, or their product, is not strictly positive
    """
    if not moment > 0 or not modulus > 0:
        raise PhysicalError(
            f"Flexural rigidity factors must be positive (I={moment!r}, E={modulus!r})"
        )
    EI = moment * modulus
    if not EI > 0:
        raise PhysicalError(f"Flexural rigidity EI must be positive, got {EI!r}")
    return EI


def unit_response(kind: str, x_j: float, x: float, EI: float) -> np.ndarray:
    """
    (V, M, θ, y) at x caused by a unit reaction at x_j (x_j ≤ x assumed).

    Parameters:
    -----------
    kind : str
        FORCE (upward positive) or MOMENT
    x_j : float
        Reaction location
    x : float
        Evaluation point
    EI : float
        Flexural rigidity

    Returns:
    --------
    np.ndarray
        Shape (4,) array [V, M, θ, y]
    """
    d = x - x_j
    if kind == FORCE:
        return np.array([-1.0, -d, -d * d / (2.0 * EI), -d ** 3 / (6.0 * EI)])
    return np.array([0.0, 1.0, d / EI, d * d / (2.0 * EI)])


def field_row(layout: UnknownLayout, field: int, x: float, EI: float) -> np.ndarray:
    """
    Coefficients of every unknown in field(x), taken just after any
    feature located at x (all reactions with x_j ≤ x act).
    """
    row = np.zeros(layout.n, dtype=float)
    for reaction in layout.reactions:
        if reaction.x <= x:
            row[layout.idx(reaction.name)] = unit_response(reaction.kind, reaction.x, x, EI)[field]
    if field == THETA:
        row[layout.idx("c3")] = 1.0
    elif field == Y:
        row[layout.idx("c3")] = x
        row[layout.idx("c4")] = 1.0
    return row


def _bar(point: GridPoint, field: int) -> float:
    return (point.vbar, point.mbar, point.thetabar, point.ybar)[field]


def _point_at(grid: Sequence[GridPoint], x: float) -> GridPoint:
    for p in grid:
        if p.x == x:
            return p
    raise KeyError(f"No grid point at x={x!r}")


def assemble_system(
    grid: Sequence[GridPoint],
    layout: UnknownLayout,
    EI: float,
) -> LinearSystem:
    """
    Assemble the reaction system from the integrated grid.

    Row order: left-end conditions, one row per pin, right-end
    conditions, then M(L) = 0 and V(L) = 0. Columns follow layout.names.

    Parameters:
    -----------
    grid : Sequence[GridPoint]
        Grid with bar values filled in by integrate_particular
    layout : UnknownLayout
        Unknowns for this support configuration
    EI : float
        Flexural rigidity

    Returns:
    --------
    LinearSystem

    Raises:
    -------
    PhysicalError
        If EI is not strictly positive
    """
    if not EI > 0:
        raise PhysicalError(f"Flexural rigidity EI must be positive, got {EI!r}")

    first, last = grid[0], grid[-1]
    L = layout.length

    conditions = []     # (field, x, bar-value source)
    if layout.left_fixed:
        conditions.append((Y, 0.0, first))
        conditions.append((THETA, 0.0, first))
    for x in layout.pin_xs:
        conditions.append((Y, x, _point_at(grid, x)))
    if layout.right_fixed:
        conditions.append((Y, L, last))
        conditions.append((THETA, L, last))
    conditions.append((M, L, last))
    conditions.append((V, L, last))

    A = np.zeros((layout.n, layout.n), dtype=float)
    b = np.zeros(layout.n, dtype=float)
    for i, (field, x, source) in enumerate(conditions):
        A[i] = field_row(layout, field, x, EI)
        b[i] = -_bar(source, field)

    logger.debug("Assembled %dx%d system, unknowns=%s", layout.n, layout.n, layout.names)
    return LinearSystem(A=A, b=b, unknowns=list(layout.names))


def layout_for(length: float, pin_xs: Sequence[float], anchor_left: str, anchor_right: str) -> UnknownLayout:
    """Unknown layout for a support configuration; ends count only when fixed."""
    return UnknownLayout(
        length=length,
        left_fixed=anchor_left == FIXED,
        right_fixed=anchor_right == FIXED,
        pin_xs=tuple(pin_xs),
    )
