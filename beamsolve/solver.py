# beamsolve/solver.py
"""
SOLVE PIPELINE
==============

    build_grid → integrate_particular → assemble_system → solve_linear → superpose

`solve_beam` runs the whole pipeline on plain inputs and returns a
`BeamResult`. The `Beam` class in beam.py wraps it with validated,
mutable configuration.

SIGN CONVENTIONS:
-----------------
- Loads w (continuous and point) are positive DOWNWARD
- Reaction forces (p0, pL, pins) are positive UPWARD
- V' = w, M' = V, EI·y'' = M, so y is positive downward and M is
  positive where the beam hogs (e.g. at a cantilever root)
"""

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Dict, Iterable, List, Optional

import numpy as np

from .config import CONFIG, SolverConfig
from .errors import ConfigurationError
from .kernel import (
    LinearSystem,
    assemble_system,
    build_grid,
    flexural_rigidity,
    integrate_particular,
    layout_for,
    solve_linear,
    superpose,
)
from .model import ANCHOR_TYPES, FREE, GridPoint, Pin, PointLoad

logger = logging.getLogger(__name__)


def zero_load(x: float) -> float:
    return 0.0


@dataclass
class BeamResult:
    """Everything produced by one solve."""
    grid: List[GridPoint]
    solution: Dict[str, float]
    system: LinearSystem
    length: float
    EI: float

    @property
    def x(self) -> np.ndarray:
        return np.array([p.x for p in self.grid])

    @property
    def v(self) -> np.ndarray:
        return np.array([p.v for p in self.grid])

    @property
    def m(self) -> np.ndarray:
        return np.array([p.m for p in self.grid])

    @property
    def theta(self) -> np.ndarray:
        return np.array([p.theta for p in self.grid])

    @property
    def y(self) -> np.ndarray:
        return np.array([p.y for p in self.grid])

    def at(self, x: float, side: int = +1) -> GridPoint:
        """
        Grid point at exactly x. At a discontinuity `side` picks the
        -1 (before) or +1 (after) point.
        """
        matches = [p for p in self.grid if p.x == x]
        if not matches:
            raise KeyError(f"No grid point at x={x!r}")
        for p in matches:
            if p.relation == side:
                return p
        return matches[0]


def _check_supports(length, point_loads, pins, anchor_left, anchor_right):
    if not isinstance(length, Real) or isinstance(length, bool) or not length > 0:
        raise ConfigurationError(f"length must be a positive number, got {length!r}")
    for name, anchor in (("anchor_left", anchor_left), ("anchor_right", anchor_right)):
        if anchor not in ANCHOR_TYPES:
            raise ConfigurationError(
                f"{name} must be one of {', '.join(ANCHOR_TYPES)}, got {anchor!r}"
            )
    for feature in list(point_loads) + list(pins):
        if not 0.0 <= feature.x <= length:
            raise ConfigurationError(
                f"{type(feature).__name__} at x={feature.x!r} lies outside the beam [0, {length!r}]"
            )


def solve_beam(
    length: float,
    moment: float,
    modulus: float,
    num_grid_pts: Optional[int] = None,
    cont_load: Optional[Callable[[float], float]] = None,
    point_loads: Iterable[PointLoad] = (),
    pins: Iterable[Pin] = (),
    anchor_left: str = FREE,
    anchor_right: str = FREE,
    config: Optional[SolverConfig] = None,
) -> BeamResult:
    """
    Compute shear, moment, slope and deflection of a beam.

    Parameters:
    -----------
    length : float
        Beam length L (> 0)
    moment, modulus : float
        Second moment of area I and elastic modulus E; EI = E·I
    num_grid_pts : int, optional
        Grid resolution (defaults to config.default_num_grid_pts)
    cont_load : Callable[[float], float], optional
        Load density w(x), downward positive. Defaults to zero.
    point_loads : iterable of PointLoad
    pins : iterable of Pin
    anchor_left, anchor_right : str
        "free" or "fixed"
    config : SolverConfig, optional
        Defaults to the global CONFIG

    Returns:
    --------
    BeamResult

    Raises:
    -------
    ConfigurationError
        Invalid length, anchor token, or feature outside [0, L]
    GridConstructionError
        num_grid_pts is not a positive integer
    PhysicalError
        EI is not strictly positive
    SolveError
        The supports do not determine the reactions
    """
    config = config or CONFIG
    if num_grid_pts is None:
        num_grid_pts = config.default_num_grid_pts
    load_fn = cont_load if cont_load is not None else zero_load
    point_loads = list(point_loads)
    pins = list(pins)

    _check_supports(length, point_loads, pins, anchor_left, anchor_right)
    EI = flexural_rigidity(moment, modulus)

    logger.info(
        "Solving beam L=%g EI=%g (%s/%s) with %d point loads, %d pins, %s grid intervals",
        length, EI, anchor_left, anchor_right, len(point_loads), len(pins), num_grid_pts,
    )

    grid = build_grid(length, num_grid_pts, point_loads, pins, anchor_left, anchor_right)
    integrate_particular(grid, load_fn, EI)

    layout = layout_for(length, [p.x for p in pins], anchor_left, anchor_right)
    system = assemble_system(grid, layout, EI)
    solution = solve_linear(system, cond_limit=config.cond_limit)
    superpose(grid, layout, solution, EI)

    logger.info("Solved: %s", ", ".join(f"{k}={v:.6g}" for k, v in solution.items()))
    return BeamResult(grid=grid, solution=solution, system=system, length=length, EI=EI)
