# beamsolve - Euler-Bernoulli beam deflection
"""
BEAMSOLVE: Static Deflection of a One-Dimensional Beam
======================================================

This package provides:
- Shear, moment, slope and deflection of an Euler-Bernoulli beam
- Point loads, a continuous load density, pins and fixed end anchors
- Reaction forces/moments from a small dense linear system
- Tabular export and diagram plots

ARCHITECTURE:
-------------
    kernel/         Solver pipeline (grid, integration, assembly, solve)
    model.py        PointLoad, Pin, GridPoint, end-condition tokens
    solver.py       solve_beam() and BeamResult
    beam.py         Beam: validated, mutable configuration
    post.py         Reactions, peak values, pandas export
    viz.py          Diagram plots
    config.py       Solver defaults
    errors.py       Exception taxonomy
"""

import logging

from .errors import (
    BeamError,
    ConfigurationError,
    GridConstructionError,
    PhysicalError,
    SolveError,
    InternalInvariantError,
)
from .model import FREE, FIXED, PointLoad, Pin, GridPoint
from .config import CONFIG, SolverConfig
from .solver import solve_beam, BeamResult
from .beam import Beam

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'Beam',
    'BeamResult',
    'solve_beam',
    'PointLoad',
    'Pin',
    'GridPoint',
    'FREE',
    'FIXED',
    'CONFIG',
    'SolverConfig',
    'BeamError',
    'ConfigurationError',
    'GridConstructionError',
    'PhysicalError',
    'SolveError',
    'InternalInvariantError',
]
