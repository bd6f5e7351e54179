# beamsolve/kernel - Beam solver pipeline
"""
KERNEL: THE BEAM SOLVER PIPELINE
================================

    grid.py        Discontinuity-aware grid (feature pairs at loads/pins/anchors)
    integrate.py   Particular ("bar") solution of the applied loads
    dof.py         Column layout of the reaction unknowns
    assemble.py    Unit responses and the reaction system A·u = b
    solve.py       Dense solve with conditioning check, superposition

Each stage only reads the output of the previous one; all state is local
to a single solve.
"""

from .grid import build_grid
from .integrate import integrate_particular
from .dof import UnknownLayout
from .assemble import LinearSystem, assemble_system, flexural_rigidity, layout_for
from .solve import solve_linear, superpose

__all__ = [
    'build_grid',
    'integrate_particular',
    'UnknownLayout',
    'LinearSystem',
    'assemble_system',
    'flexural_rigidity',
    'layout_for',
    'solve_linear',
    'superpose',
]
