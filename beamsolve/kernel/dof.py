# beamsolve/kernel/dof.py
"""
UNKNOWN LAYOUT: Column Indexing for the Reaction System
=======================================================

PURPOSE:
--------
This module maps each unknown of the beam problem to a column of the
linear system. Which unknowns exist depends on the supports:

    left end fixed   →  m0, p0   (reaction moment and force at x = 0)
    each pin         →  pin_0 … pin_{k-1}, ascending x
    right end fixed  →  mL, pL   (reaction moment and force at x = L)
    always           →  c3, c4   (slope and deflection integration constants)

The shear/moment constants c1, c2 are zero: V(0) = M(0) = 0 always holds
because any force acting at x = 0 is an explicit reaction unknown.

USAGE:
------
    layout = UnknownLayout(length=10.0, left_fixed=True, right_fixed=False,
                           pin_xs=(4.0,))
    layout.names        # ['m0', 'p0', 'pin_0', 'c3', 'c4']
    layout.idx('c3')    # 3
    layout.n            # 5
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

FORCE = "force"
MOMENT = "moment"


@dataclass(frozen=True)
class Reaction:
    """A reaction unknown: its column name, kind and location."""
    name: str
    kind: str       # FORCE (upward positive) or MOMENT
    x: float


@dataclass
class UnknownLayout:
    """
    Column layout of the reaction system.

    Attributes:
    -----------
    length : float
        Beam length L (locates mL and pL)
    left_fixed, right_fixed : bool
        Whether the end carries moment/force reaction unknowns
    pin_xs : Tuple[float, ...]
        Distinct pin locations, ascending

    Examples:
    ---------
    >>> layout = UnknownLayout(5.0, False, False, (0.0, 5.0))
    >>> layout.names
    ['pin_0', 'pin_1', 'c3', 'c4']
    >>> layout.idx('c4')
    3
    """
    length: float
    left_fixed: bool
    right_fixed: bool
    pin_xs: Tuple[float, ...] = ()
    reactions: List[Reaction] = field(init=False)
    names: List[str] = field(init=False)
    _index: Dict[str, int] = field(init=False, repr=False)

    def __post_init__(self):
        self.pin_xs = tuple(sorted(set(self.pin_xs)))

        reactions = []
        if self.left_fixed:
            reactions.append(Reaction("m0", MOMENT, 0.0))
            reactions.append(Reaction("p0", FORCE, 0.0))
        for i, x in enumerate(self.pin_xs):
            reactions.append(Reaction(f"pin_{i}", FORCE, x))
        if self.right_fixed:
            reactions.append(Reaction("mL", MOMENT, self.length))
            reactions.append(Reaction("pL", FORCE, self.length))

        self.reactions = reactions
        self.names = [r.name for r in reactions] + ["c3", "c4"]
        self._index = {name: i for i, name in enumerate(self.names)}

    @property
    def n(self) -> int:
        """Number of unknowns (size of the square system)."""
        return len(self.names)

    def idx(self, name: str) -> int:
        """Column index of the named unknown."""
        return self._index[name]
