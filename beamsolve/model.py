# PointLoad, Pin, GridPoint, end conditions

from dataclasses import dataclass

FREE = "free"
FIXED = "fixed"
ANCHOR_TYPES = (FREE, FIXED)


@dataclass(frozen=True, eq=False)
class PointLoad:
    """
    Concentrated force acting on the beam.

    Compared by identity so that two loads with the same (x, w) can be
    added to a beam and removed independently.
    """
    x: float
    w: float


@dataclass(frozen=True, eq=False)
class Pin:
    """Simple support at x: one reaction force, no bending restraint."""
    x: float


@dataclass
class GridPoint:
    """
    One sample of the beam's response.

    A zero-width discontinuity (point load, pin, fixed anchor) is
    represented by two points at the same x: `relation=-1` is the side
    just before the feature and `relation=+1` the side just after it.
    Plain points carry `relation=0`.
    """
    x: float
    relation: int = 0
    is_point_load: bool = False
    is_pin: bool = False
    is_fixed_anchor: bool = False
    load: float = 0.0           # Summed point-load magnitude at x

    # Particular ("bar") solution: applied loads only
    vbar: float = 0.0
    mbar: float = 0.0
    thetabar: float = 0.0
    ybar: float = 0.0

    # Final fields after superposition of the reactions
    v: float = 0.0
    m: float = 0.0
    theta: float = 0.0
    y: float = 0.0

    @property
    def is_plain(self) -> bool:
        return self.relation == 0
