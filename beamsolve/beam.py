# beamsolve/beam.py
"""
BEAM CONFIGURATION
==================

`Beam` holds the description of one beam and validates every property at
the moment it is assigned, raising ConfigurationError straight away. A
successful mutation drops any cached result, so `is_solved` is True only
while the stored result matches the current configuration.

    beam = Beam(length=10.0, moment=1.0, modulus=100.0)
    beam.anchor_left = "fixed"
    load = beam.add_point_load(5.0, 100.0)
    result = beam.solve(50)
    result.solution["m0"]        # 500.0
    beam.remove_point_load(load) # beam.is_solved is now False

Point loads and pins are stored as immutable records. The add methods
return the stored record; the remove methods match by identity, so two
loads with equal values are still removed one at a time.
"""

import logging
from numbers import Real
from typing import Callable, Iterable, Optional, Tuple

from .errors import ConfigurationError
from .model import ANCHOR_TYPES, FREE, Pin, PointLoad
from .solver import BeamResult, solve_beam, zero_load

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and value == value


def _positive(name: str, value) -> float:
    if not _is_number(value) or not value > 0 or value == float("inf"):
        raise ConfigurationError(f"{name} must be a positive number, got {value!r}")
    return float(value)


def _coordinate(name: str, value) -> float:
    if not _is_number(value) or abs(value) == float("inf"):
        raise ConfigurationError(f"{name} must be a finite number, got {value!r}")
    return float(value)


class Beam:
    """
    Validated, mutable beam description.

    Attributes:
    -----------
    length : float
        Beam length (> 0)
    moment : float
        Second moment of area I (> 0)
    modulus : float
        Elastic modulus E (> 0)
    cont_load : Callable[[float], float]
        Load density w(x), downward positive (default: zero)
    anchor_left, anchor_right : str
        "free" or "fixed"
    point_loads : Tuple[PointLoad, ...]
        Read-only view; mutate through add/remove_point_load or assignment
    pins : Tuple[Pin, ...]
        Read-only view; mutate through add/remove_pin or assignment
    """

    def __init__(
        self,
        length: Optional[float] = None,
        moment: Optional[float] = None,
        modulus: Optional[float] = None,
        cont_load: Optional[Callable[[float], float]] = None,
        anchor_left: str = FREE,
        anchor_right: str = FREE,
    ):
        self._length = None
        self._moment = None
        self._modulus = None
        self._cont_load = zero_load
        self._anchor = [FREE, FREE]
        self._point_loads = []
        self._pins = []
        self._result = None

        if length is not None:
            self.length = length
        if moment is not None:
            self.moment = moment
        if modulus is not None:
            self.modulus = modulus
        if cont_load is not None:
            self.cont_load = cont_load
        self.anchor_left = anchor_left
        self.anchor_right = anchor_right

    def _invalidate(self):
        self._result = None

    # ------------------------------------------------------------------
    # Scalar properties
    # ------------------------------------------------------------------

    @property
    def length(self) -> Optional[float]:
        return self._length

    @length.setter
    def length(self, value):
        value = _positive("length", value)
        for feature in self._point_loads + self._pins:
            if feature.x > value:
                raise ConfigurationError(
                    f"length {value!r} would leave {type(feature).__name__} at x={feature.x!r} off the beam"
                )
        self._length = value
        self._invalidate()

    @property
    def moment(self) -> Optional[float]:
        return self._moment

    @moment.setter
    def moment(self, value):
        if callable(value):
            raise ConfigurationError("moment must be a positive number; position-dependent I is not supported")
        self._moment = _positive("moment", value)
        self._invalidate()

    @property
    def modulus(self) -> Optional[float]:
        return self._modulus

    @modulus.setter
    def modulus(self, value):
        self._modulus = _positive("modulus", value)
        self._invalidate()

    @property
    def cont_load(self) -> Callable[[float], float]:
        return self._cont_load

    @cont_load.setter
    def cont_load(self, fn):
        if not callable(fn):
            raise ConfigurationError(
                "cont_load must be a function that returns the load density as a "
                "function of the distance from the left end of the beam"
            )
        self._cont_load = fn
        self._invalidate()

    def _check_anchor(self, name: str, value) -> str:
        if value not in ANCHOR_TYPES:
            raise ConfigurationError(f"{name} must be one of {', '.join(ANCHOR_TYPES)}, got {value!r}")
        return value

    @property
    def anchor_left(self) -> str:
        return self._anchor[0]

    @anchor_left.setter
    def anchor_left(self, value):
        self._anchor[0] = self._check_anchor("anchor_left", value)
        self._invalidate()

    @property
    def anchor_right(self) -> str:
        return self._anchor[1]

    @anchor_right.setter
    def anchor_right(self, value):
        self._anchor[1] = self._check_anchor("anchor_right", value)
        self._invalidate()

    # ------------------------------------------------------------------
    # Point loads and pins
    # ------------------------------------------------------------------

    def _check_x(self, x) -> float:
        x = _coordinate("x", x)
        if x < 0 or (self._length is not None and x > self._length):
            raise ConfigurationError(f"x must lie on the beam [0, {self._length}], got {x!r}")
        return x

    def _make_point_load(self, record) -> PointLoad:
        if isinstance(record, PointLoad):
            x, w = record.x, record.w
        elif isinstance(record, dict):
            if "x" not in record or "w" not in record:
                raise ConfigurationError(f"Point load must have keys 'x' and 'w', got {record!r}")
            x, w = record["x"], record["w"]
        elif isinstance(record, (tuple, list)) and len(record) == 2:
            x, w = record
        else:
            raise ConfigurationError(
                f"Each point load must be a PointLoad, an (x, w) pair or {{'x': ..., 'w': ...}}, got {record!r}"
            )
        return PointLoad(x=self._check_x(x), w=_coordinate("w", w))

    def _make_pin(self, record) -> Pin:
        if isinstance(record, Pin):
            x = record.x
        elif isinstance(record, dict):
            if "x" not in record:
                raise ConfigurationError(f"Pin must have key 'x', got {record!r}")
            x = record["x"]
        elif _is_number(record):
            x = record
        else:
            raise ConfigurationError(f"Each pin must be a Pin, a number or {{'x': ...}}, got {record!r}")
        return Pin(x=self._check_x(x))

    @property
    def point_loads(self) -> Tuple[PointLoad, ...]:
        return tuple(self._point_loads)

    @point_loads.setter
    def point_loads(self, records: Iterable):
        if isinstance(records, (str, bytes, dict)) or not hasattr(records, "__iter__"):
            raise ConfigurationError("point_loads must be an iterable of point loads")
        self._point_loads = [self._make_point_load(r) for r in records]
        self._invalidate()

    @property
    def pins(self) -> Tuple[Pin, ...]:
        return tuple(self._pins)

    @pins.setter
    def pins(self, records: Iterable):
        if isinstance(records, (str, bytes, dict)) or not hasattr(records, "__iter__"):
            raise ConfigurationError("pins must be an iterable of pins")
        self._pins = [self._make_pin(r) for r in records]
        self._invalidate()

    def add_point_load(self, x: float, w: float) -> PointLoad:
        """
        Add a downward force w at distance x from the left end.

        Returns:
        --------
        PointLoad
            The stored record; pass it to remove_point_load to undo.
        """
        load = PointLoad(x=self._check_x(x), w=_coordinate("w", w))
        self._point_loads.append(load)
        self._invalidate()
        return load

    def remove_point_load(self, load: PointLoad) -> None:
        """Remove a point load previously returned by add_point_load."""
        self._point_loads.pop(self._find(self._point_loads, load, "point load"))
        self._invalidate()

    def add_pin(self, x: float) -> Pin:
        """Add a simple support at distance x from the left end."""
        pin = Pin(x=self._check_x(x))
        self._pins.append(pin)
        self._invalidate()
        return pin

    def remove_pin(self, pin: Pin) -> None:
        """Remove a pin previously returned by add_pin."""
        self._pins.pop(self._find(self._pins, pin, "pin"))
        self._invalidate()

    @staticmethod
    def _find(records, record, label: str) -> int:
        for i, stored in enumerate(records):
            if stored is record:
                return i
        raise ConfigurationError(
            f"The given {label} was not found. ({label.capitalize()}s are matched by identity, not value.)"
        )

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------

    @property
    def is_solved(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Optional[BeamResult]:
        """Result of the last solve, or None if the beam changed since."""
        return self._result

    def solve(self, num_grid_pts: Optional[int] = None, config=None) -> BeamResult:
        """
        Solve the beam and cache the result until the next mutation.

        Raises:
        -------
        ConfigurationError
            If length, moment or modulus has not been set
        GridConstructionError, PhysicalError, SolveError
            As raised by solve_beam
        """
        for name in ("length", "moment", "modulus"):
            if getattr(self, name) is None:
                raise ConfigurationError(f"{name} must be set before solving")

        self._result = solve_beam(
            self._length,
            self._moment,
            self._modulus,
            num_grid_pts=num_grid_pts,
            cont_load=self._cont_load,
            point_loads=self._point_loads,
            pins=self._pins,
            anchor_left=self.anchor_left,
            anchor_right=self.anchor_right,
            config=config,
        )
        return self._result

    def __repr__(self):
        return (
            f"Beam(length={self._length!r}, moment={self._moment!r}, modulus={self._modulus!r}, "
            f"anchors={tuple(self._anchor)!r}, point_loads={len(self._point_loads)}, pins={len(self._pins)})"
        )
