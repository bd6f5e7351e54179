# File: tests/test_integrate.py
"""
Test the particular-solution integrator against hand-integrated loads.

For a uniform load w on a beam with no reactions:
    vbar = w·x,  mbar = w·x²/2,  thetabar = w·x³/(6EI),  ybar = w·x⁴/(24EI)
The mixed trapezoid/Simpson scheme is exact for this case.
"""

import numpy as np
import pytest

from beamsolve.errors import InternalInvariantError
from beamsolve.kernel.grid import build_grid
from beamsolve.kernel.integrate import integrate_particular
from beamsolve.model import GridPoint, Pin, PointLoad


def test_uniform_load_is_integrated_exactly():
    L, w, EI = 4.0, 2.0, 3.0
    grid = build_grid(L, 4)
    integrate_particular(grid, lambda x: w, EI)

    x = np.array([p.x for p in grid])
    np.testing.assert_allclose([p.vbar for p in grid], w * x, rtol=1e-12, atol=1e-12)
    np.testing.assert_allclose([p.mbar for p in grid], w * x**2 / 2, rtol=1e-12, atol=1e-12)
    np.testing.assert_allclose([p.thetabar for p in grid], w * x**3 / (6 * EI), rtol=1e-12, atol=1e-12)
    np.testing.assert_allclose([p.ybar for p in grid], w * x**4 / (24 * EI), rtol=1e-12, atol=1e-12)


def test_first_point_is_zero():
    grid = build_grid(4.0, 4)
    integrate_particular(grid, lambda x: 5.0, 1.0)
    first = grid[0]
    assert (first.vbar, first.mbar, first.thetabar, first.ybar) == (0.0, 0.0, 0.0, 0.0)


def test_point_load_jumps_shear_only():
    """
    A load P at x = 2 on a 4 m beam:
        vbar jumps from 0 to P across the pair
        mbar(4) = 2P, thetabar(4) = 2P/EI, ybar(4) = 8P/(6EI)
    """
    P, EI = 5.0, 1.0
    grid = build_grid(4.0, 4, point_loads=[PointLoad(2.0, P)])
    integrate_particular(grid, lambda x: 0.0, EI)

    before, after = [p for p in grid if p.x == 2.0]
    assert before.vbar == 0.0
    assert after.vbar == P
    assert after.mbar == before.mbar
    assert after.thetabar == before.thetabar
    assert after.ybar == before.ybar

    last = grid[-1]
    assert np.isclose(last.mbar, 2 * P)
    assert np.isclose(last.thetabar, 2 * P / EI)
    assert np.isclose(last.ybar, 8 * P / (6 * EI))


def test_pin_pair_carries_everything_over():
    grid = build_grid(4.0, 4, pins=[Pin(2.0)])
    integrate_particular(grid, lambda x: 3.0, 2.0)
    before, after = [p for p in grid if p.x == 2.0]
    assert (before.vbar, before.mbar, before.thetabar, before.ybar) == \
        (after.vbar, after.mbar, after.thetabar, after.ybar)


def test_load_function_sampled_inside_each_interval():
    calls = []

    def w(x):
        calls.append(x)
        return 1.0

    grid = build_grid(3.0, 3)
    integrate_particular(grid, w, 1.0)

    # 3 intervals, 5 samples each (4 sub-steps)
    assert len(calls) == 15
    assert min(calls) == 0.0
    assert max(calls) == 3.0
    assert all(isinstance(x, float) for x in calls)


def test_malformed_grid_raises():
    """Two plain points at one x cannot come from build_grid."""
    grid = [GridPoint(0.0), GridPoint(1.0), GridPoint(1.0), GridPoint(2.0)]
    with pytest.raises(InternalInvariantError):
        integrate_particular(grid, lambda x: 0.0, 1.0)
