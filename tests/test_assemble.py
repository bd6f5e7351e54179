# File: tests/test_assemble.py
"""
Test the unknown layout and the assembled reaction system.
"""

import numpy as np
import pytest

from beamsolve.errors import PhysicalError
from beamsolve.kernel.assemble import assemble_system, flexural_rigidity, layout_for, unit_response
from beamsolve.kernel.dof import FORCE, MOMENT, UnknownLayout
from beamsolve.kernel.grid import build_grid
from beamsolve.kernel.integrate import integrate_particular
from beamsolve.model import FIXED, FREE, Pin


def test_layout_column_order():
    layout = UnknownLayout(length=10.0, left_fixed=True, right_fixed=True, pin_xs=(7.0, 3.0, 3.0))
    assert layout.pin_xs == (3.0, 7.0)
    assert layout.names == ['m0', 'p0', 'pin_0', 'pin_1', 'mL', 'pL', 'c3', 'c4']
    assert layout.n == 8
    assert layout.idx('pin_1') == 3
    assert layout.idx('c4') == 7


def test_layout_gates_on_fixed_only():
    """n = dofsLeft + numPins + dofsRight + 2, with end unknowns only for "fixed"."""
    assert layout_for(5.0, [0.0, 5.0], FREE, FREE).names == ['pin_0', 'pin_1', 'c3', 'c4']
    assert layout_for(5.0, [], FIXED, FREE).names == ['m0', 'p0', 'c3', 'c4']
    assert layout_for(5.0, [], FREE, FIXED).names == ['mL', 'pL', 'c3', 'c4']


def test_unit_responses():
    EI = 4.0
    np.testing.assert_allclose(unit_response(FORCE, 1.0, 3.0, EI), [-1.0, -2.0, -0.5, -8.0 / 24.0])
    np.testing.assert_allclose(unit_response(MOMENT, 1.0, 3.0, EI), [0.0, 1.0, 0.5, 0.5])


def _unloaded_system(L, EI, pins, left, right):
    grid = build_grid(L, 10, pins=[Pin(x) for x in pins], anchor_left=left, anchor_right=right)
    integrate_particular(grid, lambda x: 0.0, EI)
    layout = layout_for(L, pins, left, right)
    return assemble_system(grid, layout, EI)


def test_pin_row_expansion():
    """
    Pin i at x_i:
        m0·x_i²/(2EI) - p0·x_i³/(6EI) - Σ_{j<i} pin_j·(x_i-x_j)³/(6EI) + c3·x_i + c4
    """
    L, EI = 10.0, 100.0
    system = _unloaded_system(L, EI, [4.0, 6.0], FIXED, FREE)
    assert system.unknowns == ['m0', 'p0', 'pin_0', 'pin_1', 'c3', 'c4']
    assert system.A.shape == (6, 6)
    assert system.b.shape == (6,)

    # Rows: y(0), θ(0), y(4), y(6), M(L), V(L)
    np.testing.assert_allclose(system.A[0], [0, 0, 0, 0, 0, 1])
    np.testing.assert_allclose(system.A[1], [0, 0, 0, 0, 1, 0])
    np.testing.assert_allclose(
        system.A[3],
        [36 / 200, -216 / 600, -8 / 600, 0.0, 6.0, 1.0],
    )
    np.testing.assert_allclose(system.A[4], [1, -10, -6, -4, 0, 0])
    np.testing.assert_allclose(system.A[5], [0, -1, -1, -1, 0, 0])
    np.testing.assert_allclose(system.b, 0.0)


def test_right_fixed_rows():
    L, EI = 10.0, 100.0
    system = _unloaded_system(L, EI, [4.0], FREE, FIXED)
    assert system.unknowns == ['pin_0', 'mL', 'pL', 'c3', 'c4']

    # Rows: y(4), y(L), θ(L), M(L), V(L)
    np.testing.assert_allclose(system.A[1], [-216 / 600, 0, 0, 10, 1])
    np.testing.assert_allclose(system.A[2], [-36 / 200, 0, 0, 1, 0])
    np.testing.assert_allclose(system.A[3], [-6, 1, 0, 0, 0])
    np.testing.assert_allclose(system.A[4], [-1, 0, -1, 0, 0])


def test_rhs_uses_bar_values():
    L, EI, w = 4.0, 2.0, 3.0
    grid = build_grid(L, 4, anchor_left=FIXED)
    integrate_particular(grid, lambda x: w, EI)
    layout = layout_for(L, [], FIXED, FREE)
    system = assemble_system(grid, layout, EI)
    last = grid[-1]
    assert system.b[-2] == -last.mbar
    assert system.b[-1] == -last.vbar
    assert np.isclose(system.b[-1], -w * L)


@pytest.mark.parametrize("EI", [0.0, -1.0])
def test_non_positive_EI_rejected(EI):
    grid = build_grid(5.0, 5)
    layout = layout_for(5.0, [0.0, 5.0], FREE, FREE)
    with pytest.raises(PhysicalError):
        assemble_system(grid, layout, EI)


@pytest.mark.parametrize("moment, modulus", [(-1.0, 5.0), (1.0, 0.0), (0.0, 0.0), (-2.0, -3.0)])
def test_flexural_rigidity_factors(moment, modulus):
    with pytest.raises(PhysicalError):
        flexural_rigidity(moment, modulus)


def test_flexural_rigidity_product():
    assert flexural_rigidity(8.0e-6, 210e9) == pytest.approx(1.68e6)
