# File: tests/test_simply_supported_udl.py
"""
TEST: PIN-PIN BEAM UNDER A CONTINUOUS LOAD
==========================================

For a beam on pins at x = 0 and x = L under a uniform load w (downward
positive), beam theory gives

    y(x) = w·x·(x³ - 2L·x² + L³) / (24·EI)      (y positive downward)
    each reaction = w·L/2

The quadrature is exact for a uniform load, so the grid solution should
match to rounding. For a triangular load w(x) = w0·x/L:

    y(x) = w0·x·(3x⁴ - 10L²x² + 7L⁴) / (360·L·EI)
    R(0) = w0·L/6,  R(L) = w0·L/3
"""

import numpy as np

from beamsolve import Pin, solve_beam


def test_uniform_load_reference_value():
    """L=5, EI=600, w=-4 (upward) → y(2.5) ≈ -0.054253."""
    result = solve_beam(5.0, 1.0, 600.0, 10, cont_load=lambda x: -4.0, pins=[Pin(0.0), Pin(5.0)])
    assert np.isclose(result.at(2.5).y, -0.054253, rtol=1e-3)


def test_uniform_load_deflection_curve():
    L = 5.0
    EI = 600.0
    w = -4.0

    result = solve_beam(L, 1.0, EI, 20, cont_load=lambda x: w, pins=[Pin(0.0), Pin(L)])
    x = result.x
    expected = w * x * (x**3 - 2 * L * x**2 + L**3) / (24 * EI)

    np.testing.assert_allclose(result.y, expected, rtol=1e-6, atol=1e-12)
    assert np.isclose(result.solution['pin_0'], w * L / 2)
    assert np.isclose(result.solution['pin_1'], w * L / 2)

    delta_max_expected = 5 * w * L**4 / (384 * EI)
    assert np.isclose(result.at(L / 2).y, delta_max_expected, rtol=1e-9)


def test_triangular_load():
    L = 6.0
    EI = 1000.0
    w0 = 6.0

    result = solve_beam(L, 1.0, EI, 60, cont_load=lambda x: w0 * x / L, pins=[Pin(0.0), Pin(L)])

    assert np.isclose(result.solution['pin_0'], w0 * L / 6, rtol=1e-3)
    assert np.isclose(result.solution['pin_1'], w0 * L / 3, rtol=1e-3)

    x = result.x
    expected = w0 * x * (3 * x**4 - 10 * L**2 * x**2 + 7 * L**4) / (360 * L * EI)
    np.testing.assert_allclose(result.y, expected, rtol=1e-3, atol=1e-6 * np.max(np.abs(expected)))
