# File: demos/run_simply_supported_udl.py
"""
DEMO: PIN-PIN BEAM WITH A UNIFORM LOAD
======================================

A 5 m beam on pins at both ends carries a uniform load w. Beam theory gives

    y(x) = w·x·(x³ - 2L·x² + L³) / (24·EI)
    each reaction = w·L/2

This demo solves the beam, compares against the formula, and saves the
shear / moment / slope / deflection diagrams.
"""

import numpy as np

from beamsolve import Beam
from beamsolve.logging_setup import setup_logging
from beamsolve.post import compute_reactions, peak_values
from beamsolve.viz import plot_beam_diagrams


def main():
    setup_logging()

    L = 5.0
    EI = 600.0
    w = -4.0        # Negative = upward in this sign convention

    beam = Beam(length=L, moment=1.0, modulus=EI, cont_load=lambda x: w)
    beam.add_pin(0.0)
    beam.add_pin(L)
    result = beam.solve(20)

    print("=" * 60)
    print("PIN-PIN BEAM, UNIFORM LOAD")
    print("=" * 60)
    for name, r in compute_reactions(result).items():
        print(f"  {name:>6} at x={r['x']:.2f}: R = {r['R']:.4f}  (expected {w * L / 2:.4f})")

    x = result.x
    expected = w * x * (x**3 - 2 * L * x**2 + L**3) / (24 * EI)
    print(f"  y(L/2)   = {result.at(L / 2).y:.6f}  (expected {expected[np.argmin(np.abs(x - L / 2))]:.6f})")
    print(f"  max |err| = {np.max(np.abs(result.y - expected)):.2e}")

    for name, peak in peak_values(result).items():
        print(f"  peak {name:>5} = {peak['value']:.5g} at x={peak['x']:.3g}")

    plot_beam_diagrams(result, outpath="outputs/udl_beam.png", title="Pin-pin beam, uniform load")
    print("Diagrams saved to: outputs/udl_beam.png")


if __name__ == "__main__":
    main()
