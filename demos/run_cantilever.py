# File: demos/run_cantilever.py
"""
DEMO: CANTILEVER WITH A POINT LOAD
==================================

A 10 m cantilever, fixed at the left wall, carries P = 100 at x = 5.
Statics gives the wall reactions directly:

    p0 = P          (upward force)
    m0 = P·a = 500  (wall moment)

The results are also exported as a table for inspection.
"""

from beamsolve import Beam
from beamsolve.post import results_to_dataframe
from beamsolve.viz import plot_beam_diagrams


def main():
    beam = Beam(length=10.0, moment=1.0, modulus=100.0, anchor_left="fixed")
    load = beam.add_point_load(5.0, 100.0)

    result = beam.solve(40)
    print("Cantilever - point load at midspan")
    print("=" * 50)
    print(f"Wall force  p0 = {result.solution['p0']:.3f}  (expected {load.w:.3f})")
    print(f"Wall moment m0 = {result.solution['m0']:.3f}  (expected {load.w * load.x:.3f})")
    print(f"Tip deflection = {result.grid[-1].y:.4f}")

    df = results_to_dataframe(result)
    print(df.iloc[::8].to_string(index=False))

    plot_beam_diagrams(result, outpath="outputs/cantilever.png", title="Cantilever, point load")

    # Moving the load invalidates the cached result
    beam.remove_point_load(load)
    beam.add_point_load(10.0, 100.0)
    print(f"Solved after moving the load? {beam.is_solved}")
    print(f"Tip deflection with load at the tip = {beam.solve(40).grid[-1].y:.4f}")


if __name__ == "__main__":
    main()
