"""
VISUALIZATION: BEAM DIAGRAMS
============================

Plots the four response fields of a solved beam, stacked over a shared
x axis:

    V(x)   shear
    M(x)   bending moment
    θ(x)   slope
    y(x)   deflection (positive downward, so the axis is inverted)

Supports and point loads are marked on every panel so jumps in V and
kinks in M can be read against their cause.
"""

import os
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from .solver import BeamResult

PANELS = (
    ('v', 'V', 'tab:blue'),
    ('m', 'M', 'tab:red'),
    ('theta', 'θ', 'tab:green'),
    ('y', 'y', 'tab:purple'),
)


def plot_beam_diagrams(
    result: BeamResult,
    outpath: Optional[str] = None,
    title: str = "Beam Diagrams",
):
    """
    Plot shear, moment, slope and deflection of a solved beam.

    Parameters:
    -----------
    result : BeamResult
        Output of solve_beam / Beam.solve
    outpath : str, optional
        If given, the figure is saved there and closed
    title : str
        Figure title

    Returns:
    --------
    matplotlib.figure.Figure
        The figure (already closed if outpath was given)
    """
    x = result.x
    fig, axes = plt.subplots(len(PANELS), 1, figsize=(10, 10), sharex=True)

    pin_xs = sorted({p.x for p in result.grid if p.is_pin})
    load_xs = sorted({p.x for p in result.grid if p.is_point_load})

    for ax, (attr, label, color) in zip(axes, PANELS):
        values = getattr(result, attr)
        ax.plot(x, values, color=color, linewidth=2)
        ax.fill_between(x, 0.0, values, color=color, alpha=0.15)
        ax.axhline(0.0, color='black', linewidth=0.8)

        for px in pin_xs:
            ax.axvline(px, color='gray', linestyle='--', linewidth=0.8)
        for lx in load_xs:
            ax.axvline(lx, color='orange', linestyle=':', linewidth=1.0)

        i = int(np.argmax(np.abs(values)))
        ax.annotate(f'{values[i]:.4g}', xy=(x[i], values[i]), fontsize=9,
                    xytext=(5, 5), textcoords='offset points')

        ax.set_ylabel(label, fontsize=12, fontweight='bold')
        ax.grid(True, alpha=0.3, linestyle='--')

    axes[-1].invert_yaxis()
    axes[-1].set_xlabel('x', fontsize=12, fontweight='bold')
    axes[0].set_title(title, fontsize=14, fontweight='bold')

    plt.tight_layout()

    if outpath:
        os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
        fig.savefig(outpath, dpi=150, bbox_inches='tight')
        plt.close(fig)

    return fig
