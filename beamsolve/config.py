# beamsolve/config.py
"""
Solver configuration and defaults.
"""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Global solver configuration."""

    # Grid resolution used when a solve does not pass one explicitly
    default_num_grid_pts: int = 100

    # Max condition number of the (equilibrated) reaction system
    cond_limit: float = 1e12


# Global config instance
CONFIG = SolverConfig()
