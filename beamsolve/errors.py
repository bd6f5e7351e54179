# beamsolve/errors.py
"""Exceptions raised while configuring or solving a beam."""


class BeamError(Exception):
    """Base class for every error raised by beamsolve."""
    pass


class ConfigurationError(BeamError, ValueError):
    """Raised when a beam property or load/pin record is invalid."""
    pass


class GridConstructionError(BeamError, ValueError):
    """Raised when the grid resolution is not a positive integer."""
    pass


class PhysicalError(BeamError, ValueError):
    """Raised when the flexural rigidity EI is not strictly positive."""
    pass


class SolveError(BeamError, RuntimeError):
    """Raised when the reaction system is singular or ill-conditioned."""
    pass


class InternalInvariantError(BeamError, RuntimeError):
    """Raised when the integrator meets a grid it cannot interpret."""
    pass
