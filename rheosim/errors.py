class RheoSimError(Exception):
    """Base class for errors raised by rheosim."""


class InvalidDomainError(RheoSimError, ValueError):
    """Input lies outside the domain of a grid or log transform.

    Raised for degenerate grids (fewer than two points), non-positive
    log-space bounds and non-positive values handed to a log-log crossover.
    """


class ParameterFileError(RheoSimError, ValueError):
    """A parameter file or NAME=VALUE assignment could not be used."""
