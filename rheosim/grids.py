import math

import numpy as np

from .errors import InvalidDomainError


def log_space(start: float, stop: float, count: int) -> np.ndarray:
    """Return ``count`` values log-uniformly spaced from start to stop (inclusive)."""
    if count < 2:
        raise InvalidDomainError(f"log_space needs at least 2 points, got {count}")
    if start <= 0 or stop <= 0:
        raise InvalidDomainError(f"log_space bounds must be positive, got {start}..{stop}")
    log_start = math.log10(start)
    log_stop = math.log10(stop)
    step = (log_stop - log_start) / (count - 1)
    return np.power(10.0, log_start + np.arange(count) * step)


def lin_space(start: float, stop: float, count: int) -> np.ndarray:
    """Return ``count`` values linearly spaced from start to stop (inclusive)."""
    if count < 2:
        raise InvalidDomainError(f"lin_space needs at least 2 points, got {count}")
    step = (stop - start) / (count - 1)
    return start + np.arange(count) * step
