"""Crossover detection between two sampled curves.

A single bracket scan finds adjacent samples where ``a - b`` changes sign (or
touches zero); an interpolation strategy turns the bracket into a point.
Strategies return ``None`` for a degenerate bracket, in which case the scan
moves on to the next one.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np
import pandas as pd

from .errors import InvalidDomainError

logger = logging.getLogger(__name__)

LINEAR_DENOMINATOR_TOL = 1e-12
LOGLOG_DENOMINATOR_TOL = 1e-10


@dataclass(frozen=True)
class CrossoverPoint:
    x: float
    y: float


# (x pair, a pair, b pair) -> point or None
Interpolator = Callable[[np.ndarray, np.ndarray, np.ndarray], Optional[CrossoverPoint]]


def interpolate_linear(x: np.ndarray, a: np.ndarray, b: np.ndarray) -> Optional[CrossoverPoint]:
    """Zero of the linear interpolant of ``a - b``; y from linear interpolation of ``a``."""
    x1, x2 = float(x[0]), float(x[1])
    diff1 = float(a[0] - b[0])
    diff2 = float(a[1] - b[1])
    if abs(diff2 - diff1) < LINEAR_DENOMINATOR_TOL:
        return None
    x_cross = x1 - diff1 * (x2 - x1) / (diff2 - diff1)
    y_cross = float(a[0]) + (x_cross - x1) * float(a[1] - a[0]) / (x2 - x1)
    return CrossoverPoint(x=x_cross, y=y_cross)


def interpolate_loglog(x: np.ndarray, a: np.ndarray, b: np.ndarray) -> Optional[CrossoverPoint]:
    """Intersect the log-log secants of ``a`` and ``b`` across the bracket."""
    for name, values in (("x", x), ("a", a), ("b", b)):
        if np.any(np.asarray(values) <= 0):
            raise InvalidDomainError(f"log-log crossover needs positive {name} values, got {list(values)}")
    lx1, lx2 = math.log10(x[0]), math.log10(x[1])
    la1, la2 = math.log10(a[0]), math.log10(a[1])
    lb1, lb2 = math.log10(b[0]), math.log10(b[1])
    slope_a = (la2 - la1) / (lx2 - lx1)
    slope_b = (lb2 - lb1) / (lx2 - lx1)
    denom = slope_a - slope_b
    if abs(denom) < LOGLOG_DENOMINATOR_TOL:
        return None
    lx = lx1 + (lb1 - la1) / denom
    ly = la1 + slope_a * (lx - lx1)
    return CrossoverPoint(x=math.pow(10, lx), y=math.pow(10, ly))


def find_crossover(
    x: Sequence[float],
    a: Sequence[float],
    b: Sequence[float],
    interpolate: Interpolator = interpolate_linear,
) -> Optional[CrossoverPoint]:
    """Return the first crossing of ``a`` and ``b`` over the grid ``x``, or None.

    The series must be aligned (same length, same grid).
    """
    x_arr = np.asarray(x, dtype=float)
    a_arr = np.asarray(a, dtype=float)
    b_arr = np.asarray(b, dtype=float)
    if not (len(x_arr) == len(a_arr) == len(b_arr)):
        raise InvalidDomainError(
            f"crossover series must be aligned, got lengths {len(x_arr)}, {len(a_arr)}, {len(b_arr)}"
        )
    diff = a_arr - b_arr
    brackets = np.nonzero(diff[:-1] * diff[1:] <= 0)[0]
    for i in brackets:
        window = slice(i, i + 2)
        point = interpolate(x_arr[window], a_arr[window], b_arr[window])
        if point is None:
            logger.debug("Skipping degenerate crossover bracket at x=%g..%g", x_arr[i], x_arr[i + 1])
            continue
        return point
    return None


def find_gel_point(time_sweep: pd.DataFrame) -> Optional[CrossoverPoint]:
    """Gel point (G' = G'') of a time sweep, interpolated linearly in time."""
    return find_crossover(
        time_sweep["t"], time_sweep["Gprime"], time_sweep["GdoublePrime"], interpolate_linear
    )


def find_flow_point(amplitude_sweep: pd.DataFrame) -> Optional[CrossoverPoint]:
    """Flow point (G' = G'') of an amplitude sweep, interpolated in log-log space."""
    return find_crossover(
        amplitude_sweep["strain"],
        amplitude_sweep["Gprime"],
        amplitude_sweep["GdoublePrime"],
        interpolate_loglog,
    )
