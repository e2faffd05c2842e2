from itertools import accumulate
from typing import Callable, Sequence

import numpy as np

# d(lambda)/dt as a function of (lambda, shear rate)
RateFunction = Callable[[float, float], float]

LOW_TO_HIGH_FRACTION = 0.3
HIGH_TO_LOW_FRACTION = 0.6


def shear_profile(times: np.ndarray, t_total: float, low: float, high: float) -> np.ndarray:
    """Three-interval step profile: low on [0, 0.3T), high on [0.3T, 0.6T), low after."""
    high_phase = (times >= t_total * LOW_TO_HIGH_FRACTION) & (times < t_total * HIGH_TO_LOW_FRACTION)
    return np.where(high_phase, high, low).astype(float)


def euler_step(rate: RateFunction, lam: float, gamma_dot: float, dt: float) -> float:
    """One explicit forward step of the structure parameter, clamped to [0, 1]."""
    return min(1.0, max(0.0, lam + rate(lam, gamma_dot) * dt))


def integrate_structure(
    rate: RateFunction,
    lambda0: float,
    gamma_dots: Sequence[float],
    dt: float,
) -> np.ndarray:
    """Fold ``euler_step`` over a shear-rate history.

    - rate: structure kinetics d(lambda)/dt
    - lambda0: structure level before the first sample
    - gamma_dots: shear rate applied at each sample
    - dt: fixed step (s)

    Element i is the structure after the update at sample i, so the result
    has one entry per shear-rate sample and never includes ``lambda0``.
    """
    states = accumulate(
        (float(g) for g in gamma_dots),
        lambda lam, g: euler_step(rate, lam, g, dt),
        initial=float(lambda0),
    )
    next(states)
    return np.fromiter(states, dtype=float, count=len(gamma_dots))
