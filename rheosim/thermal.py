from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

import numpy as np

if TYPE_CHECKING:
    from .models import RheologyParams

REFERENCE_TEMPERATURE_C: float = 25.0

Temperature = Union[float, np.ndarray]


def thermal_factor(params: "RheologyParams", temperature: Optional[Temperature] = None) -> Temperature:
    """Arrhenius-like sensitivity factor: f(T) = exp(-alpha * (T - 25)).

    Uses ``params.current_temp`` unless an explicit temperature (scalar or
    array, in degrees C) is given. Equals 1.0 at the reference temperature.
    """
    target = params.current_temp if temperature is None else temperature
    return np.exp(-params.temp_sensitivity * (np.asarray(target, dtype=float) - REFERENCE_TEMPERATURE_C))
