from __future__ import annotations

import logging
import math
from typing import Callable, Dict

import numpy as np
import pandas as pd

from .grids import lin_space, log_space
from .kinetics import integrate_structure, shear_profile
from .laws import CreepLoad, creep_law, flow_law, gelation_moduli, oscillatory_law, structure_rate
from .models import EffectiveParams, ModelKind, RheologyParams
from .thermal import thermal_factor

logger = logging.getLogger(__name__)

FLOW_POINTS = 100
OSCILLATORY_POINTS = 100
AMPLITUDE_POINTS = 100
TEMPERATURE_POINTS = 100
CREEP_POINTS = 300
STEP_SHEAR_POINTS = 200
TIME_SWEEP_POINTS = 100

OSCILLATORY_FLOOR = 1e-4
MODULUS_FLOOR = 1e-3

Evaluator = Callable[[ModelKind, RheologyParams], pd.DataFrame]


def _frame(name: str, model: ModelKind | None, columns: Dict[str, np.ndarray]) -> pd.DataFrame:
    df = pd.DataFrame(columns)
    logger.debug("%s sweep (%s): %d samples", name, model.value if model else "model-free", len(df))
    return df


def compute_flow_curve(model: ModelKind, p: RheologyParams) -> pd.DataFrame:
    """Steady-shear flow curve over a log-spaced shear-rate range.

    Columns: gammaDot (1/s), tau (Pa), eta (Pa·s).
    """
    rates = log_space(p.gamma_dot_min, p.gamma_dot_max, FLOW_POINTS)
    tau, eta = flow_law(model)(rates, p, EffectiveParams.at(p))
    return _frame("flow", model, {"gammaDot": rates, "tau": tau, "eta": eta})


def compute_oscillatory(model: ModelKind, p: RheologyParams) -> pd.DataFrame:
    """Small-amplitude frequency sweep. Columns: freq (Hz), Gprime, GdoublePrime (Pa)."""
    freqs = log_space(p.freq_min, p.freq_max, OSCILLATORY_POINTS)
    omega = 2.0 * math.pi * freqs
    gp, gdp = oscillatory_law(model)(omega, p, EffectiveParams.at(p))
    return _frame(
        "oscillatory",
        model,
        {
            "freq": freqs,
            "Gprime": np.maximum(OSCILLATORY_FLOOR, gp),
            "GdoublePrime": np.maximum(OSCILLATORY_FLOOR, gdp),
        },
    )


def compute_amplitude_sweep(p: RheologyParams) -> pd.DataFrame:
    """Strain amplitude sweep with structural breakdown around the yield strain.

    Columns: strain, Gprime, GdoublePrime (Pa). Independent of the model.
    """
    strains = log_space(p.gamma0_min, p.gamma0_max, AMPLITUDE_POINTS)
    G0 = EffectiveParams.at(p).G0
    ratio = strains / p.gamma_y
    purity = 1.0 / (1.0 + np.power(ratio, p.softening_p))
    peak = np.exp(-np.power(np.log(ratio), 2) / 1.0)
    gp = G0 * purity
    gdp = (G0 * 0.2) * (purity + 3.0 * peak + 0.05)
    return _frame(
        "amplitude",
        None,
        {
            "strain": strains,
            "Gprime": np.maximum(MODULUS_FLOOR, gp),
            "GdoublePrime": np.maximum(MODULUS_FLOOR, gdp),
        },
    )


def compute_temperature_sweep(p: RheologyParams) -> pd.DataFrame:
    """Moduli against temperature. Columns: temperature (C), Gprime, GdoublePrime (Pa)."""
    temperatures = lin_space(p.temp_min, p.temp_max, TEMPERATURE_POINTS)
    f = thermal_factor(p, temperatures)
    gp = p.G0 * f
    gdp = (p.G0 * 0.2) * f * (1.0 + 0.005 * (temperatures - 25.0))
    return _frame(
        "temperature",
        None,
        {
            "temperature": temperatures,
            "Gprime": np.maximum(MODULUS_FLOOR, gp),
            "GdoublePrime": np.maximum(MODULUS_FLOOR, gdp),
        },
    )


def compute_creep_recovery(model: ModelKind, p: RheologyParams) -> pd.DataFrame:
    """Creep under constant stress for the first half of t_total, recovery after.

    Columns: t (s), strain (-).
    """
    times = lin_space(0.0, p.t_total, CREEP_POINTS)
    load = CreepLoad.from_params(p, EffectiveParams.at(p))
    strain = creep_law(model)(times, p.t_total / 2.0, load)
    return _frame("creep", model, {"t": times, "strain": strain})


def compute_step_shear(model: ModelKind, p: RheologyParams) -> pd.DataFrame:
    """Three-interval step-shear test with structural kinetics.

    Columns: t (s), eta (Pa·s), lambda (-), gammaDot (1/s).
    """
    times = lin_space(0.0, p.t_total, STEP_SHEAR_POINTS)
    dt = p.t_total / STEP_SHEAR_POINTS
    rates = shear_profile(times, p.t_total, p.gamma_dot_low, p.gamma_dot_high)
    rate = structure_rate(model)
    lam = integrate_structure(lambda lam, g: rate(lam, g, p), p.lambda0, rates, dt)
    K = EffectiveParams.at(p).K
    eta = K * (1.0 + p.a * lam) * np.power(rates, p.n - 1.0)
    return _frame("step-shear", model, {"t": times, "eta": eta, "lambda": lam, "gammaDot": rates})


def compute_self_healing(model: ModelKind, p: RheologyParams) -> pd.DataFrame:
    """Step-shear result plus structural recovery in percent (3ITT)."""
    df = compute_step_shear(model, p)
    return df.assign(recovery=df["lambda"] * 100.0)


def compute_time_sweep(model: ModelKind, p: RheologyParams) -> pd.DataFrame:
    """Aging/gelation time sweep. Columns: t (s), Gprime, GdoublePrime (Pa).

    The law is closed-form and the same for every model.
    """
    times = lin_space(0.0, p.t_total, TIME_SWEEP_POINTS)
    gp, gdp = gelation_moduli(times, p, EffectiveParams.at(p))
    return _frame("time-sweep", model, {"t": times, "Gprime": gp, "GdoublePrime": gdp})


EVALUATORS: Dict[str, Evaluator] = {
    "flow": compute_flow_curve,
    "oscillatory": compute_oscillatory,
    "amplitude": lambda model, p: compute_amplitude_sweep(p),
    "temperature": lambda model, p: compute_temperature_sweep(p),
    "creep": compute_creep_recovery,
    "step-shear": compute_step_shear,
    "self-healing": compute_self_healing,
    "time-sweep": compute_time_sweep,
}


def evaluate(experiment: str, model: ModelKind, p: RheologyParams) -> pd.DataFrame:
    try:
        evaluator = EVALUATORS[experiment]
    except KeyError:
        raise ValueError(f"Unknown experiment: {experiment}. Use one of {sorted(EVALUATORS)}") from None
    return evaluator(model, p)
