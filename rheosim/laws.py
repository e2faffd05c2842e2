"""Constitutive laws, one pure function per (experiment, model) pair.

Each experiment has a dispatch table keyed by ``ModelKind`` and a default law
used for every model the table does not name. Laws take numpy arrays of the
independent variable and return arrays; thermal scaling is already folded
into the ``EffectiveParams`` they receive.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

import numpy as np

from .models import EffectiveParams, ModelKind, RheologyParams

Array = np.ndarray
FlowLaw = Callable[[Array, RheologyParams, EffectiveParams], Tuple[Array, Array]]
OscillatoryLaw = Callable[[Array, RheologyParams, EffectiveParams], Tuple[Array, Array]]
StructureRate = Callable[[float, float, RheologyParams], float]

# Kelvin-Voigt has no steady flow; this viscosity only keeps the curve on a log axis.
KELVIN_VOIGT_DISPLAY_VISCOSITY = 1e6


# --- Steady shear: (shear rates) -> (stress, viscosity) ---

def flow_newtonian(g: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    return eff.K * g, np.full_like(g, eff.K)


def flow_power_law(g: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    tau = eff.K * np.power(g, p.n)
    return tau, tau / g


def flow_cross(g: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    eta = eff.eta_inf + (eff.eta0 - eff.eta_inf) / (1.0 + np.power(p.k_cross * g, p.m_cross))
    return eta * g, eta


def flow_carreau(g: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    eta = eff.eta_inf + (eff.eta0 - eff.eta_inf) * np.power(
        1.0 + np.power(p.lambda_carreau * g, 2), (p.n - 1.0) / 2.0
    )
    return eta * g, eta


def flow_herschel_bulkley(g: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    tau = eff.tau0 + eff.K * np.power(g, p.n)
    return tau, tau / g


def flow_casson(g: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    tau = np.power(np.sqrt(eff.tau0) + np.sqrt(eff.K * g), 2)
    return tau, tau / g


def flow_bingham(g: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    tau = eff.tau0 + eff.K * g
    return tau, tau / g


def flow_maxwell(g: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    # zero-shear viscosity of a Maxwell liquid: eta = G * tau_relaxation
    eta = np.full_like(g, eff.G0 * p.tau_r)
    return eta * g, eta


def flow_kelvin_voigt(g: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    eta = np.full_like(g, KELVIN_VOIGT_DISPLAY_VISCOSITY)
    return eta * g, eta


FLOW_LAWS: Dict[ModelKind, FlowLaw] = {
    ModelKind.NEWTONIAN: flow_newtonian,
    ModelKind.POWER_LAW: flow_power_law,
    ModelKind.CROSS: flow_cross,
    ModelKind.CARREAU: flow_carreau,
    ModelKind.HERSCHEL_BULKLEY: flow_herschel_bulkley,
    ModelKind.CASSON: flow_casson,
    ModelKind.BINGHAM: flow_bingham,
    ModelKind.MAXWELL: flow_maxwell,
    ModelKind.KELVIN_VOIGT: flow_kelvin_voigt,
}
DEFAULT_FLOW_LAW: FlowLaw = flow_herschel_bulkley


# --- Oscillatory: (angular frequency) -> (G', G'') ---

def oscillatory_maxwell(w: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    wt = w * p.tau_r
    d = 1.0 + np.power(wt, 2)
    return eff.G0 * (np.power(wt, 2) / d), eff.G0 * (wt / d)


def oscillatory_kelvin_voigt(w: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    return np.full_like(w, eff.k_spring), w * eff.eta_dashpot


def oscillatory_gelation(w: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    # critical gel: G' and G'' scale alike, phase angle pi/4
    gp = eff.G0 * np.power(w, 0.5)
    return gp, gp * math.tan(math.pi * 0.25)


def oscillatory_structural(w: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    return eff.G0 * np.power(w, 0.18), (eff.G0 * 0.3) * np.power(w, 0.22)


OSCILLATORY_LAWS: Dict[ModelKind, OscillatoryLaw] = {
    ModelKind.MAXWELL: oscillatory_maxwell,
    ModelKind.KELVIN_VOIGT: oscillatory_kelvin_voigt,
    ModelKind.GELATION: oscillatory_gelation,
}
DEFAULT_OSCILLATORY_LAW: OscillatoryLaw = oscillatory_structural


# --- Creep / recovery: (time) -> strain ---

@dataclass(frozen=True)
class CreepLoad:
    """Effective moduli and applied stress for one creep/recovery test.

    Zero moduli fall back to fixed values so the curve stays drawable.
    """

    G0: float
    k_spring: float
    eta_dashpot: float
    K: float
    tau_r: float
    stress: float

    @classmethod
    def from_params(cls, p: RheologyParams, eff: EffectiveParams) -> "CreepLoad":
        G0 = eff.G0 or 1000.0
        return cls(
            G0=G0,
            k_spring=eff.k_spring or 1000.0,
            eta_dashpot=eff.eta_dashpot or 200.0,
            K=eff.K or 10.0,
            tau_r=p.tau_r or 1.0,
            stress=G0 * 0.05,
        )


CreepLaw = Callable[[Array, float, CreepLoad], Array]


def creep_maxwell(t: Array, t_switch: float, load: CreepLoad) -> Array:
    elastic = load.stress / load.G0
    creep = elastic + load.stress * t / (load.G0 * load.tau_r)
    at_switch = elastic + load.stress * t_switch / (load.G0 * load.tau_r)
    # only the elastic part springs back; viscous flow is permanent
    return np.where(t < t_switch, creep, at_switch - elastic)


def creep_kelvin_voigt(t: Array, t_switch: float, load: CreepLoad) -> Array:
    retardation = load.eta_dashpot / load.k_spring
    plateau = load.stress / load.k_spring
    creep = plateau * (1.0 - np.exp(-t / retardation))
    at_switch = plateau * (1.0 - math.exp(-t_switch / retardation))
    recovery = at_switch * np.exp(-np.maximum(t - t_switch, 0.0) / retardation)
    return np.where(t < t_switch, creep, recovery)


def creep_structural(t: Array, t_switch: float, load: CreepLoad) -> Array:
    compliance = load.stress / (load.K + 1.0)
    creep = compliance * np.power(t, 0.45)
    # recovery holds a fixed 80% of the strain at switch for the whole window
    recovered = compliance * math.pow(t_switch, 0.45) * 0.8
    return np.where(t < t_switch, creep, recovered)


CREEP_LAWS: Dict[ModelKind, CreepLaw] = {
    ModelKind.MAXWELL: creep_maxwell,
    ModelKind.KELVIN_VOIGT: creep_kelvin_voigt,
}
DEFAULT_CREEP_LAW: CreepLaw = creep_structural


# --- Structural kinetics: d(lambda)/dt at (lambda, shear rate) ---

def rate_thixotropy(lam: float, g: float, p: RheologyParams) -> float:
    return p.kr * (1.0 - lam) - p.kb * g * lam


def rate_rheopexy(lam: float, g: float, p: RheologyParams) -> float:
    return p.kr * (1.0 - lam) + p.kb * g * (1.0 - lam)


def rate_fixed(lam: float, g: float, p: RheologyParams) -> float:
    return 0.1 * (1.0 - lam) - 0.01 * g * lam


STRUCTURE_RATES: Dict[ModelKind, StructureRate] = {
    ModelKind.THIXOTROPY: rate_thixotropy,
    ModelKind.RHEOPEXY: rate_rheopexy,
}
DEFAULT_STRUCTURE_RATE: StructureRate = rate_fixed


# --- Aging / gelation time sweep ---

def gelation_moduli(t: Array, p: RheologyParams, eff: EffectiveParams) -> Tuple[Array, Array]:
    """Closed-form G'(t), G''(t) for network formation after an induction time."""
    elapsed = np.maximum(0.0, np.asarray(t, dtype=float) - p.gel_t0)
    gp = eff.gprime_final * (1.0 - np.exp(-p.gel_rate * elapsed))
    gdp = 0.15 * eff.gprime_final + 0.45 * eff.gprime_final * np.exp(-p.gel_rate * elapsed * 0.7)
    return gp, gdp


def flow_law(model: ModelKind) -> FlowLaw:
    return FLOW_LAWS.get(model, DEFAULT_FLOW_LAW)


def oscillatory_law(model: ModelKind) -> OscillatoryLaw:
    return OSCILLATORY_LAWS.get(model, DEFAULT_OSCILLATORY_LAW)


def creep_law(model: ModelKind) -> CreepLaw:
    return CREEP_LAWS.get(model, DEFAULT_CREEP_LAW)


def structure_rate(model: ModelKind) -> StructureRate:
    return STRUCTURE_RATES.get(model, DEFAULT_STRUCTURE_RATE)
