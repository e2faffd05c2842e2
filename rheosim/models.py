from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .thermal import thermal_factor


class ModelKind(Enum):
    """Constitutive or kinetic law selected for an evaluator call.

    Values double as CLI slugs; ``label`` is the display name.
    """

    NEWTONIAN = "newtonian"
    POWER_LAW = "power-law"
    CROSS = "cross"
    CARREAU = "carreau"
    HERSCHEL_BULKLEY = "herschel-bulkley"
    CASSON = "casson"
    BINGHAM = "bingham"
    THIXOTROPY = "thixotropy"
    RHEOPEXY = "rheopexy"
    MAXWELL = "maxwell"
    KELVIN_VOIGT = "kelvin-voigt"
    GELATION = "gelation"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: Dict[ModelKind, str] = {
    ModelKind.NEWTONIAN: "Newtonian (Ideal)",
    ModelKind.POWER_LAW: "Power-law (Thinning/Dilatant)",
    ModelKind.CROSS: "Cross Model (Viscosity Plateaus)",
    ModelKind.CARREAU: "Carreau (Polymer Standard)",
    ModelKind.HERSCHEL_BULKLEY: "Herschel–Bulkley (Yield + Power)",
    ModelKind.CASSON: "Casson (Yield + Square Root)",
    ModelKind.BINGHAM: "Bingham (Yield + Linear)",
    ModelKind.THIXOTROPY: "Thixotropy (Time-Thinning)",
    ModelKind.RHEOPEXY: "Rheopexy (Time-Thickening)",
    ModelKind.MAXWELL: "Maxwell (Viscoelastic Liquid)",
    ModelKind.KELVIN_VOIGT: "Kelvin–Voigt (Viscoelastic Solid)",
    ModelKind.GELATION: "Gelation/Aging (Sol-Gel)",
}


@dataclass(frozen=True)
class RheologyParams:
    """Parameter record shared by every evaluator.

    Frozen: derive variants with ``replace`` instead of mutating. Units follow
    the rheometer conventions (Pa, Pa·s, 1/s, s, Hz, degrees C). No range
    checks are made; non-positive values fed to a log or a division are
    caller errors.
    """

    # Steady shear
    n: float
    K: float  # consistency index (Pa·s^n)
    tau0: float  # yield stress (Pa)
    gamma_dot_min: float
    gamma_dot_max: float

    # Cross / Carreau
    eta0: float
    eta_inf: float
    k_cross: float
    m_cross: float
    lambda_carreau: float

    # Thixotropy / step shear
    gamma_dot_const: float
    gamma_dot_low: float
    gamma_dot_high: float
    t_total: float
    dt: float
    kb: float  # breakdown rate
    kr: float  # rebuild rate
    lambda0: float
    a: float  # structural amplification

    # Viscoelastic elements
    G0: float
    tau_r: float
    k_spring: float
    eta_dashpot: float
    freq_min: float
    freq_max: float

    # Amplitude sweep
    gamma0_min: float
    gamma0_max: float
    gamma_y: float
    softening_p: float

    # Gelation / aging
    gel_rate: float
    gprime_final: float
    gel_t0: float
    osc_freq: float

    # Thermal
    current_temp: float
    temp_min: float
    temp_max: float
    temp_sensitivity: float

    def replace(self, **changes: float) -> "RheologyParams":
        """Return a copy with the given fields changed; unknown names raise TypeError."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "RheologyParams":
        return cls(**{name: float(values[name]) for name in field_names()})


def field_names() -> tuple:
    return tuple(f.name for f in fields(RheologyParams))


@dataclass(frozen=True)
class EffectiveParams:
    """Thermally scaled quantities at one temperature."""

    factor: float
    K: float
    tau0: float
    eta0: float
    eta_inf: float
    G0: float
    k_spring: float
    eta_dashpot: float
    gprime_final: float

    @classmethod
    def at(cls, params: RheologyParams, temperature: Optional[float] = None) -> "EffectiveParams":
        f = float(thermal_factor(params, temperature))
        return cls(
            factor=f,
            K=params.K * f,
            tau0=params.tau0 * f,
            eta0=params.eta0 * f,
            eta_inf=params.eta_inf * f,
            G0=params.G0 * f,
            k_spring=params.k_spring * f,
            eta_dashpot=params.eta_dashpot * f,
            gprime_final=params.gprime_final * f,
        )


DEFAULT_PARAMS = RheologyParams(
    n=0.8,
    K=5.0,
    tau0=10.0,
    gamma_dot_min=0.001,
    gamma_dot_max=1000.0,
    eta0=100.0,
    eta_inf=0.01,
    k_cross=0.5,
    m_cross=0.8,
    lambda_carreau=1.0,
    gamma_dot_const=10.0,
    gamma_dot_low=0.1,
    gamma_dot_high=500.0,
    t_total=180.0,
    dt=0.5,
    kb=0.1,
    kr=0.01,
    lambda0=1.0,
    a=10.0,
    G0=2500.0,
    tau_r=1.0,
    k_spring=2000.0,
    eta_dashpot=200.0,
    freq_min=0.001,
    freq_max=1000.0,
    gamma0_min=0.001,
    gamma0_max=1000.0,
    gamma_y=10.0,
    softening_p=2.5,
    gel_rate=0.02,
    gprime_final=8000.0,
    gel_t0=20.0,
    osc_freq=1.0,
    current_temp=25.0,
    temp_min=5.0,
    temp_max=85.0,
    temp_sensitivity=0.04,
)
