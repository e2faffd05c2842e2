from dataclasses import dataclass
from typing import Dict, List

from .models import DEFAULT_PARAMS, ModelKind, RheologyParams


@dataclass(frozen=True)
class MaterialProfile:
    name: str
    model: ModelKind
    params: RheologyParams
    description: str


MATERIAL_PROFILES: List[MaterialProfile] = [
    MaterialProfile(
        name="Commercial Toothpaste",
        model=ModelKind.BINGHAM,
        params=DEFAULT_PARAMS.replace(tau0=160.0, K=12.0, n=1.0, G0=48000.0, gamma_y=1.2),
        description=(
            "Ideal Bingham plastic. Acts as a rigid gel at rest to stay on the brush, "
            "but flows linearly once the squeeze pressure (yield stress) is applied."
        ),
    ),
    MaterialProfile(
        name="Classic Tomato Ketchup",
        model=ModelKind.HERSCHEL_BULKLEY,
        params=DEFAULT_PARAMS.replace(tau0=32.0, K=15.0, n=0.3, G0=1100.0, gamma_y=25.0),
        description=(
            "Highly pseudoplastic yield stress fluid. It won't run off your burger, "
            "but once you shake the bottle, it thins drastically to flow out easily."
        ),
    ),
    MaterialProfile(
        name="10W-40 Synthetic Motor Oil",
        model=ModelKind.NEWTONIAN,
        params=DEFAULT_PARAMS.replace(K=1.2, n=1.0, temp_sensitivity=0.15),
        description=(
            "Pure Newtonian lubricant. Viscosity is independent of speed but "
            "collapses rapidly as engine temperature increases."
        ),
    ),
    MaterialProfile(
        name="Self-Healing Hydrogel",
        model=ModelKind.THIXOTROPY,
        params=DEFAULT_PARAMS.replace(kr=0.03, kb=0.5, K=22.0, a=18.0, lambda0=1.0, G0=9500.0),
        description=(
            "Intelligent recovery network. It liquefies under injection stress and "
            "regenerates its full solid-like stiffness within seconds of reaching rest."
        ),
    ),
    MaterialProfile(
        name="Starch 'Oobleck' Slurry",
        model=ModelKind.POWER_LAW,
        params=DEFAULT_PARAMS.replace(K=0.02, n=2.2, G0=60.0),
        description=(
            "Dilatant (Shear-Thickening). The suspension becomes dramatically more "
            "resistive as more energy is applied."
        ),
    ),
    MaterialProfile(
        name="Molten Dark Chocolate",
        model=ModelKind.CASSON,
        params=DEFAULT_PARAMS.replace(tau0=15.0, K=3.2, n=1.0, temp_sensitivity=0.1),
        description=(
            "Standard Casson profile for cocoa-based solids. Optimized for smooth "
            "coating and uniform thickness in manufacturing."
        ),
    ),
    MaterialProfile(
        name="High-Density Mayonnaise",
        model=ModelKind.HERSCHEL_BULKLEY,
        params=DEFAULT_PARAMS.replace(tau0=95.0, K=14.0, n=0.42, G0=7000.0, gamma_y=10.0),
        description=(
            "Structural emulsion. Very high yield stress ensures it holds shape, "
            "with significant thinning to allow easy spreading."
        ),
    ),
]

_BY_NAME: Dict[str, MaterialProfile] = {profile.name: profile for profile in MATERIAL_PROFILES}


def get_profile(name: str) -> MaterialProfile:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown material profile: {name!r}. Available: {sorted(_BY_NAME)}") from None
