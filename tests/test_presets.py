import pytest

from rheosim.models import DEFAULT_PARAMS, ModelKind
from rheosim.presets import MATERIAL_PROFILES, get_profile


def test_seven_uniquely_named_profiles():
    names = [p.name for p in MATERIAL_PROFILES]
    assert len(names) == 7
    assert len(set(names)) == 7


def test_profile_values():
    toothpaste = get_profile("Commercial Toothpaste")
    assert toothpaste.model is ModelKind.BINGHAM
    assert toothpaste.params.tau0 == 160.0
    assert toothpaste.params.G0 == 48000.0

    oobleck = get_profile("Starch 'Oobleck' Slurry")
    assert oobleck.model is ModelKind.POWER_LAW
    assert oobleck.params.n == 2.2

    hydrogel = get_profile("Self-Healing Hydrogel")
    assert hydrogel.model is ModelKind.THIXOTROPY
    assert (hydrogel.params.kb, hydrogel.params.kr) == (0.5, 0.03)


def test_profiles_keep_unlisted_defaults():
    oil = get_profile("10W-40 Synthetic Motor Oil")
    assert oil.params.temp_sensitivity == 0.15
    assert oil.params.t_total == DEFAULT_PARAMS.t_total
    assert oil.params.gel_rate == DEFAULT_PARAMS.gel_rate


def test_unknown_profile():
    with pytest.raises(KeyError):
        get_profile("Peanut Butter")
