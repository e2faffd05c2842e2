import dataclasses

import numpy as np
import pytest

from rheosim.models import DEFAULT_PARAMS, EffectiveParams, ModelKind, RheologyParams, field_names
from rheosim.thermal import thermal_factor


def test_thermal_factor_is_one_at_reference():
    assert float(thermal_factor(DEFAULT_PARAMS)) == 1.0
    assert float(thermal_factor(DEFAULT_PARAMS, 25.0)) == 1.0


def test_thermal_factor_decreases_with_temperature():
    temps = np.linspace(5.0, 85.0, 50)
    f = thermal_factor(DEFAULT_PARAMS, temps)
    assert np.all(np.diff(f) < 0)
    assert float(thermal_factor(DEFAULT_PARAMS, 35.0)) == pytest.approx(np.exp(-0.4))


def test_effective_params_scale_with_temperature():
    hot = DEFAULT_PARAMS.replace(current_temp=50.0)
    eff = EffectiveParams.at(hot)
    assert eff.factor < 1.0
    assert eff.K == pytest.approx(hot.K * eff.factor)
    assert eff.G0 == pytest.approx(hot.G0 * eff.factor)
    assert EffectiveParams.at(DEFAULT_PARAMS).K == DEFAULT_PARAMS.K


def test_params_are_immutable_and_cloned_by_replace():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_PARAMS.n = 0.5
    changed = DEFAULT_PARAMS.replace(n=0.5)
    assert changed.n == 0.5
    assert DEFAULT_PARAMS.n == 0.8
    with pytest.raises(TypeError):
        DEFAULT_PARAMS.replace(not_a_field=1.0)


def test_params_dict_round_trip():
    d = DEFAULT_PARAMS.to_dict()
    assert set(d) == set(field_names())
    assert len(d) == 37
    assert RheologyParams.from_dict(d) == DEFAULT_PARAMS


def test_model_kind_slugs_and_labels():
    assert ModelKind("power-law") is ModelKind.POWER_LAW
    assert len(ModelKind) == 12
    assert all(m.label for m in ModelKind)
    assert ModelKind.BINGHAM.label.startswith("Bingham")
