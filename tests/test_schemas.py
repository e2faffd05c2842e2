import json

import pytest
from pydantic import ValidationError

from rheosim.errors import ParameterFileError
from rheosim.models import DEFAULT_PARAMS, ModelKind
from rheosim.schemas import ParameterFile, load_parameter_file, parse_assignments


def test_resolve_without_preset_uses_fallback_model():
    model, params = ParameterFile(overrides={"n": 0.5}).resolve(ModelKind.CROSS)
    assert model is ModelKind.CROSS
    assert params == DEFAULT_PARAMS.replace(n=0.5)


def test_resolve_preset_then_overrides():
    spec = ParameterFile(preset="Commercial Toothpaste", overrides={"K": 2.0})
    model, params = spec.resolve(ModelKind.POWER_LAW)
    assert model is ModelKind.BINGHAM
    assert params.K == 2.0
    assert params.tau0 == 160.0


def test_explicit_model_beats_preset():
    spec = ParameterFile.model_validate({"model": "maxwell", "preset": "Commercial Toothpaste"})
    model, _ = spec.resolve(ModelKind.POWER_LAW)
    assert model is ModelKind.MAXWELL


def test_rejects_unknown_names():
    with pytest.raises(ValidationError):
        ParameterFile.model_validate({"overrides": {"viscosity": 1.0}})
    with pytest.raises(ValidationError):
        ParameterFile.model_validate({"preset": "Peanut Butter"})
    with pytest.raises(ValidationError):
        ParameterFile.model_validate({"model": "voigt"})
    with pytest.raises(ValidationError):
        ParameterFile.model_validate({"params": {}})


def test_load_parameter_file(tmp_path):
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"model": "casson", "overrides": {"tau0": 12.5}}))
    spec = load_parameter_file(path)
    assert spec.model is ModelKind.CASSON
    assert spec.overrides == {"tau0": 12.5}


def test_load_parameter_file_errors(tmp_path):
    with pytest.raises(ParameterFileError):
        load_parameter_file(tmp_path / "missing.json")
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(ParameterFileError):
        load_parameter_file(broken)
    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps({"overrides": {"bogus": 1}}))
    with pytest.raises(ParameterFileError):
        load_parameter_file(invalid)


def test_parse_assignments():
    assert parse_assignments(["n=0.5", " K = 3"]) == {"n": 0.5, "K": 3.0}
    assert parse_assignments([]) == {}
    for bad in (["n"], ["n=abc"], ["bogus=1"]):
        with pytest.raises(ParameterFileError):
            parse_assignments(bad)
