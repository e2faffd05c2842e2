import pytest
from pydantic import ValidationError

from rheosim.models import ModelKind
from rheosim.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("RHEOSIM_LOG_LEVEL", "RHEOSIM_OUTPUT_DIR", "RHEOSIM_DEFAULT_MODEL", "RHEOSIM_CACHE_SIZE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.output_dir == "."
    assert settings.default_model is ModelKind.POWER_LAW
    assert settings.cache_size == 256


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RHEOSIM_DEFAULT_MODEL", "bingham")
    monkeypatch.setenv("RHEOSIM_CACHE_SIZE", "8")
    settings = get_settings()
    assert settings.default_model is ModelKind.BINGHAM
    assert settings.cache_size == 8
    assert get_settings() is settings


def test_log_level_is_normalised(monkeypatch):
    monkeypatch.setenv("RHEOSIM_LOG_LEVEL", " debug ")
    assert get_settings().log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("RHEOSIM_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        get_settings()
