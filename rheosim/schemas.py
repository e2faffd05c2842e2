from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ParameterFileError
from .models import DEFAULT_PARAMS, ModelKind, RheologyParams, field_names
from .presets import get_profile


class ParameterFile(BaseModel):
    """JSON parameter file: optional model, optional preset, field overrides.

    Example::

        {"model": "bingham", "preset": "Commercial Toothpaste", "overrides": {"K": 12.0}}
    """

    model_config = ConfigDict(extra="forbid")

    model: Optional[ModelKind] = None
    preset: Optional[str] = None
    overrides: Dict[str, float] = Field(default_factory=dict)

    @field_validator("overrides")
    @classmethod
    def _known_fields(cls, value: Dict[str, float]) -> Dict[str, float]:
        unknown = sorted(set(value) - set(field_names()))
        if unknown:
            raise ValueError(f"unknown parameter(s): {unknown}")
        return value

    @field_validator("preset")
    @classmethod
    def _known_preset(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                get_profile(value)
            except KeyError as exc:
                raise ValueError(str(exc)) from None
        return value

    def resolve(self, fallback_model: ModelKind) -> Tuple[ModelKind, RheologyParams]:
        """Apply default -> preset -> overrides; the preset model wins over the fallback."""
        params = DEFAULT_PARAMS
        model = fallback_model
        if self.preset is not None:
            profile = get_profile(self.preset)
            params = profile.params
            model = profile.model
        if self.model is not None:
            model = self.model
        return model, params.replace(**self.overrides)


def load_parameter_file(path: Path) -> ParameterFile:
    try:
        raw = json.loads(Path(path).read_text())
        return ParameterFile.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise ParameterFileError(f"Invalid parameter file {path}: {exc}") from exc


def parse_assignments(assignments: Iterable[str]) -> Dict[str, float]:
    """Parse NAME=VALUE strings into a field -> float mapping."""
    known = set(field_names())
    out: Dict[str, float] = {}
    for item in assignments:
        name, sep, value = item.partition("=")
        name = name.strip()
        if not sep or name not in known:
            raise ParameterFileError(f"Expected NAME=VALUE with a known parameter name, got {item!r}")
        try:
            out[name] = float(value)
        except ValueError:
            raise ParameterFileError(f"Value for {name} is not a number: {value!r}") from None
    return out
