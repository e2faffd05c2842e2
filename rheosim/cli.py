import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import ValidationError

from .crossover import find_flow_point, find_gel_point
from .errors import ParameterFileError, RheoSimError
from .models import ModelKind, RheologyParams
from .presets import MATERIAL_PROFILES
from .schemas import ParameterFile, load_parameter_file, parse_assignments
from .settings import get_settings
from .sweeps import (
    EVALUATORS,
    compute_amplitude_sweep,
    compute_time_sweep,
)

logger = logging.getLogger(__name__)

MODEL_CHOICES = [m.value for m in ModelKind]


def _add_param_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--model", choices=MODEL_CHOICES, help="Constitutive model (default from settings or preset)")
    p.add_argument("--preset", type=str, help="Material preset name (see 'presets')")
    p.add_argument("--config", type=Path, help="JSON parameter file")
    p.add_argument(
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Override one parameter; repeatable",
    )


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="RheoSim - rheometer protocol simulator")
    sub = parser.add_subparsers(dest="cmd", required=True)

    for key in EVALUATORS:
        p = sub.add_parser(key, help=f"Evaluate the {key} experiment and write CSV")
        _add_param_args(p)
        p.add_argument("--csv", type=str, default=f"{key}.csv", help="Output CSV path")

    p_gel = sub.add_parser("gel-point", help="Gel point (G' = G'') of the time sweep")
    _add_param_args(p_gel)
    p_flow = sub.add_parser("flow-point", help="Flow point (G' = G'') of the amplitude sweep")
    _add_param_args(p_flow)

    sub.add_parser("presets", help="List material presets")
    return parser


def resolve_inputs(args: argparse.Namespace) -> Tuple[ModelKind, RheologyParams]:
    """Default -> preset -> config file -> --set overrides."""
    settings = get_settings()
    raw = load_parameter_file(args.config).model_dump() if args.config is not None else {}
    if args.preset is not None:
        raw["preset"] = args.preset
    try:
        spec = ParameterFile.model_validate(raw)
    except ValidationError as exc:
        raise ParameterFileError(str(exc)) from exc
    model, params = spec.resolve(settings.default_model)
    if args.model is not None:
        model = ModelKind(args.model)
    overrides = parse_assignments(args.assignments)
    if overrides:
        params = params.replace(**overrides)
    return model, params


def _output_path(csv_path: str) -> str:
    if os.path.dirname(csv_path):
        return csv_path
    return os.path.join(get_settings().output_dir, csv_path)


def _run(args: argparse.Namespace) -> None:
    if args.cmd == "presets":
        for profile in MATERIAL_PROFILES:
            print(f"{profile.name}\t{profile.model.value}\t{profile.description}")
        return

    model, params = resolve_inputs(args)
    logger.info("Running %s with model %s", args.cmd, model.value)

    if args.cmd == "gel-point":
        point = find_gel_point(compute_time_sweep(model, params))
    elif args.cmd == "flow-point":
        point = find_flow_point(compute_amplitude_sweep(params))
    else:
        df = EVALUATORS[args.cmd](model, params)
        path = _output_path(args.csv)
        df.to_csv(path, index=False)
        logger.info("Wrote %d rows to %s", len(df), path)
        return

    if point is None:
        print("no crossing")
    else:
        print(f"{point.x},{point.y}")


def run_cli(argv: Optional[List[str]] = None) -> None:
    args = build_argparser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"error: invalid RHEOSIM_* settings: {exc}", file=sys.stderr)
        raise SystemExit(2)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        _run(args)
    except RheoSimError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2)


if __name__ == "__main__":
    run_cli()
