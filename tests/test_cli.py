import csv
import json
import subprocess
import sys
from pathlib import Path

import pytest

from rheosim.cli import build_argparser, resolve_inputs, run_cli
from rheosim.models import ModelKind
from rheosim.settings import get_settings

ROOT = Path(__file__).resolve().parents[1]


def test_cli_flow_csv(tmp_path):
    out_csv = tmp_path / "flow.csv"
    cmd = [sys.executable, "-m", "rheosim.cli", "flow", "--model", "bingham", "--csv", str(out_csv)]
    subprocess.check_call(cmd, cwd=ROOT)
    assert out_csv.exists()
    with open(out_csv, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["gammaDot", "tau", "eta"]
    assert len(rows) == 101


def test_cli_gel_point_prints_coordinates():
    out = subprocess.run(
        [sys.executable, "-m", "rheosim.cli", "gel-point"], cwd=ROOT, capture_output=True, text=True, check=True
    )
    x, y = (float(v) for v in out.stdout.strip().split(","))
    assert 20.0 < x < 180.0
    assert y > 0


def test_cli_bad_assignment_exits_2():
    out = subprocess.run(
        [sys.executable, "-m", "rheosim.cli", "flow", "--set", "bogus=1"], cwd=ROOT, capture_output=True, text=True
    )
    assert out.returncode == 2
    assert "error:" in out.stderr


def test_resolution_order(tmp_path):
    config = tmp_path / "params.json"
    config.write_text(json.dumps({"preset": "Commercial Toothpaste", "overrides": {"K": 2.0, "n": 0.9}}))
    args = build_argparser().parse_args(["creep", "--config", str(config), "--set", "n=0.5"])
    model, params = resolve_inputs(args)
    assert model is ModelKind.BINGHAM
    assert (params.tau0, params.K, params.n) == (160.0, 2.0, 0.5)

    args = build_argparser().parse_args(["creep", "--config", str(config), "--preset", "Molten Dark Chocolate"])
    model, params = resolve_inputs(args)
    assert model is ModelKind.CASSON
    assert params.tau0 == 15.0
    assert params.K == 2.0

    args = build_argparser().parse_args(["creep", "--preset", "Molten Dark Chocolate", "--model", "maxwell"])
    model, _ = resolve_inputs(args)
    assert model is ModelKind.MAXWELL


def test_run_cli_presets_and_errors(tmp_path, capsys):
    run_cli(["presets"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 7
    assert lines[0].split("\t")[:2] == ["Commercial Toothpaste", "bingham"]

    with pytest.raises(SystemExit) as exc:
        run_cli(["flow-point", "--preset", "Peanut Butter"])
    assert exc.value.code == 2

    with pytest.raises(SystemExit) as exc:
        run_cli(["time-sweep", "--config", str(tmp_path / "missing.json")])
    assert exc.value.code == 2


def test_invalid_log_level_exits_2(monkeypatch, capsys):
    monkeypatch.setenv("RHEOSIM_LOG_LEVEL", "LOUD")
    get_settings.cache_clear()
    try:
        with pytest.raises(SystemExit) as exc:
            run_cli(["presets"])
        assert exc.value.code == 2
        assert "log_level" in capsys.readouterr().err
    finally:
        get_settings.cache_clear()
