# ──────────────────────────────────────────────────────────────────────
# PID Ball — CLI Tests
# ──────────────────────────────────────────────────────────────────────

from __future__ import annotations

import json
import logging

import pandas as pd
import pytest
from click.testing import CliRunner

import pid_ball.cli as cli_mod
from pid_ball.core.config_schema import SimulationConfig


@pytest.fixture(autouse=True)
def _restore_logging():  # type: ignore[no-untyped-def]
    logger = logging.getLogger("pid_ball")
    old_handlers = list(logger.handlers)
    old_level = logger.level
    yield
    logger.handlers[:] = old_handlers
    logger.setLevel(old_level)


def test_defaults_prints_config_json() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["defaults"])
    assert result.exit_code == 0
    assert json.loads(result.output) == SimulationConfig().model_dump()


def test_run_offline_prints_summary_and_writes_trace(tmp_path) -> None:  # type: ignore[no-untyped-def]
    out = tmp_path / "trace.csv"
    result = CliRunner().invoke(
        cli_mod.cli,
        ["run", "--duration", "1", "--tick-interval", "0.05", "--noise", "0",
         "--output", str(out), "--log-level", "WARNING"],
    )
    assert result.exit_code == 0, result.output
    assert "ticks      20" in result.output
    assert "simulated  1.000 s" in result.output
    frame = pd.read_csv(out)
    assert len(frame) == 20
    assert list(frame.columns) == ["time", "position", "velocity", "force", "target"]


def test_run_hold_keeps_ball_in_place() -> None:
    result = CliRunner().invoke(
        cli_mod.cli,
        ["run", "--duration", "0.5", "--tick-interval", "0.1", "--hold", "--noise", "0",
         "--log-level", "ERROR"],
    )
    assert result.exit_code == 0, result.output
    assert f"position   {SimulationConfig().ball_position:.5f} m" in result.output
    assert "velocity   0.00000 m/s" in result.output


def test_run_reads_config_file(tmp_path) -> None:  # type: ignore[no-untyped-def]
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"target": 0.65, "noise": 0.0}), encoding="utf-8")
    result = CliRunner().invoke(
        cli_mod.cli,
        ["run", "--config", str(cfg), "--duration", "0.2", "--log-level", "ERROR"],
    )
    assert result.exit_code == 0, result.output
    assert "(target 0.65000 m)" in result.output


def test_run_rejects_invalid_override() -> None:
    result = CliRunner().invoke(
        cli_mod.cli, ["run", "--noise", "-1", "--duration", "0.1", "--log-level", "ERROR"]
    )
    assert result.exit_code != 0
    assert "Invalid configuration" in result.output


def test_run_rejects_non_positive_duration() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["run", "--duration", "0", "--log-level", "ERROR"])
    assert result.exit_code != 0
    assert "--duration must be finite and > 0" in result.output


def test_no_hold_overrides_config_file(tmp_path) -> None:  # type: ignore[no-untyped-def]
    cfg = tmp_path / "held.json"
    cfg.write_text(json.dumps({"hold_ball": True, "noise": 0.0}), encoding="utf-8")
    base = ["run", "--config", str(cfg), "--duration", "0.5", "--tick-interval", "0.1",
            "--log-level", "ERROR"]

    held = CliRunner().invoke(cli_mod.cli, base)
    assert held.exit_code == 0, held.output
    assert "velocity   0.00000 m/s" in held.output

    released = CliRunner().invoke(cli_mod.cli, base + ["--no-hold"])
    assert released.exit_code == 0, released.output
    assert "velocity   0.00000 m/s" not in released.output


def test_main_returns_exit_code(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr("sys.argv", ["pid-ball", "run", "--duration", "-1", "--log-level", "ERROR"])
    assert cli_mod.main() == 1
