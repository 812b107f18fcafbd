from __future__ import annotations

import pandas as pd
import pytest

from pid_ball.core.simulation import StepData
from pid_ball.diagnostics.trace import COLUMNS, SimulationTrace


def _filled(n: int) -> SimulationTrace:
    trace = SimulationTrace()
    for i in range(n):
        trace.append(0.1 * i, StepData(position=0.5 + i, velocity=-i, force=2.0 * i), target=0.5)
    return trace


def test_empty_trace() -> None:
    trace = SimulationTrace()
    assert len(trace) == 0
    assert trace.last() is None
    frame = trace.to_frame()
    assert list(frame.columns) == list(COLUMNS)
    assert frame.empty


def test_append_and_last() -> None:
    trace = _filled(3)
    assert len(trace) == 3
    last = trace.last()
    assert last == {"time": pytest.approx(0.2), "position": 2.5, "velocity": -2, "force": 4.0, "target": 0.5}


def test_to_frame_columns_and_values() -> None:
    frame = _filled(4).to_frame()
    assert isinstance(frame, pd.DataFrame)
    assert list(frame.columns) == ["time", "position", "velocity", "force", "target"]
    assert frame["force"].tolist() == [0.0, 2.0, 4.0, 6.0]


def test_clear() -> None:
    trace = _filled(5)
    trace.clear()
    assert len(trace) == 0


def test_to_csv(tmp_path) -> None:  # type: ignore[no-untyped-def]
    path = _filled(2).to_csv(tmp_path / "trace.csv")
    loaded = pd.read_csv(path)
    assert loaded.shape == (2, 5)
    assert loaded["position"].tolist() == [0.5, 1.5]
