# ──────────────────────────────────────────────────────────────────────
# PID Ball — Sample Trace
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Union

import pandas as pd

if TYPE_CHECKING:
    from pid_ball.core.simulation import StepData

COLUMNS = ("time", "position", "velocity", "force", "target")


class SimulationTrace:
    """
    Per-tick record of the simulation outputs.
    Holds one sample per driver tick: wall time [s], ball position [m],
    velocity [m/s], inductor force [N] and the target in effect [m].
    """
    def __init__(self) -> None:
        self.history: Dict[str, List[float]] = {name: [] for name in COLUMNS}

    def __len__(self) -> int:
        return len(self.history["time"])

    def append(self, t: float, data: StepData, target: float) -> None:
        self.history["time"].append(float(t))
        self.history["position"].append(data.position)
        self.history["velocity"].append(data.velocity)
        self.history["force"].append(data.force)
        self.history["target"].append(float(target))

    def clear(self) -> None:
        for values in self.history.values():
            values.clear()

    def last(self) -> Optional[Dict[str, float]]:
        if not len(self):
            return None
        return {name: values[-1] for name, values in self.history.items()}

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.history, columns=list(COLUMNS))

    def to_csv(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        self.to_frame().to_csv(path, index=False)
        return path
