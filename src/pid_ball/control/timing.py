# ──────────────────────────────────────────────────────────────────────
# PID Ball — Real-Time Step Scheduler
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
r"""Wall-clock to simulation-step pacing (fixed-timestep accumulator).

On every external tick the scheduler answers "how many fixed steps are
owed?":

    drift = t_wall - t_sim
    n     = floor(drift / dt)
    t_sim = t_sim + n * dt

The simulated clock therefore never runs ahead of the wall clock and lags
it by less than one sampling duration, whatever the tick rate of the
caller.  Both clocks are kept in integer nanoseconds
(``time.perf_counter_ns``) so the accumulator is exact.
"""
from __future__ import annotations

import time
from typing import Callable

NS_PER_S = 1_000_000_000


def seconds_to_ns(seconds: float) -> int:
    return int(round(float(seconds) * NS_PER_S))


class StepScheduler:
    """Counts the whole simulation steps owed to the wall clock."""

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        """Restart the wall-clock origin and forget all simulated time."""
        self._start_ns = int(self._clock())
        self._simulated_ns = 0

    @property
    def elapsed(self) -> float:
        """Wall-clock time since the last reset [s]."""
        return (int(self._clock()) - self._start_ns) / NS_PER_S

    @property
    def simulated(self) -> float:
        """Simulated time accounted for so far [s]."""
        return self._simulated_ns / NS_PER_S

    def step_count(self, sampling_time: float) -> int:
        sampling_ns = seconds_to_ns(sampling_time)
        if sampling_ns <= 0:
            raise ValueError(f"Sampling time must be > 0, got {sampling_time!r}.")
        drift_ns = int(self._clock()) - self._start_ns - self._simulated_ns
        steps = max(drift_ns // sampling_ns, 0)
        self._simulated_ns += steps * sampling_ns
        return steps
