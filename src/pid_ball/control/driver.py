# ──────────────────────────────────────────────────────────────────────
# PID Ball — Headless Simulation Driver
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
r"""Host loop for the simulation without a user interface.

Provides:
1. **Tunable** — an edited value that is reported once per change
2. **DriverInputs** — the live parameters a user may edit between ticks
3. **VirtualClock** — a nanosecond clock advanced by hand, for offline runs
4. **SimulationDriver** — per tick: push edits, pace, step, record

A tick follows the order the simulation expects: configuration changes
from the previous tick are applied first, then the scheduler decides how
many fixed steps are owed, then the simulation runs them.
"""
from __future__ import annotations

import logging
import math
import time
from dataclasses import asdict, dataclass, fields
from typing import Any, Generic, Optional, TypeVar

from pid_ball.control.timing import StepScheduler, seconds_to_ns
from pid_ball.core.config_schema import SimulationConfig
from pid_ball.core.messages import Message
from pid_ball.core.simulation import Simulation, StepData
from pid_ball.diagnostics.trace import SimulationTrace

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Tunable(Generic[T]):
    """User-editable value that remembers what was last reported."""

    def __init__(self, value: T) -> None:
        self.value = value
        self._reported = value

    def get(self) -> T:
        return self.value

    def changed(self) -> Optional[T]:
        """Return the value if it differs from the last report, else None."""
        if self.value != self._reported:
            self._reported = self.value
            return self.value
        return None


# Parameters that cannot go below zero; the driver clamps, the core trusts.
_NON_NEGATIVE = {"noise", "max_force", "max_force_rate"}


@dataclass
class DriverInputs:
    kp: Tunable[float]
    ki: Tunable[float]
    kd: Tunable[float]
    target: Tunable[float]
    sampling_rate: Tunable[int]
    noise: Tunable[float]
    gravitation: Tunable[float]
    max_force: Tunable[float]
    max_force_rate: Tunable[float]
    hold_ball: Tunable[bool]

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "DriverInputs":
        return cls(**{f.name: Tunable(getattr(config, f.name)) for f in fields(cls)})

    def set(self, name: str, value: Any) -> None:
        if name not in {f.name for f in fields(self)}:
            raise KeyError(f"Unknown parameter '{name}'.")
        if name != "hold_ball" and not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}.")
        if name == "hold_ball":
            value = bool(value)
        elif name == "sampling_rate":
            value = max(int(value), 1)
        else:
            value = float(value)
            if name in _NON_NEGATIVE:
                value = max(value, 0.0)
        getattr(self, name).value = value

    def emit(self, simulation: Simulation) -> int:
        """Send one message per edited parameter. Returns the message count."""
        sent = 0
        for name, build in (
            ("kp", Message.kp),
            ("ki", Message.ki),
            ("kd", Message.kd),
            ("target", Message.target),
            ("noise", Message.noise),
            ("gravitation", Message.gravitation),
            ("max_force", Message.max_force),
            ("max_force_rate", Message.max_force_rate),
            ("hold_ball", Message.hold_ball),
        ):
            value = getattr(self, name).changed()
            if value is not None:
                simulation.config(build(value))
                sent += 1
        return sent


class VirtualClock:
    """Monotonic nanosecond clock that only moves when told to."""

    def __init__(self) -> None:
        self.now_ns = 0

    def __call__(self) -> int:
        return self.now_ns

    def advance(self, seconds: float) -> None:
        self.now_ns += seconds_to_ns(seconds)


class SimulationDriver:
    """Drives a :class:`Simulation` from a tick loop and records the outputs.

    With ``realtime=False`` the scheduler reads a :class:`VirtualClock`
    that :meth:`run` advances by one tick interval per tick, so a long
    run finishes as fast as the host allows with identical pacing.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        *,
        realtime: bool = True,
        seed: Optional[int] = None,
        simulation: Simulation | None = None,
    ) -> None:
        if simulation is not None:
            if config is not None and config != simulation.defaults:
                raise ValueError("config does not match the defaults of the given simulation.")
            self.config = simulation.defaults
            self.simulation = simulation
        else:
            self.config = config or SimulationConfig()
            self.simulation = Simulation(self.config, seed=seed)
        self.realtime = bool(realtime)
        # Start from the live values; an injected simulation may already be tuned.
        self.inputs = DriverInputs.from_config(self.simulation.parameters)
        self.clock = None if self.realtime else VirtualClock()
        self.scheduler = StepScheduler() if self.clock is None else StepScheduler(self.clock)
        self.trace = SimulationTrace()
        self.ticks = 0

    @property
    def sampling_time(self) -> float:
        return 1.0 / self.inputs.sampling_rate.get()

    def tick(self) -> StepData:
        self.inputs.emit(self.simulation)
        sampling_time = self.sampling_time
        steps = self.scheduler.step_count(sampling_time)
        data = self.simulation.step(steps, sampling_time)
        self.trace.append(self.scheduler.elapsed, data, self.inputs.target.get())
        self.ticks += 1
        return data

    def reset(self) -> None:
        """Clear the record and the simulation state; keep edited inputs."""
        self.trace.clear()
        self.simulation.config(Message.reset())
        self.scheduler.reset()
        self.ticks = 0

    def restart(self) -> None:
        """Clear everything and discard edited inputs."""
        self.trace.clear()
        self.simulation.config(Message.restart())
        self.scheduler.reset()
        self.inputs = DriverInputs.from_config(self.config)
        self.ticks = 0

    def run(self, duration: float, tick_interval: float = 1.0 / 60.0) -> StepData:
        """Tick until ``duration`` seconds of wall (or virtual) time have passed."""
        if not (duration > 0.0 and math.isfinite(duration)):
            raise ValueError(f"duration must be finite and > 0, got {duration!r}.")
        if not (tick_interval > 0.0 and math.isfinite(tick_interval)):
            raise ValueError(f"tick_interval must be finite and > 0, got {tick_interval!r}.")

        logger.info(
            "Driver run: duration=%.3fs tick=%.4fs realtime=%s sampling_rate=%dHz",
            duration, tick_interval, self.realtime, self.inputs.sampling_rate.get(),
        )
        data = self.simulation.snapshot()
        while self.scheduler.elapsed < duration:
            if self.clock is not None:
                self.clock.advance(tick_interval)
            else:
                time.sleep(tick_interval)
            data = self.tick()
        logger.info(
            "Driver finished: ticks=%d simulated=%.3fs position=%.4f force=%.3f",
            self.ticks, self.scheduler.simulated, data.position, data.force,
            extra={"sim_context": {
                "ticks": self.ticks,
                "simulated": self.scheduler.simulated,
                "target": self.inputs.target.get(),
                **asdict(data),
            }},
        )
        return data
