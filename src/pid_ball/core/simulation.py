# ──────────────────────────────────────────────────────────────────────
# PID Ball — Simulation
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Closed-loop simulation of the magnetically levitated ball.

One step couples the entities in a fixed order:

1. move the ball under the attenuated inductor pull plus gravitation
   (skipped while the ball is held),
2. measure the ball height,
3. update the PID controller with the measurement,
4. command the inductor with the PID output.

The magnetic pull falls off as ``F / (1 + d^2)`` with the ball-coil
distance ``d``.  This is a shaping approximation, not a field model.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Callable, Dict, Optional

import numpy as np

from pid_ball.control.inductor import Inductor
from pid_ball.control.pid import PIDController
from pid_ball.core.ball import Ball
from pid_ball.core.config_schema import SimulationConfig
from pid_ball.core.messages import Message, MessageKind
from pid_ball.diagnostics.sensor import PositionSensor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepData:
    """Observable state after a call to ``Simulation.step``."""
    position: float
    velocity: float
    force: float


class Simulation:
    """Ball, inductor, PID controller and sensor driven as one system.

    All mutation goes through :meth:`config` and :meth:`step`.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if seed is not None and rng is not None:
            raise ValueError("Provide either seed or rng, not both.")
        self.defaults = config or SimulationConfig()
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._handlers: Dict[MessageKind, Callable[[Message], None]] = {
            MessageKind.KP: lambda m: setattr(self._pid, "kp", m.value),
            MessageKind.KI: lambda m: setattr(self._pid, "ki", m.value),
            MessageKind.KD: lambda m: setattr(self._pid, "kd", m.value),
            MessageKind.TARGET: lambda m: setattr(self._pid, "target", m.value),
            MessageKind.NOISE: lambda m: self._sensor.set_sigma(m.value),
            MessageKind.GRAVITATION: lambda m: setattr(self, "_gravitation", m.value),
            MessageKind.MAX_FORCE: lambda m: setattr(self._inductor, "max_force", m.value),
            MessageKind.MAX_FORCE_RATE: lambda m: setattr(self._inductor, "max_force_rate", m.value),
            MessageKind.HOLD_BALL: lambda m: setattr(self, "_hold_ball", m.value),
            MessageKind.RESET: lambda m: self.reset(),
            MessageKind.RESTART: lambda m: self.restart(),
        }
        self.restart()

    # --- Configuration protocol ---

    def config(self, message: Message) -> None:
        if not isinstance(message, Message):
            raise TypeError(f"Expected a Message, got {type(message).__name__}.")
        logger.debug("config %s=%r", message.kind.value, message.value)
        self._handlers[message.kind](message)

    def reset(self) -> None:
        """Return the state to its initial values, keeping all tuning."""
        self._pid.reset()
        self._ball.reset()
        self._inductor.reset()
        self._sensor.reset()
        logger.info("Simulation reset", extra={"sim_context": asdict(self.snapshot())})

    def restart(self) -> None:
        """Rebuild every entity from the construction-time defaults."""
        cfg = self.defaults
        self._pid = PIDController(cfg.kp, cfg.ki, cfg.kd, cfg.target)
        self._ball = Ball(cfg.ball_position, cfg.ball_velocity)
        self._inductor = Inductor(
            cfg.inductor_position,
            max_force=cfg.max_force,
            max_force_rate=cfg.max_force_rate,
        )
        self._sensor = PositionSensor(cfg.noise, rng=self._rng)
        self._gravitation = cfg.gravitation
        self._hold_ball = cfg.hold_ball
        logger.info(
            "Simulation restarted from defaults",
            extra={"sim_context": {**asdict(self.snapshot()), "target": cfg.target}},
        )

    # --- Stepping ---

    def step(self, steps: int, sampling_time: float) -> StepData:
        """Run the coupling loop ``steps`` times with a step of ``sampling_time`` [s]."""
        for _ in range(steps):
            # Moving the ball
            if not self._hold_ball:
                distance = abs(self._ball.position - self._inductor.position)
                force = self._inductor.force / (1.0 + distance**2)
                self._ball.step(force + self._gravitation, sampling_time)

            z_meas = self._sensor.measure(self._ball.position)

            self._pid.update(z_meas, sampling_time)
            self._inductor.set_force(self._pid.total(), sampling_time)
        return self.snapshot()

    def snapshot(self) -> StepData:
        return StepData(
            position=self._ball.position,
            velocity=self._ball.velocity,
            force=self._inductor.force,
        )

    @property
    def parameters(self) -> SimulationConfig:
        """Live tunable values, in the shape of the construction config."""
        return self.defaults.model_copy(
            update={
                "kp": self._pid.kp,
                "ki": self._pid.ki,
                "kd": self._pid.kd,
                "target": self._pid.target,
                "noise": self._sensor.sigma,
                "gravitation": self._gravitation,
                "max_force": self._inductor.max_force,
                "max_force_rate": self._inductor.max_force_rate,
                "hold_ball": self._hold_ball,
            }
        )
