# CopyRight: (c) 1998-2026 Miroslav Sotek. All rights reserved.
"""PID controller for the ball height.

The controller drives the inductor force from the measured ball position.

    error = target - z_measured
    P     = Kp * error
    I    += Ki * error                       (per sample, no anti-windup)
    D     = Kd * (z_previous - z_measured) / dt

The derivative acts on the measurement rather than on the error, so a
change of target does not produce a derivative kick.  On the first sample
after a reset no previous measurement exists and D keeps its last value
(zero after a reset).

The integral is deliberately left unbounded: under a sustained error it
grows linearly with the number of samples.
"""
from __future__ import annotations

from typing import Optional

from pid_ball.core.config_schema import KD, KI, KP, TARGET


class PIDController:
    """Discrete PID with derivative-on-measurement."""

    def __init__(
        self,
        kp: float = KP,
        ki: float = KI,
        kd: float = KD,
        target: float = TARGET,
    ) -> None:
        self.kp = float(kp)
        self.ki = float(ki)
        self.kd = float(kd)
        self.target = float(target)
        self.p_term = 0.0
        self.i_term = 0.0
        self.d_term = 0.0
        self.prev_position: Optional[float] = None

    def reset(self) -> None:
        self.p_term = 0.0
        self.i_term = 0.0
        self.d_term = 0.0
        self.prev_position = None

    def update(self, z_measured: float, dt: float) -> None:
        error = self.target - z_measured
        self.p_term = self.kp * error
        self.i_term += self.ki * error
        if self.prev_position is not None:
            self.d_term = self.kd * (self.prev_position - z_measured) / dt
        self.prev_position = z_measured

    def total(self) -> float:
        """Commanded force [N] for the actuator."""
        return self.p_term + self.i_term + self.d_term
