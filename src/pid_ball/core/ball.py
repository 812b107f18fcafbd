# ──────────────────────────────────────────────────────────────────────
# PID Ball — Ball Model
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Point-mass ball moving along the vertical axis.

Model:
    x'' = F / m,   m = 1 kg

Integrated with kick-drift-kick (leapfrog), which for a force held
constant over the step equals semi-implicit Euler and keeps the energy
bounded over long runs.
"""
from __future__ import annotations

from pid_ball.core.config_schema import BALL_POSITION, BALL_VELOCITY


class Ball:
    """Vertical position [m] and velocity [m/s] of the levitated ball."""

    def __init__(
        self,
        position: float = BALL_POSITION,
        velocity: float = BALL_VELOCITY,
    ) -> None:
        self._initial = (float(position), float(velocity))
        self.position, self.velocity = self._initial

    def reset(self) -> None:
        self.position, self.velocity = self._initial

    def step(self, force: float, dt: float) -> None:
        """Advance by ``dt`` seconds under a constant ``force`` [N]."""
        delta_vel = 0.5 * dt * force
        self.velocity += delta_vel
        self.position += self.velocity * dt
        self.velocity += delta_vel
