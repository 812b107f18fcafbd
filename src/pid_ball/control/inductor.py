# ──────────────────────────────────────────────────────────────────────
# PID Ball — Inductor Actuator
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

import numpy as np

from pid_ball.core.config_schema import INDUCTOR_POSITION, MAX_FORCE, MAX_FORCE_RATE


class Inductor:
    """Electromagnet at a fixed height with slew-rate and saturation limits.

    A commanded force is first slewed (``max_force_rate`` [N/s]) and then
    hard-clamped to ``[-max_force, max_force]`` [N].
    """

    def __init__(
        self,
        position: float = INDUCTOR_POSITION,
        *,
        max_force: float = MAX_FORCE,
        max_force_rate: float = MAX_FORCE_RATE,
    ) -> None:
        self.position = float(position)
        self.max_force = float(max_force)
        self.max_force_rate = float(max_force_rate)
        self._force = 0.0

    @property
    def force(self) -> float:
        """Force currently produced by the coil [N]."""
        return self._force

    def reset(self) -> None:
        # Limits are tuning, not state.
        self._force = 0.0

    def set_force(self, force: float, dt: float) -> None:
        delta = force - self._force
        if abs(delta / dt) > self.max_force_rate:
            delta = self.max_force_rate * np.sign(delta) * dt
        self._force = float(np.clip(self._force + delta, -self.max_force, self.max_force))
