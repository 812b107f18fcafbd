# ──────────────────────────────────────────────────────────────────────
# PID Ball — Position Sensor
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

from typing import Optional

import numpy as np

from pid_ball.core.config_schema import NOISE


class PositionSensor:
    """
    Height sensor with additive zero-mean Gaussian noise.
    Every reading is an independent draw; sigma = 0 gives exact readings.
    """
    def __init__(
        self,
        sigma: float = NOISE,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if seed is not None and rng is not None:
            raise ValueError("Provide either seed or rng, not both.")
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self.set_sigma(sigma)

    @property
    def sigma(self) -> float:
        return self._sigma

    def set_sigma(self, sigma: float) -> None:
        sigma = float(sigma)
        if not sigma >= 0.0:
            raise ValueError(f"Noise sigma must be >= 0, got {sigma}.")
        self._sigma = sigma

    def measure(self, true_position: float) -> float:
        noise = self._rng.normal(0.0, self._sigma)
        return true_position + float(noise)

    def reset(self) -> None:
        pass
