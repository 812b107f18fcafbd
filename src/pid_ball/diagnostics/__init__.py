# ──────────────────────────────────────────────────────────────────────
# PID Ball — Diagnostics Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Measurement and recording of the simulated ball."""

from .sensor import PositionSensor
from .trace import SimulationTrace

__all__ = ["PositionSensor", "SimulationTrace"]
