# ──────────────────────────────────────────────────────────────────────
# PID Ball — Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Fixed-step simulation of a PID-levitated ball."""

from .core import Message, MessageKind, Simulation, SimulationConfig, StepData
from .control import StepScheduler

__version__ = "0.1.0"

__all__ = [
    "Message",
    "MessageKind",
    "Simulation",
    "SimulationConfig",
    "StepData",
    "StepScheduler",
]
