# ──────────────────────────────────────────────────────────────────────
# PID Ball — Core Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from .ball import Ball
from .config_schema import SimulationConfig, validate_config
from .messages import Message, MessageKind
from .simulation import Simulation, StepData

__all__ = [
    "Ball",
    "Message",
    "MessageKind",
    "Simulation",
    "SimulationConfig",
    "StepData",
    "validate_config",
]
