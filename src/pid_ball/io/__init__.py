# ──────────────────────────────────────────────────────────────────────
# PID Ball — IO Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Configuration files and logging setup."""

from .config_loader import dump_config, load_config
from .logging_config import BallJSONFormatter, setup_ball_logging

__all__ = ["BallJSONFormatter", "dump_config", "load_config", "setup_ball_logging"]
