# ──────────────────────────────────────────────────────────────────────
# PID Ball — Configuration File Loader
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Read simulation defaults from a JSON file."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from pid_ball.core.config_schema import SimulationConfig, validate_config

logger = logging.getLogger(__name__)


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Load and validate a JSON configuration.

    Keys not given in the file keep their compiled-in defaults.  Raises
    ``FileNotFoundError`` for a missing file and ``ValueError`` when the
    top level is not a JSON object; schema violations surface as
    ``pydantic.ValidationError``.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        raw: Any = json.load(fh)
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top-level JSON value must be an object.")
    config = validate_config(raw)
    logger.info("Loaded configuration from %s", path)
    return config


def dump_config(config: SimulationConfig) -> Dict[str, Any]:
    return config.model_dump()
