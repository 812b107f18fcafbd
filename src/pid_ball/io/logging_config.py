# ──────────────────────────────────────────────────────────────────────
# PID Ball — Structured Logging Configuration
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ──────────────────────────────────────────────────────────────────────
"""Log output for the ``pid_ball`` logger tree.

The simulation and the driver attach their state to log records through
``extra={"sim_context": {...}}`` (ball position, velocity, force, ticks).
The JSON formatter emits that mapping as a nested object so a run can be
followed with line-oriented tools; the plain formatter drops it.
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOGGER_NAME = "pid_ball"


class BallJSONFormatter(logging.Formatter):
    """One JSON object per record, with the simulation state when attached."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        context = getattr(record, "sim_context", None)
        if context is not None:
            entry["sim_context"] = dict(context)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        # numpy scalars and paths fall back to their string form
        return json.dumps(entry, default=str)


def _formatter(json_output: bool) -> logging.Formatter:
    return BallJSONFormatter() if json_output else logging.Formatter(PLAIN_FORMAT)


def setup_ball_logging(
    level: int = logging.INFO,
    json_output: bool = True,
    log_file: str | None = None,
) -> logging.Logger:
    """Route ``pid_ball`` records to stdout and optionally to ``log_file``.

    Existing handlers on the ``pid_ball`` logger are replaced, so calling
    this twice does not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(_formatter(json_output))
        logger.addHandler(handler)

    logger.debug("Logging configured (json=%s, file=%s)", json_output, log_file)
    return logger
