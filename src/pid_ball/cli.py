# ──────────────────────────────────────────────────────────────────────
# PID Ball — Command-Line Interface
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

import json
import logging
import math
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
from pydantic import ValidationError

from pid_ball.control.driver import SimulationDriver
from pid_ball.core.config_schema import SimulationConfig, validate_config
from pid_ball.io.config_loader import dump_config, load_config
from pid_ball.io.logging_config import setup_ball_logging


LOGGER = logging.getLogger("pid_ball.cli")
DEFAULT_DURATION_SECONDS = 10.0
DEFAULT_TICK_INTERVAL_SECONDS = 1.0 / 60.0


def _positive_finite(name: str, value: float) -> float:
    value = float(value)
    if not (value > 0.0 and math.isfinite(value)):
        raise click.ClickException(f"--{name} must be finite and > 0.")
    return value


def _resolve_config(config_path: Optional[Path], overrides: Dict[str, Any]) -> SimulationConfig:
    try:
        base = load_config(config_path) if config_path is not None else SimulationConfig()
        merged = dump_config(base)
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return validate_config(merged)
    except (ValidationError, ValueError) as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """Magnetic levitation PID simulator."""


@cli.command()
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="JSON file with default parameters.")
@click.option("--kp", type=float, help="Proportional gain.")
@click.option("--ki", type=float, help="Integral gain.")
@click.option("--kd", type=float, help="Derivative gain.")
@click.option("--target", type=float, help="Target height [m].")
@click.option("--noise", type=float, help="Sensor noise sigma [m].")
@click.option("--gravitation", type=float, help="Gravitation [m/s^2], e.g. -9.81.")
@click.option("--max-force", type=float, help="Inductor saturation [N].")
@click.option("--max-force-rate", type=float, help="Inductor slew limit [N/s].")
@click.option("--sampling-rate", type=int, help="Simulation sampling rate [Hz].")
@click.option("--hold/--no-hold", default=None,
              help="Hold or release the ball (controller still runs). Default: from config.")
@click.option("--duration", default=DEFAULT_DURATION_SECONDS, show_default=True, type=float,
              help="Run length [s].")
@click.option("--tick-interval", default=DEFAULT_TICK_INTERVAL_SECONDS, show_default=True, type=float,
              help="Host tick interval [s].")
@click.option("--realtime/--offline", default=False, show_default=True,
              help="Pace against the wall clock or a virtual clock.")
@click.option("--seed", type=int, help="Seed for the sensor noise.")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Write the trace as CSV.")
@click.option(
    "--log-level",
    default="INFO",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level.",
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines.")
def run(
    config_path: Optional[Path],
    kp: Optional[float],
    ki: Optional[float],
    kd: Optional[float],
    target: Optional[float],
    noise: Optional[float],
    gravitation: Optional[float],
    max_force: Optional[float],
    max_force_rate: Optional[float],
    sampling_rate: Optional[int],
    hold: Optional[bool],
    duration: float,
    tick_interval: float,
    realtime: bool,
    seed: Optional[int],
    output: Optional[Path],
    log_level: str,
    json_logs: bool,
) -> None:
    """Run the closed loop and print the final state."""
    setup_ball_logging(level=getattr(logging, log_level.upper(), logging.INFO), json_output=json_logs)
    duration = _positive_finite("duration", duration)
    tick_interval = _positive_finite("tick-interval", tick_interval)

    overrides: Dict[str, Any] = {
        "kp": kp,
        "ki": ki,
        "kd": kd,
        "target": target,
        "noise": noise,
        "gravitation": gravitation,
        "max_force": max_force,
        "max_force_rate": max_force_rate,
        "sampling_rate": sampling_rate,
        "hold_ball": hold,
    }
    config = _resolve_config(config_path, overrides)

    driver = SimulationDriver(config, realtime=realtime, seed=seed)
    data = driver.run(duration, tick_interval)

    click.echo(f"ticks      {driver.ticks}")
    click.echo(f"simulated  {driver.scheduler.simulated:.3f} s")
    click.echo(f"position   {data.position:.5f} m (target {config.target:.5f} m)")
    click.echo(f"velocity   {data.velocity:.5f} m/s")
    click.echo(f"force      {data.force:.5f} N")

    if output is not None:
        driver.trace.to_csv(output)
        LOGGER.info("Trace written to %s (%d samples)", output, len(driver.trace))


@cli.command()
def defaults() -> None:
    """Print the default configuration as JSON."""
    click.echo(json.dumps(dump_config(SimulationConfig()), indent=2))


def main() -> int:
    try:
        cli.main(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        return 1
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        return code
    return 0


if __name__ == "__main__":
    sys.exit(main())
