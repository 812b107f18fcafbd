# ─────────────────────────────────────────────────────────────────────
# PID Ball — Configuration Schema
# © 1998–2026 Miroslav Šotek. All rights reserved.
# ─────────────────────────────────────────────────────────────────────
"""
Default parameters of the levitation rig and their validation schema.

The named constants below are the compiled-in defaults the simulation
starts from (and returns to on a restart).  ``SimulationConfig`` bundles
them so a different set can be supplied at construction time.
"""

from pydantic import BaseModel, ConfigDict, Field

# --- CONTROLLER ---
KP = 40.0          # Proportional gain [N/m]
KI = 0.1           # Integral gain [N/m per step]
KD = 12.0          # Derivative gain [N*s/m]
TARGET = 0.5       # Target height [m]

# --- SENSOR ---
NOISE = 0.001      # Measurement noise sigma [m]

# --- PLANT ---
GRAVITATION = -9.81      # Acceleration on the 1 kg ball [m/s^2]
MAX_FORCE = 60.0         # Inductor saturation [N]
MAX_FORCE_RATE = 1000.0  # Inductor slew limit [N/s]
HOLD_BALL = False
BALL_POSITION = 0.5      # [m]
BALL_VELOCITY = 0.0      # [m/s]
INDUCTOR_POSITION = 1.0  # [m]

# --- TIMING ---
SAMPLING_RATE = 100      # [Hz]


class SimulationConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kp: float = KP
    ki: float = KI
    kd: float = KD
    target: float = TARGET
    noise: float = Field(default=NOISE, ge=0)
    gravitation: float = GRAVITATION
    max_force: float = Field(default=MAX_FORCE, ge=0)
    max_force_rate: float = Field(default=MAX_FORCE_RATE, ge=0)
    hold_ball: bool = HOLD_BALL
    ball_position: float = BALL_POSITION
    ball_velocity: float = BALL_VELOCITY
    inductor_position: float = INDUCTOR_POSITION
    sampling_rate: int = Field(default=SAMPLING_RATE, ge=1)


def validate_config(config_dict: dict) -> SimulationConfig:
    """Validate a raw configuration dictionary and return a SimulationConfig."""
    return SimulationConfig.model_validate(config_dict)
