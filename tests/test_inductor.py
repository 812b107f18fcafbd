# CopyRight: (c) 1998-2026 Miroslav Sotek. All rights reserved.
"""Tests for the rate- and amplitude-limited inductor actuator."""
from __future__ import annotations

import numpy as np
import pytest

from pid_ball.control.inductor import Inductor


# ── test_amplitude_clamp_binds ───────────────────────────────────────
def test_amplitude_clamp_binds_after_allowed_jump():
    """max_force=5, rate 1000 N/s, dt=0.1: a jump of 100 N is allowed,
    so the command 10 N passes the slew limit and is clamped to 5 N."""
    ind = Inductor(max_force=5.0, max_force_rate=1000.0)
    ind.set_force(10.0, 0.1)
    assert ind.force == 5.0


# ── test_rate_limit_binds ────────────────────────────────────────────
def test_rate_limit_slews_large_command():
    """A large command is slewed by max_force_rate * dt per update."""
    ind = Inductor(max_force=100.0, max_force_rate=50.0)
    ind.set_force(80.0, 0.1)
    assert ind.force == pytest.approx(5.0)
    ind.set_force(80.0, 0.1)
    assert ind.force == pytest.approx(10.0)
    ind.set_force(-80.0, 0.1)
    assert ind.force == pytest.approx(5.0)


# ── test_rate_before_amplitude ───────────────────────────────────────
def test_rate_limit_applies_before_amplitude_limit():
    """Slewing first means a far-out command reaches the clamp only gradually."""
    ind = Inductor(max_force=5.0, max_force_rate=10.0)
    ind.set_force(1000.0, 0.1)
    assert ind.force == pytest.approx(1.0)
    for _ in range(10):
        ind.set_force(1000.0, 0.1)
    assert ind.force == 5.0


# ── test_bounds_hold_for_random_commands ─────────────────────────────
def test_bounds_hold_for_random_commands():
    """|force| <= max_force and |Δforce| <= max_force_rate * dt for any command."""
    rng = np.random.default_rng(7)
    ind = Inductor(max_force=20.0, max_force_rate=300.0)
    dt = 0.01
    previous = ind.force
    for command in rng.normal(0.0, 100.0, size=2000):
        ind.set_force(float(command), dt)
        assert abs(ind.force) <= ind.max_force
        assert abs(ind.force - previous) <= ind.max_force_rate * dt + 1e-9
        previous = ind.force


# ── test_small_command_passes_through ────────────────────────────────
def test_small_command_passes_through_unchanged():
    ind = Inductor(max_force=20.0, max_force_rate=300.0)
    ind.set_force(2.5, 0.01)
    assert ind.force == 2.5


# ── test_reset ───────────────────────────────────────────────────────
def test_reset_zeroes_force_and_keeps_limits():
    ind = Inductor(max_force=7.0, max_force_rate=90.0)
    ind.set_force(7.0, 1.0)
    assert ind.force == 7.0
    ind.reset()
    assert ind.force == 0.0
    assert ind.max_force == 7.0
    assert ind.max_force_rate == 90.0
