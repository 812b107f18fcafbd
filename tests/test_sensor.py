# CopyRight: (c) 1998-2026 Miroslav Sotek. All rights reserved.
"""Tests for the noisy position sensor."""
from __future__ import annotations

import numpy as np
import pytest

from pid_ball.diagnostics.sensor import PositionSensor


def test_zero_sigma_is_exact():
    sensor = PositionSensor(0.0, seed=3)
    for z in (0.0, 0.25, -1.5, 1e6):
        assert sensor.measure(z) == z


def test_noise_statistics_match_sigma():
    sensor = PositionSensor(0.02, seed=11)
    readings = np.array([sensor.measure(0.5) for _ in range(20_000)])
    assert readings.mean() == pytest.approx(0.5, abs=1e-3)
    assert readings.std() == pytest.approx(0.02, rel=0.05)


def test_set_sigma_rebuilds_noise():
    sensor = PositionSensor(0.5, seed=1)
    assert any(sensor.measure(0.0) != 0.0 for _ in range(5))
    sensor.set_sigma(0.0)
    assert sensor.sigma == 0.0
    assert all(sensor.measure(0.3) == 0.3 for _ in range(5))


def test_negative_sigma_rejected():
    with pytest.raises(ValueError):
        PositionSensor(-0.1)
    sensor = PositionSensor(0.1)
    with pytest.raises(ValueError):
        sensor.set_sigma(-1.0)
    assert sensor.sigma == 0.1


def test_seed_and_rng_are_exclusive():
    with pytest.raises(ValueError, match="either seed or rng"):
        PositionSensor(0.1, seed=1, rng=np.random.default_rng(1))


def test_seeded_sensors_are_reproducible():
    a = PositionSensor(0.1, seed=42)
    b = PositionSensor(0.1, rng=np.random.default_rng(42))
    np.testing.assert_array_equal(
        [a.measure(0.0) for _ in range(50)],
        [b.measure(0.0) for _ in range(50)],
    )


def test_reset_is_noop():
    sensor = PositionSensor(0.05, seed=5)
    sensor.reset()
    assert sensor.sigma == 0.05
