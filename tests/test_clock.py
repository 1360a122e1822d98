"""Tests for clock.py - timestamp deltas and delta sanitizing."""
import math

import pytest

from clock import Clock, sanitize_delta


@pytest.mark.unit
class TestSanitizeDelta:

    @pytest.mark.parametrize("dt,expected", [
        (16.0, 16.0),
        (100.0, 100.0),
        (0.0, 0.0),
        (-5.0, 0.0),
        (math.nan, 0.0),
        (250.0, 100.0),
        (60_000.0, 100.0),
    ])
    def test_clamps(self, dt, expected):
        assert sanitize_delta(dt, 100.0) == expected

    def test_large_delta_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="clock"):
            sanitize_delta(5000.0, 100.0)

        assert "clamped" in caplog.text


@pytest.mark.unit
class TestClock:

    def test_first_tick_is_zero(self):
        clock = Clock()

        assert clock.tick(123456.0) == 0.0

    def test_regular_frames(self):
        clock = Clock()
        clock.tick(1000.0)

        assert clock.tick(1016.0) == 16.0
        assert clock.tick(1033.0) == 17.0

    def test_resume_after_suspend_is_clamped(self):
        clock = Clock(max_dt=100.0)
        clock.tick(0.0)

        assert clock.tick(30_000.0) == 100.0
        assert clock.tick(30_016.0) == 16.0

    def test_stale_timestamp_is_discarded(self):
        clock = Clock()
        clock.tick(1000.0)

        assert clock.tick(990.0) == 0.0
        assert clock.tick(1016.0) == 16.0

    def test_reset_forgets_previous(self):
        clock = Clock()
        clock.tick(0.0)
        clock.reset()

        assert clock.tick(5000.0) == 0.0
