"""
Tests for the tick timer.
"""

import pytest

from conftest import FakeClock
from services.tick_timer import TickTimer


class TestTickTimer:

    def test_not_due_before_interval(self):
        clock = FakeClock()
        timer = TickTimer(0.25, clock=clock)

        clock.advance(0.125)
        assert timer.due() is False

    def test_due_once_interval_elapsed(self):
        clock = FakeClock()
        timer = TickTimer(0.25, clock=clock)

        clock.advance(0.25)
        assert timer.due() is True
        # Re-armed: the next tick needs another full interval
        assert timer.due() is False
        clock.advance(0.25)
        assert timer.due() is True

    def test_missed_ticks_not_caught_up(self):
        clock = FakeClock()
        timer = TickTimer(0.25, clock=clock)

        clock.advance(1.0)
        assert timer.due() is True
        assert timer.due() is False

    def test_reset_restarts_interval(self):
        clock = FakeClock()
        timer = TickTimer(0.25, clock=clock)

        clock.advance(0.125)
        timer.reset()
        clock.advance(0.125)
        assert timer.due() is False
        clock.advance(0.125)
        assert timer.due() is True

    def test_invalid_interval(self):
        with pytest.raises(ValueError):
            TickTimer(0)
