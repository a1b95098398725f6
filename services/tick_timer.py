"""
Fixed-interval tick gate over a monotonic clock.
"""

import time
from typing import Callable

from domain.constants import TICK_INTERVAL


class TickTimer:
    """
    Decides when the game state should advance.

    The main loop polls input on every iteration but only calls the game
    logic when due() reports that a full interval has elapsed since the
    last tick. Missed ticks are not caught up.
    """

    def __init__(self, interval: float = TICK_INTERVAL, clock: Callable[[], float] = time.monotonic):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval = interval
        self.clock = clock
        self.last_tick = clock()

    def reset(self) -> None:
        self.last_tick = self.clock()

    def due(self) -> bool:
        now = self.clock()
        if now - self.last_tick >= self.interval:
            self.last_tick = now
            return True
        return False
