"""
Shared fixtures: a scripted terminal and a manual clock.
"""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.terminal import Terminal


class FakeTerminal(Terminal):
    """
    Terminal double that replays scripted keys and records what was drawn.

    None in the key script marks the end of one poll's buffered input.
    Running out of keys in blocking mode fails the test instead of hanging.
    """

    def __init__(self, keys=None, rows=40, cols=80):
        self.keys = list(keys or [])
        self.rows = rows
        self.cols = cols
        self.blocking = False
        self.cells = {}
        self.clear_count = 0
        self.refresh_count = 0
        self.blocking_changes = []

    def read_key(self):
        if not self.keys:
            if self.blocking:
                raise AssertionError("Blocking read with no scripted keys left")
            return None
        return self.keys.pop(0)

    def write(self, row, col, text):
        for offset, ch in enumerate(text):
            self.cells[(row, col + offset)] = ch

    def clear(self):
        self.cells = {}
        self.clear_count += 1

    def refresh(self):
        self.refresh_count += 1

    def size(self):
        return (self.rows, self.cols)

    def set_blocking(self, blocking):
        self.blocking = blocking
        self.blocking_changes.append(blocking)

    def char_at(self, row, col):
        return self.cells.get((row, col), " ")

    def text_at(self, row, col, length):
        return "".join(self.char_at(row, col + i) for i in range(length))

    def row_text(self, row):
        return self.text_at(row, 0, self.cols).rstrip()


class FakeClock:
    """Clock that advances by a fixed step every time it is read."""

    def __init__(self, start=0.0, step=0.0):
        self.now = start
        self.step = step

    def __call__(self):
        current = self.now
        self.now += self.step
        return current

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def clock():
    return FakeClock()
