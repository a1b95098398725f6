"""
Domain entities for the terminal Snake game.

This module contains the core game entities that are independent of
terminal concerns (curses, timing, key decoding).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, QUIT, VALID_MOVES, OPPOSITES, MOVE_DELTAS,
    WIDTH, HEIGHT, FOOD_REWARD, TICK_INTERVAL,
)
from .snake import Snake
from .game_state import GameState
from .food import random_free_cell

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'QUIT', 'VALID_MOVES', 'OPPOSITES', 'MOVE_DELTAS',
    'WIDTH', 'HEIGHT', 'FOOD_REWARD', 'TICK_INTERVAL',
    'Snake',
    'GameState',
    'random_free_cell',
]
