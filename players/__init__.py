"""
Player implementations for terminal Snake.

This module contains the player abstraction and the keyboard player
that turns terminal key presses into moves.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, KEY_BINDINGS, QUIT_KEYS, RESTART_KEYS

__all__ = [
    'Player',
    'KeyboardPlayer',
    'KEY_BINDINGS',
    'QUIT_KEYS',
    'RESTART_KEYS',
]
