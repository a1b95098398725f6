"""
Keyboard player - reads buffered key presses from the terminal.
"""

import logging
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT, OPPOSITES
from domain.game_state import GameState
from services.terminal import Terminal
from .base import Player

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    "w": UP, "W": UP, "KEY_UP": UP,
    "s": DOWN, "S": DOWN, "KEY_DOWN": DOWN,
    "a": LEFT, "A": LEFT, "KEY_LEFT": LEFT,
    "d": RIGHT, "D": RIGHT, "KEY_RIGHT": RIGHT,
}
QUIT_KEYS = {"q", "Q"}
RESTART_KEYS = {"r", "R"}


class KeyboardPlayer(Player):
    """
    Turns key presses into moves.

    Every call drains all keys buffered since the previous call. The last
    direction key that does not reverse the snake wins; a quit key overrides
    any movement read in the same poll.
    """

    def __init__(self, terminal: Terminal):
        self.terminal = terminal

    def get_move(self, game_state: GameState) -> Optional[str]:
        move = None
        while True:
            key = self.terminal.read_key()
            if key is None:
                break

            if key in QUIT_KEYS:
                move = QUIT
                continue

            direction = KEY_BINDINGS.get(key)
            if direction is None or move == QUIT:
                continue

            # Turning straight back would run the head into the first tail segment
            if game_state.direction is not None and OPPOSITES[direction] == game_state.direction:
                logger.debug(f"Ignoring reversal {direction} while moving {game_state.direction}")
                continue

            move = direction

        return move

    def wait_for_restart(self) -> bool:
        """
        Block until the player chooses to restart (True) or quit (False).
        """
        self.terminal.set_blocking(True)
        try:
            while True:
                key = self.terminal.read_key()
                if key in RESTART_KEYS:
                    return True
                if key in QUIT_KEYS:
                    return False
        finally:
            self.terminal.set_blocking(False)
