"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player is asked for a move once per loop iteration, given the
    current game state.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return the player's move given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", "QUIT", or None for no change
        """
        raise NotImplementedError
