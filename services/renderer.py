"""
Renderer - draws the game state onto a Terminal.

Layout (rows top to bottom):
    0             top border
    1 .. H        playable rows, framed by border columns 0 and W + 1
    H + 1         bottom border
    H + 3         score line
    H + 4         help line
"""

import logging
from typing import Tuple

from domain.constants import WIDTH, HEIGHT
from domain.game_state import GameState
from services.terminal import Terminal

logger = logging.getLogger(__name__)

BORDER = "#"
FOOD = "F"
TAIL = "o"
HEAD = "O"

HELP_TEXT = "Use WASD or Arrow keys. Press 'q' to quit."
GAME_OVER_TEXT = "GAME OVER"
RESTART_TEXT = "Press 'r' to Restart or 'q' to Quit"


class Renderer:
    """
    Pure output from a GameState; never mutates it.
    """

    def __init__(self, terminal: Terminal, width: int = WIDTH, height: int = HEIGHT):
        self.terminal = terminal
        self.width = width
        self.height = height

    @property
    def score_row(self) -> int:
        return self.height + 3

    @property
    def help_row(self) -> int:
        return self.height + 4

    def draw_board(self, state: GameState) -> None:
        """Draw the static frame once at the start of a round."""
        self.terminal.clear()
        self._draw_border()
        self._draw_score(state)
        self.terminal.write(self.help_row, 0, HELP_TEXT)
        self.terminal.refresh()

    def draw(self, state: GameState) -> None:
        """Redraw the interior: food, tail, head on top, then the score."""
        blank = " " * self.width
        for row in range(1, self.height + 1):
            self.terminal.write(row, 1, blank)
        self._draw_border()

        if state.food is not None:
            self._put(state.food, FOOD)

        for segment in state.snake.tail:
            self._put(segment, TAIL)
        self._put(state.snake.head, HEAD)

        self._draw_score(state)
        self.terminal.refresh()

    def draw_game_over(self, state: GameState) -> None:
        self.terminal.write(self.height // 2, self.width // 2 - 4, GAME_OVER_TEXT)
        self.terminal.write(
            self.height // 2 + 2,
            (self.width + 2 - len(RESTART_TEXT)) // 2,
            RESTART_TEXT,
        )
        self._draw_score(state)
        self.terminal.refresh()

    def _draw_border(self) -> None:
        edge = BORDER * (self.width + 2)
        self.terminal.write(0, 0, edge)
        self.terminal.write(self.height + 1, 0, edge)
        for row in range(1, self.height + 1):
            self.terminal.write(row, 0, BORDER)
            self.terminal.write(row, self.width + 1, BORDER)

    def _draw_score(self, state: GameState) -> None:
        self.terminal.write(self.score_row, 0, f"Score: {state.score}   ")

    def _put(self, cell: Tuple[int, int], glyph: str) -> None:
        x, y = cell
        # Wraparound keeps every segment on the grid; never draw over the border
        if not (1 <= x <= self.width and 1 <= y <= self.height):
            logger.debug(f"Skipping off-grid cell {cell} for {glyph!r}")
            return
        self.terminal.write(y, x, glyph)
