"""
GameState entity - everything one round of the game needs.
"""

from typing import Tuple, Optional

from .snake import Snake


class GameState:
    """
    The state of the current round.

    Attributes:
        width, height: playable board dimensions; cells are 1-indexed
        snake: the player's Snake
        food: (x, y) position of the food
        direction: direction applied on the last tick, or None before the first move
        pending_direction: direction chosen by input since the last tick
        score: points scored this round
        game_over: set on self-collision or quit
        tick: number of movement ticks applied this round
    """

    def __init__(
        self,
        width: int,
        height: int,
        snake: Snake,
        food: Optional[Tuple[int, int]] = None,
        direction: Optional[str] = None,
        score: int = 0,
    ):
        self.width = width
        self.height = height
        self.snake = snake
        self.food = food
        self.direction = direction
        self.pending_direction: Optional[str] = None
        self.score = score
        self.game_over = False
        self.tick = 0

    def in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 1 <= x <= self.width and 1 <= y <= self.height

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = border
        F = food
        o = snake tail
        O = snake head
        Rows run top to bottom, matching the terminal layout.
        """
        # Board including the border ring
        board = [[' ' for _ in range(self.width + 2)] for _ in range(self.height + 2)]
        for x in range(self.width + 2):
            board[0][x] = '#'
            board[self.height + 1][x] = '#'
        for y in range(self.height + 2):
            board[y][0] = '#'
            board[y][self.width + 1] = '#'

        if self.food is not None and self.in_bounds(self.food):
            fx, fy = self.food
            board[fy][fx] = 'F'

        for x, y in self.snake.tail:
            board[y][x] = 'o'
        hx, hy = self.snake.head
        board[hy][hx] = 'O'

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, head={self.snake.head}, food={self.food}, "
            f"direction={self.direction}, score={self.score}, game_over={self.game_over}>"
        )
