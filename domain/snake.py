"""
Snake entity for the game engine.
"""

from collections import deque
from itertools import islice
from typing import List, Tuple, Optional

Cell = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether this snake is still alive
        death_reason: 'self' or 'quit'
        death_tick: the tick number when the round ended
    """

    def __init__(self, positions: List[Cell]):
        if not positions:
            raise ValueError("A snake needs at least a head position.")
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> List[Cell]:
        """Tail segments ordered from the one behind the head to the tail end."""
        return list(islice(self.positions, 1, None))

    def __len__(self) -> int:
        return len(self.positions)

    def occupies(self, cell: Cell) -> bool:
        return cell in self.positions

    def advance(self, new_head: Cell) -> Cell:
        """
        Move the head to new_head, each tail segment following the one ahead of it.

        Returns the cell the tail end vacated.
        """
        self.positions.appendleft(new_head)
        return self.positions.pop()

    def grow(self, cell: Cell) -> None:
        """Append one segment at the tail end."""
        self.positions.append(cell)

    def bites_itself(self) -> bool:
        head = self.positions[0]
        return any(segment == head for segment in islice(self.positions, 1, None))

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, alive={self.alive}>"
