"""
Random food placement.
"""

import logging
import random
from typing import Tuple

from .snake import Snake

logger = logging.getLogger(__name__)


def random_free_cell(snake: Snake, width: int, height: int, rng: random.Random = None) -> Tuple[int, int]:
    """
    Return a random cell (x, y) within [1, width] x [1, height] not occupied by the snake.

    Sampling is bounded by the grid area. When every attempt lands on the
    snake the last sampled cell is returned, so a nearly full board can
    never hang the game.
    """
    rng = rng or random
    cell = None
    for _ in range(width * height):
        cell = (rng.randint(1, width), rng.randint(1, height))
        if not snake.occupies(cell):
            return cell

    logger.warning(
        f"No free cell found after {width * height} attempts "
        f"(snake length {len(snake)}); placing food at {cell}"
    )
    return cell
