import argparse
import logging
import os
import random
import sys
import time
from typing import Callable, Optional, Tuple

from dotenv import load_dotenv

from domain.constants import (
    VALID_MOVES, OPPOSITES, MOVE_DELTAS, QUIT,
    WIDTH, HEIGHT, FOOD_REWARD, TICK_INTERVAL,
    MIN_TERMINAL_WIDTH, MIN_TERMINAL_HEIGHT,
)
from domain.food import random_free_cell
from domain.game_state import GameState
from domain.snake import Snake
from players.base import Player
from players.keyboard_player import KeyboardPlayer
from services.renderer import Renderer
from services.terminal import CursesTerminal, Terminal, TerminalTooSmallError
from services.tick_timer import TickTimer

load_dotenv()

logger = logging.getLogger(__name__)

# Pause per loop iteration so the busy-poll does not peg a core
IDLE_SLEEP = 0.001


def wrap(coordinate: int, size: int) -> int:
    """Map a 1-indexed coordinate that stepped off the grid back onto the opposite edge."""
    return (coordinate - 1) % size + 1


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - The snake and its direction
      - Food
      - Score
      - Rounds
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT, rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.round_number = 0
        self.state: Optional[GameState] = None
        self.new_round()

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def new_round(self) -> GameState:
        """
        Reset to a fresh round: head centred, empty tail, idle, score 0, new food.
        """
        snake = Snake([(self.width // 2, self.height // 2)])
        self.state = GameState(width=self.width, height=self.height, snake=snake)
        self.state.food = self._random_free_cell()
        self.round_number += 1
        logger.info(f"Round {self.round_number} started: head at {snake.head}, food at {self.state.food}")
        return self.state

    def set_food(self, cell: Tuple[int, int]) -> None:
        if not self.state.in_bounds(cell):
            raise ValueError(f"Food out of bounds at {cell}.")
        if self.state.snake.occupies(cell):
            raise ValueError(f"Food cannot be placed on the snake at {cell}.")
        self.state.food = cell

    def _random_free_cell(self) -> Tuple[int, int]:
        return random_free_cell(self.state.snake, self.width, self.height, self.rng)

    def apply_move(self, move: Optional[str]) -> None:
        """
        Apply a player's move: QUIT ends the round, a direction is queued for the next tick.
        """
        if move is None or self.state.game_over:
            return
        if move == QUIT:
            self.end_round("quit")
            return
        self.steer(move)

    def steer(self, direction: str) -> bool:
        """
        Queue a direction for the next tick. Reversals of the current direction are rejected.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction!r}")
        current = self.state.direction
        if current is not None and OPPOSITES[direction] == current:
            return False
        self.state.pending_direction = direction
        return True

    def tick(self) -> None:
        """
        Advance the game by one step:
          1) Commit the pending direction; stay idle while there is none
          2) Compute the new head, wrapping around the edges
          3) Shift the body so every segment follows the one ahead
          4) End the round if the head landed on the tail
          5) Otherwise eat food: score, grow, place new food
        """
        state = self.state
        if state.game_over:
            return

        if state.pending_direction is not None:
            state.direction = state.pending_direction
            state.pending_direction = None
        if state.direction is None:
            return

        state.tick += 1
        snake = state.snake
        dx, dy = MOVE_DELTAS[state.direction]
        hx, hy = snake.head
        new_head = (wrap(hx + dx, self.width), wrap(hy + dy, self.height))

        eats_food = new_head == state.food
        vacated = snake.advance(new_head)

        if snake.bites_itself():
            self.end_round("self")
            return

        if eats_food:
            state.score += FOOD_REWARD
            snake.grow(vacated)
            state.food = self._random_free_cell()
            logger.debug(f"Food eaten at {new_head}; score {state.score}, length {len(snake)}")

    def end_round(self, reason: str) -> None:
        state = self.state
        state.game_over = True
        state.snake.alive = False
        state.snake.death_reason = reason
        state.snake.death_tick = state.tick
        logger.info(
            f"Round {self.round_number} over ({reason}) at tick {state.tick}: "
            f"score {state.score}, length {len(state.snake)}"
        )
        logger.debug("Final board:\n" + state.print_board())


# -------------------------------
# Main Loop
# -------------------------------

def play_round(
    game: SnakeGame,
    player: Player,
    renderer: Renderer,
    timer: TickTimer,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Run the current round until game over.

    Input is polled on every iteration; the game only advances when the
    timer reports a full tick interval has elapsed.

    Returns:
        The round's final score.
    """
    renderer.draw_board(game.state)
    timer.reset()

    while not game.game_over:
        game.apply_move(player.get_move(game.state))

        if timer.due():
            game.tick()
            renderer.draw(game.state)

        sleep(IDLE_SLEEP)

    return game.state.score


def run_session(
    terminal: Terminal,
    game: Optional[SnakeGame] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Play rounds until the player quits from the game-over screen.

    Returns:
        The score of the last round played.
    """
    game = game or SnakeGame()
    renderer = Renderer(terminal, game.width, game.height)
    player = KeyboardPlayer(terminal)
    timer = TickTimer(TICK_INTERVAL, clock=clock)

    while True:
        score = play_round(game, player, renderer, timer, sleep=sleep)
        renderer.draw_game_over(game.state)
        if not player.wait_for_restart():
            break
        game.new_round()

    logger.info(f"Session ended after {game.round_number} round(s), final score {score}")
    return score


def configure_logging() -> None:
    """
    Log to SNAKE_LOG_FILE when set; stderr would draw over the curses screen.
    """
    log_file = os.getenv("SNAKE_LOG_FILE")
    if not log_file:
        logging.getLogger().addHandler(logging.NullHandler())
        return

    level = os.getenv("SNAKE_LOG_LEVEL", "INFO").upper()
    unknown_level = not isinstance(logging.getLevelName(level), int)

    logging.basicConfig(
        filename=log_file,
        level="INFO" if unknown_level else level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if unknown_level:
        logger.warning(f"Unknown SNAKE_LOG_LEVEL {level!r}; logging at INFO")


# -------------------------------
# Entry Point
# -------------------------------
def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. Move with WASD or the arrow keys, "
                    "'q' quits, 'r' restarts from the game-over screen."
    )
    parser.parse_args(argv)

    configure_logging()

    try:
        with CursesTerminal() as terminal:
            terminal.ensure_size(MIN_TERMINAL_WIDTH, MIN_TERMINAL_HEIGHT)
            final_score = run_session(terminal)
    except TerminalTooSmallError as e:
        print(e)
        return 1

    print(f"Thanks for playing! Final Score: {final_score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
