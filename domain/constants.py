"""
Game constants for terminal Snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Player command that ends the round
QUIT = "QUIT"

OPPOSITES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Screen coordinates: y grows downward
MOVE_DELTAS = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

# Board settings (playable cells, borders excluded)
WIDTH = 40
HEIGHT = 20

FOOD_REWARD = 10

# Seconds between game-state updates
TICK_INTERVAL = 0.1

# Board plus border, blank row, score line and help line
MIN_TERMINAL_WIDTH = WIDTH + 2
MIN_TERMINAL_HEIGHT = HEIGHT + 6
