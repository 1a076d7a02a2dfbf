import logging

import numpy as np

from game_logic import ALIVE

logger = logging.getLogger(__name__)

# Rows map to y, columns to x
_PATTERNS = {
    # --- Still Lifes ---
    "Block": [
        [1, 1],
        [1, 1],
    ],
    "Beehive": [
        [0, 1, 1, 0],
        [1, 0, 0, 1],
        [0, 1, 1, 0],
    ],
    # --- Oscillators ---
    "Blinker": [
        [1, 1, 1],
    ],
    "Toad": [
        [0, 1, 1, 1],
        [1, 1, 1, 0],
    ],
    "Beacon": [
        [1, 1, 0, 0],
        [1, 1, 0, 0],
        [0, 0, 1, 1],
        [0, 0, 1, 1],
    ],
    # --- Spaceships ---
    "Glider": [
        [0, 1, 0],
        [0, 0, 1],
        [1, 1, 1],
    ],
    "Lightweight Spaceship (LWSS)": [
        [0, 1, 0, 0, 1],
        [1, 0, 0, 0, 0],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 0],
    ],
    # --- Methuselahs ---
    "R-pentomino": [
        [0, 1, 1],
        [1, 1, 0],
        [0, 1, 0],
    ],
}

PATTERNS = {name: np.array(rows, dtype=int) for name, rows in _PATTERNS.items()}


def get_pattern_names():
    return list(PATTERNS)


def get_pattern(name):
    """Returns a copy of the named pattern array, or None if it is unknown."""
    pattern = PATTERNS.get(name)
    return None if pattern is None else pattern.copy()


def place_pattern(grid, pattern, x, y):
    """
    Writes a pattern onto a copy of the grid with its top-left corner at (x, y).

    Both the alive and dead cells of the pattern overwrite the grid, and
    cells falling off an edge wrap around to the opposite one.
    """
    pattern = np.asarray(pattern)
    rows, cols = pattern.shape
    alive, dead = [], []
    for r_offset in range(rows):
        for c_offset in range(cols):
            target = (x + c_offset, y + r_offset)
            if pattern[r_offset, c_offset] == ALIVE:
                alive.append(target)
            else:
                dead.append(target)
    placed = grid.with_cells(dead, alive=False).with_cells(alive, alive=True)
    logger.info("Placed %dx%d pattern at (%d, %d)", cols, rows, x, y)
    return placed
