"""
Sparse Game of Life grid.

Stores only the coordinates of alive cells, which keeps memory and step
time proportional to the population instead of the area. Useful for large,
mostly dead boards; the GUI sticks to the dense Grid.
"""
from collections import Counter

import numpy as np

from game_logic import (ALIVE, DEAD, NEIGHBOR_OFFSETS, Grid, check_dimensions,
                        next_cell_state)


class SparseGrid:
    """Toroidal grid holding a frozenset of alive (x, y) coordinates."""

    def __init__(self, width, height, alive=()):
        check_dimensions(width, height)
        self._width = int(width)
        self._height = int(height)
        self._alive = frozenset((x % self._width, y % self._height) for x, y in alive)

    @classmethod
    def from_dense(cls, grid):
        return cls(grid.width, grid.height, grid.alive_cells())

    def to_dense(self):
        cells = np.zeros((self._height, self._width), dtype=int)
        for x, y in self._alive:
            cells[y, x] = ALIVE
        return Grid(self._width, self._height, cells)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def alive(self):
        return self._alive

    @property
    def population(self):
        return len(self._alive)

    def normalize(self, x, y):
        return x % self._width, y % self._height

    def is_alive(self, x, y):
        return self.normalize(x, y) in self._alive

    def __eq__(self, other):
        if not isinstance(other, SparseGrid):
            return NotImplemented
        return (self._width, self._height, self._alive) == (other._width, other._height, other._alive)

    def __hash__(self):
        return hash((self._width, self._height, self._alive))

    def __repr__(self):
        return f"SparseGrid(width={self._width}, height={self._height}, population={self.population})"


def alive_neighbor_count(grid, x, y):
    """Counts the live neighbors of (x, y), wrapping around both axes."""
    return sum(1 for dx, dy in NEIGHBOR_OFFSETS if grid.is_alive(x + dx, y + dy))


def next_grid(grid):
    """Computes the next generation, visiting only alive cells and their neighbors."""
    counts = Counter()
    for x, y in grid.alive:
        for dx, dy in NEIGHBOR_OFFSETS:
            counts[grid.normalize(x + dx, y + dy)] += 1

    survivors = []
    for pos, count in counts.items():
        current = ALIVE if pos in grid.alive else DEAD
        if next_cell_state(current, count) == ALIVE:
            survivors.append(pos)
    # Alive cells with no alive neighbors never show up in counts and die off
    return SparseGrid(grid.width, grid.height, survivors)
