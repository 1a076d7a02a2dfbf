import logging

import numpy as np
import scipy.signal

logger = logging.getLogger(__name__)

# 3x3 neighborhood without the centre cell
NEIGHBOR_KERNEL = np.array([[1, 1, 1],
                            [1, 0, 1],
                            [1, 1, 1]], dtype=int)

NEIGHBOR_OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1)
                    if not (dx == 0 and dy == 0)]

ALIVE = 1
DEAD = 0


class InvalidDimension(ValueError):
    """Raised when a grid is created with a non-positive width or height."""


def check_dimensions(width, height):
    """Rejects anything but positive integer dimensions."""
    for name, value in (("width", width), ("height", height)):
        # bool is an int subclass, but True x False is not a grid
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimension(f"Grid {name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidDimension(f"Grid {name} must be positive, got {value}")


class Grid:
    """
    Toroidal grid of cells for Conway's Game of Life.

    Cells are held row-major in a read-only numpy array of shape
    (height, width), so cell (x, y) sits at flat index y * width + x.
    A Grid never changes after creation; every transformation returns
    a new Grid.
    """

    def __init__(self, width, height, cells=None):
        check_dimensions(width, height)
        self._width = int(width)
        self._height = int(height)

        if cells is None:
            data = np.zeros((self._height, self._width), dtype=int)
        else:
            data = np.asarray(cells)
            if data.size != self._width * self._height:
                raise ValueError(
                    f"Expected {self._width * self._height} cells for a "
                    f"{self._width}x{self._height} grid, got {data.size}")
            # Any non-zero value counts as alive
            data = (data.reshape((self._height, self._width)) != 0).astype(int)

        data.flags.writeable = False
        self._cells = data

    @classmethod
    def from_rows(cls, rows):
        """Builds a grid from strings of '#'/'.' (or 'O'/'.') or nested 0/1 lists."""
        parsed = []
        for row in rows:
            if isinstance(row, str):
                parsed.append([1 if ch in "#O*1" else 0 for ch in row])
            else:
                parsed.append([1 if v else 0 for v in row])
        if not parsed:
            raise InvalidDimension("Grid needs at least one row")
        width = len(parsed[0])
        if any(len(r) != width for r in parsed):
            raise ValueError("All rows must have the same length")
        return cls(width, len(parsed), np.array(parsed, dtype=int))

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def shape(self):
        return self._height, self._width

    @property
    def cells(self):
        """Read-only (height, width) array of 0/1 states."""
        return self._cells

    @property
    def flat(self):
        """Read-only flat view, indexed by y * width + x."""
        return self._cells.ravel()

    @property
    def population(self):
        return int(self._cells.sum())

    def normalize(self, x, y):
        """Wraps any integer coordinate into the grid bounds."""
        return x % self._width, y % self._height

    def is_alive(self, x, y):
        x, y = self.normalize(x, y)
        return bool(self._cells[y, x])

    def __getitem__(self, pos):
        x, y = pos
        return ALIVE if self.is_alive(x, y) else DEAD

    def alive_cells(self):
        """Returns the (x, y) coordinates of every alive cell, in row-major order."""
        ys, xs = np.nonzero(self._cells)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def with_cells(self, coords, alive=True):
        """Returns a copy of the grid with the given (x, y) cells set, wrapping coordinates."""
        data = self._cells.copy()
        value = ALIVE if alive else DEAD
        for x, y in coords:
            nx, ny = self.normalize(x, y)
            data[ny, nx] = value
        return Grid(self._width, self._height, data)

    def toggled(self, x, y):
        """Returns a copy with the state of cell (x, y) flipped."""
        return self.with_cells([(x, y)], alive=not self.is_alive(x, y))

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self):
        return hash((self._width, self._height, self._cells.tobytes()))

    def __repr__(self):
        return f"Grid(width={self._width}, height={self._height}, population={self.population})"

    def __str__(self):
        return "\n".join("".join("#" if v else "." for v in row) for row in self._cells)


def create_grid(width, height, alive_probability=0.0, rng=None):
    """Creates a grid where each cell is alive with probability alive_probability."""
    check_dimensions(width, height)
    if not 0.0 <= alive_probability <= 1.0:
        raise ValueError(f"alive_probability must be within [0, 1], got {alive_probability}")

    if alive_probability == 0.0:
        return Grid(width, height)

    if rng is None:
        rng = np.random.default_rng()
    # random() is in [0, 1), so a probability of 1 makes every cell alive
    cells = (rng.random((height, width)) < alive_probability).astype(int)
    grid = Grid(width, height, cells)
    logger.debug("Created %dx%d grid with %d alive cells (p=%.2f)",
                 width, height, grid.population, alive_probability)
    return grid


def alive_neighbor_count(grid, x, y):
    """Counts the live neighbors of cell (x, y) using toroidal boundaries."""
    count = 0
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = grid.normalize(x + dx, y + dy)
        count += grid.cells[ny, nx]
    return int(count)


def next_cell_state(current, neighbor_count):
    """Applies Conway's rule to a single cell."""
    if current:
        # Survives with 2 or 3 neighbors, otherwise under- or overpopulation
        return ALIVE if neighbor_count in (2, 3) else DEAD
    return ALIVE if neighbor_count == 3 else DEAD


def count_live_neighbors(cells):
    """Counts live neighbors for every cell at once using 2D convolution."""
    # Wrap-padding by one cell gives modulo neighbors even on 1- or 2-wide grids
    padded = np.pad(cells, 1, mode='wrap')
    return scipy.signal.convolve2d(padded, NEIGHBOR_KERNEL, mode='valid')


def next_grid(grid):
    """Computes the next generation from a snapshot of the current one."""
    cells = grid.cells
    live_neighbors = count_live_neighbors(cells)
    # Apply Conway's rules using boolean masking (vectorized)
    survivors = (cells == ALIVE) & ((live_neighbors == 2) | (live_neighbors == 3))
    births = (cells == DEAD) & (live_neighbors == 3)
    new_cells = np.zeros_like(cells)  # Start fresh, never write into the old generation
    new_cells[survivors | births] = ALIVE
    return Grid(grid.width, grid.height, new_cells)
