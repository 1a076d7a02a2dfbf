"""
Drawing and animation for the Game of Life grid.

Nothing here knows about tkinter: rendering goes through any object that
implements the Surface protocol, and the render loop is paced by a
schedule/cancel pair supplied by the host (tk's after/after_cancel in the
GUI, a fake scheduler in the tests).
"""
import logging
from dataclasses import dataclass
from typing import Protocol

from game_logic import next_grid

logger = logging.getLogger(__name__)


class Surface(Protocol):
    width: float

    def draw_rect(self, x, y, size, fill, outline, line_width): ...


@dataclass(frozen=True)
class RenderStyle:
    alive_color: str = "yellow"
    dead_color: str = "white"
    stroke_color: str = "black"
    stroke_width: float = 1.5
    margin: float = 2


DEFAULT_STYLE = RenderStyle()


def cell_size(surface_width, columns, margin=DEFAULT_STYLE.margin):
    """Side length of one cell so that all columns fit inside the margin."""
    return (surface_width - margin) / columns


def render(grid, surface, style=None):
    """Draws every cell of a dense or sparse grid as a filled, outlined square."""
    style = style or DEFAULT_STYLE
    size = cell_size(surface.width, grid.width, style.margin)
    offset = style.margin / 2
    for y in range(grid.height):
        for x in range(grid.width):
            fill = style.alive_color if grid.is_alive(x, y) else style.dead_color
            surface.draw_rect(offset + x * size, offset + y * size, size,
                              fill, style.stroke_color, style.stroke_width)


def generations(grid):
    """Yields the seed grid followed by every later generation, forever."""
    current = grid
    while True:
        yield current
        current = next_grid(current)


class RenderLoop:
    """
    Renders one generation per frame until stopped.

    schedule(delay_ms, callback) must return a handle that cancel(handle)
    accepts. Each frame renders the current grid, advances to the next
    generation, reports the drawn one to on_frame and schedules the
    following frame.
    """

    def __init__(self, grid, surface, schedule, cancel, interval_ms=16,
                 style=None, on_frame=None):
        self.surface = surface
        self.style = style or DEFAULT_STYLE
        self.interval_ms = interval_ms
        self.on_frame = on_frame
        self._schedule = schedule
        self._cancel = cancel
        self._pending = None
        self._active = False
        self.reset(grid)

    @property
    def grid(self):
        """The generation that the next frame will draw."""
        return self._grid

    @property
    def generation(self):
        return self._generation

    @property
    def running(self):
        return self._active

    def reset(self, grid, generation=0):
        """Replaces the seed grid and restarts counting generations from generation."""
        self._generations = generations(grid)
        self._grid = next(self._generations)
        self._generation = generation

    def start(self):
        if self._active:
            return
        self._active = True
        logger.info("Render loop started at generation %d", self._generation)
        self._pending = self._schedule(0, self._frame)

    def stop(self):
        if not self._active:
            return
        self._active = False
        if self._pending is not None:
            self._cancel(self._pending)
            self._pending = None
        logger.info("Render loop stopped at generation %d", self._generation)

    def draw(self):
        """Renders the current grid without advancing."""
        render(self._grid, self.surface, self.style)

    def step(self):
        """
        Renders the current generation and advances to the next one.

        on_frame receives the generation number and grid that were drawn,
        so a status readout matches the canvas.
        """
        drawn, drawn_generation = self._grid, self._generation
        self.draw()
        self._grid = next(self._generations)
        self._generation += 1
        logger.debug("Drew generation %d, population %d", drawn_generation, drawn.population)
        if self.on_frame is not None:
            self.on_frame(drawn_generation, drawn)
        return self._grid

    def _frame(self):
        self._pending = None
        self.step()
        # on_frame may have stopped the loop
        if self._active:
            self._pending = self._schedule(self.interval_ms, self._frame)
