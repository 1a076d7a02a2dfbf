import logging
import tkinter as tk
from tkinter import font

import numpy as np

from game_logic import Grid
from patterns import place_pattern
from renderer import RenderStyle, render

logger = logging.getLogger(__name__)

DIGITAL_FONT_SIZE = 18
STATS_FONT_SIZE = 10

STATE_COLORS = {"Paused": "grey", "Running": "#20A020", "Dead": "#C03030"}


class CanvasSurface:
    """
    Drawing surface backed by a tk.Canvas.

    Rectangles are created on the first draw and then moved/recoloured on
    later draws instead of being recreated every frame.
    """

    def __init__(self, canvas, width=None, margin=2):
        self.canvas = canvas
        self._width = width
        self.margin = margin
        self._items = {}

    @property
    def width(self):
        if self._width is not None:
            return self._width
        return self.canvas.winfo_width()

    def draw_rect(self, x, y, size, fill, outline, line_width):
        x0, y0, x1, y1 = x, y, x + size, y + size
        # Key by cell index; x and y include the margin offset
        offset = self.margin / 2
        key = (int(round((x - offset) / size)), int(round((y - offset) / size))) if size > 0 else (x, y)
        item = self._items.get(key)
        if item is not None:
            try:
                self.canvas.coords(item, x0, y0, x1, y1)
                self.canvas.itemconfig(item, fill=fill, outline=outline, width=line_width)
                return
            except tk.TclError:
                logger.debug("Canvas item %s vanished, recreating", item)
        self._items[key] = self.canvas.create_rectangle(
            x0, y0, x1, y1, fill=fill, outline=outline, width=line_width, tags=("grid_cell",))

    def clear(self):
        """Drops every rectangle, e.g. after the grid dimensions changed."""
        self.canvas.delete("grid_cell")
        self._items = {}


def draw_pattern_preview(preview_canvas, pattern_array, preview_canvas_size):
    """Draws a small preview of a pattern on a given canvas."""
    preview_canvas.delete("all")  # Clear previous preview
    if pattern_array is None:
        return
    rows, cols = pattern_array.shape
    if rows == 0 or cols == 0:
        return

    # Centre the pattern on a square grid so that tall patterns fit too
    side = max(rows, cols)
    grid = place_pattern(Grid(side, side), pattern_array, (side - cols) // 2, (side - rows) // 2)
    style = RenderStyle(alive_color="black", dead_color="white", stroke_color="", stroke_width=0, margin=2)
    render(grid, CanvasSurface(preview_canvas, width=preview_canvas_size, margin=style.margin), style)


class StatusPanel(tk.LabelFrame):
    """Generation counter, run state and population readout."""

    def __init__(self, parent, **kwargs):
        super().__init__(parent, text="Status", relief="ridge", borderwidth=2, padx=5, pady=5, **kwargs)
        self.columnconfigure(0, weight=1)
        try:
            digital_font = font.Font(family="Consolas", size=DIGITAL_FONT_SIZE, weight="bold")
        except tk.TclError:
            digital_font = font.Font(family="Courier", size=DIGITAL_FONT_SIZE, weight="bold")
        stats_font = font.Font(size=STATS_FONT_SIZE)

        self.generation_label = tk.Label(self, text="000000", font=digital_font, anchor="center",
                                         fg="black", bg="lightgrey", relief="sunken", bd=2)
        self.generation_label.grid(row=0, column=0, sticky="ew", pady=(0, 2))
        self.state_label = tk.Label(self, text="PAUSED", font=digital_font, anchor="center",
                                    fg="grey", bg="lightgrey", relief="sunken", bd=2)
        self.state_label.grid(row=1, column=0, sticky="ew")
        self.population_label = tk.Label(self, text="Population: 0", font=stats_font, anchor="w")
        self.population_label.grid(row=2, column=0, sticky="ew", pady=(4, 0))
        self.density_label = tk.Label(self, text="Density: 0.0%", font=stats_font, anchor="w")
        self.density_label.grid(row=3, column=0, sticky="ew")

    def update_status(self, generation, state, grid):
        self.generation_label.config(text=f"{generation:06d}")
        self.state_label.config(text=state.upper(), fg=STATE_COLORS.get(state, "black"))
        population = grid.population
        density = population / float(np.prod(grid.shape))
        self.population_label.config(text=f"Population: {population}")
        self.density_label.config(text=f"Density: {density:.1%}")
