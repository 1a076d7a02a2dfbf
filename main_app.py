import logging
import tkinter as tk
from tkinter import ttk

# --- Local Imports ---
from config import AppConfig
from game_logic import InvalidDimension, create_grid
from gui_components import CanvasSurface, StatusPanel, draw_pattern_preview
from patterns import get_pattern, get_pattern_names, place_pattern
from renderer import RenderLoop, cell_size

logger = logging.getLogger(__name__)

PREVIEW_CANVAS_SIZE = 30


class GameOfLifeApp:
    """Wires a toroidal Game of Life grid into a tkinter window."""

    def __init__(self, root, config=None):
        self.root = root
        self.config = config or AppConfig()
        self.style = self.config.render.style()
        self.selected_pattern_name = None

        self._build_gui()

        # One generator per app, so a seeded Randomize still gives new grids
        self.rng = self.config.grid.rng()
        self.surface = CanvasSurface(self.canvas, margin=self.style.margin)
        seed = self._random_grid()
        # The canvas' after/after_cancel act as the per-frame callback
        self.loop = RenderLoop(seed, self.surface, self.canvas.after, self.canvas.after_cancel,
                               interval_ms=self.config.loop.interval_ms, style=self.style,
                               on_frame=self._on_frame)

    # --- Grid helpers ---

    def _random_grid(self):
        grid_cfg = self.config.grid
        return create_grid(grid_cfg.width, grid_cfg.height, grid_cfg.alive_probability, rng=self.rng)

    def _replace_grid(self, grid):
        """Restarts the loop from a new seed grid, keeping the run state."""
        self.loop.reset(grid)
        self.loop.draw()
        self._update_status()

    def _cell_at(self, event):
        size = cell_size(self.surface.width, self.loop.grid.width, self.style.margin)
        if size <= 0:
            return None
        offset = self.style.margin / 2
        col = int((event.x - offset) // size)
        row = int((event.y - offset) // size)
        if 0 <= col < self.loop.grid.width and 0 <= row < self.loop.grid.height:
            return col, row
        return None

    # --- UI Update and Event Handlers ---

    def _on_frame(self, generation, grid):
        # Report what is on the canvas, not the generation already computed
        self._update_status(generation, grid)

    def _update_status(self, generation=None, grid=None):
        if grid is None:
            generation, grid = self.loop.generation, self.loop.grid
        if grid.population == 0:
            state = "Dead"
        else:
            state = "Running" if self.loop.running else "Paused"
        self.status_panel.update_status(generation, state, grid)

    def handle_resize(self, event):
        """Callback for canvas resize: rebuild the rectangles at the new cell size."""
        if getattr(self, "loop", None) is None:
            return
        self.surface.clear()
        self.canvas.after_idle(self.loop.draw)

    def pause_resume(self):
        if self.loop.running:
            self.loop.stop()
            self.loop.draw()
            logger.info("Simulation Paused")
        else:
            self.loop.start()
            logger.info("Simulation Resumed")
        self.pause_button.config(text="Pause" if self.loop.running else "Resume")
        self._update_status()

    def step_once(self):
        if self.loop.running:
            return
        self.loop.step()
        self.loop.draw()
        self._update_status()

    def randomize(self):
        logger.info("Randomizing grid (p=%.2f)", self.config.grid.alive_probability)
        self._replace_grid(self._random_grid())

    def clear(self):
        logger.info("Clearing grid")
        grid_cfg = self.config.grid
        self._replace_grid(create_grid(grid_cfg.width, grid_cfg.height, 0.0))

    # --- Pattern Selection / Placement ---

    def select_pattern(self, pattern_name):
        if self.selected_pattern_name == pattern_name:
            self.cancel_selection()
            return
        self.selected_pattern_name = pattern_name
        self.canvas.config(cursor="crosshair")
        logger.info("Selected: %s", pattern_name)

    def cancel_selection(self, event=None):
        if self.selected_pattern_name:
            logger.info("Selection cancelled.")
        self.selected_pattern_name = None
        self.canvas.config(cursor="")

    def handle_click(self, event):
        """Places the selected pattern, or toggles a single cell when nothing is selected."""
        cell = self._cell_at(event)
        if cell is None:
            return
        col, row = cell
        grid = self.loop.grid
        try:
            if self.selected_pattern_name:
                grid = place_pattern(grid, get_pattern(self.selected_pattern_name), col, row)
                self.cancel_selection()
            else:
                grid = grid.toggled(col, row)
        except ValueError as exc:
            logger.warning("Could not edit grid at (%d, %d): %s", col, row, exc)
            return
        # Edits keep the generation count
        self.loop.reset(grid, generation=self.loop.generation)
        self.loop.draw()
        self._update_status()

    # --- Main Application Setup ---

    def _build_gui(self):
        root = self.root
        root.minsize(width=700, height=500)
        root.bind('<Escape>', self.cancel_selection)

        main_pane = tk.PanedWindow(root, orient=tk.HORIZONTAL, sashrelief=tk.RAISED, sashwidth=6)
        main_pane.pack(fill=tk.BOTH, expand=True)

        canvas_frame = tk.Frame(main_pane, bg="lightgrey")
        main_pane.add(canvas_frame, stretch="always", minsize=400)

        size = self.config.render.canvas_size
        self.canvas = tk.Canvas(canvas_frame, width=size, height=size, bg="white", highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", self.handle_resize)
        self.canvas.bind("<Button-1>", self.handle_click)

        control_frame = tk.Frame(main_pane, width=260)
        main_pane.add(control_frame, stretch="never", minsize=220)

        # --- Top Buttons ---
        button_frame = tk.Frame(control_frame)
        button_frame.pack(side=tk.TOP, fill=tk.X, padx=5, pady=(5, 10))
        self.pause_button = ttk.Button(button_frame, text="Resume", command=self.pause_resume)
        self.pause_button.pack(side=tk.LEFT, padx=(0, 5), fill=tk.X, expand=True)
        ttk.Button(button_frame, text="Step", command=self.step_once).pack(
            side=tk.LEFT, padx=(0, 5), fill=tk.X, expand=True)
        ttk.Button(button_frame, text="Randomize", command=self.randomize).pack(
            side=tk.LEFT, padx=(0, 5), fill=tk.X, expand=True)
        ttk.Button(button_frame, text="Clear", command=self.clear).pack(
            side=tk.LEFT, fill=tk.X, expand=True)

        # --- Status Display ---
        self.status_panel = StatusPanel(control_frame)
        self.status_panel.pack(side=tk.TOP, fill=tk.X, padx=5, pady=(0, 10))

        # --- Pattern List ---
        patterns_frame = tk.LabelFrame(control_frame, text="Patterns", relief="ridge", borderwidth=2)
        patterns_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=5)
        for name in get_pattern_names():
            entry_frame = tk.Frame(patterns_frame, relief="groove", borderwidth=1)
            entry_frame.pack(fill=tk.X, padx=1, pady=0)
            entry_frame.columnconfigure(1, weight=1)

            preview_canvas = tk.Canvas(entry_frame, width=PREVIEW_CANVAS_SIZE, height=PREVIEW_CANVAS_SIZE,
                                       bg="white", highlightthickness=0)
            preview_canvas.grid(row=0, column=0, padx=(1, 3), pady=1, sticky="w")
            draw_pattern_preview(preview_canvas, get_pattern(name), PREVIEW_CANVAS_SIZE)

            lbl = ttk.Label(entry_frame, text=name, anchor="w", cursor="hand2")
            lbl.grid(row=0, column=1, sticky="ew")

            click_handler = lambda event, p=name: self.select_pattern(p)
            for widget in (entry_frame, preview_canvas, lbl):
                widget.bind("<Button-1>", click_handler)

    def run(self):
        self.root.update_idletasks()  # Ensure the canvas has its real size
        self.loop.draw()
        if self.config.loop.start_running:
            self.pause_resume()
        else:
            self._update_status()


def main(config=None):
    config = config or AppConfig()
    logging.basicConfig(level=config.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    main_window = tk.Tk()
    main_window.title("Conway's Game of Life")
    try:
        app = GameOfLifeApp(main_window, config)
    except InvalidDimension as exc:
        logger.error("Invalid grid configuration: %s", exc)
        main_window.destroy()
        raise
    app.run()
    main_window.mainloop()


# --- Main Execution ---
if __name__ == "__main__":
    main()
