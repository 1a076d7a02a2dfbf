"""
Shared fakes for tests: a surface that records draw calls and a scheduler
that only fires callbacks when told to.
"""
import numpy as np
import pytest


class RecordingSurface:
    def __init__(self, width=302):
        self.width = width
        self.rects = []

    def draw_rect(self, x, y, size, fill, outline, line_width):
        self.rects.append((x, y, size, fill, outline, line_width))


class ManualScheduler:
    """Stands in for tk's after/after_cancel."""

    def __init__(self):
        self.pending = {}
        self.delays = []
        self.cancelled = []
        self._next_id = 0

    def schedule(self, delay_ms, callback):
        self._next_id += 1
        handle = f"after#{self._next_id}"
        self.pending[handle] = callback
        self.delays.append(delay_ms)
        return handle

    def cancel(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def fire(self):
        """Runs every callback that is due right now."""
        due = list(self.pending.items())
        self.pending.clear()
        for _, callback in due:
            callback()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
