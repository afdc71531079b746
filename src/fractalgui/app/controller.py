"""
Selection Controller
====================
Connects the fractal buttons and resize notifications to the canvas.

Why is this file needed?
------------------------
1. State: It owns the `DrawingState` holding the active fractal.
2. Ordering: Every redraw clears the canvas before the generator runs.
3. Testability: It only talks to a `Canvas` protocol, so it runs without a
   window in tests.
"""
from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Protocol, Sequence, TYPE_CHECKING

from PySide6.QtCore import QObject, Slot

from fractalgui.app.registry import get_entry
from fractalgui.app.state import DrawingState

if TYPE_CHECKING:
    from fractalgui.model.surface import DrawingSurface, Point

logger = logging.getLogger(__name__)


class Canvas(Protocol):
    def width(self) -> int: ...
    def height(self) -> int: ...
    def clear(self) -> None: ...
    def painting(self) -> AbstractContextManager[DrawingSurface]: ...


class _CountingSurface:
    """Forwards primitives and counts them for the debug log."""
    def __init__(self, inner: DrawingSurface) -> None:
        self._inner = inner
        self.lines = 0
        self.polygons = 0

    def line(self, p1: Point, p2: Point) -> None:
        self.lines += 1
        self._inner.line(p1, p2)

    def polygon(self, points: Sequence[Point]) -> None:
        self.polygons += 1
        self._inner.polygon(points)


class SelectionController(QObject):
    def __init__(self, canvas: Canvas, state: DrawingState | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.canvas = canvas
        self.state = state if state is not None else DrawingState()

    def select(self, key: str) -> None:
        """Make `key` the active fractal, clear the canvas and draw it once."""
        entry = get_entry(key)
        logger.info(f"Selected fractal: {entry.label}")
        self.state.set_active(entry)
        self.redraw()

    def clear_selection(self) -> None:
        self.state.set_active(None)
        self.canvas.clear()

    def redraw(self) -> None:
        """Clear and re-run the active fractal against the current canvas size."""
        if not self.state.has_active():
            return
        entry = self.state.active

        width, height = self.canvas.width(), self.canvas.height()
        self.canvas.clear()
        with self.canvas.painting() as surface:
            counter = _CountingSurface(surface)
            entry.draw(counter, width, height)

        logger.debug(
            f"Drew '{entry.key}' at {width}x{height}: "
            f"{counter.lines} lines, {counter.polygons} polygons"
        )

    @Slot(int, int)
    def on_resized(self, width: int, height: int) -> None:
        self.redraw()
