from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

if TYPE_CHECKING:
    from fractalgui.app.registry import FractalEntry


class DrawingState(QObject):
    """Application state: the currently selected fractal, if any."""
    selection_changed = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self._active: FractalEntry | None = None

    @property
    def active(self) -> FractalEntry | None:
        return self._active

    def has_active(self) -> bool:
        return self._active is not None

    def set_active(self, entry: FractalEntry | None) -> None:
        self._active = entry
        self.selection_changed.emit(entry)
