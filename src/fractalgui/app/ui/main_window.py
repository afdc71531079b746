"""
Main Application Window
=======================
Top-level window: a row of fractal buttons above the drawing canvas.

Why is this file needed?
------------------------
1. Layout: It organizes the buttons and the canvas.
2. Routing: It connects button clicks and canvas resizes to the
   `SelectionController`.
"""
from __future__ import annotations

from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QVBoxLayout, QWidget

from fractalgui.app.controller import SelectionController
from fractalgui.app.registry import FractalEntry, entries
from fractalgui.app.state import DrawingState
from fractalgui.app.ui.canvas import FractalCanvas
from fractalgui.config import VISIBLE_APP_NAME, WINDOW_HEIGHT, WINDOW_WIDTH


class MainWindow(QMainWindow):
    def __init__(self, state: DrawingState | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        # --- MAIN CONTAINER ---
        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)
        self.setCentralWidget(central)

        # --- 1. BUTTON ROW (centered) ---
        button_row = QHBoxLayout()
        button_row.setContentsMargins(5, 5, 5, 5)
        button_row.addStretch(1)
        self.buttons: dict[str, QPushButton] = {}
        for entry in entries():
            btn = QPushButton(entry.label, central)
            button_row.addWidget(btn)
            self.buttons[entry.key] = btn
        button_row.addStretch(1)
        v.addLayout(button_row, 0)

        # --- 2. CANVAS ---
        self.canvas = FractalCanvas(central)
        v.addWidget(self.canvas, 1)

        # --- SIGNAL CONNECTIONS ---
        self.controller = SelectionController(self.canvas, state, parent=self)
        for key, btn in self.buttons.items():
            btn.clicked.connect(lambda _=False, k=key: self.controller.select(k))
        self.canvas.resized.connect(self.controller.on_resized)

        self.state.selection_changed.connect(self._on_selection_changed)

    @property
    def state(self) -> DrawingState:
        return self.controller.state

    def center_on_screen(self) -> None:
        screen = self.screen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    def _on_selection_changed(self, entry: FractalEntry | None) -> None:
        """Mark the button of the active fractal."""
        for key, btn in self.buttons.items():
            btn.setDefault(entry is not None and key == entry.key)
