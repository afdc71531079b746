from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from fractalgui.model.surface import RecordingSurface  # noqa: E402


class FakeCanvas:
    """Canvas stand-in that records the command stream and call order."""
    def __init__(self, width: int = 1024, height: int = 700) -> None:
        self._width = width
        self._height = height
        self.surface = RecordingSurface()
        self.events: list[str] = []

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    def clear(self) -> None:
        self.events.append("clear")
        self.surface.clear()

    @contextmanager
    def painting(self) -> Iterator[RecordingSurface]:
        self.events.append("paint")
        yield self.surface


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def fake_canvas() -> FakeCanvas:
    return FakeCanvas()
