from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Sequence, TYPE_CHECKING

from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtGui import QColor, QImage, QPainter, QPen, QPolygonF
from PySide6.QtWidgets import QWidget

from fractalgui.config import BACKGROUND_COLOR, FOREGROUND_COLOR

if TYPE_CHECKING:
    from PySide6.QtGui import QPaintEvent, QResizeEvent
    from fractalgui.model.surface import Point


class PainterSurface:
    """`DrawingSurface` on top of an active QPainter."""
    def __init__(self, painter: QPainter) -> None:
        self._painter: QPainter | None = painter

    def _require_painter(self) -> QPainter:
        if self._painter is None:
            raise RuntimeError("PainterSurface used after its painting() block ended")
        return self._painter

    def line(self, p1: Point, p2: Point) -> None:
        self._require_painter().drawLine(QPointF(float(p1[0]), float(p1[1])), QPointF(float(p2[0]), float(p2[1])))

    def polygon(self, points: Sequence[Point]) -> None:
        poly = QPolygonF([QPointF(float(x), float(y)) for x, y in points])
        self._require_painter().drawPolygon(poly)

    def close(self) -> None:
        self._painter = None


class FractalCanvas(QWidget):
    """
    Drawing surface widget.

    Primitives are rasterized into a backing image the size of the widget;
    paintEvent only blits that image. Resizing reallocates the image (blank)
    and emits `resized` so the active fractal can be drawn again.
    """
    resized = Signal(int, int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)
        self._background = QColor(BACKGROUND_COLOR)
        self._pen = QPen(QColor(FOREGROUND_COLOR))
        self._pen.setWidth(1)
        self._image = self._new_image(self.width(), self.height())

    # ---- Public API ----

    def image(self) -> QImage:
        return self._image

    def clear(self) -> None:
        """Paint the background color over the full bounds."""
        self._ensure_image()
        self._image.fill(self._background)
        self.update()

    @contextmanager
    def painting(self) -> Iterator[PainterSurface]:
        """Open one QPainter on the backing image for a batch of primitives."""
        self._ensure_image()
        painter = QPainter(self._image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, False)
        painter.setPen(self._pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        surface = PainterSurface(painter)
        try:
            yield surface
        finally:
            surface.close()
            painter.end()
            self.update()

    # ---- Qt events ----

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        size = event.size()
        self._image = self._new_image(size.width(), size.height())
        self.resized.emit(size.width(), size.height())

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.drawImage(0, 0, self._image)
        painter.end()

    def _ensure_image(self) -> None:
        # hidden widgets only get their resize event once shown
        if self._image.width() != max(1, self.width()) or self._image.height() != max(1, self.height()):
            self._image = self._new_image(self.width(), self.height())

    def _new_image(self, width: int, height: int) -> QImage:
        image = QImage(max(1, width), max(1, height), QImage.Format.Format_ARGB32_Premultiplied)
        image.fill(self._background)
        return image
