from __future__ import annotations

import pytest

from fractalgui.app.controller import SelectionController
from fractalgui.app.ui.canvas import FractalCanvas


def _is_dark(canvas: FractalCanvas, x: int, y: int) -> bool:
    return canvas.image().pixelColor(x, y).lightness() < 128


def _column_has_ink(canvas: FractalCanvas, x: int, y_from: int, y_to: int) -> bool:
    return any(_is_dark(canvas, x, y) for y in range(y_from, y_to + 1))


def test_clear_matches_widget_size(qapp) -> None:
    canvas = FractalCanvas()
    canvas.resize(200, 120)
    canvas.clear()

    image = canvas.image()
    assert (image.width(), image.height()) == (200, 120)
    assert not _is_dark(canvas, 5, 5)


def test_painting_draws_lines(qapp) -> None:
    canvas = FractalCanvas()
    canvas.resize(200, 120)
    canvas.clear()

    with canvas.painting() as surface:
        surface.line((10, 50), (190, 50))
        surface.polygon([(10, 110), (100, 70), (190, 110)])

    assert _column_has_ink(canvas, 100, 49, 51)
    assert _column_has_ink(canvas, 100, 109, 111)
    assert not _is_dark(canvas, 100, 20)


def test_surface_unusable_after_block(qapp) -> None:
    canvas = FractalCanvas()
    canvas.resize(50, 50)
    with canvas.painting() as surface:
        pass
    with pytest.raises(RuntimeError):
        surface.line((0, 0), (10, 10))


def test_controller_draws_cantor_on_canvas(qapp) -> None:
    canvas = FractalCanvas()
    canvas.resize(300, 200)
    controller = SelectionController(canvas)

    controller.select("cantor")
    assert _column_has_ink(canvas, 150, 29, 31)

    controller.clear_selection()
    assert not _column_has_ink(canvas, 150, 29, 31)
