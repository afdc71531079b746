from __future__ import annotations

import logging

import pytest

from fractalgui.app.controller import SelectionController
from fractalgui.app.state import DrawingState


def test_select_koch_draws_1024_lines(fake_canvas) -> None:
    controller = SelectionController(fake_canvas)
    controller.select("koch")

    assert controller.state.has_active()
    assert controller.state.active.key == "koch"
    assert len(fake_canvas.surface.lines) == 4 ** 5 == 1024
    assert fake_canvas.surface.polygons == []


def test_clear_precedes_drawing(fake_canvas) -> None:
    controller = SelectionController(fake_canvas)
    controller.select("cantor")
    controller.select("tree")
    assert fake_canvas.events == ["clear", "paint", "clear", "paint"]


def test_reselecting_replaces_previous_drawing(fake_canvas) -> None:
    controller = SelectionController(fake_canvas)
    controller.select("sierpinski")
    controller.select("koch")
    assert fake_canvas.surface.polygons == []
    assert len(fake_canvas.surface.lines) == 1024


def test_resize_redraws_sierpinski_with_new_width(fake_canvas) -> None:
    controller = SelectionController(fake_canvas)
    controller.select("sierpinski")
    assert fake_canvas.surface.polygons[0].width == 1024 - 40

    fake_canvas.resize(800, 600)
    controller.on_resized(800, 600)

    assert fake_canvas.surface.clear_count == 2
    outline = fake_canvas.surface.polygons[0]
    assert outline.width == 800 - 40
    assert outline.points == ((20, 550), (400, 250), (780, 550))


def test_resize_without_selection_is_noop(fake_canvas) -> None:
    controller = SelectionController(fake_canvas)
    controller.on_resized(640, 480)
    controller.redraw()
    assert fake_canvas.events == []
    assert len(fake_canvas.surface) == 0


def test_tree_call_site_uses_height(fake_canvas) -> None:
    controller = SelectionController(fake_canvas)
    controller.select("tree")
    trunk = fake_canvas.surface.lines[0]
    assert trunk.p1 == (512, 650)
    assert trunk.p2 == (512, 530)


def test_cantor_call_site(fake_canvas) -> None:
    controller = SelectionController(fake_canvas)
    controller.select("cantor")
    top = fake_canvas.surface.lines[0]
    assert top.p1 == (20, 30)
    assert top.p2 == (1004, 30)


def test_unknown_key_leaves_state_untouched(fake_canvas) -> None:
    controller = SelectionController(fake_canvas)
    controller.select("koch")
    with pytest.raises(KeyError):
        controller.select("mandelbrot")
    assert controller.state.active.key == "koch"
    assert fake_canvas.events == ["clear", "paint"]


def test_clear_selection(fake_canvas) -> None:
    controller = SelectionController(fake_canvas)
    controller.select("koch")
    controller.clear_selection()

    assert controller.state.active is None
    assert not controller.state.has_active()
    assert len(fake_canvas.surface) == 0
    controller.on_resized(300, 300)
    assert fake_canvas.events == ["clear", "paint", "clear"]


def test_selection_changed_signal(fake_canvas) -> None:
    state = DrawingState()
    seen = []
    state.selection_changed.connect(seen.append)

    controller = SelectionController(fake_canvas, state)
    controller.select("cantor")
    controller.clear_selection()

    assert [e.key if e is not None else None for e in seen] == ["cantor", None]
    assert controller.state is state


def test_redraw_logs_command_counts(fake_canvas, caplog) -> None:
    controller = SelectionController(fake_canvas)
    with caplog.at_level(logging.DEBUG, logger="fractalgui"):
        controller.select("koch")
    assert "Selected fractal: Kochkurve" in caplog.text
    assert "1024 lines, 0 polygons" in caplog.text
