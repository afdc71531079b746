"""
Recursive Fractal Generators
============================
Four textbook fractal constructions that draw by side effect on a
`DrawingSurface`.

Cantor set, Sierpinski triangle and the recursive tree work on integer
pixel coordinates (truncated toward zero), the Koch curve on floats.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt
    from fractalgui.model.surface import DrawingSurface

CANTOR_MIN_LENGTH = 1
CANTOR_LEVEL_STEP = 20

SIERPINSKI_MIN_SIZE = 5

KOCH_ANGLE_DEG = 60.0

TREE_MIN_LENGTH = 5.0
TREE_BRANCH_ANGLE_DEG = 20.0
TREE_SCALE = 0.8


def _rotation(angle_deg: float) -> npt.NDArray[np.float64]:
    """2D rotation matrix. Negative angles turn "up" on a y-down screen."""
    a = math.radians(angle_deg)
    return np.array([[math.cos(a), -math.sin(a)],
                     [math.sin(a), math.cos(a)]])


_KOCH_BUMP = _rotation(-KOCH_ANGLE_DEG)


def draw_cantor_set(surface: DrawingSurface, x: int, y: int, length: int) -> None:
    """
    Draw a Cantor set: a horizontal segment, then the outer thirds one level
    below it, until the segment is shorter than one pixel.
    """
    if length < CANTOR_MIN_LENGTH:
        return
    surface.line((x, y), (x + length, y))
    y += CANTOR_LEVEL_STEP
    draw_cantor_set(surface, x, y, length // 3)
    draw_cantor_set(surface, x + 2 * length // 3, y, length // 3)


def draw_sierpinski_triangle(surface: DrawingSurface, x: int, y: int, size: int, height: int) -> None:
    """
    Draw a Sierpinski triangle outline.

    Args:
        surface: Target surface.
        x: Left edge of the base.
        y: Top (apex) coordinate.
        size: Base width.
        height: Distance from apex to base.
    """
    if size < SIERPINSKI_MIN_SIZE:
        return
    surface.polygon([(x, y + height), (x + size // 2, y), (x + size, y + height)])

    half_size = size // 2
    half_height = height // 2
    # bottom-left, top, bottom-right
    draw_sierpinski_triangle(surface, x, y + half_height, half_size, half_height)
    draw_sierpinski_triangle(surface, x + size // 4, y, half_size, half_height)
    draw_sierpinski_triangle(surface, x + half_size, y + half_height, half_size, half_height)


def draw_koch_curve(surface: DrawingSurface, x: float, y: float, length: float, depth: int) -> None:
    """
    Draw a Koch curve along the horizontal segment (x, y) -> (x + length, y).

    Each level replaces a segment with four, so depth d yields 4**d lines.
    """
    if depth < 0 or length <= 0:
        return
    _koch_segment(surface, np.array([x, y], dtype=np.float64),
                  np.array([x + length, y], dtype=np.float64), depth)


def _koch_segment(
    surface: DrawingSurface,
    start: npt.NDArray[np.float64],
    end: npt.NDArray[np.float64],
    depth: int,
) -> None:
    if depth == 0:
        surface.line((float(start[0]), float(start[1])), (float(end[0]), float(end[1])))
        return

    third = (end - start) / 3.0
    a = start + third
    b = start + 2.0 * third
    peak = a + _KOCH_BUMP @ third

    _koch_segment(surface, start, a, depth - 1)
    _koch_segment(surface, a, peak, depth - 1)
    _koch_segment(surface, peak, b, depth - 1)
    _koch_segment(surface, b, end, depth - 1)


def draw_tree(surface: DrawingSurface, x: int, y: int, angle: float, length: float) -> None:
    """
    Draw a binary tree from (x, y).

    `angle` is in degrees: 0 points along +x, -90 points up on screen.
    Both children turn by 20 degrees and shrink to 80 %.
    """
    if length < TREE_MIN_LENGTH:
        return
    rad = math.radians(angle)
    x_end = x + int(math.cos(rad) * length)
    y_end = y + int(math.sin(rad) * length)
    surface.line((x, y), (x_end, y_end))
    draw_tree(surface, x_end, y_end, angle - TREE_BRANCH_ANGLE_DEG, length * TREE_SCALE)
    draw_tree(surface, x_end, y_end, angle + TREE_BRANCH_ANGLE_DEG, length * TREE_SCALE)
