"""
Drawing Surface Protocol
========================
The minimal interface the fractal generators draw against.

Why is this file needed?
------------------------
1. Decoupling: Generators emit primitives to "something with line() and
   polygon()". The Qt canvas is one implementation, `RecordingSurface` another.
2. Inspection: `RecordingSurface` keeps every command so that counts and
   coordinates can be checked without a window.

Classes:
    DrawingSurface: Protocol for line/polygon sinks.
    LineCommand, PolygonCommand: Recorded primitives.
    RecordingSurface: A surface that stores the command stream.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence, Tuple, Union

Point = Tuple[float, float]


class DrawingSurface(Protocol):
    def line(self, p1: Point, p2: Point) -> None: ...
    def polygon(self, points: Sequence[Point]) -> None: ...


@dataclass(frozen=True)
class LineCommand:
    """A straight segment from p1 to p2."""
    p1: Point
    p2: Point


@dataclass(frozen=True)
class PolygonCommand:
    """A closed outline through the given points."""
    points: Tuple[Point, ...]

    @property
    def width(self) -> float:
        xs = [p[0] for p in self.points]
        return max(xs) - min(xs)


DrawCommand = Union[LineCommand, PolygonCommand]


@dataclass
class RecordingSurface:
    """
    Surface that remembers every primitive drawn on it.

    `clear()` drops the recorded stream, mirroring a canvas being repainted
    with its background color.
    """
    commands: list[DrawCommand] = field(default_factory=list)
    clear_count: int = 0

    def line(self, p1: Point, p2: Point) -> None:
        self.commands.append(LineCommand(tuple(p1), tuple(p2)))

    def polygon(self, points: Sequence[Point]) -> None:
        self.commands.append(PolygonCommand(tuple(tuple(p) for p in points)))

    def clear(self) -> None:
        self.commands.clear()
        self.clear_count += 1

    @property
    def lines(self) -> list[LineCommand]:
        return [c for c in self.commands if isinstance(c, LineCommand)]

    @property
    def polygons(self) -> list[PolygonCommand]:
        return [c for c in self.commands if isinstance(c, PolygonCommand)]

    def __len__(self) -> int:
        return len(self.commands)
