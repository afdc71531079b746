from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING

from fractalgui.config import FRACTAL_LABELS
from fractalgui.model.fractals import (
    draw_cantor_set,
    draw_koch_curve,
    draw_sierpinski_triangle,
    draw_tree,
)

if TYPE_CHECKING:
    from fractalgui.model.surface import DrawingSurface

# Call site: (surface, width, height) -> None
CallSite = Callable[["DrawingSurface", int, int], None]

MARGIN = 20
KOCH_DEPTH = 5


@dataclass(frozen=True)
class FractalEntry:
    """A selectable fractal: stable key, button label and its call site."""
    key: str
    label: str
    call_site: CallSite

    def draw(self, surface: DrawingSurface, width: int, height: int) -> None:
        self.call_site(surface, width, height)


_REGISTRY: dict[str, FractalEntry] = {}


def register_fractal(key: str, label: str | None = None) -> Callable[[CallSite], CallSite]:
    """Function decorator registering a call site under `key`."""
    if not key:
        raise ValueError("Fractal key must not be empty")

    def decorator(func: CallSite) -> CallSite:
        if key in _REGISTRY:
            raise ValueError(f"Fractal '{key}' is already registered")
        _REGISTRY[key] = FractalEntry(key=key, label=label or FRACTAL_LABELS.get(key, key), call_site=func)
        return func

    return decorator


def get_entry(key: str) -> FractalEntry:
    entry = _REGISTRY.get(key)
    if entry is None:
        raise KeyError(f"No fractal registered for key '{key}'")
    return entry


def list_keys() -> list[str]:
    return list(_REGISTRY.keys())


def entries() -> list[FractalEntry]:
    return list(_REGISTRY.values())


# ---- built-in fractals (registration order = button order) ----

@register_fractal("cantor")
def cantor_call_site(surface: DrawingSurface, width: int, height: int) -> None:
    draw_cantor_set(surface, MARGIN, 30, width - 2 * MARGIN)


@register_fractal("sierpinski")
def sierpinski_call_site(surface: DrawingSurface, width: int, height: int) -> None:
    draw_sierpinski_triangle(surface, MARGIN, 250, width - 2 * MARGIN, 300)


@register_fractal("koch")
def koch_call_site(surface: DrawingSurface, width: int, height: int) -> None:
    draw_koch_curve(surface, MARGIN, 400, width - 2 * MARGIN, KOCH_DEPTH)


@register_fractal("tree")
def tree_call_site(surface: DrawingSurface, width: int, height: int) -> None:
    draw_tree(surface, width // 2, height - 50, -90.0, 120.0)
