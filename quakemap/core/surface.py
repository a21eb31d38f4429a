"""Drawing surface interface.

The core never draws pixels itself. It calls a surface that follows the
DrawingSurface protocol; the Pillow-backed implementation lives in the
shell. Style changes are bracketed with ``style_scope`` so one marker's
colors and stroke weight cannot leak into the next.
"""

from contextlib import contextmanager
from typing import Iterator, Protocol


class DrawingSurface(Protocol):
    """Minimal canvas used by markers and labels."""

    def fill(self, red: int, green: int, blue: int) -> None: ...

    def stroke(self, gray: int) -> None: ...

    def stroke_weight(self, weight: float) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        corner_radius: float = 0,
    ) -> None: ...

    def draw_ellipse(self, x: float, y: float, width: float, height: float) -> None: ...

    def draw_triangle(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
    ) -> None: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...

    def text_width(self, text: str) -> float: ...

    def push_style(self) -> None: ...

    def pop_style(self) -> None: ...

    def clear(self) -> None: ...


@contextmanager
def style_scope(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    """Save the surface style and restore it on every exit path."""
    surface.push_style()
    try:
        yield surface
    finally:
        surface.pop_style()
