"""Pillow Drawing Surface - Imperative Shell.

Implements the core DrawingSurface protocol on top of a Pillow image.
Fill color, stroke color and stroke weight form the current style; they
can be saved and restored with push_style / pop_style.
"""

import logging
from dataclasses import dataclass, replace

from PIL import Image, ImageDraw, ImageFont


logger = logging.getLogger(__name__)


Color = tuple[int, ...]


@dataclass(frozen=True)
class Style:
    """Current drawing style.

    Attributes:
        fill: Fill color for shapes and text
        stroke: Outline color, None for no outline
        stroke_weight: Outline and line width in pixels
    """
    fill: Color = (255, 255, 255)
    stroke: Color | None = (0, 0, 0)
    stroke_weight: float = 1


def _box(x: float, y: float, width: float, height: float) -> list[float]:
    # Pillow wants x0 <= x1 and y0 <= y1
    x0, x1 = sorted((x, x + width))
    y0, y1 = sorted((y, y + height))
    return [x0, y0, x1, y1]


def _channel(value: int) -> int:
    return max(0, min(255, int(value)))


class PillowSurface:
    """DrawingSurface backed by a Pillow image.

    Attributes:
        image: The image being drawn on (drawn in place)
        style: Current style
    """

    def __init__(
        self,
        image: Image.Image,
        font: ImageFont.ImageFont | None = None,
        background: Color = (0, 0, 0, 0),
    ) -> None:
        """Initialize the surface.

        Args:
            image: Image to draw on
            font: Font for labels (Pillow's default bitmap font if None)
            background: Color used by clear()
        """
        self.image = image
        self.font = font or ImageFont.load_default()
        self.background = background
        self.style = Style()
        self._draw = ImageDraw.Draw(image)
        self._stack: list[Style] = []

    @classmethod
    def blank(cls, width: int, height: int) -> "PillowSurface":
        """A fully transparent RGBA surface, used as an overlay layer."""
        return cls(Image.new("RGBA", (width, height), (0, 0, 0, 0)))

    # Style

    def fill(self, red: int, green: int, blue: int) -> None:
        # Out-of-range channels are clipped only at the pixel level
        self.style = replace(self.style, fill=(_channel(red), _channel(green), _channel(blue)))

    def stroke(self, gray: int) -> None:
        value = _channel(gray)
        self.style = replace(self.style, stroke=(value, value, value))

    def no_stroke(self) -> None:
        self.style = replace(self.style, stroke=None)

    def stroke_weight(self, weight: float) -> None:
        self.style = replace(self.style, stroke_weight=weight)

    def push_style(self) -> None:
        self._stack.append(self.style)

    def pop_style(self) -> None:
        if not self._stack:
            raise RuntimeError("pop_style() called more times than push_style()")
        self.style = self._stack.pop()

    @property
    def style_depth(self) -> int:
        """Number of saved styles."""
        return len(self._stack)

    # Drawing

    @property
    def _width(self) -> int:
        return max(1, int(round(self.style.stroke_weight)))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if self.style.stroke is None:
            return
        self._draw.line([(x1, y1), (x2, y2)], fill=self.style.stroke, width=self._width)

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        corner_radius: float = 0,
    ) -> None:
        box = _box(x, y, width, height)
        if corner_radius > 0:
            self._draw.rounded_rectangle(
                box,
                radius=corner_radius,
                fill=self.style.fill,
                outline=self.style.stroke,
                width=self._width,
            )
        else:
            self._draw.rectangle(
                box,
                fill=self.style.fill,
                outline=self.style.stroke,
                width=self._width,
            )

    def draw_ellipse(self, x: float, y: float, width: float, height: float) -> None:
        self._draw.ellipse(
            _box(x, y, width, height),
            fill=self.style.fill,
            outline=self.style.stroke,
            width=self._width,
        )

    def draw_triangle(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
    ) -> None:
        self._draw.polygon(
            [(x1, y1), (x2, y2), (x3, y3)],
            fill=self.style.fill,
            outline=self.style.stroke,
        )

    def draw_text(self, text: str, x: float, y: float) -> None:
        # Text is drawn with the fill color, anchored at its top-left corner
        self._draw.text((x, y), text, fill=self.style.fill, font=self.font)

    def text_width(self, text: str) -> float:
        return float(self._draw.textlength(text, font=self.font))

    def clear(self) -> None:
        self._draw.rectangle(
            [0, 0, self.image.width, self.image.height],
            fill=self.background,
        )
