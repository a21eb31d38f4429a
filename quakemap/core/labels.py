"""Label placement - Pure functions.

Hover labels are drawn next to a marker and nudged back inside the map
when they would be clipped. Placement is two independent one-dimensional
rules: flip left when the label runs past the right edge, and snap up
when it runs past the bottom. It is deliberately not a 2-D solver.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from quakemap.core.earthquake import EarthquakeRecord


# Text measurement supplied by the drawing surface
MeasureText = Callable[[str], float]

# Box geometry, relative to the placed anchor
TEXT_PADDING = 3
BOX_OFFSET_Y = 15
TEXT_OFFSET_Y = 18
TITLE_BOX_HEIGHT = 18
TITLE_CORNER_RADIUS = 5
DETAIL_BOX_HEIGHT = 44
DETAIL_LINE_SPACING = 12


@dataclass(frozen=True)
class LabelBounds:
    """Viewport limits used to keep a label on screen.

    Attributes:
        right_edge: Labels whose box would cross this x are flipped left
        left_safe_margin: A flipped label must stay right of this x
        fallback_x: Where a label goes when flipping is not possible
        shift_margin: Extra gap left between a flipped label and its anchor
        bottom_edge: Reference y for the bottom clearance test
        min_clearance: Minimum room needed below the anchor
        fallback_y: Where a label goes when it is too close to the bottom
    """
    right_edge: float = 850
    left_safe_margin: float = 200
    fallback_x: float = 210
    shift_margin: float = 0
    bottom_edge: float = 800
    min_clearance: float = 15
    fallback_y: float = 785


TITLE_BOUNDS = LabelBounds(
    shift_margin=6,
    bottom_edge=650,
    min_clearance=30,
    fallback_y=614,
)

DETAIL_BOUNDS = LabelBounds()


class LabelKind(Enum):
    """Which hover label to draw."""
    TITLE = "title"
    DETAILED = "detailed"


@dataclass(frozen=True)
class TextLine:
    """A line of label text and where it is drawn."""
    text: str
    x: float
    y: float


@dataclass(frozen=True)
class LabelLayout:
    """Everything needed to draw a label box.

    Attributes:
        x: Box left edge
        y: Box top edge
        width: Box width
        height: Box height
        corner_radius: Rounded corner radius (0 for square)
        lines: Text lines in drawing order
    """
    x: float
    y: float
    width: float
    height: float
    corner_radius: float
    lines: tuple[TextLine, ...]


def place_label(
    anchor: tuple[float, float],
    box_width: float,
    bounds: LabelBounds,
) -> tuple[float, float]:
    """Clamp a label anchor so the label stays inside the viewport.

    Pure function. Always returns a position.

    Args:
        anchor: Desired (x, y) screen position
        box_width: Width of the label text
        bounds: Viewport limits

    Returns:
        Adjusted (x, y)
    """
    x, y = anchor

    if bounds.right_edge - x < box_width:
        if x - box_width > bounds.left_safe_margin:
            x = x - box_width - bounds.shift_margin
        else:
            x = bounds.fallback_x

    if bounds.bottom_edge - y < bounds.min_clearance:
        y = bounds.fallback_y

    return (x, y)


def layout_title(
    title: str,
    anchor: tuple[float, float],
    measure: MeasureText,
    bounds: LabelBounds = TITLE_BOUNDS,
) -> LabelLayout:
    """Lay out the one-line title label.

    Pure function (given a pure ``measure``).
    """
    text_width = measure(title)
    x, y = place_label(anchor, text_width, bounds)

    return LabelLayout(
        x=x,
        y=y + BOX_OFFSET_Y,
        width=text_width + 2 * TEXT_PADDING,
        height=TITLE_BOX_HEIGHT,
        corner_radius=TITLE_CORNER_RADIUS,
        lines=(TextLine(title, x + TEXT_PADDING, y + TEXT_OFFSET_Y),),
    )


def detail_lines(record: EarthquakeRecord) -> tuple[str, str, str]:
    """Text of the detailed label: radius, depth and magnitude."""
    return (
        f"Radius: {record.radius}",
        f"Depth: {record.depth}",
        f"Mag: {record.magnitude}",
    )


def layout_detailed(
    record: EarthquakeRecord,
    anchor: tuple[float, float],
    measure: MeasureText,
    bounds: LabelBounds = DETAIL_BOUNDS,
) -> LabelLayout:
    """Lay out the three-line radius / depth / magnitude label.

    Pure function (given a pure ``measure``).
    """
    texts = detail_lines(record)
    max_width = max(measure(t) for t in texts)
    x, y = place_label(anchor, max_width, bounds)

    lines = tuple(
        TextLine(text, x + TEXT_PADDING, y + TEXT_OFFSET_Y + i * DETAIL_LINE_SPACING)
        for i, text in enumerate(texts)
    )

    return LabelLayout(
        x=x,
        y=y + BOX_OFFSET_Y,
        width=max_width + 2 * TEXT_PADDING,
        height=DETAIL_BOX_HEIGHT,
        corner_radius=0,
        lines=lines,
    )
