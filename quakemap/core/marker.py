"""Marker presentation decisions - Pure functions.

Everything the renderer needs to know about one marker (fill color and
whether to overlay the recent-activity X) is decided here, before any
drawing call is made.
"""

from dataclasses import dataclass

from quakemap.core.colors import Rgb, marker_fill
from quakemap.core.comparison import ComparisonMode
from quakemap.core.earthquake import EarthquakeRecord, is_recent


# Gap between the marker edge and the X overlay
X_MARK_BUFFER = 2
X_MARK_STROKE_WEIGHT = 2

Segment = tuple[float, float, float, float]


@dataclass(frozen=True)
class MarkerDecision:
    """How a single marker is drawn.

    Attributes:
        fill: Fill color for the shape
        x_mark: Line segments (x1, y1, x2, y2) of the recent-activity X,
            empty when the earthquake is not recent
    """
    fill: Rgb
    x_mark: tuple[Segment, ...] = ()


def x_mark_segments(x: float, y: float, radius: float) -> tuple[Segment, Segment]:
    """The two diagonals of an X centered on (x, y)."""
    reach = radius + X_MARK_BUFFER
    return (
        (x - reach, y - reach, x + reach, y + reach),
        (x - reach, y + reach, x + reach, y - reach),
    )


def decide_marker(
    record: EarthquakeRecord,
    x: float,
    y: float,
    comparison: ComparisonMode | None = None,
) -> MarkerDecision:
    """Decide fill color and overlay for a record drawn at (x, y).

    Pure function: identical inputs always give identical decisions.
    """
    segments: tuple[Segment, ...] = ()
    if is_recent(record):
        segments = x_mark_segments(x, y, record.radius)

    return MarkerDecision(
        fill=marker_fill(record, comparison),
        x_mark=segments,
    )
