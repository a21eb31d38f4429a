"""Marker color decisions - Pure functions.

Markers are colored either by depth (shallow / intermediate / deep) or,
in comparative mode, on a blue-to-red gradient by their rank among peers.
"""

import math
from enum import Enum
from typing import NamedTuple

from quakemap.core.comparison import ComparisonMode, score_for
from quakemap.core.earthquake import (
    EarthquakeRecord,
    THRESHOLD_DEEP,
    THRESHOLD_INTERMEDIATE,
    THRESHOLD_LIGHT,
    THRESHOLD_MODERATE,
)


class Rgb(NamedTuple):
    """An RGB fill color. Channels are not range-checked."""
    red: int
    green: int
    blue: int


YELLOW = Rgb(255, 255, 0)
BLUE = Rgb(0, 0, 255)
RED = Rgb(255, 0, 0)


class DepthClass(Enum):
    """Depth bucket with its canonical marker color."""
    SHALLOW = "shallow"
    INTERMEDIATE = "intermediate"
    DEEP = "deep"

    @property
    def color(self) -> Rgb:
        return _DEPTH_COLORS[self]


_DEPTH_COLORS = {
    DepthClass.SHALLOW: YELLOW,
    DepthClass.INTERMEDIATE: BLUE,
    DepthClass.DEEP: RED,
}


class MagnitudeClass(Enum):
    """Magnitude bucket for consumers that size or group by strength."""
    MINOR = "minor"
    LIGHT = "light"
    MODERATE = "moderate"


def classify_by_depth(depth: float) -> DepthClass:
    """Classify an earthquake depth (km).

    Pure function. A depth exactly on a threshold belongs to the deeper
    bucket.
    """
    if depth < THRESHOLD_INTERMEDIATE:
        return DepthClass.SHALLOW
    elif depth < THRESHOLD_DEEP:
        return DepthClass.INTERMEDIATE
    return DepthClass.DEEP


def depth_color(depth: float) -> Rgb:
    """Fill color for a depth: yellow shallow, blue intermediate, red deep."""
    return classify_by_depth(depth).color


def classify_by_magnitude(magnitude: float) -> MagnitudeClass:
    """Classify a magnitude against the light / moderate thresholds.

    Pure function.
    """
    if magnitude >= THRESHOLD_MODERATE:
        return MagnitudeClass.MODERATE
    elif magnitude >= THRESHOLD_LIGHT:
        return MagnitudeClass.LIGHT
    return MagnitudeClass.MINOR


def comparative_color(score: int, clamp_upper: bool = False) -> Rgb:
    """Color for a comparison score on the blue (low) to red (high) ramp.

    Pure function. Negative scores are floored to 0. Scores above 255 are
    passed through unchanged and give out-of-range channels unless
    ``clamp_upper`` is set.

    Args:
        score: Rank score, nominally 0-255
        clamp_upper: Cap the score at 255

    Returns:
        Rgb with red = score, green = 0, blue = 255 - round(0.85 * score)
    """
    score = max(int(score), 0)
    if clamp_upper:
        score = min(score, 255)

    # Round half up; the product is never negative here
    blue = 255 - int(math.floor(0.85 * score + 0.5))
    return Rgb(score, 0, blue)


def marker_fill(
    record: EarthquakeRecord,
    comparison: ComparisonMode | None = None,
) -> Rgb:
    """Select the fill color for a record.

    Comparative mode wins when it is active; otherwise the depth color.
    """
    if comparison is not None and comparison.active:
        return comparative_color(score_for(record), comparison.clamp_upper)
    return depth_color(record.depth)
