"""Functional Core - Pure functions with no side effects.

This module contains all decision logic as pure functions:
- Earthquake record validation and ingestion
- Depth / magnitude classification and marker colors
- Comparative ranking
- Threat circle radius
- Label placement
- Map viewport and projection

All functions here are deterministic and have no I/O.
"""

from quakemap.core.earthquake import (
    EarthquakeRecord,
    THRESHOLD_DEEP,
    THRESHOLD_INTERMEDIATE,
    THRESHOLD_LIGHT,
    THRESHOLD_MODERATE,
    create_record,
    parse_features,
)
from quakemap.core.errors import MissingPropertyError, PropertyParseError
from quakemap.core.colors import DepthClass, Rgb, classify_by_depth, comparative_color
from quakemap.core.comparison import ComparisonMode, apply_comparison
from quakemap.core.threat import threat_radius_km
from quakemap.core.labels import LabelBounds, LabelKind, place_label
from quakemap.core.marker import MarkerDecision, decide_marker
from quakemap.core.shapes import MarkerKind, marker_kind_for, shape_for

__all__ = [
    # Records
    "EarthquakeRecord",
    "THRESHOLD_DEEP",
    "THRESHOLD_INTERMEDIATE",
    "THRESHOLD_LIGHT",
    "THRESHOLD_MODERATE",
    "create_record",
    "parse_features",
    # Errors
    "MissingPropertyError",
    "PropertyParseError",
    # Colors
    "DepthClass",
    "Rgb",
    "classify_by_depth",
    "comparative_color",
    # Comparison
    "ComparisonMode",
    "apply_comparison",
    # Threat circle
    "threat_radius_km",
    # Labels
    "LabelBounds",
    "LabelKind",
    "place_label",
    # Markers
    "MarkerDecision",
    "decide_marker",
    "MarkerKind",
    "marker_kind_for",
    "shape_for",
]
