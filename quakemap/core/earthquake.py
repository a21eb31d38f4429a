"""Earthquake records and ingestion - Pure functions.

This module turns feature properties (from a USGS GeoJSON feed or any
other key/value store) into typed, validated EarthquakeRecord objects.
All functions are pure with no side effects apart from logging rejects.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Any

from quakemap.core.errors import MissingPropertyError, PropertyParseError, RecordError


logger = logging.getLogger(__name__)


# Greater than or equal to this magnitude is a light earthquake
THRESHOLD_LIGHT = 4.0
# Greater than or equal to this magnitude is a moderate earthquake
THRESHOLD_MODERATE = 5.0

# Greater than or equal to this depth (km) is an intermediate earthquake
THRESHOLD_INTERMEDIATE = 70.0
# Greater than or equal to this depth (km) is a deep earthquake
THRESHOLD_DEEP = 300.0

# Marker radius = RADIUS_SCALE * radius_base, radius_base = 2 * magnitude
RADIUS_SCALE = 1.75

AGE_PAST_HOUR = "Past Hour"
AGE_PAST_DAY = "Past Day"
AGE_PAST_WEEK = "Past Week"
AGE_PAST_MONTH = "Past Month"
AGE_OLDER = "Older"

RECENT_AGES = frozenset({AGE_PAST_HOUR, AGE_PAST_DAY})

REQUIRED_PROPERTIES = ("magnitude", "depth", "title")


@dataclass(frozen=True)
class EarthquakeRecord:
    """Immutable, validated earthquake ready for drawing.

    Attributes:
        id: Feature identifier (USGS event ID when available)
        latitude: Epicenter latitude
        longitude: Epicenter longitude
        magnitude: Earthquake magnitude (Richter-like scale)
        depth: Depth in kilometers
        title: Human-readable label
        age: Age bucket ("Past Hour", "Past Day", ...)
        is_on_land: Set by the ingesting code, never recomputed
        radius: Marker radius, derived once from the magnitude
        time: Event timestamp (UTC), if known
        comparison_value: Rank score used in comparative coloring mode
    """
    id: str
    latitude: float
    longitude: float
    magnitude: float
    depth: float
    title: str
    age: str = AGE_OLDER
    is_on_land: bool = False
    radius: float = 0.0
    time: datetime | None = None
    comparison_value: int | None = field(default=None, compare=False)

    @property
    def location(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)

    @property
    def radius_base(self) -> float:
        """The un-scaled radius property (2 * magnitude)."""
        return self.radius / RADIUS_SCALE

    def with_comparison(self, value: int | None) -> "EarthquakeRecord":
        """Return a copy carrying a comparison score."""
        return replace(self, comparison_value=value)

    def __str__(self) -> str:
        return self.title


@dataclass
class IngestResult:
    """Outcome of ingesting a feature collection.

    Attributes:
        records: Valid records, newest first
        rejected: (feature id, error) for every feature that failed validation
    """
    records: list[EarthquakeRecord] = field(default_factory=list)
    rejected: list[tuple[str, RecordError]] = field(default_factory=list)


def derive_radius(magnitude: float) -> float:
    """Marker radius for a magnitude: 1.75 * (2 * magnitude).

    Pure function.
    """
    radius_base = 2 * magnitude
    return RADIUS_SCALE * radius_base


def _require(properties: dict[str, Any], key: str, record_id: str) -> Any:
    value = properties.get(key)
    if value is None:
        raise MissingPropertyError(key, record_id)
    return value


def _parse_float(value: Any, key: str, record_id: str) -> float:
    # bool is an int subclass; True is not a magnitude
    if isinstance(value, bool):
        raise PropertyParseError(key, value, record_id)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise PropertyParseError(key, value, record_id) from None
    if not math.isfinite(number):
        raise PropertyParseError(key, value, record_id)
    return number


def create_record(
    properties: dict[str, Any],
    latitude: float,
    longitude: float,
    *,
    record_id: str = "",
    is_on_land: bool = False,
    time: datetime | None = None,
) -> EarthquakeRecord:
    """Build a validated record from a property bag.

    Pure function. The radius is derived here and never again.

    Args:
        properties: Feature properties; needs magnitude, depth and title
        latitude: Epicenter latitude
        longitude: Epicenter longitude
        record_id: Identifier used in error messages
        is_on_land: Land/ocean flag from the ingesting code; an
            ``isOnLand`` property overrides it
        time: Event timestamp, if known

    Returns:
        EarthquakeRecord

    Raises:
        MissingPropertyError: If magnitude, depth or title is absent
        PropertyParseError: If magnitude or depth is not a finite number
    """
    magnitude = _parse_float(
        _require(properties, "magnitude", record_id), "magnitude", record_id
    )
    depth = _parse_float(_require(properties, "depth", record_id), "depth", record_id)
    title = str(_require(properties, "title", record_id))

    age = properties.get("age") or AGE_OLDER
    if "isOnLand" in properties:
        is_on_land = bool(properties["isOnLand"])

    return EarthquakeRecord(
        id=record_id,
        latitude=float(latitude),
        longitude=float(longitude),
        magnitude=magnitude,
        depth=depth,
        title=title,
        age=str(age),
        is_on_land=is_on_land,
        radius=derive_radius(magnitude),
        time=time,
    )


def classify_age(event_time: datetime, now: datetime) -> str:
    """Bucket an event timestamp into an age label.

    Pure function. Timestamps in the future count as "Past Hour".
    """
    elapsed = now - event_time
    if elapsed < timedelta(hours=1):
        return AGE_PAST_HOUR
    elif elapsed < timedelta(days=1):
        return AGE_PAST_DAY
    elif elapsed < timedelta(days=7):
        return AGE_PAST_WEEK
    elif elapsed < timedelta(days=30):
        return AGE_PAST_MONTH
    return AGE_OLDER


def is_recent(record: EarthquakeRecord) -> bool:
    """True if the record gets the recent-activity X overlay."""
    return record.age in RECENT_AGES


def parse_feature(
    feature: dict[str, Any],
    now: datetime | None = None,
) -> EarthquakeRecord:
    """Parse a single USGS GeoJSON feature into a record.

    Pure function (given ``now``).

    Args:
        feature: GeoJSON feature dict from the USGS feed
        now: Reference time for the age bucket (defaults to current UTC)

    Returns:
        EarthquakeRecord

    Raises:
        MissingPropertyError: If a required value is absent
        PropertyParseError: If a value has the wrong shape or cannot be parsed
    """
    if not isinstance(feature, dict):
        raise PropertyParseError("feature", feature, expected="a GeoJSON object")

    record_id = str(feature.get("id") or "")
    props = feature.get("properties") or {}
    if not isinstance(props, dict):
        raise PropertyParseError("properties", props, record_id, expected="an object")

    geometry = feature.get("geometry") or {}
    if not isinstance(geometry, dict):
        raise PropertyParseError("geometry", geometry, record_id, expected="an object")

    coords = geometry.get("coordinates")
    if coords is None:
        raise MissingPropertyError("coordinates", record_id)
    if not isinstance(coords, (list, tuple)):
        raise PropertyParseError("coordinates", coords, record_id, expected="a position array")
    if len(coords) < 2:
        raise MissingPropertyError("coordinates", record_id)
    longitude = _parse_float(coords[0], "longitude", record_id)
    latitude = _parse_float(coords[1], "latitude", record_id)

    properties: dict[str, Any] = {
        "magnitude": props.get("mag", props.get("magnitude")),
        "depth": coords[2] if len(coords) > 2 else props.get("depth"),
        "title": props.get("title") or props.get("place"),
    }
    if "isOnLand" in props:
        properties["isOnLand"] = props["isOnLand"]

    event_time = None
    time_ms = props.get("time")
    if time_ms is not None:
        seconds = _parse_float(time_ms, "time", record_id) / 1000
        try:
            event_time = datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            # Outside the platform's datetime range
            raise PropertyParseError(
                "time", time_ms, record_id, expected="a valid timestamp",
            ) from None
        properties["age"] = classify_age(event_time, now or datetime.now(timezone.utc))
    elif props.get("age"):
        properties["age"] = props["age"]

    return create_record(
        properties,
        latitude,
        longitude,
        record_id=record_id,
        time=event_time,
    )


def parse_features(
    geojson: dict[str, Any],
    now: datetime | None = None,
) -> IngestResult:
    """Parse a GeoJSON FeatureCollection into records.

    A malformed feature is rejected on its own; the others still load.

    Args:
        geojson: Full GeoJSON FeatureCollection
        now: Reference time for age buckets (defaults to current UTC)

    Returns:
        IngestResult with records sorted newest first
    """
    now = now or datetime.now(timezone.utc)
    result = IngestResult()

    for feature in geojson.get("features", []):
        try:
            result.records.append(parse_feature(feature, now))
        except RecordError as e:
            logger.warning("Skipping earthquake feature: %s", e)
            result.rejected.append((e.record_id, e))

    oldest = datetime.min.replace(tzinfo=timezone.utc)
    result.records.sort(key=lambda r: r.time or oldest, reverse=True)
    return result
