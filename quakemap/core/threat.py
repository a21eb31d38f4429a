"""Threat circle model - Pure functions.

DISCLAIMER: the threat circle is an illustrative heuristic for drawing,
not a predictive or safety-critical model.
"""

import math

from quakemap.core.earthquake import EarthquakeRecord
from quakemap.core.geo import calculate_distance


KM_PER_MILE = 1.6


def threat_radius_km(magnitude: float) -> float:
    """Distance (km) up to which an earthquake is drawn as affecting things.

    Pure function: miles = 20 * 1.8^(2 * magnitude - 5), then km = miles * 1.6.
    Defined for any finite magnitude, including zero and negative values.
    Magnitudes too large for a float give ``math.inf``.
    """
    try:
        miles = 20.0 * 1.8 ** (2 * magnitude - 5)
    except OverflowError:
        return math.inf
    return miles * KM_PER_MILE


def threat_circle(record: EarthquakeRecord) -> float:
    """Threat radius (km) for a record."""
    return threat_radius_km(record.magnitude)


def is_within_threat_circle(
    record: EarthquakeRecord,
    latitude: float,
    longitude: float,
) -> bool:
    """Check if a point lies inside a record's threat circle.

    Pure function.
    """
    distance = calculate_distance(
        record.latitude,
        record.longitude,
        latitude,
        longitude,
    )
    return distance <= threat_circle(record)
