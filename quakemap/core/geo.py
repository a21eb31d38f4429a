"""Geographic calculations - Pure functions.

This module provides distance and city-proximity calculations for earthquake
locations. All functions are pure with no side effects.
"""

import math
from dataclasses import dataclass

from quakemap.core.earthquake import EarthquakeRecord


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class PointOfInterest:
    """A named city drawn with the city marker.

    Attributes:
        name: Human-readable name (e.g., "Tokyo")
        latitude: City latitude
        longitude: City longitude
        radius_km: Earthquakes within this distance use the city marker
    """
    name: str
    latitude: float
    longitude: float
    radius_km: float


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def find_nearby_city(
    record: EarthquakeRecord,
    cities: list[PointOfInterest],
) -> PointOfInterest | None:
    """Return the closest city whose radius contains the earthquake.

    Pure function.
    """
    best: PointOfInterest | None = None
    best_distance = float("inf")

    for city in cities:
        distance = calculate_distance(
            record.latitude, record.longitude, city.latitude, city.longitude,
        )
        if distance <= city.radius_km and distance < best_distance:
            best = city
            best_distance = distance

    return best
