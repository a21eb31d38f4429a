"""Marker shapes.

Each marker kind has one drawing function. The kind is chosen once per
record and its function is handed to the renderer, which calls it after
the fill color has been set.
"""

from enum import Enum
from typing import Callable

from quakemap.core.earthquake import EarthquakeRecord
from quakemap.core.geo import PointOfInterest, find_nearby_city
from quakemap.core.surface import DrawingSurface


# draw(surface, x, y, radius)
ShapeDrawer = Callable[[DrawingSurface, float, float, float], None]


class MarkerKind(Enum):
    """Earthquake marker sub-type."""
    CITY = "city"
    LAND = "land"
    OCEAN = "ocean"


def draw_city(surface: DrawingSurface, x: float, y: float, radius: float) -> None:
    """Triangle pointing up, centered on (x, y)."""
    surface.draw_triangle(x, y - radius, x - radius, y + radius, x + radius, y + radius)


def draw_land(surface: DrawingSurface, x: float, y: float, radius: float) -> None:
    """Circle of the given radius."""
    surface.draw_ellipse(x - radius, y - radius, 2 * radius, 2 * radius)


def draw_ocean(surface: DrawingSurface, x: float, y: float, radius: float) -> None:
    """Square with side 2 * radius."""
    surface.draw_rect(x - radius, y - radius, 2 * radius, 2 * radius)


SHAPE_DRAWERS: dict[MarkerKind, ShapeDrawer] = {
    MarkerKind.CITY: draw_city,
    MarkerKind.LAND: draw_land,
    MarkerKind.OCEAN: draw_ocean,
}


def shape_for(kind: MarkerKind) -> ShapeDrawer:
    """Look up the drawing function for a marker kind."""
    return SHAPE_DRAWERS[kind]


def marker_kind_for(
    record: EarthquakeRecord,
    cities: list[PointOfInterest] | None = None,
) -> MarkerKind:
    """Pick the marker kind for a record.

    Pure function. Earthquakes near a configured city get the city marker;
    the rest are land or ocean markers by ``is_on_land``.
    """
    if cities and find_nearby_city(record, cities) is not None:
        return MarkerKind.CITY
    if record.is_on_land:
        return MarkerKind.LAND
    return MarkerKind.OCEAN
