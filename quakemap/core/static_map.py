"""Map viewport and projection - Pure functions.

This module decides which part of the world the map shows and where an
epicenter lands in pixels. The tile fetching and image rendering (I/O)
are handled by the shell layer.
"""

import math
from dataclasses import dataclass

from quakemap.core.earthquake import EarthquakeRecord


TILE_SIZE = 256
MAX_ZOOM = 17
# Web mercator is undefined at the poles
MAX_LATITUDE = 85.0511


@dataclass(frozen=True)
class MapViewport:
    """Immutable description of the rendered map area.

    Attributes:
        latitude: Center latitude
        longitude: Center longitude
        zoom: Zoom level (0-17)
        width: Image width in pixels
        height: Image height in pixels
        tile_size: Tile edge in pixels
    """
    latitude: float
    longitude: float
    zoom: int
    width: int
    height: int
    tile_size: int = TILE_SIZE


def lon_to_tile_x(longitude: float, zoom: int) -> float:
    """Longitude to fractional tile x. Pure function."""
    return ((longitude + 180.0) / 360.0) * (2 ** zoom)


def lat_to_tile_y(latitude: float, zoom: int) -> float:
    """Latitude to fractional tile y (web mercator). Pure function."""
    latitude = max(-MAX_LATITUDE, min(MAX_LATITUDE, latitude))
    lat_rad = math.radians(latitude)
    merc = math.log(math.tan(lat_rad) + 1 / math.cos(lat_rad))
    return (1 - merc / math.pi) / 2 * (2 ** zoom)


def tile_y_to_lat(tile_y: float, zoom: int) -> float:
    """Inverse of lat_to_tile_y. Pure function."""
    merc = math.pi * (1 - 2 * tile_y / (2 ** zoom))
    return math.degrees(math.atan(math.sinh(merc)))


def project(viewport: MapViewport, latitude: float, longitude: float) -> tuple[float, float]:
    """Screen position of a coordinate on the viewport.

    Pure function.

    Returns:
        (x, y) in pixels from the top-left corner
    """
    x_center = lon_to_tile_x(viewport.longitude, viewport.zoom)
    y_center = lat_to_tile_y(viewport.latitude, viewport.zoom)

    x = (lon_to_tile_x(longitude, viewport.zoom) - x_center) * viewport.tile_size
    y = (lat_to_tile_y(latitude, viewport.zoom) - y_center) * viewport.tile_size
    return (x + viewport.width / 2, y + viewport.height / 2)


def get_zoom_level(magnitude: float) -> int:
    """Determine map zoom level for a single earthquake.

    Pure function. Larger earthquakes get zoomed out to show more context.
    """
    if magnitude >= 7.0:
        return 7
    elif magnitude >= 6.0:
        return 8
    elif magnitude >= 5.0:
        return 9
    elif magnitude >= 4.0:
        return 10
    return 11


def fit_zoom(
    records: list[EarthquakeRecord],
    width: int,
    height: int,
    padding: int = 40,
) -> int:
    """Largest zoom at which every epicenter fits inside the image.

    Pure function.
    """
    for zoom in range(MAX_ZOOM, -1, -1):
        xs = [lon_to_tile_x(r.longitude, zoom) * TILE_SIZE for r in records]
        ys = [lat_to_tile_y(r.latitude, zoom) * TILE_SIZE for r in records]
        if (
            max(xs) - min(xs) <= width - 2 * padding
            and max(ys) - min(ys) <= height - 2 * padding
        ):
            return zoom
    return 0


def create_viewport(
    records: list[EarthquakeRecord],
    width: int = 900,
    height: int = 700,
    zoom: int | None = None,
) -> MapViewport:
    """Create a viewport showing all the given earthquakes.

    Pure function. An empty list shows the whole world. A single
    earthquake is zoomed by magnitude; several are fitted to the image.

    Args:
        records: Earthquakes to show
        width: Image width in pixels
        height: Image height in pixels
        zoom: Fixed zoom level, None to choose automatically

    Returns:
        MapViewport centered on the earthquakes
    """
    if not records:
        return MapViewport(0.0, 0.0, zoom if zoom is not None else 1, width, height)

    # Center halfway between the extremes as drawn, not in degrees
    tile_ys = [lat_to_tile_y(r.latitude, 0) for r in records]
    longitudes = [r.longitude for r in records]
    center_lat = tile_y_to_lat((min(tile_ys) + max(tile_ys)) / 2, 0)
    center_lon = (min(longitudes) + max(longitudes)) / 2

    if zoom is None:
        if len(records) == 1:
            zoom = get_zoom_level(records[0].magnitude)
        else:
            zoom = fit_zoom(records, width, height)

    return MapViewport(
        latitude=center_lat,
        longitude=center_lon,
        zoom=zoom,
        width=width,
        height=height,
    )
