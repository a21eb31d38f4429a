"""Static Map Client - Imperative Shell.

This module fetches OpenStreetMap tiles and renders the base map image.
All I/O is contained here; viewport selection is in the core module.
"""

import io
import logging

from PIL import Image
from staticmap import StaticMap

from quakemap.core.static_map import MapViewport


logger = logging.getLogger(__name__)


DEFAULT_TILE_URL = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"


def to_png_bytes(image: Image.Image) -> bytes:
    """Encode an image as PNG."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


class StaticMapClient:
    """Client for rendering base map images.

    This is part of the imperative shell - it handles I/O (fetching map tiles
    and rendering images).
    """

    def __init__(self, tile_url: str | None = None) -> None:
        """Initialize static map client.

        Args:
            tile_url: Custom tile URL template. Defaults to OpenStreetMap.
        """
        self.tile_url = tile_url or DEFAULT_TILE_URL

    def render_base_map(self, viewport: MapViewport) -> Image.Image:
        """Render the tiles covering a viewport.

        This method performs I/O (fetches map tiles from tile server).

        Args:
            viewport: Map area from the core module

        Returns:
            RGBA image of viewport.width x viewport.height

        Raises:
            RuntimeError: If staticmap cannot render the map
            requests.RequestException: If tiles cannot be fetched
        """
        logger.info(
            "Rendering base map centered on (%.4f, %.4f) at zoom %d",
            viewport.latitude,
            viewport.longitude,
            viewport.zoom,
        )

        static_map = StaticMap(
            viewport.width,
            viewport.height,
            url_template=self.tile_url,
            tile_size=viewport.tile_size,
        )

        # staticmap takes (lon, lat) order
        image = static_map.render(
            zoom=viewport.zoom,
            center=[viewport.longitude, viewport.latitude],
        )

        return image.convert("RGBA")
