"""Tests for static map client.

Uses a mocked StaticMap to avoid fetching tiles in tests.
"""

from unittest.mock import MagicMock, patch

import pytest
from PIL import Image

from quakemap.core.static_map import MapViewport
from quakemap.shell.static_map_client import StaticMapClient, to_png_bytes


TEST_VIEWPORT = MapViewport(
    latitude=37.78,
    longitude=-122.42,
    zoom=10,
    width=400,
    height=300,
)


class TestStaticMapClientInit:
    """Tests for StaticMapClient initialization."""

    def test_default_tile_url(self):
        """Default tile URL is OpenStreetMap."""
        client = StaticMapClient()
        assert "openstreetmap" in client.tile_url.lower()

    def test_custom_tile_url(self):
        """Custom tile URL is accepted."""
        custom_url = "https://tiles.example.com/{z}/{x}/{y}.png"
        client = StaticMapClient(tile_url=custom_url)
        assert client.tile_url == custom_url


class TestRenderBaseMap:
    """Tests for StaticMapClient.render_base_map()."""

    @patch("quakemap.shell.static_map_client.StaticMap")
    def test_passes_viewport_to_staticmap(self, mock_static_map_class):
        """Viewport size, zoom and (lon, lat) center reach staticmap."""
        mock_map = MagicMock()
        mock_map.render.return_value = Image.new("RGB", (400, 300))
        mock_static_map_class.return_value = mock_map

        image = StaticMapClient().render_base_map(TEST_VIEWPORT)

        args, kwargs = mock_static_map_class.call_args
        assert args == (400, 300)
        assert kwargs["tile_size"] == 256
        mock_map.render.assert_called_once_with(zoom=10, center=[-122.42, 37.78])
        assert image.mode == "RGBA"
        assert image.size == (400, 300)

    @patch("quakemap.shell.static_map_client.StaticMap")
    def test_tile_failure_propagates(self, mock_static_map_class):
        """Tile errors reach the caller, which falls back to a plain map."""
        mock_static_map_class.return_value.render.side_effect = RuntimeError("no tiles")

        with pytest.raises(RuntimeError):
            StaticMapClient().render_base_map(TEST_VIEWPORT)


def test_to_png_bytes():
    """Images are encoded as PNG."""
    data = to_png_bytes(Image.new("RGBA", (2, 2)))
    assert data[:4] == b"\x89PNG"
