"""Tests for map viewport and projection - Pure functions.

These are fast unit tests with no mocks needed since they test pure functions.
"""

import pytest

from quakemap.core.earthquake import EarthquakeRecord
from quakemap.core.static_map import (
    MapViewport,
    create_viewport,
    fit_zoom,
    get_zoom_level,
    lat_to_tile_y,
    lon_to_tile_x,
    project,
)


def _record(latitude, longitude, magnitude=4.5):
    return EarthquakeRecord(
        id=f"{latitude},{longitude}",
        latitude=latitude,
        longitude=longitude,
        magnitude=magnitude,
        depth=10.0,
        title="t",
        radius=3.5 * magnitude,
    )


class TestTileCoordinates:
    """Tests for the web mercator helpers."""

    def test_origin_at_zoom_zero(self):
        """(0, 0) is the middle of the single zoom-0 tile."""
        assert lon_to_tile_x(0, 0) == pytest.approx(0.5)
        assert lat_to_tile_y(0, 0) == pytest.approx(0.5)

    def test_edges(self):
        """Longitude -180 is the left edge of the world."""
        assert lon_to_tile_x(-180, 3) == pytest.approx(0)
        assert lon_to_tile_x(180, 3) == pytest.approx(8)

    def test_poles_are_clamped(self):
        """Latitude 90 does not blow up."""
        assert lat_to_tile_y(90, 1) == pytest.approx(lat_to_tile_y(85.0511, 1))


class TestProject:
    """Tests for project()."""

    VIEWPORT = MapViewport(latitude=35.0, longitude=139.0, zoom=6, width=800, height=600)

    def test_center_maps_to_image_center(self):
        """The viewport center is the image center."""
        assert project(self.VIEWPORT, 35.0, 139.0) == pytest.approx((400, 300))

    def test_east_is_right_north_is_up(self):
        """Screen x grows eastward, screen y grows southward."""
        x, y = project(self.VIEWPORT, 36.0, 140.0)
        assert x > 400
        assert y < 300

    def test_one_tile_per_zoom_step(self):
        """At zoom 0 the whole world is 256 px wide."""
        viewport = MapViewport(0.0, 0.0, 0, 256, 256)
        assert project(viewport, 0.0, -180.0) == pytest.approx((0, 128))


class TestGetZoomLevel:
    """Tests for get_zoom_level()."""

    def test_major_earthquake_zooms_out(self):
        """Magnitude >= 7.0 gets wide view."""
        assert get_zoom_level(7.0) == 7
        assert get_zoom_level(8.5) == 7

    def test_moderate_earthquake_closer_zoom(self):
        """Magnitude 5.0-5.9 gets closer zoom."""
        assert get_zoom_level(5.0) == 9

    def test_minor_earthquake_close_zoom(self):
        """Magnitude < 4.0 gets closest zoom."""
        assert get_zoom_level(3.5) == 11


class TestFitZoom:
    """Tests for fit_zoom()."""

    def test_spread_points_zoom_out(self):
        """Earthquakes far apart need a lower zoom."""
        near = [_record(35.0, 139.0), _record(35.5, 139.5)]
        far = [_record(35.0, 139.0), _record(-33.0, -70.0)]
        assert fit_zoom(far, 900, 700) < fit_zoom(near, 900, 700)

    def test_all_points_fit(self):
        """Every record projects inside the image at the fitted zoom."""
        records = [_record(35.0, 139.0), _record(-6.0, 106.0), _record(40.0, 20.0)]
        viewport = create_viewport(records, 900, 700)

        for r in records:
            x, y = project(viewport, r.latitude, r.longitude)
            assert 0 <= x <= 900
            assert 0 <= y <= 700


class TestCreateViewport:
    """Tests for create_viewport()."""

    def test_empty_shows_world(self):
        """No earthquakes gives a zoom-1 world view."""
        viewport = create_viewport([], 900, 700)
        assert (viewport.latitude, viewport.longitude, viewport.zoom) == (0.0, 0.0, 1)

    def test_single_earthquake_zoom_by_magnitude(self):
        """A lone earthquake is centered and zoomed by magnitude."""
        viewport = create_viewport([_record(37.78, -122.42, magnitude=7.2)])
        assert viewport.latitude == pytest.approx(37.78)
        assert viewport.longitude == pytest.approx(-122.42)
        assert viewport.zoom == 7

    def test_fixed_zoom_respected(self):
        """An explicit zoom is used as-is."""
        viewport = create_viewport([_record(0, 0), _record(10, 10)], zoom=4)
        assert viewport.zoom == 4
        assert viewport.longitude == 5.0
        assert viewport.latitude == pytest.approx(5.0, abs=0.1)

    def test_is_immutable(self):
        """MapViewport is frozen (immutable)."""
        viewport = create_viewport([])
        with pytest.raises(AttributeError):
            viewport.zoom = 3
