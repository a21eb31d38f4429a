"""Tests for the threat circle model - Pure functions."""

import math

import pytest

from quakemap.core.earthquake import EarthquakeRecord
from quakemap.core.threat import (
    KM_PER_MILE,
    is_within_threat_circle,
    threat_circle,
    threat_radius_km,
)


def _record(magnitude):
    return EarthquakeRecord(
        id="us1",
        latitude=0.0,
        longitude=0.0,
        magnitude=magnitude,
        depth=10.0,
        title="t",
        radius=3.5 * magnitude,
    )


class TestThreatRadiusKm:
    """Tests for threat_radius_km()."""

    def test_magnitude_five_regression(self):
        """M5.0 is 20 * 1.8^5 miles, about 377.9 miles or 604.7 km."""
        assert threat_radius_km(5.0) == pytest.approx(20 * 1.8 ** 5 * 1.6)
        assert threat_radius_km(5.0) == pytest.approx(604.66, abs=0.01)

    def test_exponent_zero(self):
        """At M2.5 the exponent vanishes: 20 miles."""
        assert threat_radius_km(2.5) == pytest.approx(20 * KM_PER_MILE)

    def test_grows_with_magnitude(self):
        """Stronger earthquakes have larger circles."""
        assert threat_radius_km(4.0) < threat_radius_km(5.0) < threat_radius_km(6.0)

    @pytest.mark.parametrize("magnitude", [0.0, -1.0, -3.5])
    def test_defined_for_small_and_negative(self, magnitude):
        """No clamping: small magnitudes give small positive radii."""
        radius = threat_radius_km(magnitude)
        assert radius > 0
        assert math.isfinite(radius)

    @pytest.mark.parametrize("magnitude", [606.0, 1000.0, 1e6])
    def test_huge_magnitude_is_infinite(self, magnitude):
        """Radii past the float range are infinite rather than an error."""
        assert threat_radius_km(magnitude) == math.inf

    def test_very_negative_magnitude(self):
        """Underflow goes to zero, never negative."""
        assert threat_radius_km(-1e6) == 0.0

    def test_record_wrapper(self):
        """threat_circle() uses the record magnitude."""
        assert threat_circle(_record(6.0)) == threat_radius_km(6.0)


class TestIsWithinThreatCircle:
    """Tests for is_within_threat_circle()."""

    def test_point_inside(self):
        """About 11 km away is inside a 32 km circle."""
        assert is_within_threat_circle(_record(2.5), 0.1, 0.0)

    def test_point_outside(self):
        """About 111 km away is outside a 32 km circle."""
        assert not is_within_threat_circle(_record(2.5), 1.0, 0.0)
