"""Tests for marker color decisions - Pure functions."""

import pytest

from quakemap.core.colors import (
    BLUE,
    RED,
    YELLOW,
    DepthClass,
    MagnitudeClass,
    Rgb,
    classify_by_depth,
    classify_by_magnitude,
    comparative_color,
    depth_color,
    marker_fill,
)
from quakemap.core.comparison import ComparisonMode
from quakemap.core.earthquake import EarthquakeRecord


def _record(depth=10.0, comparison_value=None):
    return EarthquakeRecord(
        id="us1",
        latitude=0.0,
        longitude=0.0,
        magnitude=5.0,
        depth=depth,
        title="M 5.0 - Test",
        radius=17.5,
        comparison_value=comparison_value,
    )


class TestClassifyByDepth:
    """Tests for classify_by_depth()."""

    @pytest.mark.parametrize("depth", [-5.0, 0.0, 10.0, 69.99])
    def test_shallow(self, depth):
        """Depth below 70 km is shallow."""
        assert classify_by_depth(depth) is DepthClass.SHALLOW

    @pytest.mark.parametrize("depth", [70.0, 150.0, 299.99])
    def test_intermediate(self, depth):
        """Depth from 70 km up to 300 km is intermediate."""
        assert classify_by_depth(depth) is DepthClass.INTERMEDIATE

    @pytest.mark.parametrize("depth", [300.0, 650.0])
    def test_deep(self, depth):
        """Depth of 300 km and more is deep."""
        assert classify_by_depth(depth) is DepthClass.DEEP

    def test_boundaries_go_to_deeper_bucket(self):
        """Exactly 70 and exactly 300 select the higher bucket."""
        assert classify_by_depth(70) is DepthClass.INTERMEDIATE
        assert classify_by_depth(300) is DepthClass.DEEP


class TestDepthColor:
    """Tests for depth_color()."""

    def test_canonical_colors(self):
        """Shallow yellow, intermediate blue, deep red."""
        assert depth_color(10) == Rgb(255, 255, 0) == YELLOW
        assert depth_color(100) == Rgb(0, 0, 255) == BLUE
        assert depth_color(400) == Rgb(255, 0, 0) == RED

    def test_class_color_property(self):
        """Each depth class knows its color."""
        assert DepthClass.SHALLOW.color == YELLOW
        assert DepthClass.INTERMEDIATE.color == BLUE
        assert DepthClass.DEEP.color == RED


class TestClassifyByMagnitude:
    """Tests for classify_by_magnitude()."""

    def test_buckets(self):
        """Thresholds at 4 and 5 go to the higher bucket."""
        assert classify_by_magnitude(3.9) is MagnitudeClass.MINOR
        assert classify_by_magnitude(4.0) is MagnitudeClass.LIGHT
        assert classify_by_magnitude(4.9) is MagnitudeClass.LIGHT
        assert classify_by_magnitude(5.0) is MagnitudeClass.MODERATE
        assert classify_by_magnitude(8.1) is MagnitudeClass.MODERATE


class TestComparativeColor:
    """Tests for comparative_color()."""

    def test_literal_value(self):
        """Score 100 gives red 100, blue 170, no green."""
        assert comparative_color(100) == Rgb(100, 0, 170)

    def test_zero_is_pure_blue(self):
        """Lowest score is blue."""
        assert comparative_color(0) == Rgb(0, 0, 255)

    @pytest.mark.parametrize("score", [-1, -50, -1000])
    def test_negative_scores_floor_to_zero(self, score):
        """Negative scores behave exactly like zero."""
        assert comparative_color(score) == comparative_color(0)

    def test_rounds_half_up(self):
        """Blue uses 0.85 * score rounded to the nearest integer."""
        assert comparative_color(1) == Rgb(1, 0, 254)
        assert comparative_color(255) == Rgb(255, 0, 38)

    def test_upper_bound_not_clamped_by_default(self):
        """Scores above 255 pass through to out-of-range channels."""
        assert comparative_color(400) == Rgb(400, 0, -85)

    def test_upper_bound_clamp_opt_in(self):
        """clamp_upper caps the score at 255."""
        assert comparative_color(400, clamp_upper=True) == comparative_color(255)


class TestMarkerFill:
    """Tests for marker_fill() color-mode selection."""

    def test_depth_mode_without_comparison(self):
        """No comparison mode means depth colors."""
        assert marker_fill(_record(depth=100)) == BLUE

    def test_depth_mode_when_comparison_inactive(self):
        """An inactive comparison mode is ignored."""
        mode = ComparisonMode(active=False)
        assert marker_fill(_record(depth=10, comparison_value=100), mode) == YELLOW

    def test_comparative_mode(self):
        """An active comparison mode uses the record's score."""
        mode = ComparisonMode(active=True)
        assert marker_fill(_record(comparison_value=100), mode) == Rgb(100, 0, 170)

    def test_comparative_mode_without_score(self):
        """A record with no score is colored as score 0."""
        mode = ComparisonMode(active=True)
        assert marker_fill(_record(), mode) == Rgb(0, 0, 255)

    def test_comparative_mode_clamps_when_configured(self):
        """The mode's clamp flag is passed through."""
        mode = ComparisonMode(active=True, clamp_upper=True)
        assert marker_fill(_record(comparison_value=999), mode) == Rgb(255, 0, 38)
