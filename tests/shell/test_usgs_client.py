"""Tests for the USGS feed client.

HTTP is mocked with the responses library.
"""

import pytest
import requests
import responses

from quakemap.shell.usgs_client import USGS_FEED_BASE, USGSClient


SAMPLE_FEED = {
    "type": "FeatureCollection",
    "metadata": {"count": 1},
    "features": [
        {
            "id": "us7000abcd",
            "properties": {"mag": 5.2, "title": "M 5.2 - Test", "time": 1700000000000},
            "geometry": {"type": "Point", "coordinates": [139.0, 35.0, 10.0]},
        }
    ],
}


class TestFeedUrl:
    """Tests for USGSClient.feed_url()."""

    def test_default_base(self):
        """URL follows the summary feed naming."""
        url = USGSClient().feed_url("2.5", "day")
        assert url == f"{USGS_FEED_BASE}/2.5_day.geojson"

    def test_trailing_slash_is_dropped(self):
        """A custom base with a trailing slash still builds a clean URL."""
        url = USGSClient(base_url="https://example.com/feed/").feed_url("all", "hour")
        assert url == "https://example.com/feed/all_hour.geojson"


class TestFetchFeed:
    """Tests for USGSClient.fetch_feed()."""

    @responses.activate
    def test_returns_geojson(self):
        """A successful request returns the decoded feed."""
        responses.add(
            responses.GET,
            f"{USGS_FEED_BASE}/4.5_week.geojson",
            json=SAMPLE_FEED,
            status=200,
        )

        data = USGSClient().fetch_feed("4.5", "week")

        assert data == SAMPLE_FEED
        assert len(responses.calls) == 1

    @responses.activate
    def test_http_error_raises(self):
        """Server errors propagate as requests exceptions."""
        responses.add(
            responses.GET,
            f"{USGS_FEED_BASE}/2.5_day.geojson",
            status=500,
        )

        with pytest.raises(requests.HTTPError):
            USGSClient().fetch_feed()

    @responses.activate
    def test_missing_metadata_counts_features(self):
        """Feeds without metadata are still accepted."""
        feed = {"type": "FeatureCollection", "features": []}
        responses.add(
            responses.GET,
            f"{USGS_FEED_BASE}/significant_month.geojson",
            json=feed,
        )

        assert USGSClient().fetch_feed("significant", "month") == feed
