"""USGS Feed Client - Imperative Shell.

This module handles HTTP communication with the USGS earthquake summary
feeds. All I/O is contained here; parsing is in the core module.
"""

import logging
from typing import Any

import requests


logger = logging.getLogger(__name__)


# USGS GeoJSON summary feeds: {level}_{period}.geojson
USGS_FEED_BASE = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"

# Default timeout for API requests (seconds)
DEFAULT_TIMEOUT = 30


class USGSClient:
    """Client for fetching earthquake features from USGS.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        base_url: str = USGS_FEED_BASE,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize USGS client.

        Args:
            base_url: Summary feed base URL
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def feed_url(self, min_magnitude: str, lookback: str) -> str:
        """Build the summary feed URL, e.g. ``.../2.5_day.geojson``."""
        return f"{self.base_url}/{min_magnitude}_{lookback}.geojson"

    def fetch_feed(self, min_magnitude: str = "2.5", lookback: str = "day") -> dict[str, Any]:
        """Fetch a GeoJSON FeatureCollection.

        This method performs HTTP I/O.

        Args:
            min_magnitude: Feed level ("significant", "4.5", "2.5", "1.0", "all")
            lookback: Feed period ("hour", "day", "week", "month")

        Returns:
            Raw GeoJSON response from USGS

        Raises:
            requests.RequestException: If the request fails
        """
        url = self.feed_url(min_magnitude, lookback)

        logger.info("Fetching earthquakes from %s", url)

        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()

        data = response.json()
        count = data.get("metadata", {}).get("count", len(data.get("features", [])))

        logger.info("Fetched %d earthquakes from USGS", count)

        return data
