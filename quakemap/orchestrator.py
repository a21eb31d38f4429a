"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates one map render: fetch the feed, ingest records,
pick colors and shapes in the core, and draw them on the base map with
the shell's Pillow surface.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

import requests
from PIL import Image

from quakemap.core.comparison import apply_comparison
from quakemap.core.config import RenderConfig
from quakemap.core.earthquake import EarthquakeRecord, parse_features
from quakemap.core.labels import LabelKind
from quakemap.core.shapes import marker_kind_for, shape_for
from quakemap.core.static_map import MapViewport, create_viewport, project
from quakemap.renderer import MarkerRenderer
from quakemap.shell.pil_surface import PillowSurface
from quakemap.shell.static_map_client import StaticMapClient, to_png_bytes
from quakemap.shell.usgs_client import USGSClient


logger = logging.getLogger(__name__)


# Shown when the tile server cannot be reached
FALLBACK_BACKGROUND = (233, 233, 233, 255)


@dataclass
class ProcessingResult:
    """Result of a complete render cycle.

    Attributes:
        earthquakes_fetched: Features in the feed
        markers_drawn: Markers drawn on the map
        rejected: IDs of features that failed validation
        failed_markers: IDs of records whose drawing raised
        errors: Errors that occurred outside single records
        image_bytes: Rendered PNG, None if nothing was rendered
        highlighted: Record that received a label, if any
    """
    earthquakes_fetched: int = 0
    markers_drawn: int = 0
    rejected: list[str] = field(default_factory=list)
    failed_markers: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    image_bytes: bytes | None = None
    highlighted: EarthquakeRecord | None = None

    @property
    def success(self) -> bool:
        """Returns True if no critical errors occurred."""
        return len(self.errors) == 0 and self.image_bytes is not None

    @property
    def summary(self) -> str:
        """Human-readable summary of the processing result."""
        return (
            f"Fetched {self.earthquakes_fetched} earthquakes, "
            f"{self.markers_drawn} drawn, "
            f"{len(self.rejected)} rejected, "
            f"{len(self.failed_markers)} failed"
        )


class MapOrchestrator:
    """Coordinates fetching and drawing an earthquake map.

    This class wires together:
    - USGS client (fetches earthquake features)
    - Core functions (ingestion, colors, shapes, labels)
    - Static map client (renders base tiles)
    - Marker renderer (draws markers on a Pillow surface)
    """

    def __init__(
        self,
        config: RenderConfig,
        usgs_client: USGSClient | None = None,
        static_map_client: StaticMapClient | None = None,
        renderer: MarkerRenderer | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            usgs_client: USGS client (created if not provided)
            static_map_client: Static map client (created if not provided)
            renderer: Marker renderer (created from config if not provided)
        """
        self.config = config
        self.usgs_client = usgs_client or USGSClient()
        self.static_map_client = static_map_client or StaticMapClient(config.tile_url)
        self.renderer = renderer or MarkerRenderer(
            title_bounds=config.title_bounds,
            detail_bounds=config.detail_bounds,
        )

    def _load_base_map(self, viewport: MapViewport, result: ProcessingResult) -> Image.Image:
        try:
            return self.static_map_client.render_base_map(viewport)
        except Exception as e:
            logger.warning("Base map unavailable, drawing on plain background: %s", e)
            result.errors.append(f"Base map failed: {e}")
            return Image.new("RGBA", (viewport.width, viewport.height), FALLBACK_BACKGROUND)

    def draw_records(
        self,
        surface: PillowSurface,
        records: list[EarthquakeRecord],
        viewport: MapViewport,
        result: ProcessingResult,
    ) -> None:
        """Draw every record; one failing marker does not stop the others."""
        for record in records:
            x, y = project(viewport, record.latitude, record.longitude)
            shape = shape_for(marker_kind_for(record, self.config.cities))
            try:
                self.renderer.draw_marker(
                    surface, record, x, y, shape, self.config.comparison,
                )
            except Exception:
                logger.exception("Failed to draw marker %s", record.id or record.title)
                result.failed_markers.append(record.id)
                continue
            result.markers_drawn += 1

    def _draw_highlight(
        self,
        image: Image.Image,
        records: list[EarthquakeRecord],
        viewport: MapViewport,
        result: ProcessingResult,
    ) -> Image.Image:
        if self.config.highlight == "none" or not records:
            return image

        strongest = max(records, key=lambda r: r.magnitude)
        x, y = project(viewport, strongest.latitude, strongest.longitude)

        overlay = PillowSurface.blank(viewport.width, viewport.height)
        self.renderer.show_label(
            overlay, strongest, x, y, LabelKind(self.config.highlight),
        )
        result.highlighted = strongest

        return Image.alpha_composite(image, overlay.image)

    def render(
        self,
        records: list[EarthquakeRecord],
        result: ProcessingResult | None = None,
    ) -> ProcessingResult:
        """Draw already-ingested records onto a fresh map.

        Args:
            records: Validated earthquake records
            result: Result to fill in (a new one if None)

        Returns:
            ProcessingResult with the PNG bytes
        """
        result = result or ProcessingResult(earthquakes_fetched=len(records))

        if self.config.comparison.active and records:
            records = apply_comparison(records, self.config.comparison.attribute)

        viewport = create_viewport(
            records,
            self.config.width,
            self.config.height,
            self.config.zoom,
        )

        image = self._load_base_map(viewport, result)
        surface = PillowSurface(image)
        self.draw_records(surface, records, viewport, result)
        image = self._draw_highlight(image, records, viewport, result)

        result.image_bytes = to_png_bytes(image)
        logger.info(result.summary)
        return result

    def process(self, now: datetime | None = None) -> ProcessingResult:
        """Run a complete fetch-and-draw cycle.

        Args:
            now: Reference time for age buckets (defaults to current UTC)

        Returns:
            ProcessingResult with counts, errors and the PNG bytes
        """
        result = ProcessingResult()

        try:
            geojson = self.usgs_client.fetch_feed(
                self.config.min_magnitude,
                self.config.lookback,
            )
        except requests.RequestException as e:
            logger.error("Failed to fetch earthquakes: %s", e)
            result.errors.append(f"USGS fetch failed: {e}")
            return result

        ingest = parse_features(geojson, now)
        result.earthquakes_fetched = len(geojson.get("features", []))
        result.rejected = [feature_id for feature_id, _ in ingest.rejected]

        if ingest.rejected:
            logger.warning("Rejected %d malformed earthquakes", len(ingest.rejected))

        return self.render(ingest.records, result)
