"""Marker Renderer - Draws core decisions onto a surface.

This module turns the pure decisions from the core (colors, X overlay,
label layout) into calls on a DrawingSurface. It keeps no state between
frames: whether a marker is hovered is the caller's call.
"""

import logging

from quakemap.core.comparison import ComparisonMode
from quakemap.core.earthquake import EarthquakeRecord
from quakemap.core.labels import (
    DETAIL_BOUNDS,
    TITLE_BOUNDS,
    LabelBounds,
    LabelKind,
    LabelLayout,
    layout_detailed,
    layout_title,
)
from quakemap.core.marker import X_MARK_STROKE_WEIGHT, MarkerDecision, decide_marker
from quakemap.core.shapes import ShapeDrawer
from quakemap.core.surface import DrawingSurface, style_scope


logger = logging.getLogger(__name__)


LABEL_BORDER_GRAY = 110


class MarkerRenderer:
    """Draws earthquake markers and their hover labels.

    Attributes:
        title_bounds: Viewport limits for the title label
        detail_bounds: Viewport limits for the detailed label
    """

    def __init__(
        self,
        title_bounds: LabelBounds = TITLE_BOUNDS,
        detail_bounds: LabelBounds = DETAIL_BOUNDS,
    ) -> None:
        self.title_bounds = title_bounds
        self.detail_bounds = detail_bounds

    def draw_marker(
        self,
        surface: DrawingSurface,
        record: EarthquakeRecord,
        x: float,
        y: float,
        shape: ShapeDrawer,
        comparison: ComparisonMode | None = None,
    ) -> MarkerDecision:
        """Draw one marker at (x, y).

        The surface style is restored afterwards even if drawing fails.

        Args:
            surface: Surface to draw on
            record: Earthquake to draw
            x: Screen x of the epicenter
            y: Screen y of the epicenter
            shape: Drawing function for the marker kind
            comparison: Comparative coloring mode, None for depth colors

        Returns:
            The decision that was drawn
        """
        with style_scope(surface):
            decision = decide_marker(record, x, y, comparison)
            surface.fill(*decision.fill)
            shape(surface, x, y, record.radius)

            if decision.x_mark:
                surface.stroke_weight(X_MARK_STROKE_WEIGHT)
                for segment in decision.x_mark:
                    surface.draw_line(*segment)

        return decision

    def show_title(
        self,
        surface: DrawingSurface,
        record: EarthquakeRecord,
        x: float,
        y: float,
    ) -> LabelLayout:
        """Draw the one-line title label near (x, y)."""
        surface.clear()
        layout = layout_title(record.title, (x, y), surface.text_width, self.title_bounds)
        self._draw_label(surface, layout)
        return layout

    def show_detailed_title(
        self,
        surface: DrawingSurface,
        record: EarthquakeRecord,
        x: float,
        y: float,
    ) -> LabelLayout:
        """Draw the radius / depth / magnitude label near (x, y)."""
        surface.clear()
        layout = layout_detailed(record, (x, y), surface.text_width, self.detail_bounds)
        self._draw_label(surface, layout)
        return layout

    def show_label(
        self,
        surface: DrawingSurface,
        record: EarthquakeRecord,
        x: float,
        y: float,
        kind: LabelKind,
    ) -> LabelLayout:
        """Draw the requested label kind."""
        if kind is LabelKind.DETAILED:
            return self.show_detailed_title(surface, record, x, y)
        return self.show_title(surface, record, x, y)

    def _draw_label(self, surface: DrawingSurface, layout: LabelLayout) -> None:
        with style_scope(surface):
            surface.stroke(LABEL_BORDER_GRAY)
            surface.fill(255, 255, 255)
            surface.draw_rect(
                layout.x,
                layout.y,
                layout.width,
                layout.height,
                layout.corner_radius,
            )

            surface.fill(0, 0, 0)
            for line in layout.lines:
                surface.draw_text(line.text, line.x, line.y)

        logger.debug("Drew label at (%.1f, %.1f)", layout.x, layout.y)
