"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from quakemap.core.comparison import COMPARABLE_ATTRIBUTES, ComparisonMode
from quakemap.core.geo import PointOfInterest
from quakemap.core.labels import DETAIL_BOUNDS, TITLE_BOUNDS, LabelBounds


FEED_LEVELS = ("significant", "4.5", "2.5", "1.0", "all")
LOOKBACK_PERIODS = ("hour", "day", "week", "month")
HIGHLIGHT_MODES = ("none", "title", "detailed")


@dataclass
class RenderConfig:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        min_magnitude: Feed magnitude floor ("significant", "4.5", "2.5", "1.0", "all")
        lookback: Feed period: hour, day, week or month
        width: Map image width in pixels
        height: Map image height in pixels
        zoom: Fixed zoom level, None to fit the earthquakes
        tile_url: Tile server URL template
        output_path: Where the PNG is written
        title_bounds: Viewport limits for the title label
        detail_bounds: Viewport limits for the detailed label
        cities: Cities whose nearby earthquakes use the city marker
        comparison: Comparative coloring mode
        highlight: Label drawn for the strongest earthquake
    """
    min_magnitude: str = "2.5"
    lookback: str = "day"
    width: int = 900
    height: int = 700
    zoom: int | None = None
    tile_url: str = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"
    output_path: str = "quakemap.png"
    title_bounds: LabelBounds = TITLE_BOUNDS
    detail_bounds: LabelBounds = DETAIL_BOUNDS
    cities: list[PointOfInterest] = field(default_factory=list)
    comparison: ComparisonMode = field(default_factory=ComparisonMode)
    highlight: str = "none"


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_label_bounds(bounds: LabelBounds, field_name: str) -> list[ValidationError]:
    """Check that label fallbacks can actually keep a label on screen.

    Pure function. Odd values only produce warnings; placement still
    returns a position for any bounds.
    """
    errors = []

    if bounds.fallback_x <= bounds.left_safe_margin:
        errors.append(ValidationError(
            field=field_name,
            message=(
                f"fallback_x ({bounds.fallback_x}) is not right of "
                f"left_safe_margin ({bounds.left_safe_margin})"
            ),
            severity="warning",
        ))

    if bounds.fallback_x >= bounds.right_edge:
        errors.append(ValidationError(
            field=field_name,
            message=f"fallback_x ({bounds.fallback_x}) >= right_edge ({bounds.right_edge})",
            severity="warning",
        ))

    if bounds.fallback_y >= bounds.bottom_edge:
        errors.append(ValidationError(
            field=field_name,
            message=f"fallback_y ({bounds.fallback_y}) >= bottom_edge ({bounds.bottom_edge})",
            severity="warning",
        ))

    return errors


def validate_config(config: RenderConfig) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if config.min_magnitude not in FEED_LEVELS:
        errors.append(ValidationError(
            field="min_magnitude",
            message=f"Unknown feed level '{config.min_magnitude}', expected one of {FEED_LEVELS}",
        ))

    if config.lookback not in LOOKBACK_PERIODS:
        errors.append(ValidationError(
            field="lookback",
            message=f"Unknown lookback '{config.lookback}', expected one of {LOOKBACK_PERIODS}",
        ))

    if config.width <= 0 or config.height <= 0:
        errors.append(ValidationError(
            field="map",
            message=f"Map size must be positive, got {config.width}x{config.height}",
        ))

    if config.zoom is not None and not 0 <= config.zoom <= 17:
        errors.append(ValidationError(
            field="map.zoom",
            message=f"Zoom {config.zoom} out of range [0, 17]",
        ))

    if config.highlight not in HIGHLIGHT_MODES:
        errors.append(ValidationError(
            field="highlight",
            message=f"Unknown highlight '{config.highlight}', expected one of {HIGHLIGHT_MODES}",
        ))

    if config.comparison.attribute not in COMPARABLE_ATTRIBUTES:
        errors.append(ValidationError(
            field="comparison.attribute",
            message=f"Cannot compare by '{config.comparison.attribute}'",
        ))

    for i, city in enumerate(config.cities):
        errors.extend(validate_coordinates(
            city.latitude, city.longitude,
            f"cities[{i}]",
        ))
        if city.radius_km <= 0:
            errors.append(ValidationError(
                field=f"cities[{i}].radius_km",
                message=f"City radius must be positive, got {city.radius_km}",
            ))

    errors.extend(validate_label_bounds(config.title_bounds, "labels.title"))
    errors.extend(validate_label_bounds(config.detail_bounds, "labels.detailed"))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
