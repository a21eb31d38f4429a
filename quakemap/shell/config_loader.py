"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (RenderConfig, LabelBounds) are defined in the core package
so the core never depends on the shell.
"""

import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from quakemap.core.comparison import ComparisonMode
from quakemap.core.config import RenderConfig
from quakemap.core.geo import PointOfInterest
from quakemap.core.labels import DETAIL_BOUNDS, TITLE_BOUNDS, LabelBounds


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/quakemap.yaml"


def _resolve_value(value: Any) -> Any:
    """Resolve a ``${VAR}`` placeholder from the environment.

    Non-string values and plain strings are returned unchanged. An unset
    variable leaves the placeholder in place.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_city(data: dict[str, Any]) -> PointOfInterest:
    """Parse a city from config data."""
    return PointOfInterest(
        name=data["name"],
        latitude=float(data["latitude"]),
        longitude=float(data["longitude"]),
        radius_km=float(data.get("radius_km", 50)),
    )


def _parse_label_bounds(data: dict[str, Any] | None, default: LabelBounds) -> LabelBounds:
    """Parse label bounds, falling back to ``default`` per field."""
    if not data:
        return default

    values = {}
    for f in fields(LabelBounds):
        raw = data.get(f.name, getattr(default, f.name))
        values[f.name] = float(_resolve_value(raw))
    return LabelBounds(**values)


def _parse_comparison(data: dict[str, Any] | None) -> ComparisonMode:
    """Parse comparative coloring settings."""
    if not data:
        return ComparisonMode()

    return ComparisonMode(
        active=bool(data.get("active", True)),
        attribute=str(data.get("attribute", "magnitude")),
        clamp_upper=bool(data.get("clamp_upper", False)),
    )


def load_config_from_dict(data: dict[str, Any]) -> RenderConfig:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed RenderConfig object
    """
    feed = data.get("feed", {})
    map_data = data.get("map", {})
    labels = data.get("labels", {})

    zoom = map_data.get("zoom")

    return RenderConfig(
        min_magnitude=str(feed.get("min_magnitude", "2.5")),
        lookback=str(feed.get("lookback", "day")),
        width=int(map_data.get("width", 900)),
        height=int(map_data.get("height", 700)),
        zoom=int(zoom) if zoom is not None else None,
        tile_url=_resolve_value(
            map_data.get("tile_url", "https://tile.openstreetmap.org/{z}/{x}/{y}.png")
        ),
        output_path=_resolve_value(data.get("output_path", "quakemap.png")),
        title_bounds=_parse_label_bounds(labels.get("title"), TITLE_BOUNDS),
        detail_bounds=_parse_label_bounds(labels.get("detailed"), DETAIL_BOUNDS),
        cities=[_parse_city(c) for c in data.get("cities", [])],
        comparison=_parse_comparison(data.get("comparison")),
        highlight=str(data.get("highlight", "none")),
    )


def load_config(config_path: str | Path | None = None) -> RenderConfig:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed RenderConfig object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return RenderConfig()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return RenderConfig()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: %s feed over the past %s, %d cities",
        config.min_magnitude,
        config.lookback,
        len(config.cities),
    )

    return config
