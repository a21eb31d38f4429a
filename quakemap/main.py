"""Command-line entry point.

A thin wrapper that loads configuration, applies command-line overrides
and invokes the orchestrator.

Usage:
    quakemap --lookback week --min-magnitude 4.5 --output week.png
    quakemap --compare magnitude --label detailed
    quakemap --config config/quakemap.yaml -v

Environment:
    CONFIG_PATH: Path to config file (default: config/quakemap.yaml)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import dataclasses
import logging
import os
import sys
from pathlib import Path

from quakemap.core.comparison import COMPARABLE_ATTRIBUTES, ComparisonMode
from quakemap.core.config import (
    FEED_LEVELS,
    HIGHLIGHT_MODES,
    LOOKBACK_PERIODS,
    RenderConfig,
    validate_config,
)
from quakemap.orchestrator import MapOrchestrator
from quakemap.shell.config_loader import load_config


logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quakemap",
        description="Draw recent USGS earthquakes as classified markers on a map.",
    )
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument("--output", "-o", help="PNG file to write")
    parser.add_argument("--min-magnitude", choices=FEED_LEVELS, help="USGS feed level")
    parser.add_argument("--lookback", choices=LOOKBACK_PERIODS, help="USGS feed period")
    parser.add_argument(
        "--compare",
        choices=COMPARABLE_ATTRIBUTES,
        help="Color markers by rank of this attribute instead of depth",
    )
    parser.add_argument(
        "--clamp",
        action="store_true",
        help="Cap comparison scores at 255",
    )
    parser.add_argument(
        "--label",
        choices=HIGHLIGHT_MODES,
        help="Label drawn for the strongest earthquake",
    )
    parser.add_argument("--zoom", type=int, help="Fixed map zoom level")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def apply_overrides(config: RenderConfig, args: argparse.Namespace) -> RenderConfig:
    """Return a copy of the config with command-line values applied."""
    changes = {}

    if args.output:
        changes["output_path"] = args.output
    if args.min_magnitude:
        changes["min_magnitude"] = args.min_magnitude
    if args.lookback:
        changes["lookback"] = args.lookback
    if args.zoom is not None:
        changes["zoom"] = args.zoom
    if args.label:
        changes["highlight"] = args.label
    if args.compare:
        changes["comparison"] = ComparisonMode(
            active=True,
            attribute=args.compare,
            clamp_upper=args.clamp,
        )
    elif args.clamp:
        changes["comparison"] = dataclasses.replace(config.comparison, clamp_upper=True)

    return dataclasses.replace(config, **changes)


def main(argv: list[str] | None = None) -> int:
    """Run one render and write the PNG.

    Returns:
        Process exit code
    """
    args = _build_parser().parse_args(argv)

    log_level = "DEBUG" if args.verbose else os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = apply_overrides(load_config(args.config), args)

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("%s: %s", warning.field, warning.message)
    if not validation.valid:
        for error in validation.critical_errors:
            logger.error("%s: %s", error.field, error.message)
        return 2

    result = MapOrchestrator(config).process()

    for error in result.errors:
        logger.error(error)

    if result.image_bytes is None:
        logger.error("Nothing rendered")
        return 1

    output = Path(config.output_path)
    output.write_bytes(result.image_bytes)
    logger.info("Wrote %s (%s)", output, result.summary)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
