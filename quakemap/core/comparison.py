"""Comparative ranking - Pure functions.

Comparative mode colors each marker by how one of its attributes ranks
against the other markers on the map. This module computes that rank
score (0 for the lowest value, 255 for the highest).
"""

from dataclasses import dataclass

from quakemap.core.earthquake import EarthquakeRecord


COMPARABLE_ATTRIBUTES = ("magnitude", "depth", "radius")

MAX_SCORE = 255


@dataclass(frozen=True)
class ComparisonMode:
    """Whether and how comparative coloring is applied.

    Attributes:
        active: Comparative coloring is on for this draw call
        attribute: Record attribute the peers are ranked by
        clamp_upper: Cap scores at 255 before coloring
    """
    active: bool = False
    attribute: str = "magnitude"
    clamp_upper: bool = False


def rank_scores(records: list[EarthquakeRecord], attribute: str) -> list[int]:
    """Rank each record among its peers and scale the rank to 0-255.

    Pure function. Equal values share a score. With a single distinct
    value every record scores 255.

    Args:
        records: Peer set
        attribute: One of COMPARABLE_ATTRIBUTES

    Returns:
        Scores in the same order as ``records``

    Raises:
        ValueError: If the attribute is not comparable
    """
    if attribute not in COMPARABLE_ATTRIBUTES:
        raise ValueError(f"Cannot compare earthquakes by '{attribute}'")

    values = [getattr(r, attribute) for r in records]
    distinct = sorted(set(values))
    if len(distinct) <= 1:
        return [MAX_SCORE] * len(values)

    position = {v: i for i, v in enumerate(distinct)}
    steps = len(distinct) - 1
    return [round(MAX_SCORE * position[v] / steps) for v in values]


def apply_comparison(
    records: list[EarthquakeRecord],
    attribute: str,
) -> list[EarthquakeRecord]:
    """Return copies of the records carrying their comparison score."""
    scores = rank_scores(records, attribute)
    return [r.with_comparison(s) for r, s in zip(records, scores)]


def score_for(record: EarthquakeRecord) -> int:
    """The record's comparison score, 0 if none was assigned."""
    if record.comparison_value is None:
        return 0
    return record.comparison_value
