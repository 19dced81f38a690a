"""
Score banding: maps an integer score to a category, recommendation and color.

Bands are contiguous and inclusive at their lower edge:

    [80, 100]  very_good   green
    [60,  79]  good        yellow-orange
    [40,  59]  moderate    orange-red
    [ 0,  39]  low         red
"""

from __future__ import annotations

from dataclasses import dataclass

from mfg_scorer.taxonomy.metric_taxonomy import PerformanceBand


@dataclass(frozen=True)
class BandInfo:
    """Everything tied to one performance band."""

    band: PerformanceBand
    min_score: int
    category: str
    recommendation: str
    color_token: str


# Highest band first; classify() takes the first band whose floor is reached.
BAND_TABLE: tuple[BandInfo, ...] = (
    BandInfo(
        band=PerformanceBand.VERY_GOOD,
        min_score=80,
        category="Very Good Performance",
        recommendation=(
            "Maintain high operational standards and focus on continuous innovation."
        ),
        color_token="green",
    ),
    BandInfo(
        band=PerformanceBand.GOOD,
        min_score=60,
        category="Good Performance",
        recommendation=(
            "Improve operational efficiency and reduce production defect rate."
        ),
        color_token="yellow-orange",
    ),
    BandInfo(
        band=PerformanceBand.MODERATE,
        min_score=40,
        category="Moderate Performance",
        recommendation="Production system and quality management need improvement.",
        color_token="orange-red",
    ),
    BandInfo(
        band=PerformanceBand.LOW,
        min_score=0,
        category="Low Performance",
        recommendation=(
            "A comprehensive evaluation and operational system improvement are required."
        ),
        color_token="red",
    ),
)


def classify(score: int) -> BandInfo:
    """Return the band for an integer ``score``.

    Raises:
        ValueError: If ``score`` is outside [0, 100].
    """
    if not 0 <= score <= 100:
        raise ValueError(f"score must be in [0, 100], got {score}.")
    for info in BAND_TABLE[:-1]:
        if score >= info.min_score:
            return info
    return BAND_TABLE[-1]


def band_info(band: PerformanceBand) -> BandInfo:
    """Look up the BandInfo for ``band``."""
    for info in BAND_TABLE:
        if info.band == band:
            return info
    raise KeyError(f"Unknown band '{band}'.")
