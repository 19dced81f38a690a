"""
Performance scoring: converts a ``MetricsInput`` into a 0–100 score.

Score formula (base 50, adjustments only for present fields)
------------------------------------------------------------
    raw = 50
        + (capacity_utilization  - 50) * 0.3
        + (production_efficiency - 50) * 0.4
        -  defect_rate * 2
        + (customer_satisfaction - 5)  * 5
        +  profit_margin * 0.5
        +  DEMAND_ADJUSTMENT[market_demand]

    score = clamp(round_half_up(raw), 0, 100)

Market demand
-------------
The demand adjustment is only applied when its mapped value is non-zero, so
a ``moderate`` demand is indistinguishable from no demand answer at all.
This matches the long-standing behaviour of the form and is kept as is.

Everything else on the form (rework, returns, costs, headcount, machine
time, maintenance, competition, economy, seasonality, operating years,
company size, notes) is collected but deliberately not scored.

Pure functions, no I/O.
"""

from __future__ import annotations

from mfg_scorer.models.metrics import MetricsInput
from mfg_scorer.models.prediction import ScoreComponents
from mfg_scorer.scoring.utilization import round_half_up
from mfg_scorer.taxonomy.metric_taxonomy import MarketLevel

BASE_SCORE = 50.0

# Market demand level → score adjustment
DEMAND_ADJUSTMENT: dict[MarketLevel, float] = {
    MarketLevel.VERY_LOW:  -10.0,
    MarketLevel.LOW:        -5.0,
    MarketLevel.MODERATE:    0.0,
    MarketLevel.HIGH:        5.0,
    MarketLevel.VERY_HIGH:  10.0,
}


def score_components(metrics: MetricsInput) -> ScoreComponents:
    """Compute every score adjustment for one metrics record.

    Args:
        metrics: The record to score.  Required fields are not checked here.

    Returns:
        ScoreComponents with absent factors left at 0.0.
    """
    adjustments: dict[str, float] = {}

    # ── Production ────────────────────────────────────────────────────────────
    if metrics.capacity_utilization is not None:
        adjustments["capacity_utilization"] = (metrics.capacity_utilization - 50) * 0.3
    if metrics.production_efficiency is not None:
        adjustments["production_efficiency"] = (metrics.production_efficiency - 50) * 0.4

    # ── Quality ───────────────────────────────────────────────────────────────
    if metrics.defect_rate is not None:
        adjustments["defect_rate"] = -metrics.defect_rate * 2
    if metrics.customer_satisfaction is not None:
        adjustments["customer_satisfaction"] = (metrics.customer_satisfaction - 5) * 5

    # ── Financial ─────────────────────────────────────────────────────────────
    if metrics.profit_margin is not None:
        adjustments["profit_margin"] = metrics.profit_margin * 0.5

    # ── Market ────────────────────────────────────────────────────────────────
    if metrics.market_demand is not None:
        demand = DEMAND_ADJUSTMENT[metrics.market_demand]
        if demand:
            adjustments["market_demand"] = demand

    return ScoreComponents(
        base=BASE_SCORE,
        applied=tuple(adjustments),
        **adjustments,
    )


def compute_score(metrics: MetricsInput) -> int:
    """Return the integer performance score in [0, 100] for ``metrics``."""
    return finalize_score(score_components(metrics).raw_total)


def finalize_score(raw: float) -> int:
    """Round a raw score half away from zero and clamp it to [0, 100]."""
    return int(_clamp(round_half_up(raw), 0.0, 100.0))


# ── Helper ────────────────────────────────────────────────────────────────────

def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
