"""
Evaluation entry point: validate → score → classify.

``compute_prediction(metrics)`` returns either a ``PredictionResult`` or a
``ValidationFailure``.  No partial result is ever produced: if a required
field is missing, nothing is scored.
"""

from __future__ import annotations

import logging

from mfg_scorer.models.fields import out_of_range_fields
from mfg_scorer.models.metrics import MetricsInput
from mfg_scorer.models.prediction import PredictionResult, ValidationFailure
from mfg_scorer.scoring.bands import classify
from mfg_scorer.scoring.scorer import finalize_score, score_components
from mfg_scorer.scoring.validation import validate

logger = logging.getLogger(__name__)


def compute_prediction(metrics: MetricsInput) -> PredictionResult | ValidationFailure:
    """Evaluate one metrics record.

    Args:
        metrics: Record as submitted from the form (or loaded from a file).

    Returns:
        ``PredictionResult`` on success; ``ValidationFailure`` when any
        required field is empty.
    """
    failure = validate(metrics)
    if failure is not None:
        logger.warning(
            "Evaluation blocked; missing required fields: %s",
            ", ".join(failure.missing_fields),
        )
        return failure

    for name in out_of_range_fields(metrics):
        logger.warning(
            "%s: %s=%s is outside the expected range; scoring it as given",
            metrics.company_name, name, getattr(metrics, name),
        )

    components = score_components(metrics)
    score = finalize_score(components.raw_total)
    info = classify(score)

    logger.info(
        "Scored %s: raw=%.2f score=%d band=%s",
        metrics.company_name, components.raw_total, score, info.band.value,
    )
    return PredictionResult(
        score=score,
        band=info.band,
        category=info.category,
        recommendation=info.recommendation,
        color_token=info.color_token,
        components=components,
    )
