"""
Score engine: turns a manufacturing metrics record into a performance score.

Modules
-------
utilization : derive_utilization() + format_utilization() + round_half_up().
scorer      : score_components() + compute_score() — pure functions, no I/O.
bands       : BandInfo + classify() — score → category / recommendation / color.
validation  : validate() — required-field check, returns a failure value.
engine      : compute_prediction() — validate, score and classify in one call.
"""

from mfg_scorer.scoring.bands import classify
from mfg_scorer.scoring.engine import compute_prediction
from mfg_scorer.scoring.scorer import compute_score, score_components
from mfg_scorer.scoring.utilization import derive_utilization, format_utilization
from mfg_scorer.scoring.validation import validate

__all__ = [
    "classify",
    "compute_prediction",
    "compute_score",
    "derive_utilization",
    "format_utilization",
    "score_components",
    "validate",
]
