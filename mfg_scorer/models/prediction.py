"""
Prediction output models.

``ScoreComponents`` is the per-factor breakdown behind a score.
``PredictionResult`` is the outcome of a successful evaluation.
``ValidationFailure`` is the outcome of an evaluation blocked by missing
required fields.

All three are frozen.  A result has no identity of its own: the form
replaces it wholesale on every submit and discards it on reset.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from mfg_scorer.taxonomy.metric_taxonomy import PerformanceBand

ColorToken = Literal["green", "yellow-orange", "orange-red", "red"]

MISSING_REQUIRED_MESSAGE = "Please fill in all required fields (marked *)."


class ScoreComponents(BaseModel):
    """Signed adjustments applied on top of the base score.

    Each adjustment is ``0.0`` when its input is absent (or, for market
    demand, when the demand level maps to zero).

    Attributes:
        base:                  Starting score (50).
        capacity_utilization:  ``(utilization - 50) * 0.3``.
        production_efficiency: ``(efficiency - 50) * 0.4``.
        defect_rate:           ``-defect_rate * 2``.
        customer_satisfaction: ``(satisfaction - 5) * 5``.
        profit_margin:         ``profit_margin * 0.5``.
        market_demand:         Demand level lookup, -10 … +10.
        applied:               Names of the factors that contributed.
    """

    model_config = ConfigDict(frozen=True)

    base: float = 50.0
    capacity_utilization: float = 0.0
    production_efficiency: float = 0.0
    defect_rate: float = 0.0
    customer_satisfaction: float = 0.0
    profit_margin: float = 0.0
    market_demand: float = 0.0
    applied: tuple[str, ...] = ()

    @property
    def raw_total(self) -> float:
        """Unrounded, unclamped score."""
        return (
            self.base
            + self.capacity_utilization
            + self.production_efficiency
            + self.defect_rate
            + self.customer_satisfaction
            + self.profit_margin
            + self.market_demand
        )

    def adjustments(self) -> dict[str, float]:
        """Factor name → adjustment, for factors that contributed."""
        return {name: getattr(self, name) for name in self.applied}


class PredictionResult(BaseModel):
    """Performance score with its band, recommendation and presentation hint.

    Attributes:
        score: Integer score in [0, 100].
        band: Qualitative band the score falls into.
        category: Display label of the band, e.g. ``"Good Performance"``.
        recommendation: Static advice text tied to the band.
        color_token: Presentation hint tied to the band.
        components: Breakdown of the raw score.
    """

    model_config = ConfigDict(frozen=True)

    score: int
    band: PerformanceBand
    category: str
    recommendation: str
    color_token: ColorToken
    components: ScoreComponents = ScoreComponents()

    @field_validator("score")
    @classmethod
    def validate_score_range(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"score must be in [0, 100], got {v}.")
        return v


class ValidationFailure(BaseModel):
    """Evaluation blocked because required fields are empty.

    Attributes:
        kind: Always ``"missing_required_fields"``.
        missing_fields: Empty required fields (snake_case), in form order.
        message: User-facing message.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["missing_required_fields"] = "missing_required_fields"
    missing_fields: tuple[str, ...]
    message: str = MISSING_REQUIRED_MESSAGE

    @field_validator("missing_fields")
    @classmethod
    def validate_not_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("missing_fields must name at least one field.")
        return v
