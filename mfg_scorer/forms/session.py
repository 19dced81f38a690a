"""
Form session state as immutable values.

Every form event produces a new ``MetricsInput`` (and a new ``FormSession``)
instead of mutating shared state.  Capacity utilization is re-derived
explicitly by ``apply_change`` after a change to monthly output or
production capacity; no other field triggers the recompute, so a manual
utilization entry survives until output or capacity changes again.

Typical use from a UI layer::

    session = FormSession.new()
    session = session.change("companyName", "Acme")
    session = session.change("monthlyOutput", "5000")
    session = session.change("productionCapacity", "10000")   # utilization → 50.0
    session = session.submit()
    session.result.score   # or session.failure.missing_fields
    session = session.reset()
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from mfg_scorer.models.fields import get_field
from mfg_scorer.models.metrics import MetricsInput
from mfg_scorer.models.prediction import PredictionResult, ValidationFailure
from mfg_scorer.scoring.engine import compute_prediction
from mfg_scorer.scoring.utilization import derive_utilization

UTILIZATION_TRIGGERS = frozenset({"monthly_output", "production_capacity"})


def rederive_utilization(metrics: MetricsInput) -> MetricsInput:
    """Return ``metrics`` with capacity utilization recomputed from output/capacity.

    When capacity is not positive the record is returned unchanged.
    """
    utilization = derive_utilization(metrics.monthly_output, metrics.production_capacity)
    if utilization is None:
        return metrics
    return _replace(metrics, "capacity_utilization", utilization)


def apply_change(metrics: MetricsInput, field: str, value: Any) -> MetricsInput:
    """Return a new record with ``field`` set to ``value``.

    Args:
        metrics: Current record (left untouched).
        field:   snake_case attribute name or camelCase form name.
        value:   Raw widget value (text, number, enum value or ``None``).

    Returns:
        New record; utilization re-derived if ``field`` is output or capacity.

    Raises:
        KeyError: If ``field`` is not a form field.
        pydantic.ValidationError: If ``value`` is not a valid choice.
    """
    name = get_field(field).name
    updated = _replace(metrics, name, value)
    if name in UTILIZATION_TRIGGERS:
        updated = rederive_utilization(updated)
    return updated


def _replace(metrics: MetricsInput, name: str, value: Any) -> MetricsInput:
    # model_copy() skips validation; rebuild so text values get parsed.
    data = metrics.model_dump()
    data[name] = value
    return MetricsInput.model_validate(data)


class FormSession(BaseModel):
    """One form session: the current record plus the outcome of the last submit.

    Attributes:
        metrics: Current form values.
        result:  Result of the last successful submit, if any.
        failure: Validation failure of the last submit, if it was blocked.
    """

    model_config = ConfigDict(frozen=True)

    metrics: MetricsInput = MetricsInput()
    result: Optional[PredictionResult] = None
    failure: Optional[ValidationFailure] = None

    @classmethod
    def new(cls) -> "FormSession":
        """Empty form, no result."""
        return cls()

    def change(self, field: str, value: Any) -> "FormSession":
        """Apply one field edit; the last result stays on screen."""
        return self.model_copy(update={"metrics": apply_change(self.metrics, field, value)})

    def submit(self) -> "FormSession":
        """Evaluate the current record.

        A blocked submit sets ``failure`` and leaves the last result in place;
        a successful one replaces the result and clears ``failure``.
        """
        outcome = compute_prediction(self.metrics)
        if isinstance(outcome, ValidationFailure):
            return self.model_copy(update={"failure": outcome})
        return self.model_copy(update={"result": outcome, "failure": None})

    def reset(self) -> "FormSession":
        """Clear every field and discard the result."""
        return FormSession.new()
