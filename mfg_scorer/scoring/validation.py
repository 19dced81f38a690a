"""
Required-field validation for a metrics record.

Four fields gate scoring: company name, industry type, monthly output and
production capacity.  A missing one is reported as a ``ValidationFailure``
value, never raised, so the form can show it and carry on.
"""

from __future__ import annotations

from typing import Optional

from mfg_scorer.models.fields import required_field_names
from mfg_scorer.models.metrics import MetricsInput
from mfg_scorer.models.prediction import ValidationFailure


def missing_required_fields(metrics: MetricsInput) -> list[str]:
    """Return the required fields that are empty, in form order."""
    missing: list[str] = []
    for name in required_field_names():
        value = getattr(metrics, name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


def validate(metrics: MetricsInput) -> Optional[ValidationFailure]:
    """Check required fields.

    Returns:
        ``None`` when the record can be scored, otherwise a
        ``ValidationFailure`` naming every empty required field.
    """
    missing = missing_required_fields(metrics)
    if missing:
        return ValidationFailure(missing_fields=tuple(missing))
    return None
