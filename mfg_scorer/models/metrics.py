"""
Metrics input record — everything the performance form collects.

``MetricsInput`` is a frozen snapshot of the form.  Each edit produces a new
record (see ``mfg_scorer.forms.session.apply_change``) rather than mutating
shared state.

Parsing follows the form:
  - Numeric fields accept numbers or text.  Empty, whitespace-only and
    malformed text all become ``None`` (absent) and simply contribute
    nothing to the score.
  - Choice fields accept their enum value; empty text becomes ``None``.
    Unknown values are rejected, since no select box can produce them.
  - Required fields are *optional at model level* so an incomplete record
    can exist mid-session.  Missing required values are reported by
    ``mfg_scorer.scoring.validation.validate``, never at construction.

Field names are snake_case; the camelCase names used by the web form
(``companyName``, ``monthlyOutput``, ...) are accepted as aliases.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from mfg_scorer.taxonomy.metric_taxonomy import (
    CompanySize,
    EconomicCondition,
    IndustryType,
    MaintenanceFrequency,
    MarketLevel,
    Seasonality,
)

NUMERIC_FIELDS: tuple[str, ...] = (
    "operating_years",
    "monthly_output",
    "production_capacity",
    "capacity_utilization",
    "production_efficiency",
    "defect_rate",
    "rework_rate",
    "customer_satisfaction",
    "return_rate",
    "monthly_revenue",
    "production_cost",
    "profit_margin",
    "operational_cost",
    "employee_count",
    "machine_hours",
    "downtime_hours",
)

CHOICE_FIELDS: tuple[str, ...] = (
    "industry_type",
    "company_size",
    "maintenance_freq",
    "market_demand",
    "competition_level",
    "economic_condition",
    "seasonality",
)

TEXT_FIELDS: tuple[str, ...] = ("company_name", "additional_notes")


def parse_number(value: Any) -> Optional[float]:
    """Parse a form value into a float, or ``None`` when absent or malformed.

    ``"12.5"`` → 12.5, ``7`` → 7.0, ``""`` / ``"  "`` / ``"abc"`` / ``None``
    → ``None``.  Non-finite results (``"nan"``, ``"inf"``) are also treated
    as absent, as is digit grouping such as ``"1_000"``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        text = str(value).strip()
        # float() allows "1_000"; the form does not.
        if not text or "_" in text:
            return None
        try:
            result = float(text)
        except ValueError:
            return None
    if not math.isfinite(result):
        return None
    return result


class MetricsInput(BaseModel):
    """One company's manufacturing metrics as entered on the form.

    Attributes:
        company_name: Company name (required, non-blank).
        industry_type: Industry sector (required).
        company_size: Headcount class.
        operating_years: Years in operation (1–100).
        monthly_output: Units produced per month (required, >= 0).
        production_capacity: Maximum units per month (required, >= 0).
        capacity_utilization: Output / capacity as a percentage (0–100).
            Derived from the two fields above whenever capacity > 0.
        production_efficiency: Production efficiency percentage (0–100).
        defect_rate: Defective units percentage (0–100).
        rework_rate: Reworked units percentage (0–100).
        customer_satisfaction: Satisfaction rating (0–10).
        return_rate: Returned units percentage (0–100).
        monthly_revenue: Revenue per month (>= 0).
        production_cost: Production cost per month (>= 0).
        profit_margin: Profit margin percentage (−100–100).
        operational_cost: Operational cost per month (>= 0).
        employee_count: Number of employees (>= 1).
        machine_hours: Machine running hours per month (>= 0).
        downtime_hours: Unplanned downtime hours per month (>= 0).
        maintenance_freq: Scheduled maintenance cadence.
        market_demand: Demand level for the company's products.
        competition_level: Competitive pressure level.
        economic_condition: Macro-economic climate.
        seasonality: Strength of seasonal demand swings.
        additional_notes: Free-form notes; never scored.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Company
    company_name: str = ""
    industry_type: Optional[IndustryType] = None
    company_size: Optional[CompanySize] = None
    operating_years: Optional[float] = None

    # Production
    monthly_output: Optional[float] = None
    production_capacity: Optional[float] = None
    capacity_utilization: Optional[float] = None
    production_efficiency: Optional[float] = None

    # Quality
    defect_rate: Optional[float] = None
    rework_rate: Optional[float] = None
    customer_satisfaction: Optional[float] = None
    return_rate: Optional[float] = None

    # Financial
    monthly_revenue: Optional[float] = None
    production_cost: Optional[float] = None
    profit_margin: Optional[float] = None
    operational_cost: Optional[float] = None

    # Operational
    employee_count: Optional[float] = None
    machine_hours: Optional[float] = None
    downtime_hours: Optional[float] = None
    maintenance_freq: Optional[MaintenanceFrequency] = None

    # Market
    market_demand: Optional[MarketLevel] = None
    competition_level: Optional[MarketLevel] = None
    economic_condition: Optional[EconomicCondition] = None
    seasonality: Optional[Seasonality] = None

    additional_notes: str = ""

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def parse_numeric(cls, v: Any) -> Optional[float]:
        return parse_number(v)

    @field_validator(*CHOICE_FIELDS, mode="before")
    @classmethod
    def blank_choice_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def none_text_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def form_values(self) -> dict[str, Any]:
        """Return the record keyed by camelCase form name, enums as plain strings."""
        return self.model_dump(mode="json", by_alias=True)
