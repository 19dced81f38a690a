"""
Field registry for the manufacturing metrics form.

Single source of truth for every input on the form: its display label, unit,
advisory bounds, whether it is required, and whether it feeds the score.
The dashboard builds its widgets from this list, the help guide uses the
labels, and ``out_of_range_fields()`` uses the bounds.

Bounds are advisory only.  They mirror the widget limits of the form; a
value outside them is still accepted and scored as given.

Groups
------
company      Identity and size of the company.
production   Output, capacity, utilization, efficiency.
quality      Defects, rework, satisfaction, returns.
financial    Revenue, costs, margin.
operational  Workforce, machine time, downtime, maintenance.
market       Demand, competition, economy, seasonality.
notes        Free-form notes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mfg_scorer.models.metrics import MetricsInput


@dataclass(frozen=True)
class FieldSpec:
    """Definition of one form field.

    Attributes:
        name: Attribute name on ``MetricsInput`` (snake_case).
        alias: Original camelCase form name.
        kind: ``"text"``, ``"number"`` or ``"choice"``.
        group: Form section, see module docstring.
        label: Display label.
        unit: Display unit suffix, or empty.
        min_value: Lower advisory bound for numbers.
        max_value: Upper advisory bound for numbers.
        step: Widget increment for numbers.
        required: True if an empty value blocks scoring.
        scored: True if the field contributes to the score.
        description: One-line explanation shown as widget help.
    """

    name: str
    alias: str
    kind: str
    group: str
    label: str
    unit: str = ""
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    step: float = 1.0
    required: bool = False
    scored: bool = False
    description: str = ""


# ── Registry ──────────────────────────────────────────────────────────────────
# Order here is the order of the form.

FIELD_REGISTRY: list[FieldSpec] = [

    # ── Company ────────────────────────────────────────────────────────────
    FieldSpec("company_name", "companyName", "text", "company", "Company Name",
              required=True,
              description="Full name of the manufacturing company."),
    FieldSpec("industry_type", "industryType", "choice", "company", "Industry Type",
              required=True,
              description="Industry category that best matches the business."),
    FieldSpec("company_size", "companySize", "choice", "company", "Company Size",
              description="Size class by number of employees."),
    FieldSpec("operating_years", "operatingYears", "number", "company", "Operating Years",
              unit="years", min_value=1, max_value=100,
              description="How long the company has been operating."),

    # ── Production ─────────────────────────────────────────────────────────
    FieldSpec("monthly_output", "monthlyOutput", "number", "production", "Monthly Output",
              unit="units", min_value=0, step=0.01, required=True,
              description="Units successfully produced in one month."),
    FieldSpec("production_capacity", "productionCapacity", "number", "production",
              "Production Capacity",
              unit="units/month", min_value=0, step=0.01, required=True,
              description="Maximum units the plant can produce in one month."),
    FieldSpec("capacity_utilization", "capacityUtilization", "number", "production",
              "Capacity Utilization",
              unit="%", min_value=0, max_value=100, step=0.1, scored=True,
              description="Calculated automatically from output and capacity."),
    FieldSpec("production_efficiency", "productionEfficiency", "number", "production",
              "Production Efficiency",
              unit="%", min_value=0, max_value=100, step=0.1, scored=True,
              description="Actual output relative to standard output."),

    # ── Quality ────────────────────────────────────────────────────────────
    FieldSpec("defect_rate", "defectRate", "number", "quality", "Defect Rate",
              unit="%", min_value=0, max_value=100, step=0.01, scored=True,
              description="Share of produced units that are defective."),
    FieldSpec("rework_rate", "reworkRate", "number", "quality", "Rework Rate",
              unit="%", min_value=0, max_value=100, step=0.01,
              description="Share of produced units that need rework."),
    FieldSpec("customer_satisfaction", "customerSatisfaction", "number", "quality",
              "Customer Satisfaction",
              unit="/10", min_value=0, max_value=10, step=0.1, scored=True,
              description="Average customer satisfaction rating."),
    FieldSpec("return_rate", "returnRate", "number", "quality", "Return Rate",
              unit="%", min_value=0, max_value=100, step=0.01,
              description="Share of sold units returned by customers."),

    # ── Financial ──────────────────────────────────────────────────────────
    FieldSpec("monthly_revenue", "monthlyRevenue", "number", "financial", "Monthly Revenue",
              unit="IDR", min_value=0,
              description="Total sales revenue in one month."),
    FieldSpec("production_cost", "productionCost", "number", "financial", "Production Cost",
              unit="IDR", min_value=0,
              description="Direct production cost in one month."),
    FieldSpec("profit_margin", "profitMargin", "number", "financial", "Profit Margin",
              unit="%", min_value=-100, max_value=100, step=0.01, scored=True,
              description="Profit as a percentage of revenue."),
    FieldSpec("operational_cost", "operationalCost", "number", "financial",
              "Operational Cost",
              unit="IDR", min_value=0,
              description="Overhead cost outside direct production."),

    # ── Operational ────────────────────────────────────────────────────────
    FieldSpec("employee_count", "employeeCount", "number", "operational", "Employee Count",
              unit="people", min_value=1,
              description="Total number of employees."),
    FieldSpec("machine_hours", "machineHours", "number", "operational", "Machine Hours",
              unit="hours/day", min_value=0, step=0.1,
              description="Average machine running hours per day."),
    FieldSpec("downtime_hours", "downtimeHours", "number", "operational", "Downtime Hours",
              unit="hours/month", min_value=0, step=0.1,
              description="Unplanned machine downtime in one month."),
    FieldSpec("maintenance_freq", "maintenanceFreq", "choice", "operational",
              "Maintenance Frequency",
              description="How often scheduled maintenance is performed."),

    # ── Market ─────────────────────────────────────────────────────────────
    FieldSpec("market_demand", "marketDemand", "choice", "market", "Market Demand",
              scored=True,
              description="Demand level for the company's products."),
    FieldSpec("competition_level", "competitionLevel", "choice", "market",
              "Competition Level",
              description="Intensity of competition in the market."),
    FieldSpec("economic_condition", "economicCondition", "choice", "market",
              "Economic Condition",
              description="Current macro-economic climate."),
    FieldSpec("seasonality", "seasonality", "choice", "market", "Seasonality",
              description="Strength of seasonal swings in demand."),

    # ── Notes ──────────────────────────────────────────────────────────────
    FieldSpec("additional_notes", "additionalNotes", "text", "notes", "Additional Notes",
              description="Any other context about the operation."),
]


# ── Query helpers ─────────────────────────────────────────────────────────────

def field_names(group: str | None = None) -> list[str]:
    """Return field names, optionally filtered to a single group."""
    if group is None:
        return [f.name for f in FIELD_REGISTRY]
    return [f.name for f in FIELD_REGISTRY if f.group == group]


def required_field_names() -> list[str]:
    """Fields whose absence blocks scoring, in form order."""
    return [f.name for f in FIELD_REGISTRY if f.required]


def scored_field_names() -> list[str]:
    """Fields that feed the performance score."""
    return [f.name for f in FIELD_REGISTRY if f.scored]


def get_field(name: str) -> FieldSpec:
    """Return the FieldSpec for ``name`` (snake_case name or camelCase alias).

    Raises:
        KeyError: If ``name`` is not in the registry.
    """
    for spec in FIELD_REGISTRY:
        if name in (spec.name, spec.alias):
            return spec
    raise KeyError(f"Field '{name}' not found in FIELD_REGISTRY.")


def field_groups() -> list[str]:
    """Return unique group names in registry order (no duplicates)."""
    seen: set[str] = set()
    result: list[str] = []
    for f in FIELD_REGISTRY:
        if f.group not in seen:
            seen.add(f.group)
            result.append(f.group)
    return result


def out_of_range_fields(metrics: "MetricsInput") -> list[str]:
    """Return names of numeric fields whose value lies outside the advisory bounds."""
    result: list[str] = []
    for spec in FIELD_REGISTRY:
        if spec.kind != "number":
            continue
        value = getattr(metrics, spec.name)
        if value is None:
            continue
        if spec.min_value is not None and value < spec.min_value:
            result.append(spec.name)
        elif spec.max_value is not None and value > spec.max_value:
            result.append(spec.name)
    return result
