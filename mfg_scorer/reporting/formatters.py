"""
ASCII terminal formatters for CLI output.

All formatters accept result models and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Band markers
------------
Terminals cannot show the result card's color, so each band gets a short
text marker instead::

  [GREEN]  Very Good Performance
  [YELLOW] Good Performance
  [ORANGE] Moderate Performance
  [RED]    Low Performance
"""

from __future__ import annotations

from mfg_scorer.models.fields import get_field
from mfg_scorer.models.metrics import MetricsInput
from mfg_scorer.models.prediction import PredictionResult, ScoreComponents, ValidationFailure
from mfg_scorer.scoring.utilization import format_utilization

_COLOR_MARKERS: dict[str, str] = {
    "green":         "[GREEN]",
    "yellow-orange": "[YELLOW]",
    "orange-red":    "[ORANGE]",
    "red":           "[RED]",
}


def format_band_marker(color_token: str) -> str:
    """Return the text marker for a color token (``"[?]"`` if unknown)."""
    return _COLOR_MARKERS.get(color_token, "[?]")


# ── Single evaluation ─────────────────────────────────────────────────────────


def format_breakdown(components: ScoreComponents) -> str:
    """Format the score components as an aligned table.

    Example::

        Factor                      Adjustment
        --------------------------------------
        Base score                      +50.00
        Production Efficiency           +12.00
        Defect Rate                      -4.00
        --------------------------------------
        Raw total                       +58.00
    """
    rule = "    " + "-" * 38
    lines = [f"    {'Factor':<26}  {'Adjustment':>10}", rule]
    lines.append(f"    {'Base score':<26}  {components.base:>+10.2f}")
    for name, value in components.adjustments().items():
        lines.append(f"    {get_field(name).label:<26}  {value:>+10.2f}")
    lines.append(rule)
    lines.append(f"    {'Raw total':<26}  {components.raw_total:>+10.2f}")
    return "\n".join(lines)


def format_prediction(metrics: MetricsInput, result: PredictionResult) -> str:
    """Format one successful evaluation with its breakdown."""
    industry = metrics.industry_type.value if metrics.industry_type else "-"
    utilization = format_utilization(metrics.capacity_utilization) or "-"

    lines: list[str] = []
    lines.append("")
    lines.append("=== Performance Prediction ===")
    lines.append(f"  Company:              {metrics.company_name}")
    lines.append(f"  Industry:             {industry}")
    lines.append(f"  Capacity utilization: {utilization}%")
    lines.append("")
    lines.append(f"  Score:    {result.score}/100")
    lines.append(f"  Category: {format_band_marker(result.color_token)} {result.category}")
    lines.append(f"  Advice:   {result.recommendation}")
    lines.append("")
    lines.append("  Score breakdown")
    lines.append(format_breakdown(result.components))
    return "\n".join(lines)


def format_validation_failure(failure: ValidationFailure) -> str:
    """Format a blocked evaluation, one missing field per line."""
    lines = [f"  {failure.message}", "  Missing:"]
    for name in failure.missing_fields:
        lines.append(f"    - {get_field(name).label} ({get_field(name).alias})")
    return "\n".join(lines)


# ── Batch ─────────────────────────────────────────────────────────────────────


def format_batch_table(
    evaluations: list[tuple[MetricsInput, PredictionResult | ValidationFailure]],
) -> str:
    """Format a batch of evaluations as one row per record.

    Invalid records show ``--`` for the score and list their missing fields.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Batch Evaluation ===")
    if not evaluations:
        lines.append("  (no records)")
        return "\n".join(lines)

    header = f"    {'#':>3}  {'Company':<30}  {'Score':>5}  {'Category':<24}"
    lines.append(header)
    lines.append("    " + "-" * (len(header) - 4))

    scored = 0
    for i, (metrics, outcome) in enumerate(evaluations, start=1):
        name = (metrics.company_name or "(unnamed)")[:30]
        if isinstance(outcome, ValidationFailure):
            missing = ", ".join(outcome.missing_fields)
            lines.append(f"    {i:>3}  {name:<30}  {'--':>5}  missing: {missing}")
            continue
        scored += 1
        lines.append(f"    {i:>3}  {name:<30}  {outcome.score:>5}  {outcome.category:<24}")

    lines.append("")
    lines.append(f"  Scored: {scored} / {len(evaluations)}")
    return "\n".join(lines)
