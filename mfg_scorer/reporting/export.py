"""
Export helpers for evaluation results.

All functions write to disk and return the written ``Path``.
They accept generic ``list[dict]`` data to stay decoupled from
specific report shapes.

CSV exports are flat (no nested dicts) so they load directly in a
spreadsheet or pandas without any pre-processing step.

``flatten_evaluation_for_export()`` is the main adapter function: it turns
one record and its outcome (result or validation failure) into a single flat
row with every score component as its own column.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from mfg_scorer.models.metrics import MetricsInput
from mfg_scorer.models.prediction import PredictionResult, ValidationFailure
from mfg_scorer.scoring.utilization import format_utilization

EXPORT_COLUMNS: list[str] = [
    "company_name", "industry_type", "status", "score", "band", "category",
    "recommendation", "color_token", "capacity_utilization", "raw_score",
    "sc_utilization", "sc_efficiency", "sc_defect", "sc_satisfaction",
    "sc_profit_margin", "sc_market_demand", "missing_fields",
]


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


def flatten_evaluation_for_export(
    metrics: MetricsInput,
    outcome: PredictionResult | ValidationFailure,
) -> dict:
    """Flatten one evaluation into a single export row.

    Each row contains:
    - ``company_name``, ``industry_type`` (record identity)
    - ``status``: ``"scored"`` or ``"invalid"``
    - ``score``, ``band``, ``category``, ``recommendation``, ``color_token``
    - ``capacity_utilization`` (one-decimal text) and ``raw_score``
    - ``sc_*`` score component adjustments
    - ``missing_fields`` (semicolon-joined, invalid rows only)

    Columns that do not apply to the outcome are empty strings.

    Args:
        metrics: The evaluated record.
        outcome: Result of ``compute_prediction(metrics)``.

    Returns:
        Flat row dict keyed by ``EXPORT_COLUMNS``.
    """
    row: dict = {col: "" for col in EXPORT_COLUMNS}
    row["company_name"] = metrics.company_name
    row["industry_type"] = metrics.industry_type.value if metrics.industry_type else ""
    row["capacity_utilization"] = format_utilization(metrics.capacity_utilization)

    if isinstance(outcome, ValidationFailure):
        row["status"] = "invalid"
        row["missing_fields"] = ";".join(outcome.missing_fields)
        return row

    comps = outcome.components
    row.update(
        {
            "status":           "scored",
            "score":            outcome.score,
            "band":             outcome.band.value,
            "category":         outcome.category,
            "recommendation":   outcome.recommendation,
            "color_token":      outcome.color_token,
            "raw_score":        round(comps.raw_total, 4),
            "sc_utilization":   round(comps.capacity_utilization, 4),
            "sc_efficiency":    round(comps.production_efficiency, 4),
            "sc_defect":        round(comps.defect_rate, 4),
            "sc_satisfaction":  round(comps.customer_satisfaction, 4),
            "sc_profit_margin": round(comps.profit_margin, 4),
            "sc_market_demand": round(comps.market_demand, 4),
        }
    )
    return row
