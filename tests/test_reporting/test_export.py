"""Tests for mfg_scorer.reporting.export."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from mfg_scorer.models.metrics import MetricsInput
from mfg_scorer.reporting.export import (
    EXPORT_COLUMNS,
    export_to_csv,
    export_to_json,
    flatten_evaluation_for_export,
)
from mfg_scorer.scoring.engine import compute_prediction


# ── export_to_csv ─────────────────────────────────────────────────────────────


def test_export_to_csv_basic(tmp_path: Path) -> None:
    """Writes a valid CSV with correct headers and values."""
    records = [
        {"company_name": "Acme", "score": 72, "status": "scored"},
        {"company_name": "Globex", "score": "", "status": "invalid"},
    ]
    out = tmp_path / "test.csv"
    result = export_to_csv(records, out)

    assert result == out
    with out.open(encoding="utf-8") as f:
        reader = list(csv.DictReader(f))
    assert len(reader) == 2
    assert reader[0]["company_name"] == "Acme"
    assert reader[1]["status"] == "invalid"


def test_export_to_csv_custom_fieldnames(tmp_path: Path) -> None:
    """Custom fieldnames control column order; extra keys are ignored."""
    out = tmp_path / "cols.csv"
    export_to_csv([{"a": 1, "b": 2, "c": 3}], out, fieldnames=["c", "a"])

    with out.open(encoding="utf-8") as f:
        header = f.readline().strip()
    assert header == "c,a"


def test_export_to_csv_empty_records(tmp_path: Path) -> None:
    """Empty records list writes an empty file without raising."""
    out = tmp_path / "empty.csv"
    export_to_csv([], out)
    assert out.read_text(encoding="utf-8") == ""


def test_export_to_csv_creates_parent_dirs(tmp_path: Path) -> None:
    """Parent directories are created if they don't exist."""
    out = tmp_path / "nested" / "dir" / "output.csv"
    export_to_csv([{"x": 1}], out)
    assert out.exists()


# ── export_to_json ────────────────────────────────────────────────────────────


def test_export_to_json_list(tmp_path: Path) -> None:
    """A list of rows is written as a pretty-printed JSON array."""
    out = tmp_path / "rows.json"
    export_to_json([{"score": 50}, {"score": 97}], out)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data == [{"score": 50}, {"score": 97}]


def test_export_to_json_non_serialisable_uses_str(tmp_path: Path) -> None:
    """Values JSON can't encode natively fall back to str()."""
    out = tmp_path / "odd.json"
    export_to_json({"path": Path("a/b")}, out)
    assert json.loads(out.read_text(encoding="utf-8"))["path"] == str(Path("a/b"))


# ── flatten_evaluation_for_export ─────────────────────────────────────────────


def test_flatten_scored_row(full_metrics: MetricsInput) -> None:
    """Scored rows carry score, band texts and every component."""
    row = flatten_evaluation_for_export(full_metrics, compute_prediction(full_metrics))

    assert list(row) == EXPORT_COLUMNS
    assert row["status"] == "scored"
    assert row["score"] == 97
    assert row["band"] == "very_good"
    assert row["category"] == "Very Good Performance"
    assert row["color_token"] == "green"
    assert row["industry_type"] == "electronics"
    assert row["capacity_utilization"] == "80.0"
    assert row["raw_score"] == 97.0
    assert row["sc_defect"] == -4.0
    assert row["sc_market_demand"] == 5.0
    assert row["missing_fields"] == ""


def test_flatten_invalid_row() -> None:
    """Invalid rows list missing fields and leave score columns blank."""
    metrics = MetricsInput(company_name="Acme")
    row = flatten_evaluation_for_export(metrics, compute_prediction(metrics))

    assert row["status"] == "invalid"
    assert row["missing_fields"] == "industry_type;monthly_output;production_capacity"
    assert row["score"] == ""
    assert row["industry_type"] == ""
    assert row["capacity_utilization"] == ""


def test_flatten_round_trips_through_csv(tmp_path: Path, full_metrics: MetricsInput) -> None:
    """A flattened row written to CSV reads back with the same columns."""
    row = flatten_evaluation_for_export(full_metrics, compute_prediction(full_metrics))
    out = tmp_path / "evals.csv"
    export_to_csv([row], out, fieldnames=EXPORT_COLUMNS)

    with out.open(encoding="utf-8") as f:
        reader = csv.DictReader(f)
        assert reader.fieldnames == EXPORT_COLUMNS
        first = next(reader)
    assert first["score"] == "97"
    assert first["recommendation"].startswith("Maintain high operational standards")
