"""
File import for metrics records (batch scoring).

Formats (detected by extension):
  .json — A single object or an array of objects.  Keys may be the camelCase
          form names (``companyName``, ``monthlyOutput``) or snake_case
          attribute names (``company_name``, ``monthly_output``).
  .csv  — Header row with the same key names; one record per row.
          Empty cells are absent values.

Parsing follows the form's rules: malformed numbers become absent values,
blank choices are absent, and unknown choice values are errors.  Missing
required fields are NOT load errors; they surface as a
``ValidationFailure`` when the record is scored.

Capacity utilization is re-derived on load whenever capacity > 0.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mfg_scorer.forms.session import rederive_utilization
from mfg_scorer.models.fields import get_field
from mfg_scorer.models.metrics import MetricsInput

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = frozenset({".json", ".csv"})


def load_metrics_file(path: Path) -> list[MetricsInput]:
    """Load metrics records from a JSON or CSV file.

    All records are validated before any are returned.  If **any** record
    fails, a single :class:`ValueError` is raised listing the first 10
    failures.

    Args:
        path: Path to the file (must exist).

    Returns:
        List of :class:`MetricsInput`, utilization derived.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On unsupported suffix, malformed file, unknown columns or
            any invalid record.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Metrics file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        raw_records = _read_json(path)
    elif suffix == ".csv":
        raw_records = _read_csv(path)
    else:
        raise ValueError(
            f"Unsupported file format '{suffix}'. Use one of {sorted(SUPPORTED_SUFFIXES)}."
        )

    if not raw_records:
        logger.warning("Metrics file contains no records: %s", path)
        return []

    records: list[MetricsInput] = []
    errors: list[tuple[int, str]] = []

    for i, raw in enumerate(raw_records, start=1):
        try:
            records.append(_to_metrics(raw))
        except (ValueError, ValidationError) as exc:
            errors.append((i, str(exc)))

    if errors:
        max_shown = 10
        detail = "\n".join(f"  Record {n}: {msg}" for n, msg in errors[:max_shown])
        suffix_msg = f"\n  … and {len(errors) - max_shown} more" if len(errors) > max_shown else ""
        raise ValueError(
            f"{len(errors)} record(s) failed validation in {path.name}:\n{detail}{suffix_msg}"
        )

    logger.info("Loaded %d metrics record(s) from %s", len(records), path.name)
    return records


# ── Private helpers ────────────────────────────────────────────────────────────

def _read_json(path: Path) -> list[Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"JSON parse error in {path.name}: {exc}") from exc
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise ValueError(f"JSON metrics file must contain an object or an array: {path}")
    return data


def _read_csv(path: Path) -> list[Any]:
    with open(path, encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None:
            raise ValueError(f"CSV file is empty or has no header row: {path}")
        unknown = []
        for col in reader.fieldnames:
            try:
                get_field(col.strip())
            except KeyError:
                unknown.append(col)
        if unknown:
            raise ValueError(f"CSV has unknown columns: {sorted(unknown)}")
        # DictReader files surplus cells under the key None; keep it for _to_metrics.
        return [
            {(k.strip() if k is not None else None): v for k, v in row.items()}
            for row in reader
        ]


def _to_metrics(raw: Any) -> MetricsInput:
    """Convert one raw record to a :class:`MetricsInput` with utilization derived."""
    if not isinstance(raw, dict):
        raise ValueError(f"Expected an object, got {type(raw).__name__}.")
    if None in raw:
        extra = raw[None]
        raise ValueError(f"Row has {len(extra)} more cell(s) than the header: {extra}")
    return rederive_utilization(MetricsInput.model_validate(raw))
