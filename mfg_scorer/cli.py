"""
Manufacturing Performance Scorer — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (score a record, score a file, render the guide, ...).
  5. Report result to stdout.

Install and run::

    pip install -e .
    mfg-scorer --help
    mfg-scorer validate-config
    mfg-scorer score --company-name Acme --industry automotive \\
        --monthly-output 5000 --capacity 10000 --efficiency 85
    mfg-scorer score-file --file data/inputs/plants.csv
    mfg-scorer utilization --output 5000 --capacity 10000
    mfg-scorer guide --field defectRate

Exit codes: 0 success, 1 error (bad config, bad file, bad option value),
2 record blocked by missing required fields.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="mfg-scorer",
    help="Manufacturing performance scorer — heuristic 0-100 score from plant metrics.",
    add_completion=False,
)

EXIT_MISSING_REQUIRED = 2


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from mfg_scorer.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from mfg_scorer.utils.logging import configure_logging
    configure_logging(config.logging, debug=config.debug)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Reports dir:   {config.output.reports_dir}")
    typer.echo(f"  Export format: {config.output.export_format}")
    typer.echo(f"  Log level:     {config.logging.level}")
    typer.echo(f"  Log file:      {config.logging.log_file or '(none)'}")
    typer.echo(f"  Debug mode:    {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("score")
def score(
    company_name: str = typer.Option("", "--company-name", help="Company name (required)."),
    industry: str = typer.Option(
        "", "--industry",
        help="Industry type (required): automotive, electronics, textile, food, "
             "chemical, machinery, pharmaceutical, other.",
    ),
    monthly_output: str = typer.Option("", "--monthly-output", help="Units per month (required)."),
    capacity: str = typer.Option("", "--capacity", help="Capacity, units per month (required)."),
    utilization: str = typer.Option(
        "", "--utilization",
        help="Capacity utilization %. Ignored when output and capacity derive it.",
    ),
    efficiency: str = typer.Option("", "--efficiency", help="Production efficiency % (0-100)."),
    defect_rate: str = typer.Option("", "--defect-rate", help="Defect rate % (0-100)."),
    satisfaction: str = typer.Option("", "--satisfaction", help="Customer satisfaction (0-10)."),
    profit_margin: str = typer.Option("", "--profit-margin", help="Profit margin % (-100-100)."),
    market_demand: str = typer.Option(
        "", "--market-demand", help="very_low, low, moderate, high, very_high.",
    ),
    company_size: str = typer.Option("", "--company-size", help="small, medium, large."),
    notes: str = typer.Option("", "--notes", help="Additional notes (not scored)."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    export_path: Optional[str] = typer.Option(
        None, "--export", help="Also write the evaluation to this .csv or .json file.",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Score a single metrics record given on the command line.

    Values are entered as they would be on the form: empty or malformed
    numbers are treated as not provided.  Utilization is derived from
    output and capacity whenever capacity > 0.
    """
    from pydantic import ValidationError

    from mfg_scorer.forms.session import FormSession
    from mfg_scorer.reporting.formatters import format_prediction, format_validation_failure

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    edits = [
        ("company_name", company_name),
        ("industry_type", industry),
        ("company_size", company_size),
        ("capacity_utilization", utilization),
        ("monthly_output", monthly_output),
        ("production_capacity", capacity),
        ("production_efficiency", efficiency),
        ("defect_rate", defect_rate),
        ("customer_satisfaction", satisfaction),
        ("profit_margin", profit_margin),
        ("market_demand", market_demand),
        ("additional_notes", notes),
    ]
    session = FormSession.new()
    try:
        for field, value in edits:
            session = session.change(field, value)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Invalid value: {exc}", err=True)
        raise typer.Exit(code=1)

    session = session.submit()
    outcome = session.failure or session.result

    if export_path:
        _export_evaluations([(session.metrics, outcome)], Path(export_path))

    if session.failure is not None:
        if as_json:
            typer.echo(session.failure.model_dump_json(indent=2))
        else:
            typer.echo("[BLOCKED] Evaluation not run.", err=True)
            typer.echo(format_validation_failure(session.failure), err=True)
        raise typer.Exit(code=EXIT_MISSING_REQUIRED)

    if as_json:
        typer.echo(session.result.model_dump_json(indent=2))
    else:
        typer.echo(format_prediction(session.metrics, session.result))


@app.command("score-file")
def score_file(
    input_file: str = typer.Option(
        ..., "--file", "-f",
        help="Path to a .json or .csv file of metrics records.",
    ),
    out_dir: Optional[str] = typer.Option(
        None, "--out-dir",
        help="Directory for the evaluation report. Defaults to config.output.reports_dir.",
    ),
    export_format: Optional[str] = typer.Option(
        None, "--format",
        help="Report format: csv or json. Defaults to config.output.export_format.",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Score every record in a JSON or CSV file and write an evaluation report.

    Records with missing required fields are reported as invalid rows; they
    do not stop the batch.
    """
    from mfg_scorer.ingestion.metrics_file import load_metrics_file
    from mfg_scorer.reporting.formatters import format_batch_table
    from mfg_scorer.scoring.engine import compute_prediction

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    fmt = (export_format or config.output.export_format).lower()
    if fmt not in ("csv", "json"):
        typer.echo(f"[ERROR] Unsupported report format '{fmt}'. Use csv or json.", err=True)
        raise typer.Exit(code=1)

    input_path = Path(input_file)
    typer.echo(f"Loading metrics from: {input_path}")
    try:
        records = load_metrics_file(input_path)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    evaluations = [(m, compute_prediction(m)) for m in records]
    typer.echo(format_batch_table(evaluations))

    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    report_dir = Path(out_dir or config.output.reports_dir)
    report_path = report_dir / f"evaluations_{input_path.stem}_{stamp}.{fmt}"
    _export_evaluations(evaluations, report_path)
    typer.echo("")
    typer.echo(f"[OK] Report written: {report_path}")


@app.command("utilization")
def utilization(
    output: str = typer.Option(..., "--output", help="Monthly output (units)."),
    capacity: str = typer.Option(..., "--capacity", help="Production capacity (units/month)."),
) -> None:
    """Print capacity utilization derived from output and capacity.

    When capacity is not positive, utilization is left unset and reported
    as such.
    """
    from mfg_scorer.scoring.utilization import derive_utilization, format_utilization

    value = derive_utilization(output, capacity)
    if value is None:
        typer.echo("Capacity utilization: (unset; capacity must be > 0)")
        return
    typer.echo(f"Capacity utilization: {format_utilization(value)}%")


@app.command("guide")
def guide(
    field: Optional[str] = typer.Option(
        None, "--field",
        help="Show guidance for one field only (e.g. defectRate or defect_rate).",
    ),
) -> None:
    """Print the form filling guide."""
    from mfg_scorer.guide import render_guide

    try:
        typer.echo(render_guide(field))
    except KeyError as exc:
        typer.echo(f"[ERROR] {exc.args[0]}", err=True)
        raise typer.Exit(code=1)


# ── Export helper ─────────────────────────────────────────────────────────────

def _export_evaluations(evaluations, path: Path) -> Path:
    """Write evaluations to ``path``; format chosen by its suffix (.json or CSV)."""
    from mfg_scorer.reporting.export import (
        EXPORT_COLUMNS,
        export_to_csv,
        export_to_json,
        flatten_evaluation_for_export,
    )

    rows = [flatten_evaluation_for_export(m, outcome) for m, outcome in evaluations]
    if path.suffix.lower() == ".json":
        return export_to_json(rows, path)
    return export_to_csv(rows, path, fieldnames=EXPORT_COLUMNS)


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
