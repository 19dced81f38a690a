"""
mfg_scorer.reporting — Formatting and export of evaluation results.

Modules:
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — CSV/JSON flat-file export helpers.
"""
