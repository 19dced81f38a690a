"""
Manufacturing Performance Scorer — Streamlit Form
=================================================

Optional local UI for entering one company's metrics and scoring them.
Everything here is presentation: state lives in an immutable
``FormSession`` kept in ``st.session_state`` and every widget edit goes
through ``FormSession.change()``, which re-derives capacity utilization
when monthly output or production capacity changes.

Why optional?
-------------
- Streamlit adds ~100 MB of dependencies not needed for headless runs.
- The score engine and CLI work without it.
- Every evaluation shown here is also available via ``mfg-scorer score``.

Layout
------
  Sidebar   — Form guide (quick start, score bands, per-field help).
  Main      — Form sections (company, production, quality, financial,
              operational, market, notes), Predict / Reset buttons,
              result card and score breakdown.

Usage
-----
    pip install -e ".[dashboard]"
    streamlit run dashboard/app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# ── Ensure project root is importable ────────────────────────────────────────
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import streamlit as st

# ── Must be the first Streamlit call ─────────────────────────────────────────
st.set_page_config(
    page_title="Manufacturing Performance Scorer",
    layout="centered",
    initial_sidebar_state="collapsed",
)

import pandas as pd

from mfg_scorer.forms.session import FormSession
from mfg_scorer.guide import render_bands, render_field
from mfg_scorer.guide.content import QUICK_START
from mfg_scorer.models.fields import (
    FIELD_REGISTRY,
    FieldSpec,
    field_groups,
    get_field,
    out_of_range_fields,
)
from mfg_scorer.models.metrics import MetricsInput
from mfg_scorer.taxonomy.metric_taxonomy import (
    CompanySize,
    EconomicCondition,
    IndustryType,
    MaintenanceFrequency,
    MarketLevel,
    Seasonality,
)

_GROUP_TITLES: dict[str, str] = {
    "company":     "Company Information",
    "production":  "Production Metrics",
    "quality":     "Quality Metrics",
    "financial":   "Financial Metrics",
    "operational": "Operational Metrics",
    "market":      "External Factors",
    "notes":       "Additional Notes",
}

_CHOICES: dict[str, type] = {
    "industry_type":      IndustryType,
    "company_size":       CompanySize,
    "maintenance_freq":   MaintenanceFrequency,
    "market_demand":      MarketLevel,
    "competition_level":  MarketLevel,
    "economic_condition": EconomicCondition,
    "seasonality":        Seasonality,
}

# Streamlit has no gradient cards; one solid color per band token.
_CARD_COLORS: dict[str, str] = {
    "green":         "#16a34a",
    "yellow-orange": "#f59e0b",
    "orange-red":    "#f97316",
    "red":           "#dc2626",
}

_SESSION_KEY = "form_session"


# ── Session helpers ───────────────────────────────────────────────────────────

def _session() -> FormSession:
    if _SESSION_KEY not in st.session_state:
        st.session_state[_SESSION_KEY] = FormSession.new()
    return st.session_state[_SESSION_KEY]


def _widget_key(name: str) -> str:
    return f"field_{name}"


def _widget_value(metrics: MetricsInput, name: str):
    value = getattr(metrics, name)
    if hasattr(value, "value"):
        return value.value
    return value


def _on_change(name: str) -> None:
    """Push one widget edit through the session and sync utilization back."""
    session = _session().change(name, st.session_state[_widget_key(name)])
    st.session_state[_SESSION_KEY] = session
    if name in ("monthly_output", "production_capacity"):
        st.session_state[_widget_key("capacity_utilization")] = (
            session.metrics.capacity_utilization
        )


def _on_submit() -> None:
    st.session_state[_SESSION_KEY] = _session().submit()


def _on_reset() -> None:
    fresh = FormSession.new()
    st.session_state[_SESSION_KEY] = fresh
    for spec in FIELD_REGISTRY:
        st.session_state[_widget_key(spec.name)] = _widget_value(fresh.metrics, spec.name)


# ── Widgets ───────────────────────────────────────────────────────────────────

def _label(spec: FieldSpec) -> str:
    label = spec.label + (" *" if spec.required else "")
    return f"{label} ({spec.unit})" if spec.unit else label


def _bounds_hint(spec: FieldSpec) -> str:
    if spec.min_value is not None and spec.max_value is not None:
        return f"{spec.min_value:g} to {spec.max_value:g}"
    if spec.min_value is not None:
        return f"at least {spec.min_value:g}"
    return "0"


def _render_widget(spec: FieldSpec, metrics: MetricsInput) -> None:
    key = _widget_key(spec.name)
    if key not in st.session_state:
        st.session_state[key] = _widget_value(metrics, spec.name)
    common = dict(key=key, on_change=_on_change, args=(spec.name,), help=spec.description)

    if spec.kind == "number":
        # No min/max: bounds are advisory and derived utilization can exceed 100.
        st.number_input(
            _label(spec),
            step=float(spec.step),
            placeholder=_bounds_hint(spec),
            **common,
        )
    elif spec.kind == "choice":
        options = [None] + [e.value for e in _CHOICES[spec.name]]
        st.selectbox(
            _label(spec),
            options=options,
            format_func=lambda v: "Select..." if v is None else v.replace("_", " ").title(),
            **common,
        )
    elif spec.name == "additional_notes":
        st.text_area(_label(spec), placeholder="Optional context...", **common)
    else:
        st.text_input(_label(spec), **common)


# ── Sidebar: guide ────────────────────────────────────────────────────────────

with st.sidebar:
    st.title("Form Guide")
    st.caption("Fields marked * are required.")
    for i, (title, desc) in enumerate(QUICK_START, start=1):
        st.markdown(f"**{i}. {title}** — {desc}")
    st.divider()
    st.text(render_bands())
    st.divider()
    help_field = st.selectbox(
        "Field help",
        options=[spec.name for spec in FIELD_REGISTRY],
        format_func=lambda n: get_field(n).label,
    )
    st.text(render_field(help_field))


# ── Form ──────────────────────────────────────────────────────────────────────

st.title("Manufacturing Performance Prediction")
st.caption("Heuristic performance score (0-100) from manufacturing operation metrics.")

session = _session()

for group in field_groups():
    st.subheader(_GROUP_TITLES.get(group, group.title()))
    specs = [s for s in FIELD_REGISTRY if s.group == group]
    cols = st.columns(2) if group != "notes" else [st.container()]
    for i, spec in enumerate(specs):
        with cols[i % len(cols)]:
            _render_widget(spec, session.metrics)

col_submit, col_reset = st.columns(2)
with col_submit:
    st.button("Predict Performance", type="primary", on_click=_on_submit, width="stretch")
with col_reset:
    st.button("Reset Form", on_click=_on_reset, width="stretch")


# ── Result ────────────────────────────────────────────────────────────────────

session = _session()

out_of_range = out_of_range_fields(session.metrics)
if out_of_range:
    names = ", ".join(get_field(n).label for n in out_of_range)
    st.warning(f"Outside the usual range (scored as entered): {names}")

if session.failure is not None:
    missing = ", ".join(get_field(n).label for n in session.failure.missing_fields)
    st.error(f"{session.failure.message}\n\nMissing: {missing}")

if session.result is not None:
    result = session.result
    color = _CARD_COLORS.get(result.color_token, "#334155")
    st.markdown(
        f"""
        <div style="background:{color};color:#fff;padding:24px;border-radius:12px;
                    text-align:center;margin-top:16px">
          <h3 style="margin:0 0 12px 0;color:#fff">Performance Prediction</h3>
          <div style="font-size:40px;font-weight:700">{result.score}/100</div>
          <p style="font-size:20px;margin:8px 0">{result.category}</p>
          <p style="font-size:16px;margin:0">{result.recommendation}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    st.subheader("Score breakdown")
    comps = result.components
    rows = [{"Factor": "Base score", "Adjustment": comps.base}]
    rows += [
        {"Factor": get_field(name).label, "Adjustment": round(value, 2)}
        for name, value in comps.adjustments().items()
    ]
    rows.append({"Factor": "Raw total", "Adjustment": round(comps.raw_total, 2)})
    st.dataframe(pd.DataFrame(rows), width="stretch", hide_index=True)
