"""
Tests for dashboard/app.py, driven through Streamlit's AppTest harness.

Skipped when the ``dashboard`` extra (streamlit, pandas) is not installed.
"""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("pandas")
testing = pytest.importorskip("streamlit.testing.v1")

APP_PATH = Path(__file__).resolve().parents[2] / "dashboard" / "app.py"


@pytest.fixture
def app():
    at = testing.AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _enter(at, name: str, value: float) -> None:
    at.number_input(key=f"field_{name}").set_value(value).run()


class TestDerivedUtilization:
    def test_widget_shows_derived_value(self, app):
        _enter(app, "monthly_output", 5000.0)
        _enter(app, "production_capacity", 10000.0)
        assert app.session_state["field_capacity_utilization"] == 50.0

    def test_output_above_capacity_kept_on_screen(self, app):
        _enter(app, "monthly_output", 15000.0)
        _enter(app, "production_capacity", 10000.0)
        assert app.session_state["form_session"].metrics.capacity_utilization == 150.0
        assert app.session_state["field_capacity_utilization"] == 150.0
        assert app.number_input(key="field_capacity_utilization").value == 150.0
        assert any("Capacity Utilization" in w.value for w in app.warning)

    def test_in_range_record_has_no_warning(self, app):
        _enter(app, "monthly_output", 5000.0)
        _enter(app, "production_capacity", 10000.0)
        assert not app.warning
