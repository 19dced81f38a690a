"""
Tests for mfg_scorer/forms/session.py.

What we test
------------
apply_change():
  - Returns a new record; the old one is untouched.
  - Output / capacity changes re-derive capacity utilization.
  - Capacity <= 0 leaves the previous utilization in place.
  - A manual utilization entry survives edits to other fields.
  - camelCase form names are accepted; unknown fields raise KeyError.

FormSession:
  - submit() yields a result or a failure.
  - A blocked submit keeps the last result; a successful one clears the failure.
  - Re-submitting replaces the previous result.
  - reset() clears every field and the result.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mfg_scorer.forms.session import FormSession, apply_change, rederive_utilization
from mfg_scorer.models.metrics import MetricsInput


# ── apply_change ──────────────────────────────────────────────────────────────

class TestApplyChange:
    def test_returns_new_record(self):
        before = MetricsInput()
        after = apply_change(before, "company_name", "Acme")
        assert after.company_name == "Acme"
        assert before.company_name == ""

    def test_text_value_parsed(self):
        m = apply_change(MetricsInput(), "defect_rate", "2.5")
        assert m.defect_rate == 2.5

    def test_camel_case_name(self):
        m = apply_change(MetricsInput(), "monthlyOutput", "500")
        assert m.monthly_output == 500.0

    def test_unknown_field(self):
        with pytest.raises(KeyError):
            apply_change(MetricsInput(), "shoeSize", "42")

    def test_invalid_choice(self):
        with pytest.raises(ValidationError):
            apply_change(MetricsInput(), "industry_type", "mining")

    def test_output_then_capacity_derives(self):
        m = apply_change(MetricsInput(), "monthly_output", "5000")
        assert m.capacity_utilization is None
        m = apply_change(m, "production_capacity", "10000")
        assert m.capacity_utilization == 50.0

    def test_output_change_rederives(self):
        m = apply_change(MetricsInput(production_capacity=1000), "monthly_output", "250")
        assert m.capacity_utilization == 25.0
        m = apply_change(m, "monthly_output", "999")
        assert m.capacity_utilization == 99.9

    def test_zero_capacity_keeps_previous_value(self):
        m = MetricsInput(monthly_output=500, production_capacity=1000, capacity_utilization=50.0)
        m = apply_change(m, "production_capacity", "0")
        assert m.production_capacity == 0.0
        assert m.capacity_utilization == 50.0

    def test_manual_utilization_survives_other_edits(self):
        m = apply_change(MetricsInput(), "capacity_utilization", "72.5")
        m = apply_change(m, "defect_rate", "1")
        m = apply_change(m, "company_name", "Acme")
        assert m.capacity_utilization == 72.5

    def test_manual_utilization_overwritten_by_capacity_change(self):
        m = apply_change(MetricsInput(monthly_output=300), "capacity_utilization", "72.5")
        m = apply_change(m, "production_capacity", "600")
        assert m.capacity_utilization == 50.0

    def test_huge_output_derives(self):
        m = apply_change(MetricsInput(production_capacity=1), "monthly_output", "1e27")
        assert m.capacity_utilization == pytest.approx(1e29)

    def test_clearing_a_value(self):
        m = apply_change(MetricsInput(defect_rate=3), "defect_rate", "")
        assert m.defect_rate is None


class TestRederiveUtilization:
    def test_derives(self):
        m = rederive_utilization(MetricsInput(monthly_output=1, production_capacity=3))
        assert m.capacity_utilization == 33.3

    def test_unchanged_without_capacity(self):
        m = MetricsInput(capacity_utilization=40)
        assert rederive_utilization(m) is m


# ── FormSession ───────────────────────────────────────────────────────────────

def _filled_session() -> FormSession:
    session = FormSession.new()
    for field, value in [
        ("companyName", "Acme"),
        ("industryType", "machinery"),
        ("monthlyOutput", "8000"),
        ("productionCapacity", "10000"),
    ]:
        session = session.change(field, value)
    return session


class TestFormSession:
    def test_new_is_empty(self):
        session = FormSession.new()
        assert session.metrics == MetricsInput()
        assert session.result is None
        assert session.failure is None

    def test_change_derives_utilization(self):
        assert _filled_session().metrics.capacity_utilization == 80.0

    def test_submit_success(self):
        session = _filled_session().submit()
        # 50 + (80 - 50) * 0.3 = 59
        assert session.result.score == 59
        assert session.failure is None

    def test_submit_blocked(self):
        session = FormSession.new().change("companyName", "Acme").submit()
        assert session.result is None
        assert session.failure.missing_fields == (
            "industry_type", "monthly_output", "production_capacity",
        )

    def test_resubmit_replaces_result(self):
        session = _filled_session().submit()
        session = session.change("defectRate", "5").submit()
        assert session.result.score == 49

    def test_blocked_submit_keeps_previous_result(self):
        scored = _filled_session().submit()
        blocked = scored.change("companyName", "").submit()
        assert blocked.result == scored.result
        assert blocked.failure.missing_fields == ("company_name",)

    def test_success_clears_previous_failure(self):
        session = _filled_session().change("companyName", "").submit()
        session = session.change("companyName", "Acme").submit()
        assert session.failure is None
        assert session.result.score == 59

    def test_change_keeps_last_result_on_screen(self):
        session = _filled_session().submit()
        edited = session.change("defectRate", "5")
        assert edited.result == session.result

    def test_reset(self):
        session = _filled_session().submit().reset()
        assert session == FormSession.new()

    def test_session_is_immutable(self):
        session = FormSession.new()
        session.change("companyName", "Acme")
        assert session.metrics.company_name == ""
