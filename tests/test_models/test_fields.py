"""
Tests for mfg_scorer/models/fields.py.

What we test
------------
1. Registry completeness — one entry per MetricsInput field, in form order.
2. Required / scored sets match the scoring rules.
3. get_field() resolves snake_case names and camelCase aliases.
4. out_of_range_fields() flags values outside advisory bounds only.
"""

from __future__ import annotations

import pytest

from mfg_scorer.models.fields import (
    FIELD_REGISTRY,
    field_groups,
    field_names,
    get_field,
    out_of_range_fields,
    required_field_names,
    scored_field_names,
)
from mfg_scorer.models.metrics import CHOICE_FIELDS, NUMERIC_FIELDS, MetricsInput


class TestRegistry:
    def test_matches_model_fields(self):
        assert field_names() == list(MetricsInput.model_fields)

    def test_names_unique(self):
        names = [f.name for f in FIELD_REGISTRY]
        aliases = [f.alias for f in FIELD_REGISTRY]
        assert len(names) == len(set(names))
        assert len(aliases) == len(set(aliases))

    def test_alias_matches_model_alias(self):
        for spec in FIELD_REGISTRY:
            assert MetricsInput.model_fields[spec.name].alias == spec.alias

    def test_kinds_match_model(self):
        for spec in FIELD_REGISTRY:
            if spec.name in NUMERIC_FIELDS:
                assert spec.kind == "number"
            elif spec.name in CHOICE_FIELDS:
                assert spec.kind == "choice"
            else:
                assert spec.kind == "text"

    def test_every_field_has_label_and_description(self):
        for spec in FIELD_REGISTRY:
            assert spec.label
            assert spec.description

    def test_group_order(self):
        assert field_groups() == [
            "company", "production", "quality", "financial",
            "operational", "market", "notes",
        ]

    def test_field_names_by_group(self):
        assert field_names("quality") == [
            "defect_rate", "rework_rate", "customer_satisfaction", "return_rate",
        ]


class TestRequiredAndScored:
    def test_required(self):
        assert required_field_names() == [
            "company_name", "industry_type", "monthly_output", "production_capacity",
        ]

    def test_scored(self):
        assert scored_field_names() == [
            "capacity_utilization",
            "production_efficiency",
            "defect_rate",
            "customer_satisfaction",
            "profit_margin",
            "market_demand",
        ]

    def test_required_fields_are_not_scored(self):
        assert not set(required_field_names()) & set(scored_field_names())


class TestGetField:
    def test_by_name(self):
        assert get_field("defect_rate").alias == "defectRate"

    def test_by_alias(self):
        assert get_field("defectRate").name == "defect_rate"

    def test_unknown_raises(self):
        with pytest.raises(KeyError, match="not found"):
            get_field("shoe_size")


class TestOutOfRange:
    def test_in_range_record(self, full_metrics):
        assert out_of_range_fields(full_metrics) == []

    def test_flags_above_and_below(self):
        m = MetricsInput(customer_satisfaction=11, profit_margin=-150, defect_rate=100)
        assert out_of_range_fields(m) == ["customer_satisfaction", "profit_margin"]

    def test_absent_values_not_flagged(self):
        assert out_of_range_fields(MetricsInput()) == []

    def test_unbounded_above(self):
        assert out_of_range_fields(MetricsInput(monthly_revenue=1e15)) == []

    def test_employee_count_minimum(self):
        assert out_of_range_fields(MetricsInput(employee_count=0)) == ["employee_count"]
