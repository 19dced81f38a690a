"""
Shared pytest fixtures for the manufacturing performance scorer test suite.

Provides:
  - ``required_only``: a record with just the four required fields.
  - ``full_metrics``:  a record with every field filled in.
  - ``test_config_file``: a TOML config writing nothing outside ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from mfg_scorer.models.metrics import MetricsInput
from mfg_scorer.taxonomy.metric_taxonomy import IndustryType, MarketLevel


@pytest.fixture
def required_only() -> MetricsInput:
    """A scorable ``MetricsInput`` with every optional field absent."""
    return MetricsInput(
        company_name="Acme",
        industry_type=IndustryType.AUTOMOTIVE,
        monthly_output=1000,
        production_capacity=2000,
    )


@pytest.fixture
def full_metrics() -> MetricsInput:
    """A ``MetricsInput`` with every field set, as the form would submit it.

    Score: 50 + (80-50)*0.3 + (85-50)*0.4 - 2*2 + (8-5)*5 + 16*0.5 + 5
         = 50 + 9 + 14 - 4 + 15 + 8 + 5 = 97.
    """
    return MetricsInput.model_validate(
        {
            "companyName": "PT Industri Manufaktur Indonesia",
            "industryType": "electronics",
            "companySize": "medium",
            "operatingYears": "9",
            "monthlyOutput": "8000",
            "productionCapacity": "10000",
            "capacityUtilization": "80.0",
            "productionEfficiency": "85",
            "defectRate": "2",
            "reworkRate": "3",
            "customerSatisfaction": "8",
            "returnRate": "1.5",
            "monthlyRevenue": "500000000",
            "productionCost": "350000000",
            "profitMargin": "16",
            "operationalCost": "50000000",
            "employeeCount": "120",
            "machineHours": "16",
            "downtimeHours": "45",
            "maintenanceFreq": "weekly",
            "marketDemand": MarketLevel.HIGH.value,
            "competitionLevel": "moderate",
            "economicCondition": "stable",
            "seasonality": "low",
            "additionalNotes": "Second shift added in Q2.",
        }
    )


@pytest.fixture
def test_config_file(tmp_path: Path) -> Path:
    """A config file with reports under ``tmp_path`` and no log file."""
    reports_dir = (tmp_path / "reports").as_posix()
    path = tmp_path / "config" / "default.toml"
    path.parent.mkdir(parents=True)
    path.write_text(
        "[output]\n"
        f'reports_dir = "{reports_dir}"\n'
        'export_format = "csv"\n'
        "\n"
        "[logging]\n"
        'level = "WARNING"\n'
        'log_file = ""\n',
        encoding="utf-8",
    )
    return path
