"""
Tests for mfg_scorer/scoring/bands.py.

classify():
  - Band edges are inclusive at the lower bound (80, 60, 40, 0).
  - Each band carries its fixed category, recommendation and color token.
  - Scores outside [0, 100] are rejected.
"""

from __future__ import annotations

import pytest

from mfg_scorer.scoring.bands import BAND_TABLE, band_info, classify
from mfg_scorer.taxonomy.metric_taxonomy import PerformanceBand


class TestClassifyEdges:
    @pytest.mark.parametrize(
        "score, band",
        [
            (100, PerformanceBand.VERY_GOOD),
            (80, PerformanceBand.VERY_GOOD),
            (79, PerformanceBand.GOOD),
            (60, PerformanceBand.GOOD),
            (59, PerformanceBand.MODERATE),
            (40, PerformanceBand.MODERATE),
            (39, PerformanceBand.LOW),
            (0, PerformanceBand.LOW),
        ],
    )
    def test_edges(self, score, band):
        assert classify(score).band == band

    def test_bands_are_contiguous(self):
        seen = [classify(score).band for score in range(0, 101)]
        assert seen.count(PerformanceBand.LOW) == 40
        assert seen.count(PerformanceBand.MODERATE) == 20
        assert seen.count(PerformanceBand.GOOD) == 20
        assert seen.count(PerformanceBand.VERY_GOOD) == 21


class TestClassifyOutputs:
    def test_very_good(self):
        info = classify(85)
        assert info.category == "Very Good Performance"
        assert info.recommendation == (
            "Maintain high operational standards and focus on continuous innovation."
        )
        assert info.color_token == "green"

    def test_good(self):
        info = classify(65)
        assert info.category == "Good Performance"
        assert info.recommendation == (
            "Improve operational efficiency and reduce production defect rate."
        )
        assert info.color_token == "yellow-orange"

    def test_moderate(self):
        info = classify(50)
        assert info.category == "Moderate Performance"
        assert info.recommendation == (
            "Production system and quality management need improvement."
        )
        assert info.color_token == "orange-red"

    def test_low(self):
        info = classify(10)
        assert info.category == "Low Performance"
        assert info.recommendation == (
            "A comprehensive evaluation and operational system improvement are required."
        )
        assert info.color_token == "red"


class TestClassifyRejects:
    @pytest.mark.parametrize("score", [-1, 101, 1000])
    def test_out_of_range(self, score):
        with pytest.raises(ValueError, match="score must be in"):
            classify(score)


class TestBandInfo:
    def test_lookup_each_band(self):
        for band in PerformanceBand:
            assert band_info(band).band == band

    def test_table_sorted_descending(self):
        floors = [info.min_score for info in BAND_TABLE]
        assert floors == sorted(floors, reverse=True)
        assert floors[-1] == 0
