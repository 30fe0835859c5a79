"""Tests for anomaly detection, quality scoring and the pattern narrative."""

import pytest

from Schemas.data_profile_schema import MissingDataAnomaly, OutlierAnomaly
from Schemas.profiler_config import ProfilerConfig
from core.column_engine import analyze_column
from core.insight_engine import (
    calculate_completeness,
    calculate_data_quality,
    detect_anomalies,
    generate_insights,
)


@pytest.fixture
def outlier_column():
    return analyze_column("price", list(range(10, 26)) + [900, 1000] + [None] * 6)


@pytest.fixture
def sparse_column():
    return analyze_column("comment", ["ok", "", "", "fine", ""])


class TestDetectAnomalies:
    def test_column_can_emit_both_kinds(self, outlier_column):
        anomalies = detect_anomalies([outlier_column])

        assert [a.type for a in anomalies] == ["statistical_outliers", "high_missing_data"]
        assert isinstance(anomalies[0], OutlierAnomaly)
        assert anomalies[0].count == len(outlier_column.outliers)
        assert isinstance(anomalies[1], MissingDataAnomaly)
        assert anomalies[1].percentage == outlier_column.missing_percentage

    def test_outlier_values_are_capped(self):
        values = [1.0] * 40 + [float(v) for v in range(100, 108)]
        col = analyze_column("spiky", values)
        anomaly = detect_anomalies([col])[0]
        assert anomaly.count == 8
        assert anomaly.values == [100.0, 101.0, 102.0, 103.0, 104.0]

    def test_missing_threshold_is_strict(self):
        col = analyze_column("fifth", ["a", "b", "c", "d", ""])  # exactly 20%
        assert detect_anomalies([col]) == []

    def test_threshold_is_configurable(self, sparse_column):
        assert len(detect_anomalies([sparse_column])) == 1
        config = ProfilerConfig(missing_anomaly_threshold=75)
        assert detect_anomalies([sparse_column], config) == []


class TestScores:
    def test_completeness(self, sparse_column):
        assert calculate_completeness(5, [sparse_column]) == pytest.approx(40.0)

    def test_completeness_without_cells(self):
        assert calculate_completeness(3, []) == 0.0

    def test_quality_formula(self, sparse_column):
        anomalies = detect_anomalies([sparse_column])
        # 100 - 0.5 * 60 - 2 * 1, no numeric bonus
        assert calculate_data_quality([sparse_column], anomalies) == pytest.approx(68.0)

    def test_numeric_bonus_is_clamped(self):
        col = analyze_column("n", [1, 2, 3])
        assert calculate_data_quality([col], []) == 100.0

    def test_quality_never_below_zero(self):
        columns = [analyze_column(f"c{i}", ["", None]) for i in range(60)]
        anomalies = detect_anomalies(columns)
        assert calculate_data_quality(columns, anomalies) == 0.0


class TestGenerateInsights:
    def test_pattern_narrative(self, sparse_column):
        numeric = analyze_column("n", ["1", "2", "3", "4", "5"])
        profiles = [numeric, sparse_column]
        anomalies = detect_anomalies(profiles)
        insights = generate_insights(5, profiles, [], anomalies)

        assert insights.patterns == [
            "Dataset contains 5 records across 2 dimensions",
            "1 quantitative metrics available for analysis",
            "0 categorical dimensions for segmentation",
            "Data completeness: 70.0%",
        ]
        assert insights.business_metrics.anomaly_count == 1
        assert insights.business_metrics.trend_count == 0
        assert insights.business_metrics.quality_score == insights.data_quality
