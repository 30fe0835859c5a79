"""
FILE: core/insight_engine.py
-----------------------------
Aggregate stage of the profiling pipeline.
Turns column profiles, correlations and trends into the anomaly list,
the 0-100 data quality score and the fixed pattern narrative.
"""

from Schemas.data_profile_schema import (
    Anomaly,
    BusinessMetrics,
    ColumnProfile,
    ColumnType,
    Insights,
    MissingDataAnomaly,
    OutlierAnomaly,
    TrendRecord,
)
from Schemas.profiler_config import ProfilerConfig


# ─────────────────────────────────────────────
# ANOMALIES
# ─────────────────────────────────────────────

def detect_anomalies(
    column_profiles: list[ColumnProfile],
    config: ProfilerConfig | None = None,
) -> list[Anomaly]:
    """
    One outlier anomaly per numeric column with outliers, one missing-data
    anomaly per column above the missing threshold. A column can emit both.
    """
    config = config or ProfilerConfig()
    anomalies: list[Anomaly] = []

    for col in column_profiles:
        if col.type == ColumnType.NUMERIC and col.outliers:
            anomalies.append(OutlierAnomaly(
                column=col.name,
                count=len(col.outliers),
                values=col.outliers[: config.outlier_sample_size],
            ))

        if col.missing_percentage > config.missing_anomaly_threshold:
            anomalies.append(MissingDataAnomaly(
                column=col.name,
                percentage=col.missing_percentage,
            ))

    return anomalies


# ─────────────────────────────────────────────
# SCORES
# ─────────────────────────────────────────────

def calculate_completeness(row_count: int, column_profiles: list[ColumnProfile]) -> float:
    total_cells = row_count * len(column_profiles)
    if total_cells == 0:
        return 0.0
    missing_cells = sum(col.missing_count for col in column_profiles)
    return (total_cells - missing_cells) / total_cells * 100


def calculate_data_quality(
    column_profiles: list[ColumnProfile],
    anomalies: list[Anomaly],
    config: ProfilerConfig | None = None,
) -> float:
    """
    Starts from the base score, subtracts the weighted average missing
    percentage and a flat penalty per anomaly, adds a bonus when numeric
    data exists, then clamps to [0, 100].
    """
    config = config or ProfilerConfig()
    score = config.quality_base_score

    if column_profiles:
        avg_missing = sum(col.missing_percentage for col in column_profiles) / len(column_profiles)
        score -= avg_missing * config.missing_penalty_weight

    score -= len(anomalies) * config.anomaly_penalty

    if any(col.type == ColumnType.NUMERIC for col in column_profiles):
        score += config.numeric_bonus

    return max(0.0, min(100.0, score))


# ─────────────────────────────────────────────
# PUBLIC — INSIGHTS
# ─────────────────────────────────────────────

def generate_insights(
    row_count: int,
    column_profiles: list[ColumnProfile],
    trends: list[TrendRecord],
    anomalies: list[Anomaly],
    config: ProfilerConfig | None = None,
) -> Insights:
    completeness = calculate_completeness(row_count, column_profiles)
    quality = calculate_data_quality(column_profiles, anomalies, config)

    n_numeric = sum(col.type == ColumnType.NUMERIC for col in column_profiles)
    n_categorical = sum(col.type == ColumnType.CATEGORICAL for col in column_profiles)

    patterns = [
        f"Dataset contains {row_count} records across {len(column_profiles)} dimensions",
        f"{n_numeric} quantitative metrics available for analysis",
        f"{n_categorical} categorical dimensions for segmentation",
        f"Data completeness: {completeness:.1f}%",
    ]

    return Insights(
        data_quality=quality,
        completeness=completeness,
        patterns=patterns,
        business_metrics=BusinessMetrics(
            record_count=row_count,
            dimension_count=len(column_profiles),
            quality_score=quality,
            completeness_score=completeness,
            anomaly_count=len(anomalies),
            trend_count=len(trends),
        ),
    )
