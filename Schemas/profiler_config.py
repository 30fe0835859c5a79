"""
FILE: Schemas/profiler_config.py
----------------------------------
Tunable thresholds for the profiling engine.
Defaults mirror constants/data_profiler_constants.py, so ProfilerConfig()
reproduces the reference behaviour exactly. Callers override individual
fields instead of editing the constants module.
"""

from pydantic import BaseModel, ConfigDict, Field

from constants.data_profiler_constants import (
    ANOMALY_PENALTY,
    CATEGORICAL_UNIQUE_RATIO,
    DATETIME_RATIO_THRESHOLD,
    HIGH_CARDINALITY_THRESHOLD,
    IQR_MULTIPLIER,
    LONG_TEXT_THRESHOLD,
    LOW_CARDINALITY_THRESHOLD,
    MIN_TREND_POINTS,
    MISSING_ANOMALY_THRESHOLD,
    MISSING_PENALTY_WEIGHT,
    NUMERIC_BONUS,
    NUMERIC_RATIO_THRESHOLD,
    OUTLIER_SAMPLE_SIZE,
    QUALITY_BASE_SCORE,
    ROW_SAMPLE_SIZE,
    SHORT_TEXT_THRESHOLD,
    VALUE_SAMPLE_SIZE,
    WIDE_RANGE_THRESHOLD,
)


class ProfilerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    # type inference
    numeric_ratio_threshold: float = Field(default=NUMERIC_RATIO_THRESHOLD, gt=0, le=1)
    datetime_ratio_threshold: float = Field(default=DATETIME_RATIO_THRESHOLD, gt=0, le=1)
    categorical_unique_ratio: float = Field(default=CATEGORICAL_UNIQUE_RATIO, gt=0, le=1)

    # outliers and anomalies
    iqr_multiplier: float = Field(default=IQR_MULTIPLIER, ge=0)
    missing_anomaly_threshold: float = Field(default=MISSING_ANOMALY_THRESHOLD, ge=0, le=100)

    # quality score
    quality_base_score: float = Field(default=QUALITY_BASE_SCORE, ge=0, le=100)
    missing_penalty_weight: float = Field(default=MISSING_PENALTY_WEIGHT, ge=0)
    anomaly_penalty: float = Field(default=ANOMALY_PENALTY, ge=0)
    numeric_bonus: float = Field(default=NUMERIC_BONUS, ge=0)

    # pattern tags
    low_cardinality_threshold: int = Field(default=LOW_CARDINALITY_THRESHOLD, ge=0)
    high_cardinality_threshold: int = Field(default=HIGH_CARDINALITY_THRESHOLD, ge=0)
    long_text_threshold: float = Field(default=LONG_TEXT_THRESHOLD, ge=0)
    short_text_threshold: float = Field(default=SHORT_TEXT_THRESHOLD, ge=0)
    wide_range_threshold: float = Field(default=WIDE_RANGE_THRESHOLD, ge=0)

    # payload caps
    value_sample_size: int = Field(default=VALUE_SAMPLE_SIZE, ge=0)
    outlier_sample_size: int = Field(default=OUTLIER_SAMPLE_SIZE, ge=0)
    row_sample_size: int = Field(default=ROW_SAMPLE_SIZE, ge=0)

    min_trend_points: int = Field(default=MIN_TREND_POINTS, ge=2)
