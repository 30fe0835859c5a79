"""
FILE: Schemas/data_profile_schema.py
--------------------------------------
Pydantic output schemas for the data profiling engine.
These are shared data contracts: the report generator and the prompt
builder read DataProfile from here, never the engine internals.

Distribution and Anomaly are tagged variants:
  - Distribution : NumericDistribution | CategoricalDistribution | SampleDistribution  (tag: kind)
  - Anomaly      : OutlierAnomaly | MissingDataAnomaly                                (tag: type)
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


# ─────────────────────────────────────────────
# ENUMS
# ─────────────────────────────────────────────

class ColumnType(str, Enum):
    NUMERIC     = "numeric"
    CATEGORICAL = "categorical"
    DATETIME    = "datetime"
    TEXT        = "text"


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ─────────────────────────────────────────────
# DISTRIBUTIONS
# ─────────────────────────────────────────────

class Quartiles(_Frozen):
    q1: float
    q2: float
    q3: float


class NumericDistribution(_Frozen):
    kind: Literal["numeric"] = "numeric"
    count: int                      # values that parsed as numbers
    min: float
    max: float
    mean: float
    median: float
    std: float                      # population standard deviation
    quartiles: Quartiles


class CategoricalDistribution(_Frozen):
    kind: Literal["categorical"] = "categorical"
    counts: dict[str, int] = Field(default_factory=dict)


class SampleDistribution(_Frozen):
    kind: Literal["sample"] = "sample"
    sample_values: list[Any] = Field(default_factory=list)
    total_unique: int = 0


Distribution = Annotated[
    NumericDistribution | CategoricalDistribution | SampleDistribution,
    Field(discriminator="kind"),
]


# ─────────────────────────────────────────────
# COLUMN PROFILE
# ─────────────────────────────────────────────

class ColumnProfile(_Frozen):
    name: str
    type: ColumnType
    unique_values: int
    valid_count: int
    missing_count: int
    missing_percentage: float
    distribution: Distribution
    patterns: list[str] = Field(default_factory=list)
    outliers: list[float] | None = None                 # numeric columns only
    correlations: dict[str, float] | None = None        # numeric columns only


# ─────────────────────────────────────────────
# CROSS-COLUMN RESULTS
# ─────────────────────────────────────────────

class TrendRecord(_Frozen):
    type: Literal["temporal_trend"] = "temporal_trend"
    date_column: str
    value_column: str
    direction: TrendDirection
    strength: float                 # 0..1, relative change capped at 1
    first_value: float
    last_value: float
    points: int

    @property
    def columns(self) -> tuple[str, str]:
        return (self.date_column, self.value_column)


class OutlierAnomaly(_Frozen):
    type: Literal["statistical_outliers"] = "statistical_outliers"
    column: str
    count: int
    values: list[float] = Field(default_factory=list)   # first few outliers only


class MissingDataAnomaly(_Frozen):
    type: Literal["high_missing_data"] = "high_missing_data"
    column: str
    percentage: float


Anomaly = Annotated[
    OutlierAnomaly | MissingDataAnomaly,
    Field(discriminator="type"),
]


# ─────────────────────────────────────────────
# INSIGHTS
# ─────────────────────────────────────────────

class BusinessMetrics(_Frozen):
    record_count: int
    dimension_count: int
    quality_score: float
    completeness_score: float
    anomaly_count: int
    trend_count: int


class Insights(_Frozen):
    data_quality: float
    completeness: float
    patterns: list[str] = Field(default_factory=list)
    business_metrics: BusinessMetrics


class DatasetSummary(_Frozen):
    total_records: int
    total_columns: int
    numeric_columns: int
    categorical_columns: int
    text_columns: int
    datetime_columns: int


# ─────────────────────────────────────────────
# TOP-LEVEL RESULT
# ─────────────────────────────────────────────

class DataProfile(_Frozen):
    file_name: str
    row_count: int
    column_count: int
    columns: list[str]
    numeric_columns: list[str] = Field(default_factory=list)
    categorical_columns: list[str] = Field(default_factory=list)
    datetime_columns: list[str] = Field(default_factory=list)
    text_columns: list[str] = Field(default_factory=list)
    missing_values: dict[str, int] = Field(default_factory=dict)
    summary: DatasetSummary
    column_profiles: list[ColumnProfile] = Field(default_factory=list)
    correlations: dict[str, dict[str, float]] = Field(default_factory=dict)
    trends: list[TrendRecord] = Field(default_factory=list)
    anomalies: list[Anomaly] = Field(default_factory=list)
    insights: Insights
    sample: list[dict[str, Any]] = Field(default_factory=list)

    def column(self, name: str) -> ColumnProfile:
        """Look up a column profile by name. Raises KeyError if absent."""
        for profile in self.column_profiles:
            if profile.name == name:
                return profile
        raise KeyError(name)

    def detailed_summary(self) -> dict[str, dict[str, Any]]:
        """Per-column digest keyed by column name, in table order."""
        return {
            col.name: {
                "type":               col.type.value,
                "unique_values":      col.unique_values,
                "missing_count":      col.missing_count,
                "missing_percentage": col.missing_percentage,
                "distribution":       col.distribution.model_dump(mode="json"),
                "patterns":           list(col.patterns),
            }
            for col in self.column_profiles
        }
