"""
FILE: core/column_engine.py
----------------------------
Per-column stages of the profiling pipeline: value coercion, type
inference and statistical analysis. Each column is handled on its own,
from a plain list of raw cell values, with no shared state.
"""

import logging
from collections import Counter
from datetime import date, datetime
from typing import Any

import numpy as np
import pandas as pd
from pandas.api.types import is_scalar

from Schemas.data_profile_schema import (
    CategoricalDistribution,
    ColumnProfile,
    ColumnType,
    NumericDistribution,
    Quartiles,
    SampleDistribution,
)
from Schemas.profiler_config import ProfilerConfig
from Utils.numeric_utils import mean, median, percentile, quartiles, standard_deviation

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
# VALUE COERCION
# ─────────────────────────────────────────────

def normalize_value(value: Any) -> Any:
    """Unwrap numpy scalars so downstream checks see plain Python types."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def is_missing(value: Any) -> bool:
    """None, NaN/NaT/pd.NA and the empty string count as missing."""
    if isinstance(value, str):
        return value == ""
    return is_scalar(value) and bool(pd.isna(value))


def to_number(value: Any) -> float | None:
    """
    Returns the value as a finite float, or None if it is not numeric.
    Booleans are never numeric. Strings are trimmed before parsing.
    """
    value = normalize_value(value)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if np.isfinite(number) else None


def parse_datetimes(values: list[Any]) -> pd.Series:
    """
    Parses each value independently. Unparseable entries become NaT.
    Everything is normalised to UTC so mixed offsets stay comparable.
    """
    items = [
        v if isinstance(v, (datetime, date)) else str(v)
        for v in (normalize_value(v) for v in values)
    ]
    return pd.to_datetime(
        pd.Series(items, dtype=object),
        errors="coerce",
        format="mixed",
        utc=True,
    )


def category_key(value: Any) -> str:
    """String form used for categorical counts and text lengths."""
    value = normalize_value(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _distinct_key(value: Any) -> tuple:
    value = normalize_value(value)
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, (int, float)):
        try:
            return ("number", float(value))
        except OverflowError:
            return ("number", value)
    if isinstance(value, str):
        return ("str", value)
    try:
        hash(value)
    except TypeError:
        return ("repr", repr(value))
    return (type(value).__name__, value)


def count_distinct(values: list[Any]) -> int:
    return len({_distinct_key(v) for v in values})


# ─────────────────────────────────────────────
# TYPE INFERENCE
# ─────────────────────────────────────────────

def infer_column_type(values: list[Any], config: ProfilerConfig | None = None) -> ColumnType:
    """
    Classifies a column from its non-missing values. First rule wins:
    mostly numbers → numeric, mostly dates → datetime, heavy repetition →
    categorical, anything else → text. An empty column is text.
    """
    config = config or ProfilerConfig()
    total = len(values)
    if total == 0:
        return ColumnType.TEXT

    numeric_ratio = sum(to_number(v) is not None for v in values) / total
    if numeric_ratio > config.numeric_ratio_threshold:
        return ColumnType.NUMERIC

    date_ratio = int(parse_datetimes(values).notna().sum()) / total
    if date_ratio > config.datetime_ratio_threshold:
        return ColumnType.DATETIME

    if count_distinct(values) / total < config.categorical_unique_ratio:
        return ColumnType.CATEGORICAL

    return ColumnType.TEXT


# ─────────────────────────────────────────────
# DISTRIBUTIONS & PATTERNS
# ─────────────────────────────────────────────

def numeric_values(values: list[Any]) -> np.ndarray:
    """Parsed numbers in original order; non-numeric entries dropped."""
    parsed = (to_number(v) for v in values)
    return np.array([v for v in parsed if v is not None], dtype=float)


def _numeric_distribution(numbers: np.ndarray) -> NumericDistribution:
    if len(numbers) == 0:
        return NumericDistribution(
            count=0, min=0.0, max=0.0, mean=0.0, median=0.0, std=0.0,
            quartiles=Quartiles(q1=0.0, q2=0.0, q3=0.0),
        )
    ordered = np.sort(numbers)
    q1, q2, q3 = quartiles(ordered)
    return NumericDistribution(
        count=len(numbers),
        min=float(ordered[0]),
        max=float(ordered[-1]),
        mean=mean(numbers),
        median=median(ordered),
        std=standard_deviation(numbers),
        quartiles=Quartiles(q1=q1, q2=q2, q3=q3),
    )


def _numeric_patterns(numbers: np.ndarray, config: ProfilerConfig) -> list[str]:
    if len(numbers) == 0:
        return []
    patterns = []
    if numbers.min() >= 0:
        patterns.append("all positive values")
    if np.all(np.mod(numbers, 1) == 0):
        patterns.append("integer values only")
    if numbers.max() - numbers.min() > config.wide_range_threshold:
        patterns.append("wide value range")
    return patterns


def _categorical_patterns(unique_count: int, config: ProfilerConfig) -> list[str]:
    patterns = []
    if unique_count < config.low_cardinality_threshold:
        patterns.append("low cardinality")
    if unique_count > config.high_cardinality_threshold:
        patterns.append("high cardinality")
    return patterns


def _text_patterns(values: list[Any], config: ProfilerConfig) -> list[str]:
    if not values:
        return []
    avg_length = sum(len(category_key(v)) for v in values) / len(values)
    patterns = []
    if avg_length > config.long_text_threshold:
        patterns.append("long text content")
    if avg_length < config.short_text_threshold:
        patterns.append("short text content")
    return patterns


def detect_outliers(numbers: np.ndarray, iqr_multiplier: float = 1.5) -> list[float]:
    """
    Tukey's rule. Returns values strictly outside
    [Q1 - k*IQR, Q3 + k*IQR], in their original row order, not sorted.
    """
    numbers = np.asarray(numbers, dtype=float)
    if len(numbers) == 0:
        return []
    q1, _, q3 = quartiles(np.sort(numbers))
    iqr = q3 - q1
    lower = q1 - iqr_multiplier * iqr
    upper = q3 + iqr_multiplier * iqr
    mask = (numbers < lower) | (numbers > upper)
    return numbers[mask].tolist()


# ─────────────────────────────────────────────
# PUBLIC — COLUMN ANALYSIS
# ─────────────────────────────────────────────

def analyze_column(
    name: str,
    raw_values: list[Any],
    config: ProfilerConfig | None = None,
) -> ColumnProfile:
    """
    Builds the full profile of one column from all of its cells, missing
    ones included. Malformed content degrades the statistics; it never raises.
    """
    config = config or ProfilerConfig()
    row_count = len(raw_values)
    values = [normalize_value(v) for v in raw_values if not is_missing(v)]
    missing_count = row_count - len(values)
    missing_pct = (missing_count / row_count * 100) if row_count else 0.0

    col_type = infer_column_type(values, config)
    unique_count = count_distinct(values)
    outliers = None

    if col_type == ColumnType.NUMERIC:
        numbers = numeric_values(values)
        distribution = _numeric_distribution(numbers)
        patterns = _numeric_patterns(numbers, config)
        outliers = detect_outliers(numbers, config.iqr_multiplier)
    elif col_type == ColumnType.CATEGORICAL:
        distribution = CategoricalDistribution(
            counts=dict(Counter(category_key(v) for v in values))
        )
        patterns = _categorical_patterns(unique_count, config)
    else:
        distribution = SampleDistribution(
            sample_values=values[: config.value_sample_size],
            total_unique=unique_count,
        )
        patterns = _text_patterns(values, config) if col_type == ColumnType.TEXT else []

    logger.debug(
        f"Column {name}: type={col_type.value}, missing={missing_count}/{row_count}, "
        f"unique={unique_count}"
    )

    return ColumnProfile(
        name=name,
        type=col_type,
        unique_values=unique_count,
        valid_count=len(values),
        missing_count=missing_count,
        missing_percentage=missing_pct,
        distribution=distribution,
        patterns=patterns,
        outliers=outliers,
    )
