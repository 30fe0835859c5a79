"""
FILE: core/relationship_engine.py
----------------------------------
Cross-column stage of the profiling pipeline.
Needs the full table plus the numeric/datetime column lists produced by
the per-column stage.

  - correlation_matrix : Pearson r for every ordered pair of numeric columns
  - identify_trends    : one temporal trend (first datetime x first numeric)
"""

import logging

import pandas as pd

from Schemas.data_profile_schema import TrendDirection, TrendRecord
from Schemas.profiler_config import ProfilerConfig
from Utils.numeric_utils import pearson_correlation
from core.column_engine import parse_datetimes, to_number

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────────

def _numeric_series(df: pd.DataFrame, column: str) -> pd.Series:
    """Column parsed to floats; cells that are not numbers become NaN."""
    parsed = [to_number(v) for v in df[column].tolist()]
    return pd.Series(parsed, dtype=float)


def _trend_strength(first: float, last: float) -> float:
    """Relative change between endpoints, capped at 1."""
    if first == 0:
        return 1.0 if last != first else 0.0
    return min(1.0, abs(last - first) / abs(first))


# ─────────────────────────────────────────────
# PUBLIC — CORRELATION
# ─────────────────────────────────────────────

def correlation_matrix(
    df: pd.DataFrame,
    numeric_columns: list[str],
) -> dict[str, dict[str, float]]:
    """
    Pairwise-complete Pearson correlation. Each pair only uses rows where
    both cells parse as numbers, so pairs can differ in effective row count.
    The diagonal is fixed at 1.0 rather than computed.
    """
    numeric = pd.DataFrame({col: _numeric_series(df, col) for col in numeric_columns})

    matrix: dict[str, dict[str, float]] = {}
    for col_a in numeric_columns:
        matrix[col_a] = {}
        for col_b in numeric_columns:
            if col_a == col_b:
                matrix[col_a][col_b] = 1.0
                continue
            pair = numeric[[col_a, col_b]].dropna()
            matrix[col_a][col_b] = pearson_correlation(
                pair[col_a].to_numpy(), pair[col_b].to_numpy()
            )
    return matrix


# ─────────────────────────────────────────────
# PUBLIC — TRENDS
# ─────────────────────────────────────────────

def identify_trends(
    df: pd.DataFrame,
    datetime_columns: list[str],
    numeric_columns: list[str],
    config: ProfilerConfig | None = None,
) -> list[TrendRecord]:
    """
    Compares the chronologically first and last values of the first numeric
    column, ordered by the first datetime column. Returns at most one record.
    """
    config = config or ProfilerConfig()
    if not datetime_columns or not numeric_columns:
        return []

    date_col, value_col = datetime_columns[0], numeric_columns[0]
    points = pd.DataFrame({
        "date":  parse_datetimes(df[date_col].tolist()),
        "value": _numeric_series(df, value_col),
    }).dropna()

    if len(points) < config.min_trend_points:
        logger.debug(
            f"Skipping trend {date_col} x {value_col}: "
            f"{len(points)} dated point(s), need {config.min_trend_points}"
        )
        return []

    ordered = points.sort_values("date", kind="stable")["value"]
    first, last = float(ordered.iloc[0]), float(ordered.iloc[-1])
    direction = TrendDirection.INCREASING if last > first else TrendDirection.DECREASING

    return [TrendRecord(
        date_column=date_col,
        value_column=value_col,
        direction=direction,
        strength=_trend_strength(first, last),
        first_value=first,
        last_value=last,
        points=len(ordered),
    )]
