"""
FILE: core/profiler_engine.py
------------------------------
Public entry point of the profiling engine.
Rows in, DataProfile out. Pure and synchronous: no I/O, no module-level
state, nothing retained between calls. Can be unit tested without any
file decoder or LLM in the loop.

Pipeline:
  1. column type inference      ┐ core/column_engine.py (per column)
  2. per-column statistics      ┘
  3. correlation + trend          core/relationship_engine.py
  4. anomalies, score, patterns   core/insight_engine.py
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd

from Schemas.data_profile_schema import (
    ColumnProfile,
    ColumnType,
    DataProfile,
    DatasetSummary,
)
from Schemas.profiler_config import ProfilerConfig
from core.column_engine import analyze_column, is_missing, normalize_value
from core.exceptions import EmptyDatasetError
from core.insight_engine import detect_anomalies, generate_insights
from core.relationship_engine import correlation_matrix, identify_trends

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
# PRIVATE HELPERS
# ─────────────────────────────────────────────

def _column_names(rows: list[Mapping[str, Any]]) -> list[str]:
    """Union of row keys in first-seen order."""
    seen: dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def _names_of(profiles: list[ColumnProfile], col_type: ColumnType) -> list[str]:
    return [p.name for p in profiles if p.type == col_type]


def _json_safe(value: Any) -> Any:
    """NaN, NaT and pd.NA become None. Empty strings are kept as they are."""
    value = normalize_value(value)
    if not isinstance(value, str) and is_missing(value):
        return None
    return value


def _sample_rows(df: pd.DataFrame, n: int) -> list[dict[str, Any]]:
    return [
        {key: _json_safe(value) for key, value in record.items()}
        for record in df.head(n).to_dict(orient="records")
    ]


# ─────────────────────────────────────────────
# PUBLIC — MAIN PROFILING FUNCTIONS
# ─────────────────────────────────────────────

def profile_rows(
    rows: Iterable[Mapping[str, Any]],
    file_name: str,
    config: ProfilerConfig | None = None,
) -> DataProfile:
    """
    Profiles decoded row records (column name -> raw value).
    A key absent from a row counts as missing for that row.
    file_name is an opaque label copied onto the result.
    Raises EmptyDatasetError when there are no rows.
    """
    rows = list(rows)
    if not rows:
        raise EmptyDatasetError(file_name)

    columns = _column_names(rows)
    # dtype=object keeps every cell exactly as the decoder produced it
    df = pd.DataFrame(
        {col: [row.get(col) for row in rows] for col in columns},
        index=pd.RangeIndex(len(rows)),
        columns=columns,
        dtype=object,
    )
    return profile_dataframe(df, file_name=file_name, config=config)


def profile_dataframe(
    df: pd.DataFrame,
    file_name: str = "dataframe",
    config: ProfilerConfig | None = None,
) -> DataProfile:
    """
    Profiles an already-decoded DataFrame. No mutations to df.
    Raises EmptyDatasetError when df has no rows.
    """
    if len(df) == 0:
        raise EmptyDatasetError(file_name)

    config = config or ProfilerConfig()
    table = df.reset_index(drop=True)
    table.columns = [str(c) for c in table.columns]
    row_count, column_count = table.shape

    # ── Stages 1 + 2: per column, in table order ──
    profiles = [analyze_column(col, table[col].tolist(), config) for col in table.columns]

    numeric_cols     = _names_of(profiles, ColumnType.NUMERIC)
    categorical_cols = _names_of(profiles, ColumnType.CATEGORICAL)
    datetime_cols    = _names_of(profiles, ColumnType.DATETIME)
    text_cols        = _names_of(profiles, ColumnType.TEXT)

    # ── Stage 3: cross-column ──
    correlations = correlation_matrix(table, numeric_cols)
    trends = identify_trends(table, datetime_cols, numeric_cols, config)
    profiles = [
        p.model_copy(update={"correlations": dict(correlations[p.name])})
        if p.name in correlations else p
        for p in profiles
    ]

    # ── Stage 4: aggregate ──
    anomalies = detect_anomalies(profiles, config)
    insights = generate_insights(row_count, profiles, trends, anomalies, config)

    logger.info(
        f"Profiled {file_name}: {row_count} rows x {column_count} columns, "
        f"{len(numeric_cols)} numeric, {len(anomalies)} anomalies, "
        f"quality={insights.data_quality:.1f}"
    )

    return DataProfile(
        file_name=file_name,
        row_count=row_count,
        column_count=column_count,
        columns=list(table.columns),
        numeric_columns=numeric_cols,
        categorical_columns=categorical_cols,
        datetime_columns=datetime_cols,
        text_columns=text_cols,
        missing_values={p.name: p.missing_count for p in profiles},
        summary=DatasetSummary(
            total_records=row_count,
            total_columns=column_count,
            numeric_columns=len(numeric_cols),
            categorical_columns=len(categorical_cols),
            text_columns=len(text_cols),
            datetime_columns=len(datetime_cols),
        ),
        column_profiles=profiles,
        correlations=correlations,
        trends=trends,
        anomalies=anomalies,
        insights=insights,
        sample=_sample_rows(table, config.row_sample_size),
    )
