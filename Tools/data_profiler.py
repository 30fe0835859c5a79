"""
FILE: Tools/data_profiler.py
-----------------------------
LangChain tools that expose the profiling engine to a language-model
agent (the report / prompt-builder side). Tools take decoded rows as a
JSON array of objects and return JSON strings. Errors come back as
"ERROR: ..." strings so a bad upload never raises into the agent loop.

No session store: every call decodes, profiles and returns on its own.
"""

import json
import logging
from typing import Any

from langchain_core.tools import tool
from pydantic import ValidationError

from core.column_engine import infer_column_type, is_missing
from core.exceptions import ProfilingError
from core.profiler_engine import profile_rows

logger = logging.getLogger(__name__)

MAX_ANOMALIES_FOR_LLM = 5


# ─────────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────────

def _decode_rows(rows_json: str) -> list[dict[str, Any]]:
    data = json.loads(rows_json)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise ValueError("expected a JSON array of row objects")
    return data


def _round_floats(value: Any, ndigits: int = 3) -> Any:
    if isinstance(value, float):
        return round(value, ndigits)
    if isinstance(value, dict):
        return {k: _round_floats(v, ndigits) for k, v in value.items()}
    if isinstance(value, list):
        return [_round_floats(v, ndigits) for v in value]
    return value


def _slim_profile_output(profile: dict) -> dict:
    """
    Reduces token count of the profile sent to the LLM.
    - Rounds floats to 3 decimal places
    - Drops the raw row sample, categorical counts and text samples
    - Caps the anomaly list
    The caller still holds the full DataProfile if it needs more.
    """
    profile.pop("sample", None)

    for col in profile.get("column_profiles", []):
        dist = col.get("distribution", {})
        if dist.get("kind") == "categorical":
            counts = dist.pop("counts", {})
            dist["distinct_keys"] = len(counts)
        elif dist.get("kind") == "sample":
            dist.pop("sample_values", None)

    anomalies = profile.get("anomalies", [])
    if len(anomalies) > MAX_ANOMALIES_FOR_LLM:
        extra = len(anomalies) - MAX_ANOMALIES_FOR_LLM
        profile["anomalies"] = anomalies[:MAX_ANOMALIES_FOR_LLM] + [f"... and {extra} more anomalies"]

    return _round_floats(profile)


# ─────────────────────────────────────────────
# TOOLS
# ─────────────────────────────────────────────

@tool
def run_profiler(rows_json: str, file_name: str = "upload") -> str:
    """
    Run the full data profiling analysis on decoded rows.
    rows_json is a JSON array of objects (one per row, column name -> value).
    Returns a slimmed DataProfile as a JSON string, or an ERROR message.
    """
    try:
        rows = _decode_rows(rows_json)
        profile = profile_rows(rows, file_name=file_name).model_dump(mode="json")
    except json.JSONDecodeError as e:
        return f"ERROR: Rows are not valid JSON: {e.msg}"
    except ProfilingError as e:
        return f"ERROR: {e}"
    except (ValueError, OverflowError, ValidationError) as e:
        logger.warning(f"Profiling failed for {file_name}: {e}")
        return f"ERROR: Profiling failed: {e}"
    return json.dumps(_slim_profile_output(profile), indent=2)


@tool
def get_column_types(rows_json: str) -> str:
    """
    Return the inferred type of every column as a JSON object
    (column name -> numeric | categorical | datetime | text).
    Cheaper than run_profiler when only the schema is needed.
    """
    try:
        rows = _decode_rows(rows_json)
    except json.JSONDecodeError as e:
        return f"ERROR: Rows are not valid JSON: {e.msg}"
    except ValueError as e:
        return f"ERROR: {e}"
    if not rows:
        return "ERROR: No rows found."

    columns: dict[str, None] = {}
    for row in rows:
        columns.update(dict.fromkeys(row))

    types = {}
    for col in columns:
        values = [row.get(col) for row in rows]
        types[col] = infer_column_type([v for v in values if not is_missing(v)]).value
    return json.dumps(types)


# ─────────────────────────────────────────────
# EXPORTED TOOL LIST
# ─────────────────────────────────────────────

# Import this list directly in the agent file
DATA_PROFILER_TOOLS = [run_profiler, get_column_types]
