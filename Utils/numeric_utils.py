"""
FILE: Utils/numeric_utils.py
-----------------------------
Shared numeric primitives for the profiling engine.
Plain numpy over 1-D float arrays. Every function degrades to 0.0 on
empty input instead of raising or returning NaN.
"""

from collections.abc import Sequence

import numpy as np


def _as_array(values: Sequence[float] | np.ndarray) -> np.ndarray:
    return np.asarray(values, dtype=float).ravel()


def percentile(sorted_values: Sequence[float] | np.ndarray, p: float) -> float:
    """
    Linear-interpolation percentile over values already sorted ascending.
    index = p/100 * (n-1); blends the floor and ceiling neighbours by the
    fractional part. An upper index past the end clamps to the last element.
    """
    arr = _as_array(sorted_values)
    n = len(arr)
    if n == 0:
        return 0.0

    index = (p / 100) * (n - 1)
    lower = int(np.floor(index))
    upper = int(np.ceil(index))
    weight = index - lower

    if upper >= n:
        return float(arr[-1])
    return float(arr[lower] * (1 - weight) + arr[upper] * weight)


def median(values: Sequence[float] | np.ndarray) -> float:
    """Midpoint of the sorted values; mean of the two middle ones for even n."""
    arr = _as_array(values)
    if len(arr) == 0:
        return 0.0
    return float(np.median(arr))


def quartiles(sorted_values: Sequence[float] | np.ndarray) -> tuple[float, float, float]:
    return (
        percentile(sorted_values, 25),
        percentile(sorted_values, 50),
        percentile(sorted_values, 75),
    )


def _scaled(arr: np.ndarray) -> tuple[np.ndarray, float]:
    """Divides by the largest magnitude so sums of squares stay finite."""
    scale = float(np.max(np.abs(arr))) if len(arr) else 0.0
    if scale == 0:
        return arr, 0.0
    return arr / scale, scale


def mean(values: Sequence[float] | np.ndarray) -> float:
    arr, scale = _scaled(_as_array(values))
    if scale == 0:
        return 0.0
    return float(np.mean(arr) * scale)


def standard_deviation(values: Sequence[float] | np.ndarray) -> float:
    """Population standard deviation (divides by N)."""
    arr, scale = _scaled(_as_array(values))
    if len(arr) < 2 or scale == 0:
        return 0.0
    return float(np.std(arr, ddof=0) * scale)


def pearson_correlation(
    x: Sequence[float] | np.ndarray,
    y: Sequence[float] | np.ndarray,
) -> float:
    """
    Pearson r by the running-sums formula:

        (nΣxy - ΣxΣy) / sqrt((nΣx² - (Σx)²)(nΣy² - (Σy)²))

    Both inputs are truncated to the shorter length, so callers must align
    pairwise-complete values themselves. A zero denominator yields 0.0.
    Each input is scaled by its largest magnitude first; r is unchanged by
    scaling and the sums stay finite for values near the float limit.
    """
    x_arr, y_arr = _as_array(x), _as_array(y)
    n = min(len(x_arr), len(y_arr))
    if n == 0:
        return 0.0
    x_arr, y_arr = x_arr[:n], y_arr[:n]

    # constant input: the sums formula would leave cancellation noise, not 0
    if np.ptp(x_arr) == 0 or np.ptp(y_arr) == 0:
        return 0.0

    x_arr, _ = _scaled(x_arr)
    y_arr, _ = _scaled(y_arr)

    sum_x, sum_y = x_arr.sum(), y_arr.sum()
    sum_xy = (x_arr * y_arr).sum()
    sum_x2 = (x_arr * x_arr).sum()
    sum_y2 = (y_arr * y_arr).sum()

    numerator = n * sum_xy - sum_x * sum_y
    var_term = (n * sum_x2 - sum_x ** 2) * (n * sum_y2 - sum_y ** 2)
    if var_term <= 0 or not np.isfinite(var_term):
        return 0.0

    r = numerator / np.sqrt(var_term)
    # rounding can push |r| a hair past 1 for perfectly linear data
    return float(np.clip(r, -1.0, 1.0))
