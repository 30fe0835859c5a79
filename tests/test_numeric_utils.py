"""Tests for the shared numeric primitives."""

import numpy as np
import pytest

from Utils.numeric_utils import (
    mean,
    median,
    pearson_correlation,
    percentile,
    quartiles,
    standard_deviation,
)


class TestPercentile:
    def test_interpolates_between_neighbours(self):
        assert percentile([1, 2, 3, 4], 25) == pytest.approx(1.75)

    def test_exact_index(self):
        assert percentile([10, 20, 30], 50) == 20

    def test_upper_bound_clamps_to_last(self):
        assert percentile([1, 2, 3], 100) == 3

    def test_single_value(self):
        assert percentile([7.5], 25) == 7.5

    def test_empty_degrades_to_zero(self):
        assert percentile([], 50) == 0.0

    def test_matches_numpy_linear_method(self):
        values = np.sort(np.random.default_rng(7).normal(size=57))
        for p in (5, 25, 50, 75, 95):
            assert percentile(values, p) == pytest.approx(np.percentile(values, p))

    def test_quartiles_are_ordered(self):
        q1, q2, q3 = quartiles([1, 3, 5, 7, 9, 11])
        assert q1 <= q2 <= q3
        assert q2 == pytest.approx(6.0)


class TestMedianAndSpread:
    def test_median_odd(self):
        assert median([3, 1, 2]) == 2

    def test_median_even_averages_middle_pair(self):
        assert median([4, 1, 3, 2]) == 2.5

    def test_median_equals_fiftieth_percentile(self):
        values = sorted([8, 1, 6, 3, 9, 2])
        assert median(values) == pytest.approx(percentile(values, 50))

    def test_population_standard_deviation(self):
        assert standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)

    def test_single_value_has_zero_spread(self):
        assert standard_deviation([42]) == 0.0
        assert standard_deviation([]) == 0.0

    def test_mean(self):
        assert mean([1, 2, 3, 4]) == 2.5
        assert mean([-3.0]) == -3.0
        assert mean([]) == 0.0

    def test_large_magnitudes_stay_finite(self):
        values = [1e200 * i for i in range(1, 11)]
        assert mean(values) == pytest.approx(5.5e200)
        assert standard_deviation(values) == pytest.approx(1e200 * np.std(np.arange(1, 11)))


class TestPearsonCorrelation:
    def test_perfect_positive(self):
        assert pearson_correlation([1, 2, 3, 4], [2, 4, 6, 8]) == pytest.approx(1.0)

    def test_perfect_negative(self):
        x = [1.5, 2.0, 7.25, 9.0]
        assert pearson_correlation(x, [-v for v in x]) == pytest.approx(-1.0)

    def test_truncates_to_shorter_input(self):
        assert pearson_correlation([1, 2, 3, 4], [2, 4, 6]) == pytest.approx(1.0)

    def test_zero_variance_is_zero(self):
        assert pearson_correlation([1, 2, 3], [5, 5, 5]) == 0.0
        assert pearson_correlation([0.1, 0.1, 0.1], [1, 2, 3]) == 0.0

    def test_empty_is_zero(self):
        assert pearson_correlation([], []) == 0.0

    def test_symmetric(self):
        rng = np.random.default_rng(3)
        x, y = rng.normal(size=40), rng.normal(size=40)
        assert pearson_correlation(x, y) == pytest.approx(pearson_correlation(y, x), abs=1e-9)

    def test_within_unit_interval(self):
        rng = np.random.default_rng(11)
        x = rng.normal(size=25)
        r = pearson_correlation(x, 3 * x + 1)
        assert -1.0 <= r <= 1.0

    def test_large_magnitudes(self):
        x = [1e200 * i for i in range(1, 11)]
        assert pearson_correlation(x, [-v for v in x]) == pytest.approx(-1.0)
