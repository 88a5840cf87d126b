"""
Tests for the per-size search worker.

Validates:
    - Best subset per size and evaluation counts
    - Singular subsets skipped and counted
    - Ties resolved to the lexicographically earliest subset
    - "No valid model" sentinel when every subset is singular
"""

import math

import numpy as np
import pytest

from bestsubset.selection import FitResult, fit_subset, generate_combinations, search_size
from bestsubset.selection._common import improves


def _split(rows):
    rows = np.asarray(rows, dtype=np.float64)
    return rows[:, :-1], rows[:, -1]


class TestSearchSize:

    def test_matches_brute_force(self, sparse_signal_rows):
        X, y = _split(sparse_signal_rows)
        result = search_size(X, y, 2)
        fits = [fit_subset(X, y, s) for s in generate_combinations(6, 2)]
        expected = min(fits, key=lambda f: f.aic)
        assert result.subset == expected.subset == (1, 4)
        assert result.aic == expected.aic
        assert result.n_evaluated == 15
        assert result.n_singular == 0
        assert result.size == 2

    def test_size_equals_p(self, sparse_signal_rows):
        X, y = _split(sparse_signal_rows)
        result = search_size(X, y, 6)
        assert result.subset == (0, 1, 2, 3, 4, 5)
        assert result.n_evaluated == 1


class TestSingularHandling:

    def test_duplicate_column_counts(self, duplicate_column_rows):
        X, y = _split(duplicate_column_rows)
        size2 = search_size(X, y, 2)
        assert size2.n_singular == 1
        assert size2.n_evaluated == 5
        size3 = search_size(X, y, 3)
        assert size3.n_singular == 2
        assert size3.n_evaluated == 2

    def test_tie_goes_to_earliest_subset(self, duplicate_column_rows):
        X, y = _split(duplicate_column_rows)
        assert fit_subset(X, y, (0, 2)).aic == fit_subset(X, y, (1, 2)).aic
        result = search_size(X, y, 2)
        assert result.subset == (0, 2)

    def test_all_singular_gives_sentinel(self, duplicate_column_rows):
        X, y = _split(duplicate_column_rows)
        result = search_size(X, y, 4)
        assert result.n_evaluated == 0
        assert result.n_singular == 1
        assert not result.is_valid
        assert result.subset == ()
        assert result.aic == math.inf
        assert result.mse == math.inf
        assert result.coefficients is None

    def test_singular_subsets_logged(self, duplicate_column_rows, caplog):
        X, y = _split(duplicate_column_rows)
        with caplog.at_level("DEBUG", logger="bestsubset.selection._worker"):
            search_size(X, y, 2)
        assert "skipping singular subset (0, 1)" in caplog.text

    def test_size_larger_than_rows(self, rng):
        X = rng.standard_normal((3, 5))
        y = rng.standard_normal(3)
        result = search_size(X, y, 4)
        assert result.n_singular == 5
        assert not result.is_valid


class TestFitResultSentinel:

    def test_no_valid_model(self):
        sentinel = FitResult.no_valid_model()
        assert sentinel.subset == ()
        assert sentinel.size == 0
        assert sentinel.aic == math.inf
        assert not sentinel.is_valid
        assert not sentinel.is_degenerate

    def test_sentinel_loses_to_any_finite_score(self):
        assert 1e300 < FitResult.no_valid_model().aic


class TestImproves:

    def test_lower_score_improves(self):
        assert improves(10.0, 11.0)

    def test_equal_score_does_not_improve(self):
        assert not improves(10.0, 10.0)

    def test_near_equal_score_is_a_tie(self):
        assert not improves(100.0 - 1e-13, 100.0)

    def test_higher_score_does_not_improve(self):
        assert not improves(12.0, 11.0)

    def test_infinities(self):
        assert improves(-math.inf, 0.0)
        assert not improves(-math.inf, -math.inf)
        assert improves(1e300, math.inf)
        assert not improves(math.inf, math.inf)
