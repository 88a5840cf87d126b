"""
Tests for subset enumeration.

Validates:
    - Exactly C(n, k) distinct strictly increasing subsets
    - Lexicographic order matching itertools.combinations
    - k > n is empty, non-positive arguments are rejected
    - Independent results for concurrent callers
"""

from concurrent.futures import ThreadPoolExecutor
import itertools
import math

import pytest

from bestsubset.core.exceptions import InvalidConfigurationError
from bestsubset.selection import (
    count_combinations,
    generate_combinations,
    iter_combinations,
)


class TestGenerateCombinations:

    def test_four_choose_two(self):
        assert generate_combinations(4, 2) == [
            (0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3),
        ]

    @pytest.mark.parametrize("n, k", [(1, 1), (5, 1), (5, 5), (6, 3), (13, 4)])
    def test_matches_itertools(self, n, k):
        assert generate_combinations(n, k) == list(itertools.combinations(range(n), k))

    @pytest.mark.parametrize("n, k", [(6, 3), (10, 2), (13, 6)])
    def test_count_and_uniqueness(self, n, k):
        subsets = generate_combinations(n, k)
        assert len(subsets) == math.comb(n, k) == count_combinations(n, k)
        assert len(set(subsets)) == len(subsets)
        for s in subsets:
            assert all(a < b for a, b in zip(s, s[1:]))
            assert 0 <= s[0] and s[-1] < n

    def test_k_equals_n(self):
        assert generate_combinations(3, 3) == [(0, 1, 2)]

    def test_k_greater_than_n_empty(self):
        assert generate_combinations(2, 3) == []
        assert count_combinations(2, 3) == 0

    @pytest.mark.parametrize("n, k", [(0, 1), (3, 0), (-1, 2), (3, -2)])
    def test_non_positive_arguments(self, n, k):
        with pytest.raises(InvalidConfigurationError):
            generate_combinations(n, k)
        with pytest.raises(InvalidConfigurationError):
            count_combinations(n, k)


class TestIterCombinations:

    def test_arguments_checked_on_first_item(self):
        it = iter_combinations(0, 1)
        with pytest.raises(InvalidConfigurationError):
            next(it)

    def test_lazy(self):
        it = iter_combinations(20, 10)
        assert next(it) == tuple(range(10))
        assert next(it) == tuple(range(9)) + (10,)

    def test_yielded_tuples_are_independent(self):
        seen = []
        for subset in iter_combinations(5, 3):
            seen.append(subset)
        assert seen[0] == (0, 1, 2)
        assert seen[-1] == (2, 3, 4)

    def test_concurrent_callers(self):
        args = [(12, k) for k in range(1, 13)] * 3
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda a: generate_combinations(*a), args))
        for (n, k), subsets in zip(args, results):
            assert subsets == list(itertools.combinations(range(n), k))
