"""
Enumeration of feature subsets.

Subsets are strictly increasing tuples of column indices produced in
lexicographic order by itertools.combinations. Each call builds its own
iterator, so concurrent callers never share state, and every yielded tuple
is independent of the next.
"""

from __future__ import annotations

from typing import Iterator
import itertools
import math

from bestsubset.core.exceptions import InvalidConfigurationError


def _check_arguments(n: int, k: int) -> None:
    if n <= 0:
        raise InvalidConfigurationError(
            f"n must be positive, got {n}", option='n', value=n
        )
    if k <= 0:
        raise InvalidConfigurationError(
            f"k must be positive, got {k}", option='k', value=k
        )


def iter_combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """
    Lazily yield every k-subset of range(n) in lexicographic order.

    Args:
        n: Number of items to choose from
        k: Subset size

    Yields:
        Strictly increasing tuples of length k. Nothing when k > n.

    Raises:
        InvalidConfigurationError: If n <= 0 or k <= 0
    """
    _check_arguments(n, k)
    yield from itertools.combinations(range(n), k)


def generate_combinations(n: int, k: int) -> list[tuple[int, ...]]:
    """
    All k-subsets of range(n) in lexicographic order.

    >>> generate_combinations(4, 2)
    [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    >>> generate_combinations(2, 3)
    []
    """
    return list(iter_combinations(n, k))


def count_combinations(n: int, k: int) -> int:
    """Number of k-subsets of range(n), 0 when k > n."""
    _check_arguments(n, k)
    return math.comb(n, k)
