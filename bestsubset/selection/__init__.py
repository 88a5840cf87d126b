"""
Exhaustive best-subset linear regression.

For each subset size in a configured range, every combination of
explanatory columns is fitted by ordinary least squares (no intercept) and
scored by AIC = N ln(MSE) + 2k. The lowest-AIC subset of each size and the
lowest overall are reported.

Public API:
    search(data, ...) -> SearchSolution

The search() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from bestsubset.selection import search
    >>> solution = search(rows, min_subset_size=2)
    >>> print(solution.best.subset, solution.best.aic)
    >>> print(solution.summary())
"""

from bestsubset.selection.design import SearchDesign, DEFAULT_MIN_SUBSET_SIZE
from bestsubset.selection.solution import SearchSolution
from bestsubset.selection.solvers import search
from bestsubset.selection._common import FitResult, SizeResult, SearchParams
from bestsubset.selection._combinations import (
    generate_combinations,
    iter_combinations,
    count_combinations,
)
from bestsubset.selection._fit import fit_subset, ModelFitter
from bestsubset.selection._worker import search_size

__all__ = [
    "search",
    "SearchDesign",
    "SearchSolution",
    "SearchParams",
    "FitResult",
    "SizeResult",
    "DEFAULT_MIN_SUBSET_SIZE",
    "generate_combinations",
    "iter_combinations",
    "count_combinations",
    "fit_subset",
    "ModelFitter",
    "search_size",
]
