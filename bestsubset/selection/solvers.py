"""
Solver dispatch for best-subset search.

This module provides the search() function (public API) and backend selection.
"""

from __future__ import annotations

from typing import Any

from bestsubset.core.datasource import DataSource
from bestsubset.core.exceptions import InvalidConfigurationError
from bestsubset.core.compute.linalg.qr import DEFAULT_RANK_TOL
from bestsubset.selection.design import SearchDesign, DEFAULT_MIN_SUBSET_SIZE
from bestsubset.selection.solution import SearchSolution
from bestsubset.selection.backends.cpu import CPUSearchBackend, ExecutorKind


def search(
    data: Any,
    *,
    response: str | None = None,
    min_subset_size: int | None = None,
    max_subset_size: int | None = None,
    executor: ExecutorKind = 'process',
    max_workers: int | None = None,
    tol: float | None = None,
) -> SearchSolution:
    """
    Exhaustive best-subset OLS search scored by AIC.

    For every subset size from min_subset_size to max_subset_size, fits
        y ≈ X[:, S] β        (no intercept)
    for every subset S of that size, scores it by
        AIC = N ln(MSE) + 2|S|
    and keeps the lowest. Sizes are searched concurrently, one worker each.

    This is the primary public API. All input validation, backend selection,
    and result wrapping happens here.

    Args:
        data: SearchDesign, DataSource, pandas DataFrame, or 2D array-like of
            rows. For arrays the last column is the response.
        response: Response column name (DataSource / DataFrame only).
            Defaults to the last column.
        min_subset_size: Smallest subset size searched (default 4)
        max_subset_size: Largest subset size searched (default: all
            explanatory columns)
        executor: 'process', 'thread', or 'sequential'
        max_workers: Worker limit (default: CPU count)
        tol: Relative rank tolerance (default 1e-7); subsets whose design
            matrix is rank-deficient at this tolerance are skipped

        A prebuilt SearchDesign already carries its sizes, tolerance and
        response; passing any of those options with one is an error.

    Returns:
        SearchSolution with per-size winners, overall winner, and summary()

    Raises:
        InputError: If the dataset is empty, ragged, or non-numeric
        InvalidConfigurationError: If subset sizes or executor settings are
            invalid, or design options accompany a prebuilt SearchDesign

    Example:
        >>> import numpy as np
        >>> from bestsubset import search
        >>>
        >>> rng = np.random.default_rng(0)
        >>> X = rng.standard_normal((50, 6))
        >>> y = X[:, [0, 2]] @ [1.5, -2.0] + rng.standard_normal(50) * 0.1
        >>> solution = search(np.column_stack([X, y]), min_subset_size=1)
        >>> print(solution.summary())
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    design = _build_design(
        data,
        response=response,
        min_subset_size=min_subset_size,
        max_subset_size=max_subset_size,
        tol=tol,
    )

    # === Select Backend ===
    backend_impl = _get_backend(executor, max_workers)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return SearchSolution(_result=result, _design=design)


def _build_design(
    data: Any,
    *,
    response: str | None,
    min_subset_size: int | None,
    max_subset_size: int | None,
    tol: float | None,
) -> SearchDesign:
    """Dispatch on the input type to the matching SearchDesign builder."""
    if isinstance(data, SearchDesign):
        given = {
            'response': response,
            'min_subset_size': min_subset_size,
            'max_subset_size': max_subset_size,
            'tol': tol,
        }
        for option, value in given.items():
            if value is not None:
                raise InvalidConfigurationError(
                    f"{option}: fixed by the SearchDesign; build the design "
                    f"with the desired {option} instead",
                    option=option,
                    value=value,
                )
        return data

    if min_subset_size is None:
        min_subset_size = DEFAULT_MIN_SUBSET_SIZE
    if tol is None:
        tol = DEFAULT_RANK_TOL

    if _is_dataframe(data):
        data = DataSource.from_dataframe(data)

    if isinstance(data, DataSource):
        return SearchDesign.from_datasource(
            data,
            response=response,
            min_subset_size=min_subset_size,
            max_subset_size=max_subset_size,
            tol=tol,
        )

    if response is not None:
        raise InvalidConfigurationError(
            "response: only supported for DataSource or DataFrame input; "
            "array rows always use the last column",
            option='response',
            value=response,
        )
    return SearchDesign.from_rows(
        data,
        min_subset_size=min_subset_size,
        max_subset_size=max_subset_size,
        tol=tol,
    )


def _is_dataframe(obj: Any) -> bool:
    import pandas as pd
    return isinstance(obj, pd.DataFrame)


def _get_backend(executor: ExecutorKind, max_workers: int | None) -> CPUSearchBackend:
    """
    Select and instantiate the backend.

    Raises:
        InvalidConfigurationError: If executor or max_workers is invalid
    """
    return CPUSearchBackend(executor=executor, max_workers=max_workers)
