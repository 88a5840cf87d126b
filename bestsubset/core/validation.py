"""
Input validation utilities for bestsubset.

Every check raises on the first problem it finds and names the offending
parameter together with the value it saw. Nothing is repaired silently:
the only conversion performed is turning an array-like into a float64
array.

The dataset checks raise InputError (or its DimensionError subclass);
the configuration check raises InvalidConfigurationError.
"""

from collections.abc import Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from bestsubset.core.exceptions import (
    InputError,
    DimensionError,
    InvalidConfigurationError,
)


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a sequence of rows has one common row length.

    ndarrays are rectangular by construction and pass unchecked. For
    nested sequences the first row sets the expected length.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Raises:
        DimensionError: If any row length differs from the first row's
    """
    if isinstance(rows, np.ndarray) or not isinstance(rows, Sequence):
        return
    lengths = [len(row) if isinstance(row, Sequence) else None for row in rows]
    if not lengths or lengths[0] is None:
        return
    expected = lengths[0]
    for i, length in enumerate(lengths):
        if length != expected:
            raise DimensionError(
                f"{name}: row {i} has length {length}, expected {expected} "
                f"(row-length mismatch)"
            )


def check_array(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert rows or an array-like to a float64 array.

    Args:
        array: Rows of numbers, or any array-like
        name: Parameter name for error messages

    Returns:
        Floating point ndarray (integers are widened to float64)

    Raises:
        DimensionError: If nested rows have different lengths
        InputError: If any value is not a number
    """
    check_rectangular(array, name)
    try:
        converted = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise InputError(f"{name}: not convertible to a numeric array: {e}") from e

    if converted.dtype == object or not np.issubdtype(converted.dtype, np.number):
        raise InputError(
            f"{name}: unparsable numeric value (dtype {converted.dtype}), "
            f"every value must be a number"
        )
    if np.issubdtype(converted.dtype, np.floating):
        return converted
    return converted.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Reject NaN and infinite values.

    Raises:
        InputError: Reporting how many NaN and Inf entries were found
    """
    finite = np.isfinite(array)
    if finite.all():
        return
    n_nan = int(np.isnan(array).sum())
    n_inf = int(np.isinf(array).sum())
    raise InputError(
        f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
    )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Raises:
        DimensionError: If array.ndim != ndim
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...],
) -> None:
    """
    Verify paired arrays share their first dimension.

    Args:
        *arrays: Arrays to compare
        names: One name per array, used in the error message

    Raises:
        ValueError: If len(names) != len(arrays)
        DimensionError: Listing every array's length when they differ
    """
    if len(names) != len(arrays):
        raise ValueError(f"got {len(arrays)} arrays but {len(names)} names")

    lengths = {name: arr.shape[0] for name, arr in zip(names, arrays)}
    if len(set(lengths.values())) > 1:
        details = ", ".join(f"{name}={n}" for name, n in lengths.items())
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Raises:
        InputError: If array has no rows, or fewer than min_samples rows
    """
    n = array.shape[0]
    if n == 0:
        raise InputError(f"{name}: dataset is empty (no rows)")
    if n < min_samples:
        raise InputError(f"{name}: requires at least {min_samples} rows, got {n}")


def check_min_columns(array: NDArray[np.floating[Any]], min_columns: int, name: str) -> None:
    """
    Raises:
        InputError: If a 2D array has fewer than min_columns columns
    """
    L = array.shape[1]
    if L < min_columns:
        raise InputError(
            f"{name}: requires at least {min_columns} columns "
            f"(explanatory columns plus one response), got {L}"
        )


def check_int_range(
    value: Any,
    name: str,
    *,
    low: int,
    high: int | None = None,
) -> int:
    """
    Verify a configuration value is an integer in [low, high].

    Args:
        value: Value to check
        name: Option name for error messages
        low: Inclusive lower bound
        high: Inclusive upper bound, or None for unbounded

    Returns:
        The value as a Python int

    Raises:
        InvalidConfigurationError: If value is not an integer or out of range
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidConfigurationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}",
            option=name,
            value=value,
        )
    value = int(value)
    if value < low or (high is not None and value > high):
        bounds = f"[{low}, {high}]" if high is not None else f">= {low}"
        raise InvalidConfigurationError(
            f"{name}: must be in {bounds}, got {value}",
            option=name,
            value=value,
        )
    return value
