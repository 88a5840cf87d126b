"""
Search Design.

SearchDesign wraps a dataset and the search configuration. It splits the
table into the explanatory matrix X and the response y, freezes both, and
validates every fatal precondition so that no worker is ever started on
bad input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from bestsubset.core.datasource import DataSource
from bestsubset.core.exceptions import InvalidConfigurationError
from bestsubset.core.compute.linalg.qr import DEFAULT_RANK_TOL
from bestsubset.core.validation import (
    check_array,
    check_2d,
    check_finite,
    check_min_samples,
    check_min_columns,
    check_int_range,
)

# Searches start at this subset size unless configured otherwise
DEFAULT_MIN_SUBSET_SIZE = 4


@dataclass(frozen=True)
class SearchDesign:
    """
    Validated search input.

    Immutable after construction; X and y are read-only arrays shared by
    every worker.

    Construction:
        SearchDesign.from_rows(rows)                        # last column = response
        SearchDesign.from_datasource(ds)                    # last column = response
        SearchDesign.from_datasource(ds, response='mv')     # named response
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _feature_names: tuple[str, ...]
    _response_name: str
    _min_subset_size: int
    _max_subset_size: int
    _tol: float
    _source: DataSource | None = None

    @classmethod
    def from_rows(
        cls,
        rows: Any,
        *,
        columns: list[str] | None = None,
        min_subset_size: int = DEFAULT_MIN_SUBSET_SIZE,
        max_subset_size: int | None = None,
        tol: float = DEFAULT_RANK_TOL,
    ) -> SearchDesign:
        """
        Build from rows of numbers; the last column is the response.

        Raises:
            InputError: Empty data, ragged rows, non-numeric or non-finite values
            InvalidConfigurationError: Subset size bounds out of range
        """
        data = check_array(rows, 'data')
        if data.ndim == 1 and data.size == 0:
            data = data.reshape(0, 0)
        check_2d(data, 'data')
        check_min_samples(data, 1, 'data')
        check_min_columns(data, 2, 'data')
        check_finite(data, 'data')

        L = data.shape[1]
        names = list(columns) if columns is not None else (
            [f"x{i}" for i in range(L - 1)] + ["y"]
        )
        if len(names) != L:
            raise InvalidConfigurationError(
                f"columns: got {len(names)} names for {L} columns",
                option='columns',
                value=names,
            )

        return cls._build(
            data[:, :-1], data[:, -1],
            feature_names=tuple(str(n) for n in names[:-1]),
            response_name=str(names[-1]),
            min_subset_size=min_subset_size,
            max_subset_size=max_subset_size,
            tol=tol,
            source=None,
        )

    @classmethod
    def from_datasource(
        cls,
        source: DataSource,
        *,
        response: str | None = None,
        min_subset_size: int = DEFAULT_MIN_SUBSET_SIZE,
        max_subset_size: int | None = None,
        tol: float = DEFAULT_RANK_TOL,
    ) -> SearchDesign:
        """
        Build from a DataSource.

        Args:
            source: The DataSource
            response: Response column. If None, uses the last column.
                Every other column is explanatory, in table order.
        """
        columns = source.columns
        if response is None:
            if not columns:
                check_min_columns(np.empty((source.n_observations, 0)), 2, 'data')
            response = columns[-1]
        elif response not in source:
            raise InvalidConfigurationError(
                f"response: no column '{response}'. Available: {list(columns)}",
                option='response',
                value=response,
            )

        feature_names = tuple(c for c in columns if c != response)
        data = source.to_matrix(feature_names + (response,))
        check_2d(data, 'data')
        check_min_samples(data, 1, 'data')
        check_min_columns(data, 2, 'data')
        check_finite(data, 'data')

        return cls._build(
            data[:, :-1], data[:, -1],
            feature_names=feature_names,
            response_name=response,
            min_subset_size=min_subset_size,
            max_subset_size=max_subset_size,
            tol=tol,
            source=source,
        )

    @classmethod
    def _build(
        cls,
        X: NDArray,
        y: NDArray,
        *,
        feature_names: tuple[str, ...],
        response_name: str,
        min_subset_size: int,
        max_subset_size: int | None,
        tol: float,
        source: DataSource | None,
    ) -> SearchDesign:
        """Internal builder: configuration checks and freezing."""
        p = X.shape[1]

        min_size = check_int_range(
            min_subset_size, 'min_subset_size', low=1, high=p
        )
        if max_subset_size is None:
            max_size = p
        else:
            max_size = check_int_range(
                max_subset_size, 'max_subset_size', low=1, high=p
            )
        if min_size > max_size:
            raise InvalidConfigurationError(
                f"min_subset_size ({min_size}) exceeds max_subset_size ({max_size})",
                option='min_subset_size',
                value=min_size,
            )
        if not (isinstance(tol, float) or isinstance(tol, int)) or not 0 < tol < 1:
            raise InvalidConfigurationError(
                f"tol: must be in (0, 1), got {tol!r}", option='tol', value=tol
            )

        X = np.array(X, dtype=np.float64, order='F')
        y = np.array(y, dtype=np.float64)
        X.setflags(write=False)
        y.setflags(write=False)

        return cls(
            _X=X,
            _y=y,
            _feature_names=feature_names,
            _response_name=response_name,
            _min_subset_size=min_size,
            _max_subset_size=max_size,
            _tol=float(tol),
            _source=source,
        )

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Explanatory matrix (n x p), read only."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,), read only."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._X.shape[0]

    @property
    def n_explanatory(self) -> int:
        """Number of explanatory columns."""
        return self._X.shape[1]

    @property
    def feature_names(self) -> tuple[str, ...]:
        return self._feature_names

    @property
    def response_name(self) -> str:
        return self._response_name

    @property
    def min_subset_size(self) -> int:
        return self._min_subset_size

    @property
    def max_subset_size(self) -> int:
        return self._max_subset_size

    @property
    def sizes(self) -> range:
        """Subset sizes to search, ascending."""
        return range(self._min_subset_size, self._max_subset_size + 1)

    @property
    def tol(self) -> float:
        """Relative rank tolerance for the QR solve."""
        return self._tol

    @property
    def source(self) -> DataSource | None:
        """Original DataSource, if available."""
        return self._source
