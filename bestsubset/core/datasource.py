"""
DataSource for bestsubset.

DataSource is the "I have a table" abstraction. It holds named numeric
columns in their original order and doesn't know which one is the response;
that decision belongs to the search design.

Usage:
    from bestsubset import DataSource

    ds = DataSource.from_arrays(data=rows)
    ds = DataSource.from_file("housing.csv")
    ds = DataSource.from_dataframe(df)

    ds.columns       # ('crim', 'zn', ..., 'mv')
    ds['mv']         # one column as a float64 array
    ds.to_matrix()   # (n x L) matrix in column order
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING
import logging
import numpy as np
from numpy.typing import NDArray

from bestsubset.core.exceptions import DimensionError, InputError
from bestsubset.core.validation import check_array, check_2d, check_consistent_length

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


@dataclass
class DataSource:
    """
    Ordered collection of named numeric columns.

    Construct via factory classmethods, not directly.
    """
    _data: dict[str, NDArray[np.floating[Any]]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Array Access ===

    def keys(self) -> frozenset[str]:
        """Return the names of all available columns."""
        return frozenset(self._data.keys())

    def __getitem__(self, key: str) -> NDArray[np.floating[Any]]:
        """
        Access a named column.

        Raises:
            KeyError: If key not found, with helpful message listing available keys
        """
        if key not in self._data:
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {list(self.columns)}"
            )
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        """Check if a column exists."""
        return key in self._data

    # === Properties ===

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names in table order."""
        return tuple(self._data.keys())

    @property
    def n_observations(self) -> int:
        """Number of rows."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        """Source metadata (origin, path, dropped identifier column)."""
        return self._metadata.copy()

    def to_matrix(self, columns: list[str] | tuple[str, ...] | None = None) -> NDArray[np.floating[Any]]:
        """
        Stack columns into an (n x k) float64 matrix.

        Args:
            columns: Column names to stack, default all in table order
        """
        names = self.columns if columns is None else tuple(columns)
        if not names:
            return np.empty((self.n_observations, 0), dtype=np.float64)
        return np.column_stack([self[name] for name in names])

    # === Factory Methods ===

    @classmethod
    def from_arrays(
        cls,
        *,
        data: Any = None,
        columns: list[str] | None = None,
        X: Any = None,
        y: Any = None,
    ) -> DataSource:
        """
        Construct from array-likes.

        Either pass ``data`` (rows of L numbers, response last) with optional
        column names, or pass ``X`` (explanatory matrix) and ``y`` (response
        vector); ``y`` becomes the last column.
        """
        if data is not None:
            matrix = check_array(data, 'data')
            if matrix.ndim == 1:
                matrix = matrix.reshape(-1, 1)
            check_2d(matrix, 'data')
            if columns is None:
                columns = _default_columns(matrix.shape[1])
        elif X is not None and y is not None:
            X_arr = check_array(X, 'X')
            if X_arr.ndim == 1:
                X_arr = X_arr.reshape(-1, 1)
            check_2d(X_arr, 'X')
            y_arr = check_array(y, 'y').ravel()
            check_consistent_length(X_arr, y_arr, names=('X', 'y'))
            matrix = np.column_stack([X_arr, y_arr])
            if columns is None:
                columns = _default_columns(matrix.shape[1])
        else:
            raise ValueError("Must provide data, or both X and y")

        if len(columns) != matrix.shape[1]:
            raise InputError(
                f"columns: got {len(columns)} names for {matrix.shape[1]} columns"
            )

        storage = {
            str(name): np.ascontiguousarray(matrix[:, i], dtype=np.float64)
            for i, name in enumerate(columns)
        }
        if len(storage) != len(columns):
            raise InputError(f"columns: duplicate names in {list(columns)}")

        return cls(
            _data=storage,
            _metadata={'n_observations': matrix.shape[0], 'source': 'arrays'},
        )

    @classmethod
    def from_file(cls, path: str | Path) -> DataSource:
        """Construct from file (CSV, TSV with a header row; or NPY)."""
        path = Path(path)
        suffix = path.suffix.lower()

        if not path.exists():
            raise InputError(f"{path}: no such file")

        if suffix in ('.csv', '.tsv'):
            import pandas as pd
            sep = '\t' if suffix == '.tsv' else ','
            try:
                _check_field_counts(path, sep)
                df = pd.read_csv(path, sep=sep)
            except pd.errors.EmptyDataError as e:
                raise InputError(f"{path}: dataset is empty") from e
            except pd.errors.ParserError as e:
                raise InputError(f"{path}: cannot parse table: {e}") from e
            except (OSError, UnicodeDecodeError) as e:
                raise InputError(f"{path}: cannot read file: {e}") from e
            return cls.from_dataframe(df, source_path=str(path))
        elif suffix == '.npy':
            try:
                data = np.load(path, allow_pickle=False)
            except (OSError, ValueError) as e:
                raise InputError(f"{path}: cannot load array: {e}") from e
            ds = cls.from_arrays(data=data)
            ds._metadata['source_path'] = str(path)
            return ds
        else:
            raise InputError(f"Unknown file format: {suffix}")

    @classmethod
    def from_dataframe(cls, df: 'pd.DataFrame', *, source_path: str | None = None) -> DataSource:
        """
        Construct from pandas DataFrame.

        A leading non-numeric column is treated as a row identifier and
        dropped. Any other non-numeric column is an InputError naming the
        column and the first value that does not parse as a number.
        """
        import pandas as pd
        from pandas.api.types import is_numeric_dtype

        if len(df) == 0:
            raise InputError(
                f"{source_path or 'dataframe'}: dataset is empty (no rows)"
            )

        dropped: list[str] = []
        if len(df.columns) > 0 and not is_numeric_dtype(df.iloc[:, 0]):
            dropped.append(str(df.columns[0]))
            logger.debug("dropping identifier column %r", df.columns[0])
            df = df.iloc[:, 1:]

        storage: dict[str, NDArray[np.floating[Any]]] = {}
        for col in df.columns:
            series = df[col]
            if not is_numeric_dtype(series):
                coerced = pd.to_numeric(series, errors='coerce')
                bad = series[coerced.isna() & series.notna()]
                shown = repr(bad.iloc[0]) if len(bad) else repr(series.dtype)
                raise InputError(
                    f"column '{col}': unparsable numeric value {shown}"
                )
            storage[str(col)] = series.to_numpy(dtype=np.float64)

        metadata: dict[str, Any] = {
            'n_observations': len(df),
            'source': 'dataframe',
            'dropped_columns': dropped,
        }
        if source_path:
            metadata['source_path'] = source_path

        return cls(_data=storage, _metadata=metadata)

    @classmethod
    def build(cls, *args, **kwargs) -> DataSource:
        """
        Convenience factory that dispatches to appropriate from_* method.

        Examples:
            DataSource.build(data=rows)       # from_arrays
            DataSource.build("data.csv")      # from_file
        """
        if args and isinstance(args[0], (str, Path)):
            return cls.from_file(args[0], **kwargs)
        else:
            return cls.from_arrays(**kwargs)


def _default_columns(n_columns: int) -> list[str]:
    """Names x0..x{L-2} for explanatory columns and 'y' for the response."""
    return [f"x{i}" for i in range(n_columns - 1)] + ["y"]


def _check_field_counts(path: Path, sep: str) -> None:
    """
    Reject delimited files whose records disagree with the header width.

    pandas pads short records with NaN, which would later surface as a
    non-finite value instead of a row-length mismatch.

    Raises:
        DimensionError: Naming the first line with the wrong field count
    """
    with open(path, newline='', encoding='utf-8') as f:
        reader = csv.reader(f, delimiter=sep)
        header = next(reader, None)
        if header is None:
            return
        expected = len(header)
        for record in reader:
            if not record:
                continue
            if len(record) != expected:
                raise DimensionError(
                    f"{path}: line {reader.line_num} has {len(record)} fields, "
                    f"expected {expected} (row-length mismatch)"
                )
