"""
Tests for SearchDesign construction and validation.

Validates:
    - Splitting rows into read-only X and y
    - Subset size defaults and bounds
    - Named response selection from a DataSource
    - Fatal input errors raised before any search starts
"""

import numpy as np
import pytest

from bestsubset.core.datasource import DataSource
from bestsubset.core.exceptions import (
    DimensionError,
    InputError,
    InvalidConfigurationError,
)
from bestsubset.selection import DEFAULT_MIN_SUBSET_SIZE, SearchDesign


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestFromRows:

    def test_last_column_is_response(self, small_rows):
        design = SearchDesign.from_rows(small_rows)
        np.testing.assert_array_equal(design.X, small_rows[:, :4])
        np.testing.assert_array_equal(design.y, small_rows[:, 4])
        assert design.n == 5
        assert design.n_explanatory == 4
        assert design.feature_names == ('x0', 'x1', 'x2', 'x3')
        assert design.response_name == 'y'
        assert design.source is None

    def test_default_sizes(self, small_rows):
        design = SearchDesign.from_rows(small_rows)
        assert design.min_subset_size == DEFAULT_MIN_SUBSET_SIZE == 4
        assert design.max_subset_size == 4
        assert list(design.sizes) == [4]

    def test_explicit_sizes(self, sparse_signal_rows):
        design = SearchDesign.from_rows(
            sparse_signal_rows, min_subset_size=2, max_subset_size=5
        )
        assert list(design.sizes) == [2, 3, 4, 5]

    def test_arrays_are_read_only(self, small_rows):
        design = SearchDesign.from_rows(small_rows)
        assert not design.X.flags.writeable
        assert not design.y.flags.writeable
        with pytest.raises(ValueError):
            design.X[0, 0] = 1.0

    def test_input_not_aliased(self, small_rows):
        design = SearchDesign.from_rows(small_rows)
        small_rows[0, 0] = 99.0
        assert design.X[0, 0] != 99.0

    def test_column_names(self):
        rows = [[1.0, 2.0, 3.0], [2.0, 1.0, 0.0]]
        design = SearchDesign.from_rows(rows, columns=['a', 'b', 'out'], min_subset_size=1)
        assert design.feature_names == ('a', 'b')
        assert design.response_name == 'out'

    def test_column_name_count_mismatch(self):
        with pytest.raises(InvalidConfigurationError):
            SearchDesign.from_rows([[1.0, 2.0]], columns=['a'], min_subset_size=1)


class TestFromDataSource:

    def test_named_response(self, rng):
        data = rng.standard_normal((10, 4))
        ds = DataSource.from_arrays(data=data, columns=['a', 'target', 'b', 'c'])
        design = SearchDesign.from_datasource(ds, response='target', min_subset_size=1)
        assert design.feature_names == ('a', 'b', 'c')
        assert design.response_name == 'target'
        np.testing.assert_array_equal(design.y, data[:, 1])
        np.testing.assert_array_equal(design.X, data[:, [0, 2, 3]])
        assert design.source is ds

    def test_default_response_is_last(self, rng):
        ds = DataSource.from_arrays(data=rng.standard_normal((10, 3)))
        design = SearchDesign.from_datasource(ds, min_subset_size=1)
        assert design.response_name == 'y'

    def test_unknown_response(self, rng):
        ds = DataSource.from_arrays(data=rng.standard_normal((10, 3)))
        with pytest.raises(InvalidConfigurationError, match="no column 'mv'"):
            SearchDesign.from_datasource(ds, response='mv', min_subset_size=1)


# ═══════════════════════════════════════════════════════════════════════
# Fatal errors
# ═══════════════════════════════════════════════════════════════════════


class TestInputErrors:

    def test_empty_rows(self):
        with pytest.raises(InputError, match="dataset is empty"):
            SearchDesign.from_rows([])

    def test_empty_matrix(self):
        with pytest.raises(InputError, match="dataset is empty"):
            SearchDesign.from_rows(np.empty((0, 5)))

    def test_ragged_rows(self):
        with pytest.raises(DimensionError, match="row-length mismatch"):
            SearchDesign.from_rows([[1.0, 2.0, 3.0], [1.0, 2.0]], min_subset_size=1)

    def test_single_column(self):
        with pytest.raises(InputError, match="at least 2 columns"):
            SearchDesign.from_rows([[1.0], [2.0]], min_subset_size=1)

    def test_non_numeric(self):
        with pytest.raises(InputError, match="unparsable numeric value"):
            SearchDesign.from_rows([["1", "x"], ["2", "3"]], min_subset_size=1)

    def test_non_finite(self):
        with pytest.raises(InputError, match="non-finite"):
            SearchDesign.from_rows([[1.0, np.nan], [2.0, 3.0]], min_subset_size=1)


class TestConfigurationErrors:

    def test_default_min_exceeds_columns(self):
        rows = np.ones((5, 3))
        with pytest.raises(InvalidConfigurationError) as exc_info:
            SearchDesign.from_rows(rows)
        assert exc_info.value.option == 'min_subset_size'

    @pytest.mark.parametrize("min_size, max_size", [(0, None), (3, 2), (1, 5), (1, 0)])
    def test_bad_bounds(self, small_rows, min_size, max_size):
        with pytest.raises(InvalidConfigurationError):
            SearchDesign.from_rows(
                small_rows, min_subset_size=min_size, max_subset_size=max_size
            )

    def test_non_integer_size(self, small_rows):
        with pytest.raises(InvalidConfigurationError, match="expected an integer"):
            SearchDesign.from_rows(small_rows, min_subset_size=2.5)

    @pytest.mark.parametrize("tol", [0.0, 1.0, -1e-7, "small"])
    def test_bad_tolerance(self, small_rows, tol):
        with pytest.raises(InvalidConfigurationError):
            SearchDesign.from_rows(small_rows, min_subset_size=1, tol=tol)
