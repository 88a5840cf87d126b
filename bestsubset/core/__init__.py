"""
Core infrastructure for bestsubset.

This module provides shared abstractions and utilities used by the search
domain.

Key components:
    datasource: DataSource table container
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and linear algebra kernels
"""

from bestsubset.core.datasource import DataSource
from bestsubset.core.result import Result
from bestsubset.core.exceptions import (
    BestSubsetError,
    InputError,
    DimensionError,
    InvalidConfigurationError,
    NumericalError,
    SingularModelError,
)

__all__ = [
    # Data
    "DataSource",
    # Result
    "Result",
    # Exceptions
    "BestSubsetError",
    "InputError",
    "DimensionError",
    "InvalidConfigurationError",
    "NumericalError",
    "SingularModelError",
]
