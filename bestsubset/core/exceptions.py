"""
Exception hierarchy for bestsubset.

All exceptions inherit from BestSubsetError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Fatal vs recoverable:
    InputError and InvalidConfigurationError abort a search before any
    worker starts. SingularModelError is raised per feature subset and is
    absorbed by the worker that owns that subset.
"""


class BestSubsetError(Exception):
    """Base exception for all bestsubset errors."""
    pass


class InputError(BestSubsetError):
    """
    Input dataset failed validation.

    Raised when the dataset is empty, has too few columns, or contains
    values that are not finite numbers.
    """
    pass


class DimensionError(InputError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when rows have different lengths, when an array has the wrong
    number of dimensions, or when paired arrays disagree in length.
    """
    pass


class InvalidConfigurationError(BestSubsetError):
    """
    Search configuration is out of range.

    Raised for subset size bounds outside [1, n_explanatory], an inverted
    size range, an unknown executor, or a non-positive worker count.

    Attributes:
        option: Name of the offending option, if known
        value: The rejected value, if known
    """

    def __init__(
        self,
        message: str,
        option: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.option = option
        self.value = value


class NumericalError(BestSubsetError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularModelError(NumericalError):
    """
    Design matrix of a feature subset is singular.

    Raised when the columns selected for a model are linearly dependent
    (duplicate or collinear columns, or fewer rows than columns), so the
    least squares problem has no unique solution.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (number of columns)
        subset: Feature subset whose fit failed, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        subset: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
        self.subset = subset
