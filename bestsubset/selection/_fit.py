"""
OLS fit and scoring of a single feature subset.

The model is y ≈ X[:, subset] β with no intercept column. The score is

    AIC = N ln(MSE) + 2k

where MSE is the mean squared residual over all N rows and k the number of
features in the subset. A perfect fit (MSE == 0) scores -inf.
"""

from __future__ import annotations

from typing import Any, Sequence
import logging
import math

import numpy as np
from numpy.typing import NDArray

from bestsubset.core.exceptions import SingularModelError
from bestsubset.core.compute.linalg.qr import qr_solve_cpu, DEFAULT_RANK_TOL
from bestsubset.selection._common import FitResult

logger = logging.getLogger(__name__)


def aic_from_mse(mse: float, n: int, k: int) -> float:
    """N ln(MSE) + 2k, or -inf when MSE is exactly zero."""
    if mse == 0.0:
        return -math.inf
    return n * math.log(mse) + 2.0 * k


def fit_subset(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    subset: Sequence[int],
    *,
    tol: float = DEFAULT_RANK_TOL,
) -> FitResult:
    """
    Fit OLS on the selected columns and score it.

    Args:
        X: Explanatory matrix (n x p), read only
        y: Response vector (n,)
        subset: Strictly increasing column indices into X
        tol: Relative rank tolerance for the QR solve

    Returns:
        FitResult with MSE, AIC and coefficients

    Raises:
        SingularModelError: If the selected columns are linearly dependent
            or the solve produces non-finite coefficients
    """
    subset = tuple(int(j) for j in subset)
    X_sub = X[:, subset]
    n = X_sub.shape[0]
    k = len(subset)

    try:
        coefficients = qr_solve_cpu(X_sub, y, check_rank=True, tol=tol)
    except SingularModelError as e:
        raise SingularModelError(
            f"subset {subset}: {e}",
            matrix_name=e.matrix_name,
            rank=e.rank,
            expected_rank=e.expected_rank,
            subset=subset,
        ) from e

    if not np.all(np.isfinite(coefficients)):
        raise SingularModelError(
            f"subset {subset}: least squares solve produced non-finite coefficients",
            matrix_name='X',
            expected_rank=k,
            subset=subset,
        )

    residuals = y - X_sub @ coefficients
    mse = float(residuals @ residuals) / n
    aic = aic_from_mse(mse, n, k)
    if aic == -math.inf:
        logger.debug("subset %s: perfect fit (MSE == 0), AIC = -inf", subset)

    coefficients.setflags(write=False)
    return FitResult(subset=subset, mse=mse, aic=aic, coefficients=coefficients)


class ModelFitter:
    """
    Fitter bound to one dataset.

    Holds the read-only explanatory matrix and response so callers only
    pass the subset.
    """

    def __init__(
        self,
        X: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
        tol: float = DEFAULT_RANK_TOL,
    ):
        self.X = X
        self.y = y
        self.tol = tol

    @property
    def n_explanatory(self) -> int:
        return self.X.shape[1]

    def fit(self, subset: Sequence[int]) -> FitResult:
        """Fit and score one subset; see fit_subset()."""
        return fit_subset(self.X, self.y, subset, tol=self.tol)
