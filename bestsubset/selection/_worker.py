"""
Per-size search worker.

search_size() is the unit of work handed to an executor: it owns its running
best exclusively and returns a single SizeResult. It is a module-level
function so process pools can pickle it.
"""

from __future__ import annotations

from typing import Any
import logging

import numpy as np
from numpy.typing import NDArray

from bestsubset.core.exceptions import SingularModelError
from bestsubset.core.compute.linalg.qr import DEFAULT_RANK_TOL
from bestsubset.selection._common import FitResult, SizeResult, improves
from bestsubset.selection._combinations import iter_combinations
from bestsubset.selection._fit import ModelFitter

logger = logging.getLogger(__name__)


def search_size(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    size: int,
    *,
    tol: float = DEFAULT_RANK_TOL,
) -> SizeResult:
    """
    Best subset of one size by AIC.

    Every subset of the given size is fitted in lexicographic order. A
    candidate replaces the running best only when its AIC is lower by more
    than the tie tolerance, so the earliest subset wins ties. Singular
    subsets are counted and skipped.

    Args:
        X: Explanatory matrix (n x p), read only
        y: Response vector (n,)
        size: Subset size to search
        tol: Relative rank tolerance for the QR solve

    Returns:
        SizeResult; its best is FitResult.no_valid_model() when every
        subset was singular
    """
    fitter = ModelFitter(X, y, tol=tol)
    best: FitResult | None = None
    n_evaluated = 0
    n_singular = 0

    for subset in iter_combinations(fitter.n_explanatory, size):
        try:
            result = fitter.fit(subset)
        except SingularModelError as e:
            n_singular += 1
            logger.debug("skipping singular subset %s (rank %s of %s)",
                         subset, e.rank, e.expected_rank)
            continue

        n_evaluated += 1
        if best is None or improves(result.aic, best.aic):
            best = result

    if best is None:
        logger.info("size %d: no valid model (%d singular subsets)", size, n_singular)
        best = FitResult.no_valid_model()

    return SizeResult(
        size=size,
        best=best,
        n_evaluated=n_evaluated,
        n_singular=n_singular,
    )
