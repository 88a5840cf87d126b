"""
Common data structures for best-subset search.

FitResult is produced once per fitted feature subset. SizeResult holds the
winner for one subset size, and SearchParams is the payload wrapped by
Result[P] and exposed through SearchSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import math

import numpy as np
from numpy.typing import NDArray

# Scores this close are a tie; the incumbent keeps its place
AIC_TIE_RTOL = 1e-12
AIC_TIE_ATOL = 1e-12


def improves(candidate: float, incumbent: float) -> bool:
    """
    True when candidate is a strictly better (lower) AIC than incumbent.

    Scores equal within AIC_TIE_RTOL / AIC_TIE_ATOL count as ties and do
    not improve, so whichever result was seen first is kept.
    """
    if not candidate < incumbent:
        return False
    return not math.isclose(
        candidate, incumbent, rel_tol=AIC_TIE_RTOL, abs_tol=AIC_TIE_ATOL
    )


@dataclass(frozen=True)
class FitResult:
    """
    One OLS fit of a feature subset.

    - subset: strictly increasing explanatory column indices
    - mse: mean squared residual over all rows
    - aic: N ln(MSE) + 2k, -inf for a perfect fit, +inf for the
      "no valid model" sentinel
    - coefficients: fitted β, one per subset column (no intercept)
    """
    subset: tuple[int, ...]
    mse: float
    aic: float
    coefficients: NDArray[np.floating[Any]] | None = None

    @classmethod
    def no_valid_model(cls) -> FitResult:
        """Sentinel reported when every subset of a size was singular."""
        return cls(subset=(), mse=math.inf, aic=math.inf, coefficients=None)

    @property
    def size(self) -> int:
        return len(self.subset)

    @property
    def is_valid(self) -> bool:
        """False only for the no-valid-model sentinel."""
        return self.aic != math.inf

    @property
    def is_degenerate(self) -> bool:
        """True for a perfect fit (MSE == 0, AIC == -inf)."""
        return self.aic == -math.inf


@dataclass(frozen=True)
class SizeResult:
    """
    Best fit among all subsets of one size.

    - size: subset size searched
    - best: minimum-AIC FitResult, first-encountered on ties
    - n_evaluated: subsets whose fit succeeded
    - n_singular: subsets skipped because their design was singular
    """
    size: int
    best: FitResult
    n_evaluated: int
    n_singular: int

    @property
    def subset(self) -> tuple[int, ...]:
        return self.best.subset

    @property
    def aic(self) -> float:
        return self.best.aic

    @property
    def mse(self) -> float:
        return self.best.mse

    @property
    def coefficients(self) -> NDArray[np.floating[Any]] | None:
        return self.best.coefficients

    @property
    def is_valid(self) -> bool:
        return self.best.is_valid


@dataclass(frozen=True)
class SearchParams:
    """
    Parameter payload for a completed search.

    - per_size: one SizeResult per size searched, ascending by size
    - best: minimum-AIC SizeResult, smallest size on ties
    """
    per_size: tuple[SizeResult, ...]
    best: SizeResult
