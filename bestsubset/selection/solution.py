"""
Search solution types.

SearchSolution wraps the backend Result and provides accessors for the
per-size winners, the overall winner, and a text report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import math

from bestsubset.core.result import Result
from bestsubset.selection._common import SearchParams, SizeResult

if TYPE_CHECKING:
    import pandas as pd
    from bestsubset.selection.design import SearchDesign


@dataclass
class SearchSolution:
    """
    User-facing best-subset search results.

    Per-size results are ordered by ascending subset size; every searched
    size is present, with a +inf AIC entry where no subset could be fitted.
    """
    _result: Result[SearchParams]
    _design: 'SearchDesign'

    @property
    def per_size(self) -> dict[int, SizeResult]:
        """Size -> SizeResult, ascending by size."""
        return {r.size: r for r in self._result.params.per_size}

    @property
    def best(self) -> SizeResult:
        """Minimum-AIC result across all sizes searched."""
        return self._result.params.best

    @property
    def feature_names(self) -> tuple[str, ...]:
        return self._design.feature_names

    @property
    def response_name(self) -> str:
        return self._design.response_name

    @property
    def best_features(self) -> tuple[str, ...]:
        """Names of the columns in the overall best subset."""
        return self.names_of(self.best.subset)

    def names_of(self, subset: tuple[int, ...]) -> tuple[str, ...]:
        """Map explanatory column indices to column names."""
        return tuple(self._design.feature_names[j] for j in subset)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_frame(self) -> 'pd.DataFrame':
        """One row per subset size: subset, feature names, AIC, MSE, counts."""
        import pandas as pd

        rows = [
            {
                'size': r.size,
                'subset': r.subset,
                'features': ", ".join(self.names_of(r.subset)),
                'aic': r.aic,
                'mse': r.mse,
                'n_evaluated': r.n_evaluated,
                'n_singular': r.n_singular,
            }
            for r in self._result.params.per_size
        ]
        return pd.DataFrame(rows).set_index('size')

    def summary(self, decimals: int = 4) -> str:
        """Text report: best model per size, then the overall best."""
        lines = [
            "Best Subset Regression Results",
            "=" * 60,
            f"Observations: {self._design.n}",
            f"Explanatory columns: {self._design.n_explanatory}",
            f"Response: {self.response_name}",
            f"Subset sizes: {self._design.min_subset_size}..{self._design.max_subset_size}",
            "-" * 60,
        ]

        for r in self._result.params.per_size:
            lines.extend(self._format_size(r, decimals))
            lines.append("")

        best = self.best
        lines.append("-" * 60)
        lines.append(f"Overall best (size {best.size}):")
        lines.extend(self._format_size(best, decimals)[1:])

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def _format_size(self, r: SizeResult, decimals: int) -> list[str]:
        header = f"Size {r.size}:"
        if not r.is_valid:
            return [header, "  Best Model Features: (no valid model)"]
        names = ", ".join(self.names_of(r.subset))
        return [
            header,
            f"  Best Model Features: {list(r.subset)} ({names})",
            f"  Best Model AIC: {_format_float(r.aic, decimals)}",
            f"  Best Model MSE: {_format_float(r.mse, decimals)}",
        ]

    def __repr__(self) -> str:
        return (
            f"SearchSolution(n={self._design.n}, p={self._design.n_explanatory}, "
            f"sizes={self._design.min_subset_size}..{self._design.max_subset_size}, "
            f"best={list(self.best.subset)}, aic={self.best.aic:.4f})"
        )


def _format_float(value: float, decimals: int) -> str:
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    return f"{value:.{decimals}f}"
