"""
Generic result container for bestsubset computations.

The Result class provides a standardized envelope around a domain payload.
It carries timing, backend identity and non-fatal warnings alongside the
parameters so that reporting code never has to reach into backends.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (sizes searched, counts, executor)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (per-size bests, global best)
        info: Structured metadata (size range, models fitted, executor)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SearchParams(per_size=per_size, best=best),
        ...     info={'n_models': 15, 'n_singular': 0},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_process'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
