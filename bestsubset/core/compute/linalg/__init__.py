"""
Linear algebra kernels for bestsubset.

All functions follow these conventions:
    - Functions use NumPy/SciPy (LAPACK under the hood)
    - Each decomposition returns a structured result dataclass
    - Errors are raised immediately with clear messages
"""

from bestsubset.core.compute.linalg.qr import (
    DEFAULT_RANK_TOL,
    QRResult,
    qr_cpu,
    qr_solve_cpu,
)

__all__ = [
    "DEFAULT_RANK_TOL",
    "QRResult",
    "qr_cpu",
    "qr_solve_cpu",
]
