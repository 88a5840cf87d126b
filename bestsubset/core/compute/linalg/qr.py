"""
QR decomposition and least squares solve.

Provides the least squares kernel used by the model fitter. LAPACK does the
work through NumPy (Householder QR) and SciPy (triangular back-substitution).
"""

from dataclasses import dataclass
from typing import Literal, Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from bestsubset.core.exceptions import SingularModelError

# Relative rank tolerance, same default as R's lm.fit()
DEFAULT_RANK_TOL = 1e-7


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x k where k = min(n, p) for reduced mode)
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
        tol: Relative tolerance used for the rank decision
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int
    tol: float


def qr_cpu(
    X: NDArray[np.floating[Any]],
    mode: Literal['reduced', 'complete'] = 'reduced',
    tol: float = DEFAULT_RANK_TOL,
) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).

    Computes X = QR where Q is orthogonal and R is upper triangular.

    Column j counts toward the numerical rank when |R[j, j]|, the part of
    column j not explained by the columns before it, exceeds tol times the
    norm of column j itself. Each column is judged on its own scale, so
    columns of very different magnitude do not mask one another. A column
    that is a linear combination of earlier columns leaves |R[j, j]| at
    roundoff level relative to its norm.

    Args:
        X: Matrix to decompose (n x p)
        mode: 'reduced' for economy QR (Q is n x k, R is k x p where k = min(n,p))
              'complete' for full QR (Q is n x n, R is n x p)
        tol: Relative tolerance for rank determination

    Returns:
        QRResult with Q, R, and numerical rank
    """
    Q, R = np.linalg.qr(X, mode=mode)

    diag_R = np.abs(np.diag(R))
    col_norms = np.linalg.norm(X, axis=0)[:len(diag_R)]
    rank = int(np.sum(diag_R > tol * col_norms))

    return QRResult(Q=Q, R=R, rank=rank, tol=tol)


def qr_solve_cpu(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    check_rank: bool,
    tol: float = DEFAULT_RANK_TOL,
) -> NDArray[np.floating[Any]]:
    """
    Solve least squares via QR decomposition (CPU).

    Solves: min_β ||y - Xβ||² via QR decomposition of X.

    The solution is computed as:
        X = QR
        β = R⁻¹ Q'y

    Args:
        X: Design matrix (n x p)
        y: Response vector (n,)
        check_rank: If True, raise SingularModelError on rank-deficient X
        tol: Relative tolerance for rank determination

    Returns:
        Coefficient vector β (p,)

    Raises:
        SingularModelError: If X is rank-deficient and check_rank=True.
            Fewer rows than columns is always rank-deficient.
    """
    n, p = X.shape
    qr_result = qr_cpu(X, mode='reduced', tol=tol)

    if check_rank and qr_result.rank < p:
        raise SingularModelError(
            f"Design matrix is rank-deficient: rank={qr_result.rank}, expected={p}. "
            f"This indicates perfect multicollinearity.",
            matrix_name='X',
            rank=qr_result.rank,
            expected_rank=p
        )

    Qty = qr_result.Q.T @ y

    # R is p x p upper triangular (reduced QR with n >= p)
    beta = solve_triangular(qr_result.R[:p, :p], Qty[:p], lower=False)

    return beta
