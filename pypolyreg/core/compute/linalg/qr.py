"""
Least-squares kernels.

QR decomposition (LAPACK via NumPy) with triangular back-substitution
(SciPy) for the well-posed case, and an SVD minimum-norm solve for the
underdetermined case. Neither path forms an explicit inverse.
"""

from dataclasses import dataclass
from typing import Literal, Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgError, solve_triangular

from pypolyreg.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x k where k = min(n, p) for reduced mode)
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


@dataclass(frozen=True)
class LstsqResult:
    """
    Result of an SVD least-squares solve.

    Attributes:
        coefficients: Minimum-norm solution (p,)
        rank: Effective rank reported by LAPACK
        singular_values: Singular values of X, descending
    """
    coefficients: NDArray[np.floating[Any]]
    rank: int
    singular_values: NDArray[np.floating[Any]]


def qr_cpu(
    X: NDArray[np.floating[Any]],
    mode: Literal['reduced', 'complete'] = 'reduced'
) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).

    The numerical rank counts diagonal entries of R above
    max(n, p) * eps * max|R_ii|.

    Args:
        X: Matrix to decompose (n x p)
        mode: 'reduced' for economy QR, 'complete' for full QR

    Returns:
        QRResult with Q, R, and numerical rank
    """
    Q, R = np.linalg.qr(X, mode=mode)

    diag_R = np.abs(np.diag(R))
    largest = diag_R.max() if diag_R.size else 0.0
    if np.isfinite(largest) and largest > 0:
        tol = max(X.shape) * np.finfo(X.dtype).eps * largest
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, rank=rank)


def qr_solve_cpu(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    check_rank: bool,
    qr_result: QRResult | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Solve least squares via QR decomposition (CPU).

    Solves min_β ||y - Xβ||² as:
        X = QR
        β = R⁻¹ Q'y   (back substitution)

    Args:
        X: Design matrix (n x p), must have n >= p
        y: Response vector (n,)
        check_rank: If True, raise SingularMatrixError on numerically
            rank-deficient X instead of solving anyway
        qr_result: Precomputed decomposition of X, if available

    Returns:
        Coefficient vector β (p,)

    Raises:
        SingularMatrixError: If n < p, if X is rank-deficient and
            check_rank=True, or if R has an exactly zero diagonal entry
    """
    n, p = X.shape
    if n < p:
        raise SingularMatrixError(
            f"QR solve needs at least as many rows as columns: n={n}, p={p}. "
            f"Use the 'cpu_svd' backend for a minimum-norm solution.",
            matrix_name='X',
            rank=n,
            expected_rank=p,
        )

    if qr_result is None:
        qr_result = qr_cpu(X, mode='reduced')

    if check_rank and qr_result.rank < p:
        raise SingularMatrixError(
            f"Design matrix is rank-deficient: rank={qr_result.rank}, expected={p}.",
            matrix_name='X',
            rank=qr_result.rank,
            expected_rank=p,
        )

    Qty = qr_result.Q.T @ y

    try:
        beta = solve_triangular(
            qr_result.R[:p, :p], Qty[:p], lower=False, check_finite=False
        )
    except LinAlgError as e:
        raise SingularMatrixError(
            f"Triangular factor of X is exactly singular: {e}",
            matrix_name='R',
            rank=qr_result.rank,
            expected_rank=p,
        ) from e

    return beta


def lstsq_cpu(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> LstsqResult:
    """
    Minimum-norm least squares via SVD (LAPACK gelsd).

    Well-defined for any shape of X, including n < p.

    Args:
        X: Design matrix (n x p)
        y: Response vector (n,)

    Returns:
        LstsqResult with coefficients, rank and singular values
    """
    beta, _, rank, sv = np.linalg.lstsq(X, y, rcond=None)
    return LstsqResult(coefficients=beta, rank=int(rank), singular_values=sv)
