"""
CPU backends for polynomial least squares.

CPUQRBackend is the reference path: reduced QR of the Vandermonde
matrix followed by back substitution. CPULstsqBackend solves via SVD and
returns the minimum-norm solution, which also covers designs with fewer
observations than coefficients.
"""

from typing import Any

import numpy as np

from pypolyreg.core.result import Result
from pypolyreg.core.compute.timing import Timer
from pypolyreg.core.compute.linalg.qr import qr_cpu, qr_solve_cpu, lstsq_cpu
from pypolyreg.polynomial.design import PolynomialDesign
from pypolyreg.polynomial._common import PolynomialParams


class CPUQRBackend:
    """
    CPU backend using QR decomposition.

    Implements the LeastSquaresBackend protocol for
    PolynomialDesign -> PolynomialParams.

    Power-basis designs become numerically rank-deficient quickly when x
    spans several orders of magnitude. By default such designs are still
    solved and the condition is reported as a warning on the result;
    with check_rank=True a SingularMatrixError is raised instead.
    """

    def __init__(self, check_rank: bool = False):
        self._check_rank = check_rank

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: PolynomialDesign) -> Result[PolynomialParams]:
        """
        Solve the polynomial least-squares problem via QR.

        Algorithm:
            1. X = QR (reduced)
            2. β = R⁻¹ Q'y by back substitution
            3. fitted = Xβ, residuals = y - fitted

        Raises:
            SingularMatrixError: If n < p, if R is exactly singular, or if
                check_rank=True and X is numerically rank-deficient
        """
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y
        p = design.p

        with timer.section('qr_decomposition'):
            qr_result = qr_cpu(X, mode='reduced')

        with timer.section('solve'):
            coefficients = qr_solve_cpu(
                X, y, check_rank=self._check_rank, qr_result=qr_result
            )

        with timer.section('residuals'), np.errstate(over='ignore', invalid='ignore'):
            fitted_values = X @ coefficients
            residuals = y - fitted_values

        timer.stop()

        warnings: list[str] = []
        if qr_result.rank < p:
            warnings.append(
                f"Design matrix is numerically rank-deficient "
                f"(rank={qr_result.rank}, expected={p}); coefficients may be unstable"
            )

        params = PolynomialParams(
            coefficients=coefficients,
            fitted_values=fitted_values,
            residuals=residuals,
            degree=design.degree,
            rank=qr_result.rank,
        )

        info: dict[str, Any] = {
            'method': 'qr',
            'rank': qr_result.rank,
            'check_rank': self._check_rank,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )


class CPULstsqBackend:
    """
    CPU backend using SVD minimum-norm least squares.

    Implements the LeastSquaresBackend protocol for
    PolynomialDesign -> PolynomialParams. Always returns degree + 1
    coefficients; when the design is underdetermined the solution is
    the one with the smallest Euclidean norm.
    """

    @property
    def name(self) -> str:
        return 'cpu_svd'

    def solve(self, design: PolynomialDesign) -> Result[PolynomialParams]:
        """Solve the polynomial least-squares problem via SVD."""
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y

        with timer.section('solve'):
            lstsq_result = lstsq_cpu(X, y)

        coefficients = lstsq_result.coefficients
        with timer.section('residuals'), np.errstate(over='ignore', invalid='ignore'):
            fitted_values = X @ coefficients
            residuals = y - fitted_values

        timer.stop()

        warnings: list[str] = []
        if design.is_underdetermined:
            warnings.append(
                f"Underdetermined fit: {design.n} observations for {design.p} "
                f"coefficients; returned the minimum-norm solution"
            )
        elif lstsq_result.rank < design.p:
            warnings.append(
                f"Design matrix is numerically rank-deficient "
                f"(rank={lstsq_result.rank}, expected={design.p}); "
                f"returned the minimum-norm solution"
            )

        params = PolynomialParams(
            coefficients=coefficients,
            fitted_values=fitted_values,
            residuals=residuals,
            degree=design.degree,
            rank=lstsq_result.rank,
        )

        info: dict[str, Any] = {
            'method': 'svd',
            'rank': lstsq_result.rank,
            'singular_values': lstsq_result.singular_values,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
