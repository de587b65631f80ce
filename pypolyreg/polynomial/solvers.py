"""
Solver dispatch for fixed-degree polynomial regression.

This module provides the fit() function (public API) and backend selection.
"""

import warnings
from typing import Literal, Union

from numpy.typing import ArrayLike

from pypolyreg.core.exceptions import ValidationError
from pypolyreg.core.protocols import LeastSquaresBackend
from pypolyreg.polynomial.design import PolynomialDesign
from pypolyreg.polynomial.solution import PolynomialSolution
from pypolyreg.polynomial.backends.cpu import CPUQRBackend, CPULstsqBackend


BackendChoice = Literal['auto', 'cpu', 'cpu_qr', 'cpu_svd']
BACKEND_CHOICES = ('auto', 'cpu', 'cpu_qr', 'cpu_svd')
BackendSpec = Union[BackendChoice, LeastSquaresBackend]


def fit(
    x: ArrayLike,
    y: ArrayLike,
    degree: int,
    *,
    backend: BackendSpec = 'auto',
    check_rank: bool = False,
) -> PolynomialSolution:
    """
    Fit a polynomial of fixed degree by least squares.

    Solves:
        min_w ||y - V(x) w||²
    where V(x) is the (n x degree+1) Vandermonde matrix.

    Args:
        x: Input values (n,)
        y: Observed values (n,)
        degree: Polynomial degree, non-negative
        backend: Solve backend:
            - 'auto': QR when n >= degree + 1, otherwise minimum-norm SVD
            - 'cpu' / 'cpu_qr': QR decomposition (raises when n < degree + 1)
            - 'cpu_svd': SVD minimum-norm least squares
            - any object satisfying LeastSquaresBackend
        check_rank: With the QR backend, raise SingularMatrixError on a
            numerically rank-deficient design instead of solving anyway

    Returns:
        PolynomialSolution whose coefficients have length degree + 1,
        constant term first

    Raises:
        LengthMismatchError: If len(x) != len(y)
        ValidationError: If inputs or options are invalid
        SingularMatrixError: If the QR backend cannot solve the design

    Example:
        >>> import numpy as np
        >>> from pypolyreg import fit
        >>> np.round(fit([0, 1, 2, 3, 4], [1, 3, 7, 13, 21], 2).coefficients, 6)
        array([1., 1., 1.])
    """
    design = PolynomialDesign.build(x, y, degree)
    backend_impl = get_backend(backend, design, check_rank)

    if design.is_underdetermined and backend == 'auto':
        warnings.warn(
            f"Only {design.n} observations for a degree-{design.degree} polynomial; "
            f"returning the minimum-norm least-squares solution",
            RuntimeWarning,
            stacklevel=2,
        )

    return solve_design(design, backend_impl)


def solve_design(
    design: PolynomialDesign,
    backend: LeastSquaresBackend,
) -> PolynomialSolution:
    """Solve an already-validated design with a resolved backend."""
    result = backend.solve(design)
    return PolynomialSolution(_result=result, _design=design)


def check_backend(choice: BackendSpec) -> None:
    """
    Verify a backend choice without resolving it.

    Raises:
        ValidationError: If the name is unknown or the object does not
            provide name and solve()
    """
    if isinstance(choice, str):
        if choice not in BACKEND_CHOICES:
            raise ValidationError(f"Unknown backend: {choice!r}")
    elif not isinstance(choice, LeastSquaresBackend):
        raise ValidationError(
            f"backend must be a backend name or provide name and solve(), "
            f"got {type(choice).__name__}"
        )


def get_backend(
    choice: BackendSpec,
    design: PolynomialDesign,
    check_rank: bool = False,
) -> LeastSquaresBackend:
    """
    Resolve the backend choice to an instance for this design.

    Raises:
        ValidationError: If the choice is unknown
    """
    check_backend(choice)
    if not isinstance(choice, str):
        return choice

    if choice == 'auto':
        if design.is_underdetermined:
            return CPULstsqBackend()
        return CPUQRBackend(check_rank=check_rank)

    elif choice in ('cpu', 'cpu_qr'):
        return CPUQRBackend(check_rank=check_rank)

    elif choice == 'cpu_svd':
        return CPULstsqBackend()

    else:
        raise ValidationError(f"Unknown backend: {choice!r}")
