"""
Polynomial Design.

The design owns the observation pair and the power-basis (Vandermonde)
matrix for one candidate degree. It is built fresh for every fit and
never shared across degrees.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypolyreg.core.validation import check_array, check_1d, check_degree, check_observations


def vandermonde(x: ArrayLike, degree: int) -> NDArray[np.floating[Any]]:
    """
    Build the increasing-power Vandermonde matrix.

    Row i is [1, x_i, x_i², ..., x_i^degree]; the zeroth power is 1 for
    every x, zero included.

    Args:
        x: Input vector (n,)
        degree: Highest power, non-negative

    Returns:
        Matrix of shape (n, degree + 1)

    Example:
        >>> vandermonde([0.0, 2.0], 2)
        array([[1., 0., 0.],
               [1., 2., 4.]])
    """
    x_arr = check_array(x, 'x')
    check_1d(x_arr, 'x')
    d = check_degree(degree)
    return power_basis(x_arr, d + 1)


def power_basis(x: NDArray[np.floating[Any]], columns: int) -> NDArray[np.floating[Any]]:
    # powers of large |x| overflow to inf rather than warn
    with np.errstate(over='ignore', invalid='ignore'):
        return np.vander(x, N=columns, increasing=True)


@dataclass(frozen=True)
class PolynomialDesign:
    """
    Polynomial regression design for a single degree.

    Immutable after construction. Build with PolynomialDesign.build(),
    which validates at the boundary; everything downstream trusts it.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _X: NDArray[np.floating[Any]]
    _degree: int

    @classmethod
    def build(cls, x: ArrayLike, y: ArrayLike, degree: int) -> PolynomialDesign:
        """
        Validate observations and construct the design matrix.

        Raises:
            LengthMismatchError: If len(x) != len(y)
            ValidationError: If inputs are non-numeric, not 1-D, empty,
                or degree is not a non-negative integer
        """
        x_arr, y_arr = check_observations(x, y)
        d = check_degree(degree)
        X = power_basis(x_arr, d + 1)
        return cls(_x=x_arr, _y=y_arr, _X=X, _degree=d)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Input vector (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Vandermonde matrix (n x p)."""
        return self._X

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def n(self) -> int:
        """Number of observations."""
        return int(self._x.shape[0])

    @property
    def p(self) -> int:
        """Number of coefficients (degree + 1)."""
        return self._degree + 1

    @property
    def is_underdetermined(self) -> bool:
        """True when there are fewer observations than coefficients."""
        return self.n < self.p
