"""
Residual statistics for fitted polynomials.

sse_sst_ssr() reproduces the established scoring window: the mean of y
is taken over every observation, but the three sums only run over the
first degree + 1 observations. This is very likely an unintended index
bound (the fitted vector has n entries, not degree + 1) and it makes the
ratio and the criterion depend on a small leading subset of the data.
It is kept as the default so results stay comparable with earlier
output; sse_sst_ssr_full() is the whole-sample variant.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypolyreg.core.exceptions import DimensionError
from pypolyreg.core.validation import (
    check_array,
    check_1d,
    check_degree,
    check_min_samples,
    check_observations,
)
from pypolyreg.polynomial.design import power_basis


def evaluate(x: ArrayLike, coefficients: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Evaluate a power-basis polynomial at x.

    Args:
        x: Points to evaluate at (n,)
        coefficients: Coefficients (d + 1,), constant term first

    Returns:
        Model values (n,)
    """
    x_arr = check_array(x, 'x')
    check_1d(x_arr, 'x')
    w = _check_coefficients(coefficients)
    V = power_basis(x_arr, w.shape[0])
    with np.errstate(over='ignore', invalid='ignore'):
        return V @ w


def sse_sst_ssr(
    x: ArrayLike,
    y: ArrayLike,
    coefficients: ArrayLike,
    degree: int,
) -> tuple[float, float, float]:
    """
    Sums of squares over the leading degree + 1 observations.

    With ȳ the mean of ALL y and m = degree + 1:
        sse = Σ_{i<m} (fitted_i - ȳ)²
        sst = Σ_{i<m} (y_i - ȳ)²
        ssr = Σ_{i<m} (fitted_i - y_i)²

    Args:
        x: Input values (n,)
        y: Observed values (n,)
        coefficients: Fitted coefficients (degree + 1,)
        degree: Degree of the fitted polynomial

    Returns:
        (sse, sst, ssr)

    Raises:
        LengthMismatchError: If len(x) != len(y)
        DimensionError: If len(coefficients) != degree + 1 or n < degree + 1
    """
    x_arr, y_arr = check_observations(x, y)
    d = check_degree(degree)
    w = _check_coefficients(coefficients, expected=d + 1)

    m = d + 1
    check_min_samples(x_arr, m, 'x')

    fitted = evaluate(x_arr, w)
    y_mean = np.mean(y_arr)

    return _sums(fitted[:m], y_arr[:m], y_mean)


def sse_sst_ssr_full(
    x: ArrayLike,
    y: ArrayLike,
    coefficients: ArrayLike,
) -> tuple[float, float, float]:
    """
    Sums of squares over every observation.

    Same quantities as sse_sst_ssr() without the leading-subset window;
    ssr is then the usual residual sum of squares and 1 - ssr/sst the
    conventional R².

    Raises:
        LengthMismatchError: If len(x) != len(y)
    """
    x_arr, y_arr = check_observations(x, y)
    fitted = evaluate(x_arr, coefficients)
    return _sums(fitted, y_arr, np.mean(y_arr))


def fit_ratio(sse: float, sst: float) -> float:
    """
    The fit-quality ratio sse / sst.

    This is not the conventional R² (1 - ssr/sst). Division follows IEEE
    rules: 0/0 gives nan and x/0 gives ±inf.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(sse) / np.float64(sst))


def _sums(
    fitted: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    y_mean: float,
) -> tuple[float, float, float]:
    with np.errstate(over='ignore', invalid='ignore'):
        sse = float(np.sum((fitted - y_mean) ** 2))
        sst = float(np.sum((y - y_mean) ** 2))
        ssr = float(np.sum((fitted - y) ** 2))
    return sse, sst, ssr


def _check_coefficients(
    coefficients: ArrayLike,
    expected: int | None = None,
) -> NDArray[np.floating[Any]]:
    w = check_array(coefficients, 'coefficients')
    check_1d(w, 'coefficients')
    if w.shape[0] == 0:
        raise DimensionError("coefficients: expected at least 1 coefficient, got 0")
    if expected is not None and w.shape[0] != expected:
        raise DimensionError(
            f"coefficients: expected {expected} values for degree {expected - 1}, "
            f"got {w.shape[0]}"
        )
    return w
