"""
Input validation utilities for PyPolyReg.

Validators raise immediately with clear error messages rather than
silently correcting input. Non-finite values are deliberately NOT
rejected: they flow through the numeric pipeline as IEEE values.

Each function validates ONE thing and includes the parameter name in
its error message.
"""

import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pypolyreg.core.exceptions import (
    ValidationError,
    DimensionError,
    LengthMismatchError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_same_length(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> None:
    """
    Verify the two observation sequences have the same length.

    Raises:
        LengthMismatchError: If len(x) != len(y)
    """
    if x.shape[0] != y.shape[0]:
        raise LengthMismatchError(
            f"x and y must have the same length, got x={x.shape[0]}, y={y.shape[0]}",
            x_length=int(x.shape[0]),
            y_length=int(y.shape[0]),
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        DimensionError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise DimensionError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_degree(degree: Any, name: str = 'degree') -> int:
    """
    Validate a polynomial degree.

    Accepts Python and numpy integers (not bool, not float).

    Returns:
        The degree as a plain int

    Raises:
        ValidationError: If degree is not a non-negative integer
    """
    if isinstance(degree, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected non-negative integer, got {degree!r}")
    try:
        value = operator.index(degree)
    except TypeError:
        raise ValidationError(
            f"{name}: expected non-negative integer, got {type(degree).__name__} {degree!r}"
        ) from None
    if value < 0:
        raise ValidationError(f"{name}: expected non-negative integer, got {value}")
    return value


def check_choice(value: str, choices: tuple[str, ...], name: str) -> None:
    """
    Verify an option string is one of the allowed choices.

    Raises:
        ValidationError: If value is not in choices
    """
    if value not in choices:
        raise ValidationError(f"{name} must be one of {choices}, got {value!r}")


def check_observations(
    x: ArrayLike,
    y: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Validate a paired observation set at a public boundary.

    The length check runs before the shape checks so that mismatched
    sequences always surface as LengthMismatchError.

    Returns:
        (x, y) as 1-D float64 arrays

    Raises:
        LengthMismatchError: If len(x) != len(y)
        ValidationError: If inputs are non-numeric, not 1-D or empty
    """
    x_arr = check_array(x, 'x')
    y_arr = check_array(y, 'y')

    if x_arr.ndim >= 1 and y_arr.ndim >= 1:
        check_same_length(x_arr, y_arr)

    check_1d(x_arr, 'x')
    check_1d(y_arr, 'y')
    check_min_samples(x_arr, 1, 'x')

    return x_arr, y_arr
