"""
Exception hierarchy for PyPolyReg.

All exceptions inherit from PyPolyRegError so callers can catch any
library-specific error. Numerical anomalies that are not errors (non-finite
criterion scores, underdetermined fits) are returned as plain values unless
the caller opts into strict mode.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
"""


class PyPolyRegError(Exception):
    """Base exception for all PyPolyReg errors."""
    pass


class ValidationError(PyPolyRegError):
    """
    Input validation failed.

    Raised when user-provided inputs (observations, degree, options)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, or when
    there are too few samples for the requested computation.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    The x and y observation sequences differ in length.

    Attributes:
        x_length: Number of x observations
        y_length: Number of y observations
    """

    def __init__(self, message: str, x_length: int, y_length: int):
        super().__init__(message)
        self.x_length = x_length
        self.y_length = y_length


class NumericalError(PyPolyRegError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (number of coefficients)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


class NumericDegenerateError(NumericalError):
    """
    A score evaluated to a non-finite value in strict mode.

    Attributes:
        quantity: Which score degenerated (e.g. 'aicc', 'bic')
        value: The offending value (nan, inf or -inf)
    """

    def __init__(self, message: str, quantity: str, value: float):
        super().__init__(message)
        self.quantity = quantity
        self.value = value
