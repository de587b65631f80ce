"""
Core infrastructure for PyPolyReg.

Key components:
    protocols: LeastSquaresBackend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pypolyreg.core.protocols import LeastSquaresBackend
from pypolyreg.core.result import Result
from pypolyreg.core.exceptions import (
    PyPolyRegError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    NumericalError,
    SingularMatrixError,
    NumericDegenerateError,
)

__all__ = [
    # Protocols
    "LeastSquaresBackend",
    # Result
    "Result",
    # Exceptions
    "PyPolyRegError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "NumericDegenerateError",
]
