"""
PyPolyReg: polynomial regression with information-criterion degree selection.

Fits y ≈ w0 + w1·x + ... + wd·x^d by QR least squares and picks the
degree d by corrected AIC, so callers get coefficients and a fit-quality
ratio without guessing a degree.

Submodules:
    polynomial: Design matrix, fitting, statistics, criteria, selection
    core: Exceptions, validation, result envelope, linear algebra kernels
"""

__version__ = "0.1.0"

from pypolyreg import polynomial
from pypolyreg.polynomial import (
    fit,
    select_degree,
    vandermonde,
    evaluate,
    sse_sst_ssr,
    sse_sst_ssr_full,
    fit_ratio,
    aic,
    aicc,
    bic,
)
from pypolyreg.core.exceptions import (
    PyPolyRegError,
    ValidationError,
    LengthMismatchError,
    NumericalError,
    NumericDegenerateError,
)

__all__ = [
    "__version__",
    "polynomial",
    "fit",
    "select_degree",
    "vandermonde",
    "evaluate",
    "sse_sst_ssr",
    "sse_sst_ssr_full",
    "fit_ratio",
    "aic",
    "aicc",
    "bic",
    "PyPolyRegError",
    "ValidationError",
    "LengthMismatchError",
    "NumericalError",
    "NumericDegenerateError",
]
