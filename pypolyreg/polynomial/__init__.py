"""
One-dimensional polynomial regression with automatic degree selection.

Public API:
    fit(x, y, degree, ...) -> PolynomialSolution
    select_degree(x, y, ...) -> SelectionSolution

Building blocks, each usable on its own:
    vandermonde(x, degree): power-basis design matrix
    evaluate(x, coefficients): polynomial values
    sse_sst_ssr(...), sse_sst_ssr_full(...), fit_ratio(...): sums of squares
    aic(...), aicc(...), bic(...): information criteria

Example:
    >>> from pypolyreg.polynomial import select_degree
    >>> solution = select_degree(x, y)
    >>> print(solution.coefficients, solution.ratio)
    >>> print(solution.summary())
"""

from pypolyreg.polynomial.design import PolynomialDesign, vandermonde
from pypolyreg.polynomial._common import (
    PolynomialParams,
    SelectionParams,
    CandidateScore,
    SkippedDegree,
)
from pypolyreg.polynomial.statistics import (
    evaluate,
    sse_sst_ssr,
    sse_sst_ssr_full,
    fit_ratio,
)
from pypolyreg.polynomial.criteria import aic, aicc, aicc_correction, bic
from pypolyreg.polynomial.solution import PolynomialSolution, SelectionSolution
from pypolyreg.polynomial.solvers import fit
from pypolyreg.polynomial.selection import select_degree, DEFAULT_DEGREES

__all__ = [
    "fit",
    "select_degree",
    "DEFAULT_DEGREES",
    "vandermonde",
    "evaluate",
    "sse_sst_ssr",
    "sse_sst_ssr_full",
    "fit_ratio",
    "aic",
    "aicc",
    "aicc_correction",
    "bic",
    "PolynomialDesign",
    "PolynomialParams",
    "PolynomialSolution",
    "SelectionParams",
    "SelectionSolution",
    "CandidateScore",
    "SkippedDegree",
]
