"""
Polynomial regression solution types.

User-facing wrappers around the backend and selector Result envelopes.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypolyreg.core.result import Result
from pypolyreg.polynomial._common import (
    PolynomialParams,
    SelectionParams,
    CandidateScore,
    SkippedDegree,
)
from pypolyreg.polynomial.statistics import evaluate

if TYPE_CHECKING:
    from pypolyreg.polynomial.design import PolynomialDesign


def _format_polynomial(coefficients: NDArray[np.floating[Any]]) -> str:
    terms = []
    for power, coef in enumerate(coefficients):
        if power == 0:
            terms.append(f"{coef:.6g}")
        elif power == 1:
            terms.append(f"{coef:.6g}·x")
        else:
            terms.append(f"{coef:.6g}·x^{power}")
    return "y = " + " + ".join(terms)


@dataclass
class PolynomialSolution:
    """
    Fixed-degree polynomial fit.

    Wraps the backend Result and provides accessors for coefficients,
    fitted values and whole-sample residual statistics.
    """
    _result: Result[PolynomialParams]
    _design: 'PolynomialDesign'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficients (degree + 1,), constant term first."""
        return self._result.params.coefficients

    @property
    def degree(self) -> int:
        return self._result.params.degree

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        """Residual sum of squares over all observations."""
        return float(self.residuals @ self.residuals)

    @property
    def tss(self) -> float:
        y = self._design.y
        return float(np.sum((y - np.mean(y)) ** 2))

    @property
    def r_squared(self) -> float:
        """Conventional R² = 1 - rss/tss over all observations."""
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the fitted polynomial at new points."""
        return evaluate(x, self.coefficients)

    def summary(self) -> str:
        """Generate a plain-text summary."""
        lines = [
            "Polynomial Regression Results",
            "=" * 60,
            f"Observations: {self.n}",
            f"Degree: {self.degree}",
            f"Rank: {self.rank}",
            f"R-squared: {self.r_squared:.6f}",
            f"Residual sum of squares: {self.rss:.6g}",
            "",
            "Coefficients:",
            "-" * 60,
        ]
        for power, coef in enumerate(self.coefficients):
            lines.append(f"  x^{power}: {coef:18.10g}")
        lines.append("-" * 60)
        lines.append(_format_polynomial(self.coefficients))
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PolynomialSolution(n={self.n}, degree={self.degree}, "
            f"rank={self.rank}, r_squared={self.r_squared:.4f})"
        )


@dataclass
class SelectionSolution:
    """
    Result of automatic degree selection.

    `coefficients` and `ratio` are the two outputs of the search; the
    scored candidates and skipped degrees are kept for inspection.
    """
    _result: Result[SelectionParams]
    _n: int

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficients of the selected degree, constant term first."""
        return self._result.params.coefficients

    @property
    def degree(self) -> int | None:
        return self._result.params.degree

    @property
    def selected(self) -> bool:
        """False when no candidate degree produced a usable score."""
        return self._result.params.degree is not None

    @property
    def ratio(self) -> float:
        """Fit-quality ratio sse/sst of the selected degree (not R²)."""
        return self._result.params.ratio

    @property
    def criterion(self) -> float:
        """Criterion value of the selected degree."""
        return self._result.params.criterion

    @property
    def criterion_name(self) -> str:
        return self._result.params.criterion_name

    @property
    def scoring(self) -> str:
        return self._result.params.scoring

    @property
    def candidates(self) -> tuple[CandidateScore, ...]:
        return self._result.params.candidates

    @property
    def skipped(self) -> tuple[SkippedDegree, ...]:
        return self._result.params.skipped

    @property
    def diagnostics(self) -> tuple[str, ...]:
        """Human-readable reasons for every skipped degree."""
        return tuple(str(s) for s in self.skipped)

    @property
    def n(self) -> int:
        return self._n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Evaluate the selected polynomial at new points.

        Raises:
            DimensionError: If no degree was selected
        """
        return evaluate(x, self.coefficients)

    def summary(self) -> str:
        """Generate a plain-text summary with the per-degree scores."""
        name = self.criterion_name.upper()
        lines = [
            "Polynomial Degree Selection",
            "=" * 60,
            f"Observations: {self.n}",
            f"Criterion: {name} ({self.scoring} scoring)",
            f"Selected degree: {self.degree if self.selected else 'none'}",
            f"Ratio (sse/sst): {self.ratio:.6f}",
            f"{name}: {self.criterion:.6f}",
            "",
            f"{'Degree':<8} {name:>16} {'sse/sst':>12}",
            "-" * 60,
        ]
        for c in self.candidates:
            marker = " *" if c.degree == self.degree else ""
            lines.append(f"{c.degree:<8} {c.criterion:16.6f} {c.ratio:12.6f}{marker}")
        for s in self.skipped:
            lines.append(f"{s.degree:<8} {'skipped':>16}  {s.error_type}")
        lines.append("-" * 60)
        if self.selected:
            lines.append(_format_polynomial(self.coefficients))
            lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SelectionSolution(n={self.n}, degree={self.degree}, "
            f"{self.criterion_name}={self.criterion:.4f}, ratio={self.ratio:.4f})"
        )
