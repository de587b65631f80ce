"""
Automatic degree selection.

select_degree() fits every candidate degree, scores each fit with an
information criterion and keeps the lowest score. A degree whose fit or
score fails, whatever the error, is skipped and recorded; it never
aborts the search. If no degree yields a usable score the result is
empty (no degree, no coefficients, ratio 0.0) unless strict=True.
"""

import sys
import warnings
from typing import Any, Iterable, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypolyreg.core.exceptions import NumericalError, ValidationError
from pypolyreg.core.result import Result
from pypolyreg.core.compute.timing import Timer
from pypolyreg.core.validation import check_choice, check_degree, check_observations
from pypolyreg.polynomial._common import CandidateScore, SelectionParams, SkippedDegree
from pypolyreg.polynomial.criteria import aic, aicc, bic
from pypolyreg.polynomial.design import PolynomialDesign
from pypolyreg.polynomial.solution import SelectionSolution
from pypolyreg.polynomial.solvers import BackendSpec, check_backend, get_backend, solve_design
from pypolyreg.polynomial.statistics import fit_ratio, sse_sst_ssr, sse_sst_ssr_full


# Degrees 2 through 9 inclusive
DEFAULT_DEGREES = tuple(range(2, 10))

CriterionChoice = Literal['aicc', 'aic', 'bic']
ScoringChoice = Literal['leading', 'full']

_CRITERIA = {
    'aicc': aicc,
    'aic': aic,
    'bic': bic,
}
_SCORINGS = ('leading', 'full')


def select_degree(
    x: ArrayLike,
    y: ArrayLike,
    *,
    degrees: Iterable[int] = DEFAULT_DEGREES,
    criterion: CriterionChoice = 'aicc',
    scoring: ScoringChoice = 'leading',
    backend: BackendSpec = 'auto',
    strict: bool = False,
) -> SelectionSolution:
    """
    Fit polynomials over a range of degrees and keep the best-scoring one.

    For each degree d the coefficients are fitted by least squares, the
    sums of squares are computed, and the criterion is evaluated with
    n = len(y), k = d and rss = ssr. A candidate replaces the current
    best only when its score is strictly lower; the initial best is the
    largest finite float, so nan and +inf scores are never selected and
    a -inf score, once seen, is never displaced.

    Args:
        x: Input values (n,)
        y: Observed values (n,)
        degrees: Candidate degrees in search order (default 2..9)
        criterion: 'aicc' (default), 'aic' or 'bic'
        scoring: 'leading' (default) sums over the first d + 1
            observations only, see sse_sst_ssr(); 'full' sums over all
        backend: Solve backend, see fit()
        strict: Treat non-finite criterion values as errors, which
            skips the affected degrees, and raise when nothing is left

    Returns:
        SelectionSolution with the selected degree, its coefficients and
        sse/sst ratio, every scored candidate and the skipped degrees.
        When no degree was selected, `selected` is False, `degree` is
        None, the coefficients are empty and the ratio is 0.0.

    Raises:
        LengthMismatchError: If len(x) != len(y)
        ValidationError: If options are invalid
        NumericalError: If strict=True and no candidate degree could be
            selected

    Example:
        >>> from pypolyreg import select_degree
        >>> solution = select_degree(x, y)
        >>> solution.coefficients, solution.ratio
    """
    # Validate once for all degrees
    x_arr, y_arr = check_observations(x, y)
    check_choice(criterion, tuple(_CRITERIA), 'criterion')
    check_choice(scoring, _SCORINGS, 'scoring')
    check_backend(backend)
    degree_list = _check_degrees(degrees)

    n = int(y_arr.shape[0])
    score_fn = _CRITERIA[criterion]

    best_score = sys.float_info.max
    best: CandidateScore | None = None
    best_backend = ''
    best_warnings: tuple[str, ...] = ()
    candidates: list[CandidateScore] = []
    skipped: list[SkippedDegree] = []

    with Timer() as timer:
        for d in degree_list:
            with timer.section(f'degree_{d}'):
                try:
                    design = PolynomialDesign.build(x_arr, y_arr, d)
                    solution = solve_design(design, get_backend(backend, design))
                    coefficients = solution.coefficients
                    sse, sst, ssr = _sums(x_arr, y_arr, coefficients, d, scoring)
                    score = score_fn(n, d, ssr, strict=strict)
                except Exception as e:
                    # injected backends may fail with any error type
                    skipped.append(SkippedDegree(
                        degree=d, error_type=type(e).__name__, message=str(e)
                    ))
                    continue

            candidate = CandidateScore(
                degree=d,
                coefficients=coefficients,
                sse=sse,
                sst=sst,
                ssr=ssr,
                ratio=fit_ratio(sse, sst),
                criterion=score,
            )
            candidates.append(candidate)

            if candidate.criterion < best_score:
                best_score = candidate.criterion
                best = candidate
                best_backend = solution.backend_name
                best_warnings = solution.warnings

    if skipped:
        warnings.warn(
            f"{len(skipped)} of {len(degree_list)} candidate degrees skipped: "
            + "; ".join(str(s) for s in skipped),
            RuntimeWarning,
            stacklevel=2,
        )

    result_warnings = tuple(str(s) for s in skipped) + best_warnings

    if best is None:
        message = (
            f"No candidate degree produced a usable {criterion} score "
            f"(scored={len(candidates)}, skipped={len(skipped)})"
        )
        if strict:
            raise NumericalError(message)
        warnings.warn(
            message + "; returning empty coefficients", RuntimeWarning, stacklevel=2
        )
        result_warnings += (message,)
        params = SelectionParams(
            degree=None,
            coefficients=np.empty(0, dtype=np.float64),
            ratio=0.0,
            criterion=float('nan'),
            criterion_name=criterion,
            scoring=scoring,
            candidates=tuple(candidates),
            skipped=tuple(skipped),
        )
    else:
        params = SelectionParams(
            degree=best.degree,
            coefficients=best.coefficients,
            ratio=best.ratio,
            criterion=best.criterion,
            criterion_name=criterion,
            scoring=scoring,
            candidates=tuple(candidates),
            skipped=tuple(skipped),
        )

    info: dict[str, Any] = {
        'method': 'degree_search',
        'degrees': degree_list,
        'n_candidates': len(candidates),
        'n_skipped': len(skipped),
        'strict': strict,
    }

    return SelectionSolution(
        _result=Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=best_backend,
            warnings=result_warnings,
        ),
        _n=n,
    )


def _sums(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    coefficients: NDArray[np.floating[Any]],
    degree: int,
    scoring: str,
) -> tuple[float, float, float]:
    if scoring == 'full':
        return sse_sst_ssr_full(x, y, coefficients)
    return sse_sst_ssr(x, y, coefficients, degree)


def _check_degrees(degrees: Iterable[int]) -> tuple[int, ...]:
    try:
        values = tuple(check_degree(d, 'degrees') for d in degrees)
    except TypeError as e:
        raise ValidationError(f"degrees: expected an iterable of integers: {e}") from e
    if not values:
        raise ValidationError("degrees: at least one candidate degree is required")
    return values
