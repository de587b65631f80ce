"""
Tests for select_degree().

Covers the search contract (degree range, strict-less-than replacement,
skip-and-record on failure), the options, and determinism on the demo
dataset shipped with the original tool.
"""

import sys

import numpy as np
import pytest

from pypolyreg import select_degree
from pypolyreg.core.exceptions import (
    DimensionError,
    LengthMismatchError,
    NumericalError,
    ValidationError,
)
from pypolyreg.core.result import Result
from pypolyreg.polynomial import (
    DEFAULT_DEGREES,
    SelectionSolution,
    aicc,
    bic,
    fit_ratio,
    sse_sst_ssr,
    sse_sst_ssr_full,
)
from pypolyreg.polynomial._common import PolynomialParams


class FixedCoefficientBackend:
    """Backend returning preset coefficients per degree instead of solving."""

    def __init__(self, coefficients_by_degree):
        self._coefficients = coefficients_by_degree

    @property
    def name(self):
        return 'fixed'

    def solve(self, design):
        w = np.asarray(self._coefficients[design.degree], dtype=np.float64)
        fitted = design.X @ w
        return Result(
            params=PolynomialParams(
                coefficients=w,
                fitted_values=fitted,
                residuals=design.y - fitted,
                degree=design.degree,
                rank=design.p,
            ),
            info={'method': 'fixed'},
            timing=None,
            backend_name=self.name,
        )


def _padded(values, degree):
    w = np.zeros(degree + 1)
    w[:len(values)] = values
    return w


@pytest.fixture
def integer_quadratic():
    """y = 1 + x + x² at x = 0..19, exactly representable."""
    x = np.arange(20, dtype=np.float64)
    return x, 1.0 + x + x ** 2


class TestSelectionContract:

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            select_degree([0.0, 1.0, 2.0], [1.0, 2.0])

    def test_default_degrees(self):
        assert DEFAULT_DEGREES == (2, 3, 4, 5, 6, 7, 8, 9)

    def test_coefficient_length_in_range(self, noisy_cubic_data):
        x, y, _ = noisy_cubic_data
        solution = select_degree(x, y)
        assert isinstance(solution, SelectionSolution)
        assert 2 <= solution.degree <= 9
        assert 3 <= len(solution.coefficients) <= 10
        assert len(solution.coefficients) == solution.degree + 1

    def test_every_default_degree_accounted_for(self, noisy_cubic_data):
        x, y, _ = noisy_cubic_data
        solution = select_degree(x, y)
        seen = [c.degree for c in solution.candidates] + [s.degree for s in solution.skipped]
        assert sorted(seen) == list(DEFAULT_DEGREES)
        assert solution.info['degrees'] == DEFAULT_DEGREES

    def test_selected_is_first_minimum(self, noisy_cubic_data):
        x, y, _ = noisy_cubic_data
        solution = select_degree(x, y)
        eligible = [c for c in solution.candidates if c.criterion < sys.float_info.max]
        best = min(eligible, key=lambda c: c.criterion)
        assert solution.degree == best.degree
        assert solution.criterion == best.criterion
        np.testing.assert_array_equal(solution.coefficients, best.coefficients)

    def test_candidate_scores_are_consistent(self, noisy_cubic_data):
        x, y, _ = noisy_cubic_data
        n = len(y)
        solution = select_degree(x, y)
        for c in solution.candidates:
            sse, sst, ssr = sse_sst_ssr(x, y, c.coefficients, c.degree)
            assert (c.sse, c.sst, c.ssr) == (sse, sst, ssr)
            assert c.criterion == aicc(n, c.degree, c.ssr)
            np.testing.assert_array_equal(c.ratio, fit_ratio(c.sse, c.sst))
        assert solution.ratio == next(
            c.ratio for c in solution.candidates if c.degree == solution.degree
        )


class TestReplacementRule:

    def test_negative_infinity_wins_and_is_kept(self, integer_quadratic):
        x, y = integer_quadratic
        backend = FixedCoefficientBackend({d: _padded([1.0, 1.0, 1.0], d) for d in (2, 3, 4)})
        solution = select_degree(x, y, degrees=(2, 3, 4), backend=backend)
        assert [c.criterion for c in solution.candidates] == [float('-inf')] * 3
        assert solution.degree == 2
        assert solution.backend_name == 'fixed'

    def test_nan_is_never_selected(self, integer_quadratic):
        x, y = integer_quadratic
        backend = FixedCoefficientBackend({
            2: [np.nan, 1.0, 1.0],
            3: [1.0, 1.0, 1.0, 0.5],
        })
        solution = select_degree(x, y, degrees=(2, 3), backend=backend)
        assert np.isnan(solution.candidates[0].criterion)
        assert solution.degree == 3
        assert np.isfinite(solution.criterion)

    def test_worse_later_score_does_not_replace(self, integer_quadratic):
        x, y = integer_quadratic
        w = [1.0, 1.0, 0.5]
        backend = FixedCoefficientBackend({2: w, 3: _padded(w, 3)})
        solution = select_degree(x, y, degrees=(2, 3), criterion='aic', backend=backend)
        # the degree-3 window adds x = 3, raising both ssr and the penalty
        assert solution.degree == 2

    def test_no_usable_candidate_returns_empty(self, integer_quadratic):
        x, y = integer_quadratic
        backend = FixedCoefficientBackend({2: [np.nan, 0.0, 0.0]})
        with pytest.warns(RuntimeWarning, match="No candidate degree"):
            solution = select_degree(x, y, degrees=(2,), backend=backend)
        assert not solution.selected
        assert solution.degree is None
        assert solution.coefficients.shape == (0,)
        assert solution.ratio == 0.0
        assert len(solution.candidates) == 1
        assert any("No candidate degree" in w for w in solution.warnings)
        assert "Selected degree: none" in solution.summary()
        with pytest.raises(DimensionError):
            solution.predict([1.0])

    def test_nan_in_y_returns_empty(self):
        x = np.linspace(0.0, 1.0, 20)
        y = np.linspace(0.0, 1.0, 20)
        y[5] = np.nan
        with pytest.warns(RuntimeWarning, match="No candidate degree"):
            solution = select_degree(x, y)
        assert not solution.selected
        assert len(solution.candidates) == len(DEFAULT_DEGREES)
        assert all(np.isnan(c.criterion) for c in solution.candidates)


class TestSkippedDegrees:

    def test_small_sample_skips_high_degrees(self, rng):
        x = np.arange(6, dtype=np.float64)
        y = rng.standard_normal(6)
        with pytest.warns(RuntimeWarning, match="4 of 8 candidate degrees skipped"):
            solution = select_degree(x, y)
        assert [s.degree for s in solution.skipped] == [6, 7, 8, 9]
        assert all(s.error_type == 'DimensionError' for s in solution.skipped)
        assert solution.degree in (2, 3, 4)
        assert len(solution.diagnostics) == 4
        assert solution.diagnostics[0].startswith("degree 6 skipped: DimensionError")
        assert solution.info['n_skipped'] == 4

    def test_skips_recorded_in_result_warnings(self, rng):
        x = np.arange(6, dtype=np.float64)
        y = rng.standard_normal(6)
        with pytest.warns(RuntimeWarning):
            solution = select_degree(x, y)
        assert any("degree 9 skipped" in w for w in solution.warnings)

    def test_backend_error_of_any_type_is_skipped(self, integer_quadratic):
        x, y = integer_quadratic

        class FailingAtThree(FixedCoefficientBackend):
            def solve(self, design):
                if design.degree == 3:
                    raise ValueError("solver diverged")
                return super().solve(design)

        backend = FailingAtThree({
            2: [1.0, 1.0, 0.5],
            4: [1.0, 1.0, 0.5, 0.0, 0.0],
        })
        with pytest.warns(RuntimeWarning, match="1 of 3 candidate degrees skipped"):
            solution = select_degree(x, y, degrees=(2, 3, 4), backend=backend)
        assert [c.degree for c in solution.candidates] == [2, 4]
        assert solution.skipped[0].degree == 3
        assert solution.skipped[0].error_type == 'ValueError'
        assert solution.diagnostics == ("degree 3 skipped: ValueError: solver diverged",)
        assert solution.selected

    def test_strict_mode_skips_degenerate_scores(self, integer_quadratic):
        x, y = integer_quadratic
        backend = FixedCoefficientBackend({
            2: [1.0, 1.0, 1.0],
            3: [1.0, 1.0, 1.0, 0.5],
        })
        with pytest.warns(RuntimeWarning, match="NumericDegenerateError"):
            solution = select_degree(x, y, degrees=(2, 3), backend=backend, strict=True)
        assert solution.degree == 3
        assert solution.skipped[0].degree == 2
        assert solution.skipped[0].error_type == 'NumericDegenerateError'

    def test_strict_mode_with_nothing_left(self, integer_quadratic):
        x, y = integer_quadratic
        backend = FixedCoefficientBackend({2: [1.0, 1.0, 1.0]})
        with pytest.warns(RuntimeWarning):
            with pytest.raises(NumericalError):
                select_degree(x, y, degrees=(2,), backend=backend, strict=True)


class TestOptions:

    def test_bic_criterion(self, noisy_cubic_data):
        x, y, _ = noisy_cubic_data
        solution = select_degree(x, y, criterion='bic')
        assert solution.criterion_name == 'bic'
        for c in solution.candidates:
            assert c.criterion == bic(len(y), c.degree, c.ssr)

    def test_full_scoring(self, noisy_cubic_data):
        x, y, _ = noisy_cubic_data
        solution = select_degree(x, y, scoring='full')
        assert solution.scoring == 'full'
        for c in solution.candidates:
            assert (c.sse, c.sst, c.ssr) == sse_sst_ssr_full(x, y, c.coefficients)

    def test_custom_degrees(self, noisy_cubic_data):
        x, y, _ = noisy_cubic_data
        solution = select_degree(x, y, degrees=[3])
        assert solution.degree == 3

    @pytest.mark.parametrize("kwargs", [
        {'criterion': 'hqic'},
        {'scoring': 'middle'},
        {'backend': 'gpu'},
        {'degrees': []},
        {'degrees': [2, -1]},
        {'degrees': 3},
    ])
    def test_invalid_options(self, noisy_cubic_data, kwargs):
        x, y, _ = noisy_cubic_data
        with pytest.raises(ValidationError):
            select_degree(x, y, **kwargs)

    def test_summary_and_repr(self, noisy_cubic_data):
        x, y, _ = noisy_cubic_data
        solution = select_degree(x, y)
        text = solution.summary()
        assert "Selected degree" in text
        assert "AICC" in text
        assert repr(solution).startswith(f"SelectionSolution(n={len(y)}, degree={solution.degree}")
        assert 'total_seconds' in solution.timing

    def test_timing_has_one_section_per_degree(self, noisy_cubic_data):
        x, y, _ = noisy_cubic_data
        solution = select_degree(x, y, degrees=(2, 3))
        assert set(solution.timing) == {'total_seconds', 'degree_2', 'degree_3'}


class TestDemoDataset:

    def test_dataset_shape(self, demo_observations):
        x, y = demo_observations
        assert x.shape == y.shape == (140,)

    def test_selection_in_range(self, demo_observations):
        x, y = demo_observations
        solution = select_degree(x, y)
        assert 2 <= solution.degree <= 9
        assert len(solution.coefficients) == solution.degree + 1

    def test_deterministic(self, demo_observations):
        x, y = demo_observations
        first = select_degree(x, y)
        second = select_degree(x, y)
        assert first.degree == second.degree
        np.testing.assert_array_equal(first.coefficients, second.coefficients)
        np.testing.assert_array_equal(first.ratio, second.ratio)
        np.testing.assert_array_equal(first.criterion, second.criterion)

    def test_predict(self, demo_observations):
        x, y = demo_observations
        solution = select_degree(x, y)
        assert solution.predict(x[:3]).shape == (3,)
