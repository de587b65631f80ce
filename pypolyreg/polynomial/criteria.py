"""
Information criteria for Gaussian least-squares models.

With n observations, k parameters and residual sum of squares rss:

    AIC  = n·ln(rss/n) + 2k + n·ln(2π) + n
    AICc = AIC + 2k(k+1) / (n - k - 1)
    BIC  = n·ln(rss/n) + k·ln(n) + n·ln(2π) + n

Lower is better. Degenerate inputs are not guarded: rss == 0 gives -inf,
n == k + 1 gives an infinite correction and n < k + 1 a negative one.
Pass strict=True to turn any non-finite score into NumericDegenerateError.
"""

import math

import numpy as np

from pypolyreg.core.exceptions import NumericDegenerateError

_LOG_2PI = math.log(2.0 * math.pi)


def aic(
    n: int,
    k: int,
    rss: float,
    corrected: bool = False,
    *,
    strict: bool = False,
) -> float:
    """
    Akaike information criterion, optionally with the small-sample correction.

    Args:
        n: Number of observations
        k: Number of model parameters (the polynomial degree in this package)
        rss: Residual sum of squares
        corrected: Add the AICc term 2k(k+1) / (n - k - 1)
        strict: Raise NumericDegenerateError on a non-finite result

    Returns:
        The criterion value
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        n_f = np.float64(n)
        value = _log_ratio_term(n, rss) + 2.0 * np.float64(k) + n_f * _LOG_2PI + n_f
        if corrected:
            value = value + aicc_correction(n, k)

    return _finish('aicc' if corrected else 'aic', value, n, k, rss, strict)


def aicc(n: int, k: int, rss: float, *, strict: bool = False) -> float:
    """Corrected AIC; shorthand for aic(n, k, rss, corrected=True)."""
    return aic(n, k, rss, corrected=True, strict=strict)


def aicc_correction(n: int, k: int) -> float:
    """
    The AICc small-sample term 2k(k+1) / (n - k - 1).

    Infinite when n == k + 1 (nan when k is also 0), negative when n < k + 1.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(2 * k * (k + 1)) / np.float64(n - k - 1))


def bic(n: int, k: int, rss: float, *, strict: bool = False) -> float:
    """
    Bayesian information criterion.

    Args:
        n: Number of observations
        k: Number of model parameters
        rss: Residual sum of squares
        strict: Raise NumericDegenerateError on a non-finite result
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        n_f = np.float64(n)
        value = _log_ratio_term(n, rss) + np.float64(k) * np.log(n_f) + n_f * _LOG_2PI + n_f

    return _finish('bic', value, n, k, rss, strict)


def _log_ratio_term(n: int, rss: float) -> np.float64:
    n_f = np.float64(n)
    return n_f * np.log(np.float64(rss) / n_f)


def _finish(name: str, value: np.float64, n: int, k: int, rss: float, strict: bool) -> float:
    result = float(value)
    if strict and not math.isfinite(result):
        raise NumericDegenerateError(
            f"{name} is not finite ({result}) for n={n}, k={k}, rss={rss}",
            quantity=name,
            value=result,
        )
    return result
