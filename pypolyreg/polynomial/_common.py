"""
Common data types for polynomial regression.

Frozen parameter payloads that go inside Result[P] envelopes. Each
payload is a pure data container, no computation.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class PolynomialParams:
    """Parameter payload for a fixed-degree fit."""
    coefficients: NDArray[np.floating[Any]]   # (degree + 1,), index 0 = constant
    fitted_values: NDArray[np.floating[Any]]  # (n,)
    residuals: NDArray[np.floating[Any]]      # y - fitted, (n,)
    degree: int
    rank: int


@dataclass(frozen=True)
class CandidateScore:
    """One scored degree from the selection loop."""
    degree: int
    coefficients: NDArray[np.floating[Any]]
    sse: float
    sst: float
    ssr: float
    ratio: float        # sse / sst
    criterion: float    # aicc, aic or bic value


@dataclass(frozen=True)
class SkippedDegree:
    """A degree dropped from the search because fitting or scoring failed."""
    degree: int
    error_type: str
    message: str

    def __str__(self) -> str:
        return f"degree {self.degree} skipped: {self.error_type}: {self.message}"


@dataclass(frozen=True)
class SelectionParams:
    """Parameter payload for automatic degree selection."""
    degree: int | None                       # None when nothing was selected
    coefficients: NDArray[np.floating[Any]]
    ratio: float
    criterion: float
    criterion_name: str                      # 'aicc', 'aic' or 'bic'
    scoring: str                             # 'leading' or 'full'
    candidates: tuple[CandidateScore, ...]   # in search order
    skipped: tuple[SkippedDegree, ...]
