"""
Generic result container for all PyPolyReg computations.

Every backend and the degree selector return a Result envelope. Domain
payloads (PolynomialParams, SelectionParams) go in `params`; the envelope
carries the shared metadata: method info, timings, the producing backend
and non-fatal diagnostics.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Attributes:
        params: Domain-specific payload (coefficients, scores, ...)
        info: Structured metadata (method, rank, skipped degrees, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PolynomialParams(...),
        ...     info={'method': 'qr', 'rank': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_qr'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
