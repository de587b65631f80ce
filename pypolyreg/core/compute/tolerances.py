"""
Tolerance tiers for numerical comparison.

Power-basis design matrices are badly conditioned, so the achievable
accuracy of a fit depends on the degree and on the spread of x. The
tiers below are what the test suite and callers can rely on.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned problems (small degree, x of order one)
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned design',
)

# Exact-interpolation recovery of generating coefficients
RECOVERY = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='recovery',
    description='Recovery of noise-free polynomial coefficients',
)

