"""
Shared compute infrastructure for PyPolyReg.

Timing utilities, tolerance tiers and linear algebra kernels shared by
the polynomial backends. Domain backends live in polynomial/backends/.
"""

from pypolyreg.core.compute.timing import Timer

__all__ = [
    "Timer",
]
