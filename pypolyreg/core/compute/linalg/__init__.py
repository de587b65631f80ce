"""
Linear algebra kernels for PyPolyReg.

All functions follow these conventions:
    - NumPy/SciPy (LAPACK under the hood)
    - Each operation returns a structured result dataclass or an array
    - Errors are raised immediately with clear messages
"""

from pypolyreg.core.compute.linalg.qr import (
    QRResult,
    LstsqResult,
    qr_cpu,
    qr_solve_cpu,
    lstsq_cpu,
)

__all__ = [
    "QRResult",
    "LstsqResult",
    "qr_cpu",
    "qr_solve_cpu",
    "lstsq_cpu",
]
