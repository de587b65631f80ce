"""
Polynomial least-squares backends.

Available backends:
    CPUQRBackend: Reference implementation using QR decomposition
    CPULstsqBackend: SVD minimum-norm solve (handles n < degree + 1)
"""

from pypolyreg.polynomial.backends.cpu import CPUQRBackend, CPULstsqBackend

__all__ = [
    "CPUQRBackend",
    "CPULstsqBackend",
]
