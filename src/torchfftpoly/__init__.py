"""torchfftpoly: FFT polynomial multiplication in PyTorch."""

from . import (
    polynomial,
    transform,
)

__all__ = [
    "polynomial",
    "transform",
]

__version__ = "0.1.0"
