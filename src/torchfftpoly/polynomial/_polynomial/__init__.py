from ._polynomial import Polynomial, polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_format import polynomial_format
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_multiply_fft import (
    FFT_THRESHOLD,
    polynomial_multiply_auto,
    polynomial_multiply_fft,
)
from ._polynomial_real import polynomial_real

__all__ = [
    "FFT_THRESHOLD",
    "Polynomial",
    "polynomial",
    "polynomial_degree",
    "polynomial_evaluate",
    "polynomial_format",
    "polynomial_multiply",
    "polynomial_multiply_auto",
    "polynomial_multiply_fft",
    "polynomial_real",
]
