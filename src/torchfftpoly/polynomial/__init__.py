from ._polynomial import (
    FFT_THRESHOLD,
    Polynomial,
    polynomial,
    polynomial_degree,
    polynomial_evaluate,
    polynomial_format,
    polynomial_multiply,
    polynomial_multiply_auto,
    polynomial_multiply_fft,
    polynomial_real,
)
from ._polynomial_error import PolynomialError

__all__ = [
    "FFT_THRESHOLD",
    "Polynomial",
    "PolynomialError",
    "polynomial",
    "polynomial_degree",
    "polynomial_evaluate",
    "polynomial_format",
    "polynomial_multiply",
    "polynomial_multiply_auto",
    "polynomial_multiply_fft",
    "polynomial_real",
]
