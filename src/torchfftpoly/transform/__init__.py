from ._bit_reversal_permutation import bit_reversal_permutation
from ._exceptions import PowerOfTwoError, TransformError
from ._fourier_transform import fourier_transform
from ._inverse_fourier_transform import inverse_fourier_transform
from ._twiddle_factors import twiddle_factors

__all__ = [
    "PowerOfTwoError",
    "TransformError",
    "bit_reversal_permutation",
    "fourier_transform",
    "inverse_fourier_transform",
    "twiddle_factors",
]
