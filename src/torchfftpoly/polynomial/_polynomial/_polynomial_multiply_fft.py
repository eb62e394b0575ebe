"""FFT-based polynomial multiplication.

Convolution of coefficients is point-wise multiplication of values at the
roots of unity, so the product is computed by two forward transforms, one
element-wise product and one inverse transform, in O(n log n) time
instead of O(n^2) for direct convolution.
"""

import torch
from torch import Tensor

from torchfftpoly.transform import (
    fourier_transform,
    inverse_fourier_transform,
)

from ._polynomial import Polynomial

# Threshold for switching to FFT-based multiplication
# Below this degree, direct convolution is typically faster
FFT_THRESHOLD = 64


def _next_power_of_2(n: int) -> int:
    """Return the smallest power of 2 >= n."""
    if n <= 0:
        return 1
    return 1 << (n - 1).bit_length()


def _zero_pad(coeffs: Tensor, n: int) -> Tensor:
    """Return a copy of ``coeffs`` extended with zeros to length ``n``."""
    zeros = coeffs.new_zeros((*coeffs.shape[:-1], n - coeffs.shape[-1]))

    return torch.cat((coeffs, zeros), dim=-1)


def polynomial_multiply_fft(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials using FFT-based convolution.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply, with ``n`` and ``m`` coefficients.

    Returns
    -------
    Polynomial
        Product p * q with exactly ``n + m - 1`` coefficients.

    Notes
    -----
    The algorithm works by:

    1. Zero-padding copies of both coefficient tensors to the smallest
       power of two ``>= n + m - 1``, so the cyclic convolution computed
       by the transform has no wraparound.
    2. Evaluating both padded sequences at the roots of unity with
       :func:`~torchfftpoly.transform.fourier_transform`.
    3. Multiplying element-wise.
    4. Interpolating with
       :func:`~torchfftpoly.transform.inverse_fourier_transform`.
    5. Truncating to ``n + m - 1`` coefficients.

    ``p`` and ``q`` are not modified. The imaginary parts of the result
    may carry floating-point noise even for real inputs; see
    :func:`polynomial_real`.

    Batch dimensions of ``p`` and ``q`` broadcast.

    Examples
    --------
    >>> p = polynomial([7.0, -1.0, 4.0, 3.0])  # 3x^3 + 4x^2 - x + 7
    >>> q = polynomial([3.0, -2.0, -4.0, 7.0])  # 7x^3 - 4x^2 - 2x + 3
    >>> polynomial_multiply_fft(p, q).coeffs.real.round()
    tensor([ 21., -17., -14.,  54., -29.,  16.,  21.], dtype=torch.float64)
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    # Get shapes
    p_batch = p_coeffs.shape[:-1]
    q_batch = q_coeffs.shape[:-1]
    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    # Result length
    n_result = n_p + n_q - 1

    # Transform length, never less than the result so no aliasing occurs
    n_fft = _next_power_of_2(n_result)

    # Broadcast batch dimensions
    broadcast_batch = torch.broadcast_shapes(p_batch, q_batch)

    p_padded = _zero_pad(p_coeffs.expand(*broadcast_batch, n_p), n_fft)
    q_padded = _zero_pad(q_coeffs.expand(*broadcast_batch, n_q), n_fft)

    p_points = fourier_transform(p_padded)
    q_points = fourier_transform(q_padded)

    coeffs = inverse_fourier_transform(p_points * q_points)

    return Polynomial(coeffs=coeffs[..., :n_result])


def polynomial_multiply_auto(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials, automatically selecting the best algorithm.

    Uses FFT-based multiplication for high-degree polynomials and direct
    convolution for low-degree polynomials.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q.

    Notes
    -----
    The threshold for switching to FFT is ``FFT_THRESHOLD`` (degree 64).
    This is a heuristic, and the optimal threshold may vary by hardware.
    """
    n_p = p.coeffs.shape[-1]
    n_q = q.coeffs.shape[-1]
    max_degree = max(n_p, n_q) - 1

    if max_degree >= FFT_THRESHOLD:
        return polynomial_multiply_fft(p, q)
    else:
        from ._polynomial_multiply import polynomial_multiply

        return polynomial_multiply(p, q)
