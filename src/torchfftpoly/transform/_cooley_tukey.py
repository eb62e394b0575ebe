"""Iterative radix-2 decimation-in-time Cooley-Tukey kernel.

Shared by the forward and inverse transforms, which differ only in the
sign of the twiddle angle and the final ``1 / n`` scaling.
"""

import torch
from torch import Tensor

from ._bit_reversal_permutation import bit_reversal_permutation
from ._exceptions import TransformError, _check_power_of_two
from ._twiddle_factors import twiddle_factors


def _as_complex128(input: Tensor) -> Tensor:
    if input.dtype == torch.complex128:
        return input
    return input.to(torch.complex128)


def _cooley_tukey(input: Tensor, sign: float, dim: int = -1) -> Tensor:
    """Evaluate the polynomial ``input`` at the ``n``-th roots of unity.

    Output ``k`` is ``sum_j input[j] * exp(i * sign * 2 * pi * j * k / n)``.

    The caller's tensor is only read: the bit-reversal permutation is
    gathered into a fresh working tensor and every butterfly pass builds a
    new tensor from the previous one.
    """
    if input.dim() == 0:
        raise TransformError(
            "transform input must have at least one dimension"
        )

    n = input.shape[dim]

    log = _check_power_of_two(n)

    # (..., n)
    output = bit_reversal_permutation(_as_complex128(input), dim=dim)
    output = output.movedim(dim, -1)

    batch_shape = output.shape[:-1]

    step = 2
    for _ in range(log):
        half = step // 2

        twiddle = twiddle_factors(
            step,
            sign,
            dtype=output.dtype,
            device=output.device,
        )

        # Blocks of `step` samples; the butterfly pairs sample j of the
        # first half with sample j of the second half.
        # (..., n / step, 2, half)
        blocks = output.reshape(*batch_shape, n // step, 2, half)

        a = blocks[..., 0, :]
        b = twiddle * blocks[..., 1, :]

        output = torch.stack((a + b, a - b), dim=-2).reshape(*batch_shape, n)

        step *= 2

    return output.movedim(-1, dim)
