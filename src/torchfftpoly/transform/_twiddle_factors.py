import math

import torch
from torch import Tensor

from ._exceptions import PowerOfTwoError, _is_power_of_two


def twiddle_factors(
    step: int,
    sign: float,
    *,
    dtype: torch.dtype = torch.complex128,
    device=None,
) -> Tensor:
    r"""Powers of the principal ``step``-th root of unity for one pass.

    .. math::
        \omega = \cos\theta + i \sin\theta, \quad
        \theta = \mathrm{sign} \cdot 2\pi / \mathrm{step}

    Returns :math:`\omega^0, \omega^1, \ldots, \omega^{step/2 - 1}`. Each
    power is obtained from the previous one by a single multiplication by
    :math:`\omega`, starting from 1, in Python ``complex`` arithmetic. The
    result is bit-identical from run to run and across devices.

    Parameters
    ----------
    step : int
        Butterfly span, a power of two ``>= 2``.
    sign : float
        Angle sign, ``1.0`` for the forward transform and ``-1.0`` for the
        inverse.
    dtype : torch.dtype, optional
        Complex dtype of the result. Default: ``torch.complex128``.
    device : torch.device, optional
        Device of the result.

    Returns
    -------
    Tensor
        Shape ``(step // 2,)``.

    Raises
    ------
    PowerOfTwoError
        If ``step`` is not a power of two.
    """
    if step < 2:
        raise ValueError(f"step must be at least 2, got {step}")

    if not _is_power_of_two(step):
        raise PowerOfTwoError(f"step must be a power of two, got {step}")

    if sign not in (1.0, -1.0):
        raise ValueError(f"sign must be 1.0 or -1.0, got {sign}")

    theta = sign * 2.0 * math.pi / step

    omega = complex(math.cos(theta), math.sin(theta))

    factors = [complex(1.0, 0.0)]
    for _ in range(step // 2 - 1):
        factors.append(factors[-1] * omega)

    return torch.tensor(factors, dtype=dtype, device=device)
