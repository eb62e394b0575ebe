import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Tensor) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (...batch, N).
    x : Tensor
        Evaluation points, shape (...x_batch). The result shape is
        (...batch, ...x_batch).

    Returns
    -------
    Tensor
        Values p(x), complex.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0])).real
    tensor([ 1.,  6., 17.], dtype=torch.float64)
    """
    coeffs = p.coeffs

    batch_shape = coeffs.shape[:-1]
    N = coeffs.shape[-1]

    # (...batch, 1, ..., 1, N) so each coefficient broadcasts against x
    coeffs = coeffs.reshape(*batch_shape, *([1] * x.dim()), N)

    x = x.to(coeffs.dtype)

    result = coeffs[..., N - 1]
    for k in range(N - 2, -1, -1):
        result = result * x + coeffs[..., k]

    return torch.broadcast_to(result, (*batch_shape, *x.shape))
