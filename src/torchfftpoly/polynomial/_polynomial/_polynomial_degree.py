import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> Tensor:
    """Return degree of polynomial(s).

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Tensor
        Number of coefficients minus 1.

    Notes
    -----
    This returns the formal degree (len(coeffs) - 1), not the actual degree
    which would require checking for trailing zeros. The product of
    polynomials with formal degrees d and e always has formal degree d + e,
    even when either factor is identically zero.
    """
    return torch.tensor(p.coeffs.shape[-1] - 1, device=p.coeffs.device)
