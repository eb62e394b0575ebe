from typing import Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchfftpoly.polynomial._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending complex coefficients.

    Represents p(x) = coeffs[..., 0] + coeffs[..., 1]*x + ...
    + coeffs[..., N-1]*x^(N-1)

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (..., N) where N = degree + 1,
        dtype ``torch.complex128``. coeffs[..., i] is the coefficient of
        x^i. Batch dimensions come first, coefficient dimension last.

    Examples
    --------
    Single polynomial 3x^3 + 4x^2 - x + 7:
        polynomial([7.0, -1.0, 4.0, 3.0])

    Operator overloading:
        p * q    # polynomial_multiply_fft(p, q)
        p(x)     # polynomial_evaluate(p, x)
        str(p)   # polynomial_format(p)
    """

    coeffs: Tensor

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_multiply_fft import polynomial_multiply_fft

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_multiply_fft(self, other)

    def __rmul__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_multiply_fft import polynomial_multiply_fft

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_multiply_fft(other, self)

    def __call__(self, x: Tensor) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    def __str__(self) -> str:
        from ._polynomial_format import polynomial_format

        return polynomial_format(self)


def polynomial(coeffs: Union[Tensor, Sequence[float]]) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Coefficients in ascending order, shape (..., N).
        Must have at least one coefficient. Real values are promoted to
        complex samples with zero imaginary part.

    Returns
    -------
    Polynomial
        Polynomial instance with ``torch.complex128`` coefficients. A tensor
        argument that is already ``complex128`` is stored as is.

    Raises
    ------
    PolynomialError
        If coeffs is empty (size 0 in last dimension).

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1.+0.j, 2.+0.j, 3.+0.j], dtype=torch.complex128)
    """
    if not isinstance(coeffs, Tensor):
        coeffs = torch.tensor(coeffs, dtype=torch.float64)

    if coeffs.dim() == 0:
        raise PolynomialError(
            "Polynomial coefficients must have at least one dimension"
        )

    if coeffs.numel() == 0 or coeffs.shape[-1] == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    if coeffs.dtype != torch.complex128:
        coeffs = coeffs.to(torch.complex128)

    return Polynomial(coeffs=coeffs)
