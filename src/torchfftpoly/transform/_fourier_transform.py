"""Fourier transform implementation."""

from torch import Tensor

from ._cooley_tukey import _cooley_tukey


def fourier_transform(input: Tensor, *, dim: int = -1) -> Tensor:
    r"""Evaluate a coefficient buffer at the roots of unity.

    Treating ``input`` as the coefficients of a polynomial
    :math:`a(x) = \sum_j a_j x^j`, computes

    .. math::
        A[k] = \sum_{j=0}^{n-1} a_j \, e^{+2\pi i j k / n}
             = a(\omega_n^k), \quad \omega_n = e^{2\pi i / n}

    for :math:`k = 0, \ldots, n - 1`, using the iterative radix-2
    Cooley-Tukey algorithm: a bit-reversal permutation followed by
    :math:`\log_2 n` butterfly passes.

    Parameters
    ----------
    input : Tensor
        Coefficient buffer, real or complex. Its size along ``dim`` must be
        a power of two. All other dimensions are treated as batch
        dimensions.
    dim : int, optional
        The dimension along which to transform. Default: ``-1``.

    Returns
    -------
    Tensor
        Point values, ``torch.complex128``, same shape as ``input``.

    Raises
    ------
    TransformError
        If ``input`` is zero-dimensional.
    PowerOfTwoError
        If the size along ``dim`` is not a power of two.

    Notes
    -----
    The angle sign is positive, the opposite of ``torch.fft.fft``. The two
    are related by ``fourier_transform(x) == n * torch.fft.ifft(x)``.

    ``input`` is never modified.

    Examples
    --------
    >>> fourier_transform(torch.tensor([1.0, 2.0]))
    tensor([ 3.+0.j, -1.+0.j], dtype=torch.complex128)
    """
    return _cooley_tukey(input, 1.0, dim)
