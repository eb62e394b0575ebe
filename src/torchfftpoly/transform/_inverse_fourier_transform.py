"""Inverse Fourier transform implementation."""

from torch import Tensor

from ._cooley_tukey import _cooley_tukey


def inverse_fourier_transform(input: Tensor, *, dim: int = -1) -> Tensor:
    r"""Interpolate coefficients from values at the roots of unity.

    Inverse of :func:`fourier_transform`:

    .. math::
        a_j = \frac{1}{n} \sum_{k=0}^{n-1} A[k] \, e^{-2\pi i j k / n}

    Parameters
    ----------
    input : Tensor
        Point values. Size along ``dim`` must be a power of two.
    dim : int, optional
        The dimension along which to transform. Default: ``-1``.

    Returns
    -------
    Tensor
        Reconstructed coefficients, ``torch.complex128``, same shape as
        ``input``.

    Raises
    ------
    TransformError
        If ``input`` is zero-dimensional.
    PowerOfTwoError
        If the size along ``dim`` is not a power of two.

    Notes
    -----
    Equivalent to ``torch.fft.fft(x) / n``.
    """
    output = _cooley_tukey(input, -1.0, dim)

    return output / output.shape[dim]
