import warnings

from torch import Tensor

from ._polynomial import Polynomial


def polynomial_real(p: Polynomial, *, tol: float = 1e-9) -> Tensor:
    """Return the real part of the coefficients.

    Products computed through the Fourier transform carry floating-point
    noise in the imaginary parts of their coefficients even when both
    factors are real. This drops it.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float
        Largest imaginary magnitude discarded silently.

    Returns
    -------
    Tensor
        Real coefficients, shape (..., N), ``torch.float64`` for complex128
        coefficients. Real coefficients are returned unchanged.

    Warns
    -----
    UserWarning
        If any coefficient has an imaginary part with magnitude above
        ``tol``.
    """
    coeffs = p.coeffs

    if not coeffs.is_complex():
        return coeffs

    residue = coeffs.imag.abs().max().item()
    if residue > tol:
        warnings.warn(
            f"Discarding imaginary parts up to {residue:.3g}, "
            f"which exceeds tol={tol:.3g}",
            UserWarning,
            stacklevel=2,
        )

    return coeffs.real
