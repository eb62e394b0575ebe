from ._polynomial import Polynomial


def _format_terms(coeffs, precision: int) -> str:
    n = len(coeffs)

    return " ".join(
        f"{coeffs[k]:+.{precision}f}*x^{k}" for k in range(n - 1, -1, -1)
    )


def polynomial_format(p: Polynomial, *, precision: int = 2) -> str:
    """Render a polynomial as a human-readable expression.

    Terms run from the highest degree down to the constant, each written
    as ``<signed real part>*x^<exponent>`` and separated by single spaces.
    Imaginary parts are not shown. Batched polynomials produce one line per
    batch element, in row-major order.

    Parameters
    ----------
    p : Polynomial
        Polynomial to render.
    precision : int
        Digits after the decimal point. Default: ``2``.

    Returns
    -------
    str

    Examples
    --------
    >>> polynomial_format(polynomial([7.0, -1.0, 4.0, 3.0]))
    '+3.00*x^3 +4.00*x^2 -1.00*x^1 +7.00*x^0'
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")

    coeffs = p.coeffs.real.detach().cpu()

    rows = coeffs.reshape(-1, coeffs.shape[-1]).tolist()

    return "\n".join(_format_terms(row, precision) for row in rows)
