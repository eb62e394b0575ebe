import torch

from ._polynomial import Polynomial


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials by direct convolution.

    Computes convolution of coefficients in O(n * m) time. Result degree is
    deg(p) + deg(q).

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q.
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    # Get shapes
    p_batch = p_coeffs.shape[:-1]
    q_batch = q_coeffs.shape[:-1]
    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    # Broadcast batch dimensions
    broadcast_batch = torch.broadcast_shapes(p_batch, q_batch)

    # Expand to broadcast shape
    p_expanded = p_coeffs.expand(*broadcast_batch, n_p)
    q_expanded = q_coeffs.expand(*broadcast_batch, n_q)

    n_out = n_p + n_q - 1

    result = p_coeffs.new_zeros((*broadcast_batch, n_out))

    # Sum of copies of q shifted by i and scaled by p_i
    for i in range(n_p):
        term = p_expanded[..., i : i + 1] * q_expanded
        before = term.new_zeros((*broadcast_batch, i))
        after = term.new_zeros((*broadcast_batch, n_out - n_q - i))
        result = result + torch.cat((before, term, after), dim=-1)

    return Polynomial(coeffs=result)
