import torch
from torch import Tensor

from ._exceptions import TransformError, _check_power_of_two


def _bit_reversed_indices(n: int, device=None) -> Tensor:
    """Return ``j[i]``, the ``log2(n)``-bit reversal of every ``i < n``."""
    log = _check_power_of_two(n)

    indices = torch.arange(n, device=device)
    reversed_indices = torch.zeros_like(indices)
    for bit in range(log):
        reversed_indices = reversed_indices | (
            ((indices >> bit) & 1) << (log - 1 - bit)
        )

    return reversed_indices


def bit_reversal_permutation(input: Tensor, *, dim: int = -1) -> Tensor:
    """Reorder samples by bit-reversed index.

    Element ``i`` of the result is element ``reverse(i)`` of ``input``
    along ``dim``, where ``reverse`` reverses the ``log2(n)`` low bits of
    ``i``. Swapping ``i`` with ``reverse(i)`` for every pair ``i < j``
    produces the same ordering; the permutation is its own inverse.

    Parameters
    ----------
    input : Tensor
        Input tensor. Its size along ``dim`` must be a power of two.
    dim : int, optional
        Dimension to permute. Default: ``-1``.

    Returns
    -------
    Tensor
        Permuted copy of ``input``. ``input`` is not modified.

    Raises
    ------
    TransformError
        If ``input`` is zero-dimensional.
    PowerOfTwoError
        If the size along ``dim`` is not a power of two.

    Examples
    --------
    >>> bit_reversal_permutation(torch.arange(8))
    tensor([0, 4, 2, 6, 1, 5, 3, 7])
    """
    if input.dim() == 0:
        raise TransformError(
            "permutation input must have at least one dimension"
        )

    n = input.shape[dim]
    indices = _bit_reversed_indices(n, device=input.device)

    return input.index_select(dim, indices)
