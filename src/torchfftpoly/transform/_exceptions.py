"""Exception hierarchy for transform operations."""


class TransformError(ValueError):
    """Base class for transform errors."""

    pass


class PowerOfTwoError(TransformError):
    """Transform length is not a power of two.

    The iterative Cooley-Tukey layout indexes samples by bit reversal of
    a ``log2(n)``-bit index, which is only defined when ``n`` is an exact
    power of two. Raised before any computation takes place.
    """

    pass


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def _check_power_of_two(n: int) -> int:
    """Return ``log2(n)``, raising ``PowerOfTwoError`` for other lengths."""
    if not _is_power_of_two(n):
        raise PowerOfTwoError(
            f"transform length must be a power of two, got {n}"
        )
    return n.bit_length() - 1
