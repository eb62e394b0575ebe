import pytest
import torch

from torchfftpoly.polynomial import polynomial, polynomial_format


class TestPolynomialFormat:
    """Tests for polynomial_format."""

    def test_highest_degree_first(self):
        p = polynomial([7.0, -1.0, 4.0, 3.0])
        assert (
            polynomial_format(p) == "+3.00*x^3 +4.00*x^2 -1.00*x^1 +7.00*x^0"
        )

    def test_product(self):
        """Floating-point noise is hidden by rounding."""
        a = polynomial([7.0, -1.0, 4.0, 3.0])
        b = polynomial([3.0, -2.0, -4.0, 7.0])
        assert polynomial_format(a * b) == (
            "+21.00*x^6 +16.00*x^5 -29.00*x^4 +54.00*x^3 "
            "-14.00*x^2 -17.00*x^1 +21.00*x^0"
        )

    def test_constant(self):
        assert polynomial_format(polynomial([0.5])) == "+0.50*x^0"

    def test_imaginary_part_dropped(self):
        p = polynomial(torch.tensor([1.0 + 5.0j, -2.0 - 3.0j]))
        assert polynomial_format(p) == "-2.00*x^1 +1.00*x^0"

    def test_precision(self):
        p = polynomial([1.0 / 3.0, 2.0])
        assert polynomial_format(p, precision=4) == "+2.0000*x^1 +0.3333*x^0"
        assert polynomial_format(p, precision=0) == "+2*x^1 +0*x^0"

    def test_negative_precision_raises(self):
        with pytest.raises(ValueError, match="precision"):
            polynomial_format(polynomial([1.0]), precision=-1)

    def test_batched(self):
        """One line per batch element."""
        p = polynomial(torch.tensor([[1.0, 2.0], [3.0, -4.0]]))
        assert polynomial_format(p) == (
            "+2.00*x^1 +1.00*x^0\n-4.00*x^1 +3.00*x^0"
        )

    def test_str(self):
        p = polynomial([1.0, -1.0])
        assert str(p) == polynomial_format(p)
