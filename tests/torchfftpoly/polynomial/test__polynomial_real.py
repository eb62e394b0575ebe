import warnings

import pytest
import torch

from torchfftpoly.polynomial import Polynomial, polynomial, polynomial_real


class TestPolynomialReal:
    """Tests for polynomial_real."""

    def test_real_part(self):
        p = polynomial([1.0, -2.0, 3.0])
        result = polynomial_real(p)
        assert result.dtype == torch.float64
        torch.testing.assert_close(
            result, torch.tensor([1.0, -2.0, 3.0], dtype=torch.float64)
        )

    def test_product_noise_is_silent(self):
        """Transform noise stays below the default tolerance."""
        p = polynomial([7.0, -1.0, 4.0, 3.0])
        q = polynomial([3.0, -2.0, -4.0, 7.0])

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = polynomial_real(p * q)

        torch.testing.assert_close(
            result,
            torch.tensor(
                [21.0, -17.0, -14.0, 54.0, -29.0, 16.0, 21.0],
                dtype=torch.float64,
            ),
        )

    def test_large_imaginary_part_warns(self):
        p = polynomial(torch.tensor([1.0 + 0.5j, 2.0 + 0.0j]))

        with pytest.warns(UserWarning, match="imaginary"):
            result = polynomial_real(p)

        torch.testing.assert_close(
            result, torch.tensor([1.0, 2.0], dtype=torch.float64)
        )

    def test_tol(self):
        p = polynomial(torch.tensor([1.0 + 1e-3j]))

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            polynomial_real(p, tol=1e-2)

    def test_real_coefficients_returned_unchanged(self):
        """A polynomial built directly from a real tensor has no imag part."""
        coeffs = torch.tensor([1.0, 2.0], dtype=torch.float64)
        p = Polynomial(coeffs=coeffs)

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = polynomial_real(p)

        torch.testing.assert_close(result, coeffs, rtol=0, atol=0)
