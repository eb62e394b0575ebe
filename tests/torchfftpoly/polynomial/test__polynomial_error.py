"""Tests for polynomial exception hierarchy."""

import pytest

from torchfftpoly.polynomial import PolynomialError


class TestPolynomialError:
    def test_is_value_error(self):
        with pytest.raises(ValueError):
            raise PolynomialError("test")

    def test_message(self):
        with pytest.raises(PolynomialError, match="at least one coefficient"):
            raise PolynomialError(
                "Polynomial must have at least one coefficient"
            )
