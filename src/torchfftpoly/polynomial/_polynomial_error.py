class PolynomialError(ValueError):
    """Base class for polynomial errors."""

    pass
