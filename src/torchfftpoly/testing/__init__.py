"""Testing utilities for torchfftpoly."""

from . import strategies

__all__ = [
    "strategies",
]
