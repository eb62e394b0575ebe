"""Hypothesis strategies for transform and polynomial testing."""

from ._batch_shapes import batch_shapes
from ._coefficient_tensors import coefficient_tensors
from ._coefficient_values import coefficient_values
from ._power_of_two_lengths import power_of_two_lengths

__all__ = [
    # Scalar strategies
    "coefficient_values",
    "power_of_two_lengths",
    # Tensor strategies
    "batch_shapes",
    "coefficient_tensors",
]
