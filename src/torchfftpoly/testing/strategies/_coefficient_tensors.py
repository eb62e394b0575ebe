from typing import Optional, Tuple

import hypothesis.extra.numpy
import hypothesis.strategies
import numpy
import torch

from ._batch_shapes import batch_shapes
from ._coefficient_values import coefficient_values


@hypothesis.strategies.composite
def coefficient_tensors(
    draw: hypothesis.strategies.DrawFn,
    dtype: torch.dtype = torch.float64,
    batch_shape: Optional[Tuple[int, ...]] = None,
    min_length: int = 1,
    max_length: int = 32,
    elements: Optional[hypothesis.strategies.SearchStrategy[float]] = None,
) -> torch.Tensor:
    """Generate coefficient tensors of shape (...batch, N).

    ``N`` is drawn from ``[min_length, max_length]``. With ``batch_shape``
    left as ``None`` the batch shape is drawn too.
    """
    if batch_shape is None:
        batch_shape = draw(batch_shapes())

    length = draw(
        hypothesis.strategies.integers(
            min_value=min_length, max_value=max_length
        )
    )

    shape = (*batch_shape, length)

    if elements is None:
        elements = coefficient_values()

    if dtype == torch.complex128:
        real_arr = draw(
            hypothesis.extra.numpy.arrays(
                numpy.float64, shape, elements=elements
            )
        )
        imag_arr = draw(
            hypothesis.extra.numpy.arrays(
                numpy.float64, shape, elements=elements
            )
        )
        return torch.complex(
            torch.tensor(real_arr, dtype=torch.float64),
            torch.tensor(imag_arr, dtype=torch.float64),
        )

    arr = draw(
        hypothesis.extra.numpy.arrays(numpy.float64, shape, elements=elements)
    )

    return torch.tensor(arr, dtype=dtype)
