"""
Matrix Materialization Layer
============================

Allocates a ``rows x cols`` container and delegates to the vector layer.
Element ``(i, j)`` receives the ``(i * cols + j)``-th draw.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from numbers import Integral
from typing import TYPE_CHECKING

import numpy as np

from pysatl_random.distributions.broadcast import fill, resolve_broadcast_type

if TYPE_CHECKING:
    from typing import Any

    from pysatl_random.distributions.engine import Engine
    from pysatl_random.distributions.kernels import SamplingKernel
    from pysatl_random.families.parametrizations import Parametrization
    from pysatl_random.types import FloatArray, ParameterValue


def _check_dimension(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}.")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}.")


def materialize(
    kernel: SamplingKernel,
    parametrization_class: type[Parametrization],
    rows: int,
    cols: int,
    engine: Engine,
    dtype: np.dtype[Any] | None = None,
    **values: ParameterValue,
) -> FloatArray:
    """
    Allocate a fresh ``rows x cols`` matrix and fill it with draws.

    Parameters
    ----------
    kernel : SamplingKernel
        Scalar kernel of the family.
    parametrization_class : type[Parametrization]
        Parametrization the ``values`` are expressed in.
    rows, cols : int
        Matrix dimensions.
    engine : Engine
        Engine shared by all draws.
    dtype : numpy.dtype, optional
        Already resolved result type.
    **values : ParameterValue
        Parameter values; sequences are broadcast in row-major element order.

    Returns
    -------
    FloatArray
        Fully populated matrix owned by the caller.

    Raises
    ------
    TypeError
        If a dimension is not an integer or the kernel is not scalar.
    ValueError
        If a dimension is negative.
    MemoryError
        If the container cannot be allocated.
    """
    if not kernel.scalar:
        raise TypeError("Only scalar kernels can be materialized into a matrix.")
    _check_dimension("rows", rows)
    _check_dimension("cols", cols)
    if dtype is None:
        dtype = resolve_broadcast_type(values)

    container: FloatArray = np.empty((rows, cols), dtype=dtype, order="C")
    if container.size == 0:
        return container

    row_stride = container.strides[0] // container.itemsize
    num_elem = rows * row_stride
    buffer = container.reshape(-1)
    fill(kernel, parametrization_class, buffer, engine, num_elem, dtype, **values)
    return container


__all__ = [
    "materialize",
]
