"""
Vector Broadcast Layer
======================

Replays a scalar :class:`~pysatl_random.distributions.kernels.SamplingKernel`
across an output buffer.

- :func:`fill`: writes draws into a caller-owned 1-D buffer;
- :func:`sample_vector`: allocates a buffer and fills it.

Parameter values may be scalars or sequences. Sequences shorter than the
number of elements are cycled positionally (``index % len``).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_random.distributions.promotion import resolve_value_type

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_random.distributions.engine import Engine
    from pysatl_random.distributions.kernels import SamplingKernel
    from pysatl_random.families.parametrizations import Parametrization
    from pysatl_random.types import FloatArray, ParameterValue


def _split_parameters(
    values: Mapping[str, ParameterValue],
) -> tuple[dict[str, Any], dict[str, np.ndarray[Any, Any]]]:
    scalars: dict[str, Any] = {}
    sequences: dict[str, np.ndarray[Any, Any]] = {}
    for name, value in values.items():
        if np.ndim(value) == 0:
            scalars[name] = value
            continue
        arr = np.asarray(value).reshape(-1)
        if arr.size == 0:
            raise ValueError(f"Parameter '{name}' is an empty sequence.")
        sequences[name] = arr
    return scalars, sequences


def resolve_broadcast_type(values: Mapping[str, ParameterValue]) -> np.dtype[Any]:
    """Resolve the result type over scalar and sequence parameter values."""
    return resolve_value_type(
        *(v if np.ndim(v) == 0 else np.asarray(v) for v in values.values())
    )


def fill(
    kernel: SamplingKernel,
    parametrization_class: type[Parametrization],
    out: FloatArray,
    engine: Engine,
    num_elem: int | None = None,
    dtype: np.dtype[Any] | None = None,
    **values: ParameterValue,
) -> FloatArray:
    """
    Fill ``out`` with ``num_elem`` draws in increasing index order.

    Parameters
    ----------
    kernel : SamplingKernel
        Scalar kernel of the family.
    parametrization_class : type[Parametrization]
        Parametrization the ``values`` are expressed in.
    out : FloatArray
        Destination 1-D buffer; may be a strided view. Prior contents are
        never read.
    engine : Engine
        Engine shared by all draws.
    num_elem : int, optional
        Number of elements to write (default ``out.size``).
    dtype : numpy.dtype, optional
        Already resolved result type.
    **values : ParameterValue
        Parameter values, scalars or non-empty sequences.

    Returns
    -------
    FloatArray
        The same ``out`` buffer.

    Raises
    ------
    TypeError
        If the kernel is not scalar.
    ValueError
        If ``out`` is not 1-D, ``num_elem`` exceeds it, or a parameter
        sequence is empty.
    """
    if not kernel.scalar:
        raise TypeError("Only scalar kernels can fill a buffer.")
    if out.ndim != 1:
        raise ValueError(f"Output buffer must be 1-D, got {out.ndim}-D.")
    if num_elem is None:
        num_elem = out.shape[0]
    if num_elem < 0 or num_elem > out.shape[0]:
        raise ValueError(f"num_elem={num_elem} does not fit a buffer of {out.shape[0]} elements.")

    scalars, sequences = _split_parameters(values)
    if dtype is None:
        dtype = resolve_broadcast_type(values)

    if not sequences:
        parameters = parametrization_class(**scalars)
        for i in range(num_elem):
            out[i] = kernel(parameters, engine, dtype)
        return out

    for i in range(num_elem):
        current = dict(scalars)
        for name, seq in sequences.items():
            current[name] = seq[i % seq.shape[0]]
        out[i] = kernel(parametrization_class(**current), engine, dtype)
    return out


def sample_vector(
    kernel: SamplingKernel,
    parametrization_class: type[Parametrization],
    num_elem: int,
    engine: Engine,
    dtype: np.dtype[Any] | None = None,
    **values: ParameterValue,
) -> FloatArray:
    """Allocate a buffer of ``num_elem`` elements and :func:`fill` it."""
    if num_elem < 0:
        raise ValueError(f"num_elem must be non-negative, got {num_elem}.")
    if dtype is None:
        dtype = resolve_broadcast_type(values)
    out: FloatArray = np.empty(num_elem, dtype=dtype)
    return fill(kernel, parametrization_class, out, engine, num_elem, dtype, **values)


__all__ = [
    "fill",
    "sample_vector",
    "resolve_broadcast_type",
]
