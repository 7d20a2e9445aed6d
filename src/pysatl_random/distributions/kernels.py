"""
Sampling Kernels
================

A sampling kernel produces one draw of a distribution from its parameters and
an engine. This module defines:

- :class:`SamplingKernel`: validating, type-resolving wrapper around a draw
  function;
- :func:`sampling_kernel`: decorator turning a draw function into a kernel;
- :func:`inverse_cdf_kernel`: kernel factory for inversion sampling.

Notes
-----
- Invalid parameters produce the NaN sentinel and leave the engine untouched.
- Valid parameters consume exactly the draws of the kernel's strategy, so the
  same engine state and parameters reproduce the same value.
- Composition kernels call other kernels with the dtype they were given.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_random.distributions.engine import draw_uniform
from pysatl_random.distributions.promotion import resolve_parameter_type

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_random.distributions.engine import Engine
    from pysatl_random.families.parametrizations import Parametrization

    type DrawFunction = Callable[[Parametrization, Engine, np.dtype[Any]], Any]
    type SentinelFunction = Callable[[Parametrization, np.dtype[Any]], Any]


def scalar_sentinel(_: Parametrization, dtype: np.dtype[Any]) -> Any:
    """NaN of the resolved type."""
    return dtype.type(np.nan)


@dataclass(frozen=True, slots=True)
class SamplingKernel:
    """
    Single-draw sampler of a distribution.

    Parameters
    ----------
    draw : Callable[[Parametrization, Engine, numpy.dtype], Any]
        Draw function. Receives valid parameters in the base parametrization.
    scalar : bool, default True
        Whether a draw is a scalar. Only scalar kernels can fill buffers.
    sentinel : Callable[[Parametrization, numpy.dtype], Any]
        Produces the value returned for invalid parameters.
    """

    draw: DrawFunction
    scalar: bool = True
    sentinel: SentinelFunction = scalar_sentinel

    def __call__(
        self,
        parameters: Parametrization,
        engine: Engine,
        dtype: np.dtype[Any] | None = None,
    ) -> Any:
        """
        Draw one value.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any parametrization of the family.
        engine : Engine
            Engine advanced by the draw.
        dtype : numpy.dtype, optional
            Already resolved result type. Resolved from ``parameters`` when
            omitted.

        Returns
        -------
        Any
            Draw of type ``dtype``, or the sentinel for invalid parameters.
        """
        if dtype is None:
            dtype = resolve_parameter_type(parameters)
        if not parameters.is_valid():
            return self.sentinel(parameters, dtype)

        value = self.draw(parameters.transform_to_base_parametrization(), engine, dtype)
        if self.scalar:
            return dtype.type(value)
        return np.asarray(value, dtype=dtype)


def sampling_kernel(
    *,
    scalar: bool = True,
    sentinel: SentinelFunction = scalar_sentinel,
) -> Callable[[DrawFunction], SamplingKernel]:
    """
    Decorator building a :class:`SamplingKernel` from a draw function.

    Parameters
    ----------
    scalar : bool, default True
        Whether draws are scalars.
    sentinel : Callable, optional
        Sentinel factory for invalid parameters.
    """

    def decorator(func: DrawFunction) -> SamplingKernel:
        return SamplingKernel(draw=func, scalar=scalar, sentinel=sentinel)

    return decorator


def inverse_cdf_kernel(quantile: Callable[[Parametrization, Any], Any]) -> SamplingKernel:
    """
    Build an inversion kernel from a quantile function.

    One uniform ``u`` is drawn and ``quantile(parameters, u)`` is returned.

    Parameters
    ----------
    quantile : Callable[[Parametrization, Any], Any]
        Quantile function taking base parameters and a probability.

    Returns
    -------
    SamplingKernel
        Scalar kernel consuming one uniform per draw.
    """

    def draw(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
        return quantile(parameters, draw_uniform(engine, dtype))

    return SamplingKernel(draw=draw)


__all__ = [
    "SamplingKernel",
    "sampling_kernel",
    "inverse_cdf_kernel",
    "scalar_sentinel",
]
