"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL Random:

- distribution protocol (:mod:`.distribution`);
- engine handle and primitive draws (:mod:`.engine`);
- numeric type promotion (:mod:`.promotion`);
- sampling kernels (:mod:`.kernels`);
- vector and matrix output layers (:mod:`.broadcast`, :mod:`.materialize`),
  imported from their modules;
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .engine import Engine, EngineLike, make_engine, resolve_engine
from .kernels import SamplingKernel, inverse_cdf_kernel, sampling_kernel
from .promotion import resolve_parameter_type, resolve_type, resolve_value_type
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    KernelSamplingStrategy,
    SamplingStrategy,
)

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    # distribution
    "Distribution",
    # engine
    "Engine",
    "EngineLike",
    "make_engine",
    "resolve_engine",
    # type promotion
    "resolve_type",
    "resolve_value_type",
    "resolve_parameter_type",
    # kernels
    "SamplingKernel",
    "sampling_kernel",
    "inverse_cdf_kernel",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "KernelSamplingStrategy",
]
