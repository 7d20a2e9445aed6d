"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy`: resolves characteristic methods.
- :class:`DefaultComputationStrategy`: resolves analytical characteristics.
- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy`: draws ``(n, 1)`` samples using
  ``ppf`` and i.i.d. uniform variates from an engine.
- :class:`KernelSamplingStrategy`: draws ``(n, 1)`` samples of a parametric
  family distribution through the family's sampling kernel.

Notes
-----
- Strategies are stateless; all randomness comes from the ``engine`` option,
  an engine or a seed. Without it a fresh OS-seeded engine is used.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_random.distributions.broadcast import sample_vector
from pysatl_random.distributions.computation import AnalyticalComputation
from pysatl_random.distributions.engine import resolve_engine
from pysatl_random.types import CharacteristicName, GenericCharacteristicName

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from pysatl_random.distributions.engine import EngineLike
    from pysatl_random.families.distribution import ParametricFamilyDistribution

    from .distribution import Distribution


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> AnalyticalComputation[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Returns the analytical implementation the distribution provides.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical form of the characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> AnalyticalComputation[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical computations.

        Returns
        -------
        AnalyticalComputation
            Analytical callable implementing ``state``.
        """
        computations = distr.analytical_computations
        if state not in computations:
            raise RuntimeError(
                f"Distribution provides no analytical computation for '{state}'."
            )
        return computations[state]


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)`` drawn from the engine.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self, n: int, distr: "Distribution", engine: "EngineLike" = None, **options: Any
    ) -> ArraySample:
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        rng = resolve_engine(engine)
        U = rng.random(n)
        vals = np.array([ppf(Ui) for Ui in U], dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)


class KernelSamplingStrategy(SamplingStrategy):
    """
    Sampler of parametric family distributions through the family kernel.

    Scalar draws are produced by the vector layer, so
    ``distr.sample(n, engine=s)`` equals ``family.sample_vector(n, engine=s, ...)``
    for the same parameters. Matrix draws are flattened row-major, one per row.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``, or ``(n, rows * cols)`` for
        matrix-variate families.
    """

    def sample(
        self,
        n: int,
        distr: "ParametricFamilyDistribution",  # type: ignore[override]
        engine: "EngineLike" = None,
        **options: Any,
    ) -> ArraySample:
        kernel = distr.family.kernel
        rng = resolve_engine(engine)
        if kernel.scalar:
            values = sample_vector(
                kernel, type(distr.parameters), n, rng, **distr.parameters.parameters
            )
            return ArraySample(values.reshape(n, 1))

        draws = [np.asarray(kernel(distr.parameters, rng)).reshape(-1) for _ in range(n)]
        if not draws:
            return ArraySample(np.empty((0, 0)))
        return ArraySample(np.stack(draws))
