"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_random.distributions.distribution import Distribution
from pysatl_random.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_random.distributions.computation import AnalyticalComputation
    from pysatl_random.distributions.sampling import Sample
    from pysatl_random.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_random.families.parametric_family import ParametricFamily
    from pysatl_random.families.parametrizations import Parametrization
    from pysatl_random.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def parametrization_name(self) -> str:
        """Get the name of the parametrization the parameters are given in."""
        return self.parameters.name

    @property
    def family(self) -> ParametricFamily:
        """Get the parametric family this distribution belongs to."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily computed and cached per instance. Cache invalidates when
        parametrization object or name changes.
        """
        key = (id(self.parameters), self.parameters.name)
        cache_key = getattr(self, "_analytical_cache_key", None)
        cache_val = getattr(self, "_analytical_cache_val", None)

        if cache_key != key or cache_val is None:
            cache_val = self.family._build_analytical_computations(self.parameters)
            self._analytical_cache_key = key
            self._analytical_cache_val = cache_val

        return cache_val

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self.family.computation_strategy

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        **options : Any
            Sampling options, e.g. ``engine`` (an engine or a seed).

        Returns
        -------
        Sample
            Generated samples of shape ``(n, 1)``.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
