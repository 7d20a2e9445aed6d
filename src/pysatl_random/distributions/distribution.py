"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by the
computation and sampling strategies.

Notes
-----
- Characteristics are resolved through the distribution's computation
  strategy and may be evaluated on scalars or arrays.
- Sampling options (``engine``) are forwarded to the sampling strategy.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_random.distributions.computation import AnalyticalComputation
    from pysatl_random.distributions.sampling import Sample
    from pysatl_random.distributions.strategies import (
        ComputationStrategy,
        SamplingStrategy,
    )
    from pysatl_random.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, **options)
