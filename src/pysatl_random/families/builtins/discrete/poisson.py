"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, pdtr, xlogy

from pysatl_random.distributions.engine import draw_poisson
from pysatl_random.distributions.kernels import sampling_kernel
from pysatl_random.families.parametric_family import ParametricFamily
from pysatl_random.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_random.families.registry import ParametricFamilyRegister
from pysatl_random.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_random.distributions.engine import Engine


@dataclass(frozen=True, slots=True)
class PoissonStandard(Parametrization):
    """
    Standard parametrization of Poisson distribution.

    Parameters
    ----------
    rate : float
        Expected number of events λ
    """

    rate: float

    @constraint(description="0 < rate < inf")
    def check_rate_positive(self) -> bool:
        return bool(0 < self.rate < np.inf)


@sampling_kernel()
def poisson_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    return draw_poisson(cast(PoissonStandard, parameters).rate, engine, dtype)


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a fixed interval for events occurring at rate λ.

    Probability mass function:
        P(X = k) = λ^k exp(-λ) / k!, k = 0, 1, ...
    """

    def pmf(parameters: Parametrization, k: NumericArray, log: bool = False) -> NumericArray:
        """Probability mass function (``log=True`` for the log-mass)."""
        rate = cast(PoissonStandard, parameters).rate
        k = np.asarray(k, dtype=np.float64)

        on_support = (k >= 0) & (k == np.floor(k))
        safe_k = np.where(on_support, k, 0.0)
        log_values = np.where(on_support, xlogy(safe_k, rate) - rate - gammaln(safe_k + 1), -np.inf)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function."""
        rate = cast(PoissonStandard, parameters).rate
        k = np.floor(np.asarray(x, dtype=np.float64))
        return cast(NumericArray, np.where(k < 0, 0.0, pdtr(np.maximum(k, 0.0), rate)))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of Poisson distribution."""
        return cast(PoissonStandard, parameters).rate

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of Poisson distribution."""
        return cast(PoissonStandard, parameters).rate

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=poisson_kernel,
    )
    Poisson.__doc__ = POISSON_DOC

    parametrization(family=Poisson, name="standard")(PoissonStandard)

    ParametricFamilyRegister.register(Poisson)
