"""
Bernoulli distribution family implementation.

A Bernoulli draw consumes exactly one engine uniform ``u`` and is 1 when
``u < p``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import xlog1py, xlogy

from pysatl_random.distributions.engine import draw_bernoulli
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
class BernoulliStandard(Parametrization):
    """
    Standard parametrization of Bernoulli distribution.

    Parameters
    ----------
    p : float
        Success probability
    """

    p: float

    @constraint(description="0 <= p <= 1")
    def check_p_is_probability(self) -> bool:
        return 0 <= self.p <= 1


@sampling_kernel()
def bernoulli_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    return draw_bernoulli(cast(BernoulliStandard, parameters).p, engine, dtype)


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli distribution.

    A single trial that succeeds (1) with probability p and fails (0) otherwise.

    Probability mass function:
        P(X = 1) = p, P(X = 0) = 1 - p
    """

    def pmf(parameters: Parametrization, k: NumericArray, log: bool = False) -> NumericArray:
        """Probability mass function (``log=True`` for the log-mass)."""
        p = cast(BernoulliStandard, parameters).p
        k = np.asarray(k, dtype=np.float64)

        log_values = np.where((k == 0) | (k == 1), xlogy(k, p) + xlog1py(1 - k, -p), -np.inf)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function."""
        p = cast(BernoulliStandard, parameters).p
        x = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, np.select([x < 0, x < 1], [0.0, 1 - p], 1.0))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """
        Percent point function: the smallest k with F(k) >= q.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((q < 0) | (q > 1)):
            raise ValueError("Probability must be in [0, 1]")

        p = cast(BernoulliStandard, parameters).p
        return cast(NumericArray, np.where(np.asarray(q) <= 1 - p, 0.0, 1.0))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of Bernoulli distribution."""
        return cast(BernoulliStandard, parameters).p

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of Bernoulli distribution."""
        p = cast(BernoulliStandard, parameters).p
        return p * (1 - p)

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=bernoulli_kernel,
    )
    Bernoulli.__doc__ = BERNOULLI_DOC

    parametrization(family=Bernoulli, name="standard")(BernoulliStandard)

    ParametricFamilyRegister.register(Bernoulli)
