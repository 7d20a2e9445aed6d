"""
Binomial distribution family implementation.

A binomial draw is the count of successes in ``n`` Bernoulli trials drawn
one after another from the engine, so it consumes exactly ``n`` uniforms.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import bdtr, gammaln, xlog1py, xlogy

from pysatl_random.distributions.kernels import sampling_kernel
from pysatl_random.families.builtins.discrete.bernoulli import (
    BernoulliStandard,
    bernoulli_kernel,
)
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
class BinomialStandard(Parametrization):
    """
    Standard parametrization of binomial distribution.

    Parameters
    ----------
    n : int
        Number of trials; integral floats such as ``10.0`` are accepted
    p : float
        Success probability of each trial
    """

    n: int
    p: float

    @constraint(description="n is a non-negative integer")
    def check_n_non_negative_integer(self) -> bool:
        n = float(self.n)
        return n >= 0 and n.is_integer()

    @constraint(description="0 <= p <= 1")
    def check_p_is_probability(self) -> bool:
        return 0 <= self.p <= 1


@sampling_kernel()
def binomial_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    parameters = cast(BinomialStandard, parameters)
    trial = BernoulliStandard(p=parameters.p)
    successes = dtype.type(0)
    for _ in range(int(parameters.n)):
        successes += bernoulli_kernel(trial, engine, dtype)
    return successes


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution.

    Number of successes in n independent trials with success probability p.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1 - p)^(n - k), k = 0, ..., n
    """

    def pmf(parameters: Parametrization, k: NumericArray, log: bool = False) -> NumericArray:
        """Probability mass function (``log=True`` for the log-mass)."""
        parameters = cast(BinomialStandard, parameters)
        n, p = float(parameters.n), parameters.p
        k = np.asarray(k, dtype=np.float64)

        on_support = (k >= 0) & (k <= n) & (k == np.floor(k))
        safe_k = np.where(on_support, k, 0.0)
        inside = (
            gammaln(n + 1)
            - gammaln(safe_k + 1)
            - gammaln(n - safe_k + 1)
            + xlogy(safe_k, p)
            + xlog1py(n - safe_k, -p)
        )
        log_values = np.where(on_support, inside, -np.inf)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function."""
        parameters = cast(BinomialStandard, parameters)
        n = int(parameters.n)
        k = np.floor(np.asarray(x, dtype=np.float64))
        values = bdtr(np.clip(k, 0, n), n, parameters.p)
        return cast(NumericArray, np.select([k < 0, k >= n], [0.0, 1.0], values))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of binomial distribution."""
        parameters = cast(BinomialStandard, parameters)
        return parameters.n * parameters.p

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of binomial distribution."""
        parameters = cast(BinomialStandard, parameters)
        return parameters.n * parameters.p * (1 - parameters.p)

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=binomial_kernel,
    )
    Binomial.__doc__ = BINOMIAL_DOC

    parametrization(family=Binomial, name="standard")(BinomialStandard)

    ParametricFamilyRegister.register(Binomial)
