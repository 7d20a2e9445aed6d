"""
Log-normal distribution family implementation.

A log-normal draw is the exponential of a Normal(mu, sigma) draw.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import ndtr, ndtri

from pysatl_random.distributions.kernels import sampling_kernel
from pysatl_random.families.builtins.continuous.normal import NormalMeanVar, normal_kernel
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
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_random.distributions.engine import Engine


@dataclass(frozen=True, slots=True)
class LogNormalStandard(Parametrization):
    """
    Parametrization by the moments of the underlying normal.

    Parameters
    ----------
    mu : float
        Mean of ln X
    sigma : float
        Standard deviation of ln X
    """

    mu: float
    sigma: float

    @constraint(description="mu is not NaN")
    def check_mu_not_nan(self) -> bool:
        return not np.isnan(self.mu)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0


@sampling_kernel()
def lognormal_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    parameters = cast(LogNormalStandard, parameters)
    y = normal_kernel(NormalMeanVar(mu=parameters.mu, sigma=parameters.sigma), engine, dtype)
    return np.exp(y)


def configure_lognormal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGNORMAL):
        return

    LOGNORMAL_DOC = """
    Log-normal distribution.

    Distribution of X = exp(Y) with Y ~ N(μ, σ²).

    Probability density function:
        f(x) = exp(-(ln x - μ)² / (2σ²)) / (x σ √(2π)) for x > 0
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """Probability density function (``log=True`` for the log-density)."""
        parameters = cast(LogNormalStandard, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(divide="ignore", invalid="ignore"):
            log_x = np.log(x)
            inside = (
                -((log_x - mu) ** 2) / (2 * sigma**2) - log_x - np.log(sigma * np.sqrt(2 * np.pi))
            )
        log_values = np.where(x > 0, inside, -np.inf)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: Φ((ln x - μ)/σ)."""
        parameters = cast(LogNormalStandard, parameters)
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            z = (np.log(x) - parameters.mu) / parameters.sigma
        return cast(NumericArray, np.where(x > 0, ndtr(z), 0.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for log-normal distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(LogNormalStandard, parameters)
        return cast(NumericArray, np.exp(parameters.mu + parameters.sigma * ndtri(p)))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of log-normal distribution: exp(μ + σ²/2)."""
        parameters = cast(LogNormalStandard, parameters)
        return float(np.exp(parameters.mu + parameters.sigma**2 / 2))

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of log-normal distribution."""
        parameters = cast(LogNormalStandard, parameters)
        s2 = parameters.sigma**2
        return float(np.expm1(s2) * np.exp(2 * parameters.mu + s2))

    LogNormal = ParametricFamily(
        name=FamilyName.LOGNORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=lognormal_kernel,
    )
    LogNormal.__doc__ = LOGNORMAL_DOC

    parametrization(family=LogNormal, name="standard")(LogNormalStandard)

    ParametricFamilyRegister.register(LogNormal)
