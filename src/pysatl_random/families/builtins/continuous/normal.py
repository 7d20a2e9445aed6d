"""
Normal distribution family implementation.

Contains the Normal family with mean-variance and mean-precision
parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erf, erfinv

from pysatl_random.distributions.engine import draw_standard_normal
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
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_random.distributions.engine import Engine


@dataclass(frozen=True, slots=True)
class NormalMeanVar(Parametrization):
    """
    Mean-variance parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution
    """

    mu: float
    sigma: float

    @constraint(description="mu is not NaN")
    def check_mu_not_nan(self) -> bool:
        """Check that the mean is a number."""
        return not np.isnan(self.mu)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.sigma > 0


@dataclass(frozen=True, slots=True)
class NormalMeanPrec(Parametrization):
    """
    Mean-precision parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    tau : float
        Precision parameter (inverse variance)
    """

    mu: float
    tau: float

    @constraint(description="mu is not NaN")
    def check_mu_not_nan(self) -> bool:
        """Check that the mean is a number."""
        return not np.isnan(self.mu)

    @constraint(description="tau > 0")
    def check_tau_positive(self) -> bool:
        """Check that precision parameter is positive."""
        return self.tau > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Transform to mean-variance parametrization.

        Returns
        -------
        Parametrization
            Mean-variance parametrization instance
        """
        return NormalMeanVar(mu=self.mu, sigma=math.sqrt(1 / self.tau))


@sampling_kernel()
def normal_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    """One N(mu, sigma^2) draw from a standard normal draw."""
    parameters = cast(NormalMeanVar, parameters)
    z = draw_standard_normal(engine, dtype)
    return dtype.type(parameters.mu) + dtype.type(parameters.sigma) * z


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : NumericArray
            Points at which to evaluate the probability density function
        log : bool
            Return the log-density instead

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(NormalMeanVar, parameters)

        sigma = parameters.sigma
        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / sigma
        log_values = -0.5 * z**2 - np.log(sigma) - 0.5 * np.log(2.0 * np.pi)

        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(NormalMeanVar, parameters)

        z = (x - parameters.mu) / (parameters.sigma * np.sqrt(2))
        return cast(NumericArray, 0.5 * (1 + erf(z)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for normal distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(NormalMeanVar, parameters)

        return cast(
            NumericArray,
            parameters.mu + parameters.sigma * np.sqrt(2) * erfinv(2 * p - 1),
        )

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of normal distribution."""
        parameters = cast(NormalMeanVar, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of normal distribution."""
        parameters = cast(NormalMeanVar, parameters)
        return parameters.sigma**2

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanVar", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=normal_kernel,
    )
    Normal.__doc__ = NORMAL_DOC

    parametrization(family=Normal, name="meanVar")(NormalMeanVar)
    parametrization(family=Normal, name="meanPrec")(NormalMeanPrec)

    ParametricFamilyRegister.register(Normal)
