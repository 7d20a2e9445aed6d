"""
Logistic distribution family implementation.

Draws are made by inversion: Q(u) = mu + sigma * ln(u / (1 - u)).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import expit, logit

from pysatl_random.distributions.kernels import inverse_cdf_kernel
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


@dataclass(frozen=True, slots=True)
class LogisticStandard(Parametrization):
    """
    Location-scale parametrization of logistic distribution.

    Parameters
    ----------
    mu : float
        Location (mean)
    sigma : float
        Scale
    """

    mu: float
    sigma: float

    @constraint(description="mu is not NaN")
    def check_mu_not_nan(self) -> bool:
        return not np.isnan(self.mu)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0


def logistic_quantile(parameters: Parametrization, p: Any) -> Any:
    parameters = cast(LogisticStandard, parameters)
    return parameters.mu + parameters.sigma * logit(p)


logistic_kernel = inverse_cdf_kernel(logistic_quantile)


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return

    LOGISTIC_DOC = """
    Logistic distribution.

    Probability density function:
        f(x) = exp(-z) / (σ (1 + exp(-z))²),  z = (x - μ)/σ
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """Probability density function (``log=True`` for the log-density)."""
        parameters = cast(LogisticStandard, parameters)
        z = np.abs((np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.sigma)
        log_values = -z - 2 * np.log1p(np.exp(-z)) - np.log(parameters.sigma)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: the logistic sigmoid of z."""
        parameters = cast(LogisticStandard, parameters)
        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.sigma
        return cast(NumericArray, expit(z))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for logistic distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        return cast(NumericArray, logistic_quantile(parameters, np.asarray(p, dtype=np.float64)))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of logistic distribution."""
        return cast(LogisticStandard, parameters).mu

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of logistic distribution: σ²π²/3."""
        return cast(LogisticStandard, parameters).sigma ** 2 * np.pi**2 / 3

    Logistic = ParametricFamily(
        name=FamilyName.LOGISTIC,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=logistic_kernel,
    )
    Logistic.__doc__ = LOGISTIC_DOC

    parametrization(family=Logistic, name="standard")(LogisticStandard)

    ParametricFamilyRegister.register(Logistic)
