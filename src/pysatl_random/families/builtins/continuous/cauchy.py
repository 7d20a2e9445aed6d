"""
Cauchy distribution family implementation.

Draws are made by inversion: Q(u) = mu + sigma * tan(π(u - 1/2)).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np

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
class CauchyStandard(Parametrization):
    """
    Location-scale parametrization of Cauchy distribution.

    Parameters
    ----------
    mu : float
        Location (median)
    sigma : float
        Scale (half width at half maximum)
    """

    mu: float
    sigma: float

    @constraint(description="mu is not NaN")
    def check_mu_not_nan(self) -> bool:
        return not np.isnan(self.mu)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0


def cauchy_quantile(parameters: Parametrization, p: Any) -> Any:
    parameters = cast(CauchyStandard, parameters)
    return parameters.mu + parameters.sigma * np.tan(np.pi * (p - 0.5))


cauchy_kernel = inverse_cdf_kernel(cauchy_quantile)


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    CAUCHY_DOC = """
    Cauchy (Lorentz) distribution.

    Heavy tailed; mean and variance are undefined.

    Probability density function:
        f(x) = 1 / (π σ (1 + ((x - μ)/σ)²))
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """Probability density function (``log=True`` for the log-density)."""
        parameters = cast(CauchyStandard, parameters)
        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.sigma
        log_values = -np.log(np.pi * parameters.sigma) - np.log1p(z**2)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: 1/2 + arctan(z)/π."""
        parameters = cast(CauchyStandard, parameters)
        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.sigma
        return cast(NumericArray, 0.5 + np.arctan(z) / np.pi)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Cauchy distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        return cast(NumericArray, cauchy_quantile(parameters, np.asarray(p, dtype=np.float64)))

    def mean_func(_1: Parametrization, _2: Any = None) -> float:
        """Mean of Cauchy distribution (undefined)."""
        return float("nan")

    def var_func(_1: Parametrization, _2: Any = None) -> float:
        """Variance of Cauchy distribution (undefined)."""
        return float("nan")

    Cauchy = ParametricFamily(
        name=FamilyName.CAUCHY,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=cauchy_kernel,
    )
    Cauchy.__doc__ = CAUCHY_DOC

    parametrization(family=Cauchy, name="standard")(CauchyStandard)

    ParametricFamilyRegister.register(Cauchy)
