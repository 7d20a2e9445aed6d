"""
Laplace (double exponential) distribution family implementation.
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
class LaplaceStandard(Parametrization):
    """
    Location-scale parametrization of Laplace distribution.

    Parameters
    ----------
    mu : float
        Location (mean and median)
    sigma : float
        Scale b
    """

    mu: float
    sigma: float

    @constraint(description="mu is not NaN")
    def check_mu_not_nan(self) -> bool:
        return not np.isnan(self.mu)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0


def laplace_quantile(parameters: Parametrization, p: Any) -> Any:
    """Q(p) = mu - sigma * sign(p - 1/2) * ln(1 - 2|p - 1/2|)."""
    parameters = cast(LaplaceStandard, parameters)
    centered = p - 0.5
    return parameters.mu - parameters.sigma * np.sign(centered) * np.log1p(-2 * np.abs(centered))


laplace_kernel = inverse_cdf_kernel(laplace_quantile)


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    LAPLACE_DOC = """
    Laplace distribution.

    Probability density function:
        f(x) = exp(-|x - μ|/σ) / (2σ)
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """Probability density function (``log=True`` for the log-density)."""
        parameters = cast(LaplaceStandard, parameters)
        z = np.abs(np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.sigma
        log_values = -z - np.log(2 * parameters.sigma)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function."""
        parameters = cast(LaplaceStandard, parameters)
        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.sigma
        half_tail = 0.5 * np.exp(-np.abs(z))
        return cast(NumericArray, np.where(z < 0, half_tail, 1 - half_tail))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Laplace distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        with np.errstate(divide="ignore"):
            p = np.asarray(p, dtype=np.float64)
            return cast(NumericArray, laplace_quantile(parameters, p))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of Laplace distribution."""
        return cast(LaplaceStandard, parameters).mu

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of Laplace distribution."""
        return 2 * cast(LaplaceStandard, parameters).sigma ** 2

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=laplace_kernel,
    )
    Laplace.__doc__ = LAPLACE_DOC

    parametrization(family=Laplace, name="standard")(LaplaceStandard)

    ParametricFamilyRegister.register(Laplace)
