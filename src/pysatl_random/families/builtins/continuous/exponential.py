"""
Exponential distribution family implementation.

Contains the Exponential family with rate and scale parameterizations.
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
class ExponentialRate(Parametrization):
    """
    Rate parametrization of exponential distribution.

    Parameters
    ----------
    lambda_ : float
        Rate parameter λ
    """

    lambda_: float

    @constraint(description="lambda > 0")
    def check_lambda_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.lambda_ > 0


@dataclass(frozen=True, slots=True)
class ExponentialScale(Parametrization):
    """
    Scale parametrization of exponential distribution.

    Parameters
    ----------
    beta : float
        Scale parameter β = 1/λ
    """

    beta: float

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        """Check that scale parameter is positive."""
        return self.beta > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        """Transform to Rate parametrization."""
        return ExponentialRate(lambda_=1.0 / self.beta)


def exponential_quantile(parameters: Parametrization, p: Any) -> Any:
    """Q(p) = -ln(1 - p) / λ."""
    return -np.log1p(-p) / cast(ExponentialRate, parameters).lambda_


exponential_kernel = inverse_cdf_kernel(exponential_quantile)


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    Time between events in a Poisson point process.

    Probability density function:
        f(x) = λ * exp(-λx) for x ≥ 0, 0 otherwise
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """
        Probability density function for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - lambda_: float (rate parameter)
        x : NumericArray
            Points at which to evaluate the probability density function
        log : bool
            Return the log-density instead

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        lambda_ = cast(ExponentialRate, parameters).lambda_
        x = np.asarray(x, dtype=np.float64)

        log_values = np.where(x >= 0, np.log(lambda_) - lambda_ * x, -np.inf)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: 1 - exp(-λx) for x ≥ 0."""
        lambda_ = cast(ExponentialRate, parameters).lambda_
        x = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, np.where(x >= 0, -np.expm1(-lambda_ * np.maximum(x, 0.0)), 0.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for exponential distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        with np.errstate(divide="ignore"):
            return cast(NumericArray, exponential_quantile(parameters, np.asarray(p)))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of exponential distribution."""
        return 1.0 / cast(ExponentialRate, parameters).lambda_

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of exponential distribution."""
        return 1.0 / cast(ExponentialRate, parameters).lambda_ ** 2

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=exponential_kernel,
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    parametrization(family=Exponential, name="rate")(ExponentialRate)
    parametrization(family=Exponential, name="scale")(ExponentialScale)

    ParametricFamilyRegister.register(Exponential)
