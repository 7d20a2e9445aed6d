"""
Weibull distribution family implementation.

Draws are made by inversion: Q(u) = scale * (-ln(1 - u))^(1/shape).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gamma as gamma_func
from scipy.special import xlogy

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
class WeibullStandard(Parametrization):
    """
    Shape-scale parametrization of Weibull distribution.

    Parameters
    ----------
    shape : float
        Shape parameter k
    scale : float
        Scale parameter λ
    """

    shape: float
    scale: float

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return self.shape > 0

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0


def weibull_quantile(parameters: Parametrization, p: Any) -> Any:
    parameters = cast(WeibullStandard, parameters)
    return parameters.scale * (-np.log1p(-p)) ** (1 / parameters.shape)


weibull_kernel = inverse_cdf_kernel(weibull_quantile)


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    WEIBULL_DOC = """
    Weibull distribution.

    Probability density function:
        f(x) = (k/λ) (x/λ)^(k-1) exp(-(x/λ)^k) for x ≥ 0
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """Probability density function (``log=True`` for the log-density)."""
        parameters = cast(WeibullStandard, parameters)
        k, lam = parameters.shape, parameters.scale
        z = np.maximum(np.asarray(x, dtype=np.float64), 0.0) / lam

        inside = np.log(k / lam) + xlogy(k - 1, z) - z**k
        log_values = np.where(np.asarray(x) >= 0, inside, -np.inf)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: 1 - exp(-(x/λ)^k)."""
        parameters = cast(WeibullStandard, parameters)
        z = np.maximum(np.asarray(x, dtype=np.float64), 0.0) / parameters.scale
        return cast(NumericArray, -np.expm1(-(z**parameters.shape)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Weibull distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        with np.errstate(divide="ignore"):
            p = np.asarray(p, dtype=np.float64)
            return cast(NumericArray, weibull_quantile(parameters, p))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of Weibull distribution: λ Γ(1 + 1/k)."""
        parameters = cast(WeibullStandard, parameters)
        return float(parameters.scale * gamma_func(1 + 1 / parameters.shape))

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of Weibull distribution."""
        parameters = cast(WeibullStandard, parameters)
        k, lam = parameters.shape, parameters.scale
        return float(lam**2 * (gamma_func(1 + 2 / k) - gamma_func(1 + 1 / k) ** 2))

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=weibull_kernel,
    )
    Weibull.__doc__ = WEIBULL_DOC

    parametrization(family=Weibull, name="standard")(WeibullStandard)

    ParametricFamilyRegister.register(Weibull)
