"""
Inverse-Gamma distribution family implementation.

Inverse-Gamma draws are reciprocals of Gamma draws:
1 / X with X ~ Gamma(shape, 1/rate).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaincc, gammainccinv, gammaln

from pysatl_random.distributions.kernels import sampling_kernel
from pysatl_random.families.builtins.continuous.gamma import GammaShapeScale, gamma_kernel
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
class InverseGammaStandard(Parametrization):
    """
    Shape-rate parametrization of inverse-gamma distribution.

    Parameters
    ----------
    shape : float
        Shape parameter α
    rate : float
        Rate parameter β; the mean is β / (α - 1) for α > 1
    """

    shape: float
    rate: float

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return self.shape > 0

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        return self.rate > 0


@sampling_kernel()
def inverse_gamma_kernel(
    parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]
) -> Any:
    parameters = cast(InverseGammaStandard, parameters)
    x = gamma_kernel(
        GammaShapeScale(shape=parameters.shape, scale=1 / parameters.rate), engine, dtype
    )
    return dtype.type(1) / x


def configure_inverse_gamma_family() -> None:
    """
    Configure and register the Inverse-Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.INVERSE_GAMMA):
        return

    INVERSE_GAMMA_DOC = """
    Inverse-Gamma distribution.

    Distribution of 1/X for X ~ Gamma(α, 1/β).

    Probability density function:
        f(x) = β^α / Γ(α) * x^(-α-1) * exp(-β/x) for x > 0
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """Probability density function (``log=True`` for the log-density)."""
        parameters = cast(InverseGammaStandard, parameters)
        alpha, beta = parameters.shape, parameters.rate
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(divide="ignore", invalid="ignore"):
            inside = (
                alpha * np.log(beta) - gammaln(alpha) - (alpha + 1) * np.log(x) - beta / x
            )
        log_values = np.where(x > 0, inside, -np.inf)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: Q(α, β/x) for x > 0."""
        parameters = cast(InverseGammaStandard, parameters)
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore"):
            z = np.where(x > 0, parameters.rate / np.where(x > 0, x, 1.0), np.inf)
        return cast(NumericArray, gammaincc(parameters.shape, z))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for inverse-gamma distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(InverseGammaStandard, parameters)
        with np.errstate(divide="ignore"):
            return cast(NumericArray, parameters.rate / gammainccinv(parameters.shape, p))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of inverse-gamma distribution (infinite for shape <= 1)."""
        parameters = cast(InverseGammaStandard, parameters)
        if parameters.shape <= 1:
            return float("inf")
        return parameters.rate / (parameters.shape - 1)

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of inverse-gamma distribution (infinite for shape <= 2)."""
        parameters = cast(InverseGammaStandard, parameters)
        alpha, beta = parameters.shape, parameters.rate
        if alpha <= 2:
            return float("inf")
        return beta**2 / ((alpha - 1) ** 2 * (alpha - 2))

    InverseGamma = ParametricFamily(
        name=FamilyName.INVERSE_GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=inverse_gamma_kernel,
    )
    InverseGamma.__doc__ = INVERSE_GAMMA_DOC

    parametrization(family=InverseGamma, name="standard")(InverseGammaStandard)

    ParametricFamilyRegister.register(InverseGamma)
