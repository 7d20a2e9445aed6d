"""
Chi-squared distribution family implementation.

Chi-squared draws with k degrees of freedom are Gamma(k/2, 2) draws.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc, gammaincinv, gammaln, xlogy

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
class ChiSquaredStandard(Parametrization):
    """
    Standard parametrization of chi-squared distribution.

    Parameters
    ----------
    dof : float
        Degrees of freedom k (need not be integral)
    """

    dof: float

    @constraint(description="dof > 0")
    def check_dof_positive(self) -> bool:
        return self.dof > 0


@sampling_kernel()
def chi_squared_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    parameters = cast(ChiSquaredStandard, parameters)
    return gamma_kernel(GammaShapeScale(shape=parameters.dof / 2, scale=2.0), engine, dtype)


def configure_chi_squared_family() -> None:
    """
    Configure and register the Chi-squared distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return

    CHI_SQUARED_DOC = """
    Chi-squared distribution.

    Distribution of a sum of k squared independent standard normal variables.

    Probability density function:
        f(x) = x^(k/2-1) * exp(-x/2) / (2^(k/2) * Γ(k/2)) for x > 0
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """Probability density function (``log=True`` for the log-density)."""
        half_k = cast(ChiSquaredStandard, parameters).dof / 2
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(invalid="ignore"):
            inside = xlogy(half_k - 1, x) - x / 2 - half_k * np.log(2.0) - gammaln(half_k)
        log_values = np.where(x >= 0, inside, -np.inf)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function."""
        half_k = cast(ChiSquaredStandard, parameters).dof / 2
        x = np.maximum(np.asarray(x, dtype=np.float64), 0.0)
        return cast(NumericArray, gammainc(half_k, x / 2))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for chi-squared distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        half_k = cast(ChiSquaredStandard, parameters).dof / 2
        return cast(NumericArray, 2 * gammaincinv(half_k, p))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of chi-squared distribution."""
        return cast(ChiSquaredStandard, parameters).dof

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of chi-squared distribution."""
        return 2 * cast(ChiSquaredStandard, parameters).dof

    ChiSquared = ParametricFamily(
        name=FamilyName.CHI_SQUARED,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=chi_squared_kernel,
    )
    ChiSquared.__doc__ = CHI_SQUARED_DOC

    parametrization(family=ChiSquared, name="standard")(ChiSquaredStandard)

    ParametricFamilyRegister.register(ChiSquared)
