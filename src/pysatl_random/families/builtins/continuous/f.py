"""
F distribution family implementation.

Draws are composed as (U / d1) / (V / d2) with U ~ χ²(d1) drawn before
V ~ χ²(d2).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betaln, fdtr, fdtri, xlogy

from pysatl_random.distributions.kernels import sampling_kernel
from pysatl_random.families.builtins.continuous.chi_squared import (
    ChiSquaredStandard,
    chi_squared_kernel,
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
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_random.distributions.engine import Engine


@dataclass(frozen=True, slots=True)
class FStandard(Parametrization):
    """
    Standard parametrization of the F distribution.

    Parameters
    ----------
    dof_num : float
        Numerator degrees of freedom d1
    dof_den : float
        Denominator degrees of freedom d2
    """

    dof_num: float
    dof_den: float

    @constraint(description="dof_num > 0")
    def check_dof_num_positive(self) -> bool:
        return self.dof_num > 0

    @constraint(description="dof_den > 0")
    def check_dof_den_positive(self) -> bool:
        return self.dof_den > 0


@sampling_kernel()
def f_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    parameters = cast(FStandard, parameters)
    d1, d2 = dtype.type(parameters.dof_num), dtype.type(parameters.dof_den)
    u = chi_squared_kernel(ChiSquaredStandard(dof=parameters.dof_num), engine, dtype)
    v = chi_squared_kernel(ChiSquaredStandard(dof=parameters.dof_den), engine, dtype)
    return (u / d1) / (v / d2)


def configure_f_family() -> None:
    """
    Configure and register the F distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.F):
        return

    F_DOC = """
    F (Fisher-Snedecor) distribution.

    Distribution of the ratio of two scaled independent chi-squared variables.
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """Probability density function (``log=True`` for the log-density)."""
        parameters = cast(FStandard, parameters)
        d1, d2 = parameters.dof_num, parameters.dof_den
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(divide="ignore", invalid="ignore"):
            inside = (
                0.5 * (d1 * np.log(d1) + d2 * np.log(d2))
                + xlogy(d1 / 2 - 1, x)
                - (d1 + d2) / 2 * np.log(d2 + d1 * x)
                - betaln(d1 / 2, d2 / 2)
            )
        log_values = np.where(x >= 0, inside, -np.inf)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function."""
        parameters = cast(FStandard, parameters)
        x = np.maximum(np.asarray(x, dtype=np.float64), 0.0)
        return cast(NumericArray, fdtr(parameters.dof_num, parameters.dof_den, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for F distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(FStandard, parameters)
        return cast(NumericArray, fdtri(parameters.dof_num, parameters.dof_den, p))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of F distribution (infinite for d2 <= 2)."""
        d2 = cast(FStandard, parameters).dof_den
        return d2 / (d2 - 2) if d2 > 2 else float("inf")

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of F distribution (infinite for d2 <= 4)."""
        parameters = cast(FStandard, parameters)
        d1, d2 = parameters.dof_num, parameters.dof_den
        if d2 <= 4:
            return float("inf")
        return 2 * d2**2 * (d1 + d2 - 2) / (d1 * (d2 - 2) ** 2 * (d2 - 4))

    F = ParametricFamily(
        name=FamilyName.F,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=f_kernel,
    )
    F.__doc__ = F_DOC

    parametrization(family=F, name="standard")(FStandard)

    ParametricFamilyRegister.register(F)
