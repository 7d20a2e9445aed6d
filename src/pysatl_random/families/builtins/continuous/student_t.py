"""
Student's t distribution family implementation.

Draws are composed as Z / sqrt(V / ν) with Z ~ N(0, 1) drawn first and
V ~ χ²(ν) drawn second.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, stdtr, stdtrit

from pysatl_random.distributions.kernels import sampling_kernel
from pysatl_random.families.builtins.continuous.chi_squared import (
    ChiSquaredStandard,
    chi_squared_kernel,
)
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
class StudentTStandard(Parametrization):
    """
    Standard parametrization of Student's t distribution.

    Parameters
    ----------
    dof : float
        Degrees of freedom ν
    """

    dof: float

    @constraint(description="dof > 0")
    def check_dof_positive(self) -> bool:
        return self.dof > 0


@sampling_kernel()
def student_t_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    nu = cast(StudentTStandard, parameters).dof
    z = normal_kernel(NormalMeanVar(mu=0.0, sigma=1.0), engine, dtype)
    v = chi_squared_kernel(ChiSquaredStandard(dof=nu), engine, dtype)
    return z / np.sqrt(v / dtype.type(nu))


def configure_student_t_family() -> None:
    """
    Configure and register the Student's t distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T):
        return

    STUDENT_T_DOC = """
    Student's t distribution.

    Probability density function:
        f(x) = Γ((ν+1)/2) / (√(νπ) Γ(ν/2)) * (1 + x²/ν)^(-(ν+1)/2)
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """Probability density function (``log=True`` for the log-density)."""
        nu = cast(StudentTStandard, parameters).dof
        x = np.asarray(x, dtype=np.float64)

        log_values = (
            gammaln((nu + 1) / 2)
            - gammaln(nu / 2)
            - 0.5 * np.log(nu * np.pi)
            - (nu + 1) / 2 * np.log1p(x**2 / nu)
        )
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function."""
        return cast(NumericArray, stdtr(cast(StudentTStandard, parameters).dof, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Student's t distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        return cast(NumericArray, stdtrit(cast(StudentTStandard, parameters).dof, p))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of Student's t distribution (undefined for ν <= 1)."""
        return 0.0 if cast(StudentTStandard, parameters).dof > 1 else float("nan")

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of Student's t distribution."""
        nu = cast(StudentTStandard, parameters).dof
        if nu > 2:
            return nu / (nu - 2)
        if nu > 1:
            return float("inf")
        return float("nan")

    StudentT = ParametricFamily(
        name=FamilyName.STUDENT_T,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=student_t_kernel,
    )
    StudentT.__doc__ = STUDENT_T_DOC

    parametrization(family=StudentT, name="standard")(StudentTStandard)

    ParametricFamilyRegister.register(StudentT)
