"""
Uniform distribution family implementation.

Contains the Uniform family with multiple parameterizations. Draws are made
by inversion: one engine uniform mapped onto ``[lower_bound, upper_bound)``.
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
class UniformStandard(Parametrization):
    """
    Standard parametrization of uniform distribution.

    Parameters
    ----------
    lower_bound : float
        Lower bound of the distribution
    upper_bound : float
        Upper bound of the distribution
    """

    lower_bound: float
    upper_bound: float

    @constraint(description="lower_bound < upper_bound")
    def check_lower_less_than_upper(self) -> bool:
        """Check that lower bound is less than upper bound."""
        return self.lower_bound < self.upper_bound

    @constraint(description="bounds are finite")
    def check_bounds_finite(self) -> bool:
        return bool(np.isfinite(self.lower_bound) and np.isfinite(self.upper_bound))


@dataclass(frozen=True, slots=True)
class UniformMeanWidth(Parametrization):
    """
    Mean-width parametrization of uniform distribution.

    Parameters
    ----------
    mean : float
        Mean (center) of the distribution
    width : float
        Width of the distribution (upper_bound - lower_bound)
    """

    mean: float
    width: float

    @constraint(description="mean is finite")
    def check_mean_finite(self) -> bool:
        return bool(np.isfinite(self.mean))

    @constraint(description="0 < width < inf")
    def check_width_positive(self) -> bool:
        """Check that width is positive."""
        return bool(0 < self.width < np.inf)

    def transform_to_base_parametrization(self) -> Parametrization:
        """Transform to Standard parametrization."""
        half_width = self.width / 2
        return UniformStandard(
            lower_bound=self.mean - half_width, upper_bound=self.mean + half_width
        )


@dataclass(frozen=True, slots=True)
class UniformMinRange(Parametrization):
    """
    Minimum-range parametrization of uniform distribution.

    Parameters
    ----------
    minimum : float
        Minimum value (lower bound)
    range_val : float
        Range of the distribution (upper_bound - lower_bound)
    """

    minimum: float
    range_val: float

    @constraint(description="minimum is finite")
    def check_minimum_finite(self) -> bool:
        return bool(np.isfinite(self.minimum))

    @constraint(description="0 < range_val < inf")
    def check_range_positive(self) -> bool:
        """Check that range is positive."""
        return bool(0 < self.range_val < np.inf)

    def transform_to_base_parametrization(self) -> Parametrization:
        """Transform to Standard parametrization."""
        return UniformStandard(
            lower_bound=self.minimum, upper_bound=self.minimum + self.range_val
        )


def uniform_quantile(parameters: Parametrization, p: Any) -> Any:
    """Map ``p`` in [0, 1] linearly onto [lower_bound, upper_bound]."""
    parameters = cast(UniformStandard, parameters)
    lower_bound = parameters.lower_bound
    return lower_bound + p * (parameters.upper_bound - lower_bound)


uniform_kernel = inverse_cdf_kernel(uniform_quantile)


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    All intervals of the same length inside [lower_bound, upper_bound] are
    equally probable.

    Probability density function:
        f(x) = 1/(upper_bound - lower_bound) for x in [lower_bound, upper_bound], 0 otherwise
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """
        Probability density function for uniform distribution.
            - For x < lower_bound: returns 0
            - For x > upper_bound: returns 0
            - Otherwise: returns (1 / (upper_bound - lower_bound))

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower_bound: float (lower bound)
            - upper_bound: float (upper bound)
        x : NumericArray
            Points at which to evaluate the probability density function
        log : bool
            Return the log-density instead

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(UniformStandard, parameters)
        lower_bound, upper_bound = parameters.lower_bound, parameters.upper_bound
        x = np.asarray(x, dtype=np.float64)

        inside = (x >= lower_bound) & (x <= upper_bound)
        if log:
            return cast(NumericArray, np.where(inside, -np.log(upper_bound - lower_bound), -np.inf))
        return cast(NumericArray, np.where(inside, 1.0 / (upper_bound - lower_bound), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function, clipped to [0, 1] outside the support."""
        parameters = cast(UniformStandard, parameters)
        lower_bound, upper_bound = parameters.lower_bound, parameters.upper_bound
        return cast(
            NumericArray, np.clip((x - lower_bound) / (upper_bound - lower_bound), 0.0, 1.0)
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for uniform distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        return cast(NumericArray, uniform_quantile(parameters, p))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of uniform distribution."""
        parameters = cast(UniformStandard, parameters)
        return (parameters.lower_bound + parameters.upper_bound) / 2

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of uniform distribution."""
        parameters = cast(UniformStandard, parameters)
        width = parameters.upper_bound - parameters.lower_bound
        return width**2 / 12

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth", "minRange"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=uniform_kernel,
    )
    Uniform.__doc__ = UNIFORM_DOC

    parametrization(family=Uniform, name="standard")(UniformStandard)
    parametrization(family=Uniform, name="meanWidth")(UniformMeanWidth)
    parametrization(family=Uniform, name="minRange")(UniformMinRange)

    ParametricFamilyRegister.register(Uniform)
