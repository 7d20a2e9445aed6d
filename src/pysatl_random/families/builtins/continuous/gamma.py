"""
Gamma distribution family implementation.

Contains the Gamma family with shape-scale and shape-rate parameterizations
and the Gamma sampling kernel other families are composed from.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc, gammaincinv, gammaln, xlogy

from pysatl_random.distributions.engine import draw_standard_gamma
from pysatl_random.distributions.kernels import sampling_kernel
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
class GammaShapeScale(Parametrization):
    """
    Shape-scale parametrization of the gamma distribution.

    Parameters
    ----------
    shape : float
        Shape parameter k.
    scale : float
        Scale parameter θ.
    """

    shape: float
    scale: float

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return self.shape > 0

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0


@dataclass(frozen=True, slots=True)
class GammaShapeRate(Parametrization):
    """
    Shape-rate parametrization of the gamma distribution.

    Parameters
    ----------
    shape : float
        Shape parameter k.
    rate : float
        Rate parameter β = 1/θ.
    """

    shape: float
    rate: float

    @constraint(description="shape > 0")
    def check_shape_positive(self) -> bool:
        return self.shape > 0

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        return self.rate > 0

    def transform_to_base_parametrization(self) -> Parametrization:
        """Transform to shape-scale parametrization."""
        return GammaShapeScale(shape=self.shape, scale=1 / self.rate)


@sampling_kernel()
def gamma_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    """One Gamma(shape, scale) draw: a standard gamma draw times the scale."""
    parameters = cast(GammaShapeScale, parameters)
    return draw_standard_gamma(parameters.shape, engine, dtype) * dtype.type(parameters.scale)


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Continuous distribution on (0, ∞) with shape k and scale θ.

    Probability density function:
        f(x) = x^(k-1) * exp(-x/θ) / (Γ(k) * θ^k) for x > 0
    """

    def log_pdf(parameters: GammaShapeScale, x: NumericArray) -> NumericArray:
        k, theta = parameters.shape, parameters.scale
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(invalid="ignore"):
            inside = xlogy(k - 1, x) - x / theta - gammaln(k) - k * np.log(theta)
        return cast(NumericArray, np.where(x >= 0, inside, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """
        Probability density function for gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: float (k)
            - scale: float (θ)
        x : NumericArray
            Points at which to evaluate the density
        log : bool
            Return the log-density instead

        Returns
        -------
        NumericArray
            Density (or log-density) values at points x
        """
        values = log_pdf(cast(GammaShapeScale, parameters), x)
        return values if log else cast(NumericArray, np.exp(values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: regularized lower incomplete gamma of x/θ."""
        parameters = cast(GammaShapeScale, parameters)
        x = np.asarray(x, dtype=np.float64)
        z = np.maximum(x, 0.0) / parameters.scale
        return cast(NumericArray, gammainc(parameters.shape, z))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for gamma distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(GammaShapeScale, parameters)
        return cast(NumericArray, parameters.scale * gammaincinv(parameters.shape, p))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of gamma distribution."""
        parameters = cast(GammaShapeScale, parameters)
        return parameters.shape * parameters.scale

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of gamma distribution."""
        parameters = cast(GammaShapeScale, parameters)
        return parameters.shape * parameters.scale**2

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale", "shapeRate"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=gamma_kernel,
    )
    Gamma.__doc__ = GAMMA_DOC

    parametrization(family=Gamma, name="shapeScale")(GammaShapeScale)
    parametrization(family=Gamma, name="shapeRate")(GammaShapeRate)

    ParametricFamilyRegister.register(Gamma)
