"""
Beta distribution family implementation.

Beta draws are composed from two independent Gamma draws:
X / (X + Y) with X ~ Gamma(a, 1) and Y ~ Gamma(b, 1). A component whose
shape is below 1 consumes one extra uniform after its Gamma(shape + 1, 1)
draw, and the ratio is then formed in log space.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, betaincinv, betaln, expit, xlog1py, xlogy

from pysatl_random.distributions.engine import draw_standard_gamma, draw_uniform
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
class BetaStandard(Parametrization):
    """
    Standard parametrization of beta distribution.

    Parameters
    ----------
    a : float
        First shape parameter (α)
    b : float
        Second shape parameter (β)
    """

    a: float
    b: float

    @constraint(description="a > 0")
    def check_a_positive(self) -> bool:
        return self.a > 0

    @constraint(description="b > 0")
    def check_b_positive(self) -> bool:
        return self.b > 0


def _log_standard_gamma(shape: float, engine: Engine, dtype: np.dtype[Any]) -> Any:
    """
    Logarithm of one Gamma(shape, 1) draw.

    For ``shape < 1`` the draw is boosted: log G(shape + 1) + log(U) / shape,
    with U taken as one extra uniform right after the gamma draw.
    """
    if shape >= 1:
        return np.log(draw_standard_gamma(shape, engine, dtype))
    g = draw_standard_gamma(shape + 1, engine, dtype)
    u = dtype.type(1) - draw_uniform(engine, dtype)
    return np.log(g) + np.log(u) / dtype.type(shape)


@sampling_kernel()
def beta_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    """
    Ratio X / (X + Y) of two Gamma draws taken one after the other.

    When a shape is below 1 both draws are taken in log space and the ratio
    is the logistic sigmoid of log X - log Y.
    """
    parameters = cast(BetaStandard, parameters)
    if parameters.a >= 1 and parameters.b >= 1:
        x = gamma_kernel(GammaShapeScale(shape=parameters.a, scale=1.0), engine, dtype)
        y = gamma_kernel(GammaShapeScale(shape=parameters.b, scale=1.0), engine, dtype)
        return x / (x + y)
    log_x = _log_standard_gamma(parameters.a, engine, dtype)
    log_y = _log_standard_gamma(parameters.b, engine, dtype)
    return expit(log_x - log_y)


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution.

    Continuous distribution on [0, 1] with shape parameters α and β.

    Probability density function:
        f(x) = x^(α-1) * (1-x)^(β-1) / B(α, β) for x in [0, 1]
    """

    def pdf(parameters: Parametrization, x: NumericArray, log: bool = False) -> NumericArray:
        """
        Probability density function for beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - a: float (α)
            - b: float (β)
        x : NumericArray
            Points at which to evaluate the density
        log : bool
            Return the log-density instead

        Returns
        -------
        NumericArray
            Density (or log-density) values at points x
        """
        parameters = cast(BetaStandard, parameters)
        a, b = parameters.a, parameters.b
        x = np.asarray(x, dtype=np.float64)

        with np.errstate(invalid="ignore"):
            inside = xlogy(a - 1, x) + xlog1py(b - 1, -x) - betaln(a, b)
        log_values = np.where((x >= 0) & (x <= 1), inside, -np.inf)
        return cast(NumericArray, log_values if log else np.exp(log_values))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: regularized incomplete beta function."""
        parameters = cast(BetaStandard, parameters)
        x = np.clip(np.asarray(x, dtype=np.float64), 0.0, 1.0)
        return cast(NumericArray, betainc(parameters.a, parameters.b, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for beta distribution.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(BetaStandard, parameters)
        return cast(NumericArray, betaincinv(parameters.a, parameters.b, p))

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of beta distribution."""
        parameters = cast(BetaStandard, parameters)
        return parameters.a / (parameters.a + parameters.b)

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of beta distribution."""
        parameters = cast(BetaStandard, parameters)
        a, b = parameters.a, parameters.b
        return a * b / ((a + b) ** 2 * (a + b + 1))

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_kernel=beta_kernel,
    )
    Beta.__doc__ = BETA_DOC

    parametrization(family=Beta, name="standard")(BetaStandard)

    ParametricFamilyRegister.register(Beta)
