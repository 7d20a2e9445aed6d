"""
Inverse-Wishart distribution family implementation.

An inverse-Wishart(Ψ, n) draw is the inverse of a Wishart(Ψ⁻¹, n) draw.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import multigammaln

from pysatl_random.distributions.kernels import sampling_kernel
from pysatl_random.families.builtins.matrix.wishart import (
    WishartStandard,
    _is_spd,
    matrix_sentinel,
    matrix_type,
    wishart_kernel,
)
from pysatl_random.families.parametric_family import ParametricFamily
from pysatl_random.families.parametrizations import Parametrization, parametrization
from pysatl_random.families.registry import ParametricFamilyRegister
from pysatl_random.types import CharacteristicName, FamilyName, FloatArray

if TYPE_CHECKING:
    from typing import Any

    from pysatl_random.distributions.engine import Engine


@dataclass(frozen=True, slots=True)
class InverseWishartStandard(WishartStandard):
    """
    Scale-dof parametrization of inverse-Wishart distribution.

    Parameters
    ----------
    scale : FloatArray
        Symmetric positive definite ``p x p`` scale matrix Ψ
    dof : float
        Degrees of freedom n, ``n > p - 1``
    """


def _symmetric_inverse(matrix: Any) -> Any:
    inverse = np.linalg.inv(matrix)
    return (inverse + inverse.T) / 2


@sampling_kernel(scalar=False, sentinel=matrix_sentinel)
def inverse_wishart_kernel(
    parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]
) -> Any:
    parameters = cast(InverseWishartStandard, parameters)
    inverse_scale = _symmetric_inverse(np.asarray(parameters.scale, dtype=dtype))
    draw = wishart_kernel(WishartStandard(scale=inverse_scale, dof=parameters.dof), engine, dtype)
    return _symmetric_inverse(draw)


def configure_inverse_wishart_family() -> None:
    """
    Configure and register the InverseWishart distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.INVERSE_WISHART):
        return

    INVERSE_WISHART_DOC = """
    Inverse-Wishart distribution.

    Conjugate prior of the covariance matrix of a multivariate normal.

    Probability density function:
        f(X) = |Ψ|^(n/2) |X|^(-(n+p+1)/2) exp(-tr(ΨX⁻¹)/2) / (2^(np/2) Γ_p(n/2))
    """

    def pdf(parameters: Parametrization, x: FloatArray, log: bool = False) -> float:
        """
        Probability density function at a single ``p x p`` matrix.

        Returns 0 (``-inf`` for ``log=True``) outside the positive definite cone.
        """
        parameters = cast(InverseWishartStandard, parameters)
        scale = np.asarray(parameters.scale, dtype=np.float64)
        x = np.asarray(x, dtype=np.float64)
        n, p = parameters.dof, scale.shape[0]

        if x.shape != scale.shape or not _is_spd(x):
            return float("-inf") if log else 0.0

        _, logdet_x = np.linalg.slogdet(x)
        _, logdet_psi = np.linalg.slogdet(scale)
        value = (
            n / 2 * logdet_psi
            - (n + p + 1) / 2 * logdet_x
            - np.trace(scale @ np.linalg.inv(x)) / 2
            - n * p / 2 * np.log(2.0)
            - multigammaln(n / 2, p)
        )
        return float(value if log else np.exp(value))

    def mean_func(parameters: Parametrization, _: Any = None) -> FloatArray:
        """Mean of inverse-Wishart distribution: Ψ / (n - p - 1), infinite for n <= p + 1."""
        parameters = cast(InverseWishartStandard, parameters)
        scale = np.asarray(parameters.scale, dtype=np.float64)
        denominator = parameters.dof - scale.shape[0] - 1
        if denominator <= 0:
            return cast(FloatArray, np.full(scale.shape, np.inf))
        return cast(FloatArray, scale / denominator)

    InverseWishart = ParametricFamily(
        name=FamilyName.INVERSE_WISHART,
        distr_type=matrix_type,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.MEAN: mean_func,
        },
        sampling_kernel=inverse_wishart_kernel,
    )
    InverseWishart.__doc__ = INVERSE_WISHART_DOC

    parametrization(family=InverseWishart, name="standard")(InverseWishartStandard)

    ParametricFamilyRegister.register(InverseWishart)
