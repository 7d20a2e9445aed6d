"""
Wishart distribution family implementation.

Draws use the Bartlett decomposition: with ``scale = L Lᵀ`` and a lower
triangular ``A`` whose diagonal holds ``sqrt(χ²(dof - i))`` and whose
strict lower part holds standard normals, ``(L A)(L A)ᵀ`` is a Wishart draw.
Row ``i`` of ``A`` is drawn diagonal first, then left to right.
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
    FloatArray,
    Kind,
    MatrixDistributionType,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_random.distributions.engine import Engine


def _is_spd(matrix: Any) -> bool:
    try:
        np.linalg.cholesky(matrix)
    except np.linalg.LinAlgError:
        return False
    return True


@dataclass(frozen=True, slots=True)
class WishartStandard(Parametrization):
    """
    Scale-dof parametrization of Wishart distribution.

    Parameters
    ----------
    scale : FloatArray
        Symmetric positive definite ``p x p`` scale matrix V
    dof : float
        Degrees of freedom n, ``n > p - 1``
    """

    scale: FloatArray
    dof: float

    @constraint(description="scale is a square matrix")
    def check_scale_square(self) -> bool:
        shape = np.shape(self.scale)
        return len(shape) == 2 and shape[0] == shape[1] and shape[0] > 0

    @constraint(description="scale is finite and symmetric")
    def check_scale_symmetric(self) -> bool:
        scale = np.asarray(self.scale)
        return bool(np.all(np.isfinite(scale)) and np.allclose(scale, scale.T))

    @constraint(description="scale is positive definite")
    def check_scale_positive_definite(self) -> bool:
        return _is_spd(np.asarray(self.scale, dtype=np.float64))

    @constraint(description="dof > p - 1")
    def check_dof(self) -> bool:
        return self.dof > np.shape(self.scale)[0] - 1


def matrix_sentinel(parameters: Parametrization, dtype: np.dtype[Any]) -> FloatArray:
    """NaN matrix shaped like the ``scale`` parameter (``1 x 1`` if it is not a matrix)."""
    shape = np.shape(getattr(parameters, "scale", None))
    if len(shape) != 2:
        shape = (1, 1)
    return np.full(shape, np.nan, dtype=dtype)


@sampling_kernel(scalar=False, sentinel=matrix_sentinel)
def wishart_kernel(parameters: Parametrization, engine: Engine, dtype: np.dtype[Any]) -> Any:
    parameters = cast(WishartStandard, parameters)
    scale = np.asarray(parameters.scale, dtype=dtype)
    p = scale.shape[0]
    standard_normal = NormalMeanVar(mu=0.0, sigma=1.0)

    bartlett = np.zeros((p, p), dtype=dtype)
    for i in range(p):
        chi = chi_squared_kernel(ChiSquaredStandard(dof=parameters.dof - i), engine, dtype)
        bartlett[i, i] = np.sqrt(chi)
        for j in range(i):
            bartlett[i, j] = normal_kernel(standard_normal, engine, dtype)

    factor = np.linalg.cholesky(scale) @ bartlett
    return factor @ factor.T


def matrix_type(parameters: Parametrization) -> MatrixDistributionType:
    """Matrix type of a draw, inferred from the ``scale`` shape."""
    rows, cols = np.shape(getattr(parameters, "scale"))
    return MatrixDistributionType(kind=Kind.CONTINUOUS, rows=rows, cols=cols)


def configure_wishart_family() -> None:
    """
    Configure and register the Wishart distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WISHART):
        return

    WISHART_DOC = """
    Wishart distribution.

    Distribution of the scatter matrix of n independent N(0, V) vectors.

    Probability density function:
        f(X) = |X|^((n-p-1)/2) exp(-tr(V⁻¹X)/2) / (2^(np/2) |V|^(n/2) Γ_p(n/2))
    """

    def pdf(parameters: Parametrization, x: FloatArray, log: bool = False) -> float:
        """
        Probability density function at a single ``p x p`` matrix.

        Returns 0 (``-inf`` for ``log=True``) outside the positive definite cone.
        """
        parameters = cast(WishartStandard, parameters)
        scale = np.asarray(parameters.scale, dtype=np.float64)
        x = np.asarray(x, dtype=np.float64)
        n, p = parameters.dof, scale.shape[0]

        if x.shape != scale.shape or not _is_spd(x):
            return float("-inf") if log else 0.0

        _, logdet_x = np.linalg.slogdet(x)
        _, logdet_v = np.linalg.slogdet(scale)
        value = (
            (n - p - 1) / 2 * logdet_x
            - np.trace(np.linalg.solve(scale, x)) / 2
            - n * p / 2 * np.log(2.0)
            - n / 2 * logdet_v
            - multigammaln(n / 2, p)
        )
        return float(value if log else np.exp(value))

    def mean_func(parameters: Parametrization, _: Any = None) -> FloatArray:
        """Mean of Wishart distribution: n V."""
        parameters = cast(WishartStandard, parameters)
        return cast(FloatArray, parameters.dof * np.asarray(parameters.scale, dtype=np.float64))

    Wishart = ParametricFamily(
        name=FamilyName.WISHART,
        distr_type=matrix_type,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.MEAN: mean_func,
        },
        sampling_kernel=wishart_kernel,
    )
    Wishart.__doc__ = WISHART_DOC

    parametrization(family=Wishart, name="standard")(WishartStandard)

    ParametricFamilyRegister.register(Wishart)
