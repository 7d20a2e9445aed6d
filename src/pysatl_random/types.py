"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Random.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class for distribution type descriptors.

    Provides a feature interface describing distribution properties.
    """

    __slots__ = ()

    @property
    def registry_features(self) -> Mapping[str, Any]:
        """
        Get features describing this distribution type.

        Returns
        -------
        Mapping[str, Any]
            Dictionary of feature names to values.

        Notes
        -----
        Default implementation exposes public dataclass fields.
        """
        data: dict[str, Any] = {}

        fields = getattr(self, "__dataclass_fields__", None)
        if fields is not None:
            for name in fields:
                data[name] = getattr(self, name)

        return data


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


@dataclass(frozen=True, slots=True)
class MatrixDistributionType(DistributionType):
    """
    Distribution type for matrix-variate distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind.
    rows : int
        Number of rows of a draw.
    cols : int
        Number of columns of a draw.
    """

    kind: Kind
    rows: int
    cols: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.floating[Any]]
"""Type alias for floating-point arrays."""

type ParameterValue = Number | Sequence[Number] | NumericArray
"""Type alias for a parameter value accepted by the broadcasting layers."""

type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

type ParametrizationName = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Enumeration of statistical distribution characteristics.

    Density characteristics (``pdf`` and ``pmf``) accept a ``log`` option
    returning the logarithm of the density.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    PMF = "pmf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    BERNOULLI = "Bernoulli"
    BETA = "Beta"
    BINOMIAL = "Binomial"
    CAUCHY = "Cauchy"
    CHI_SQUARED = "ChiSquared"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    EXPONENTIAL = "Exponential"
    F = "F"
    GAMMA = "Gamma"
    INVERSE_GAMMA = "InverseGamma"
    INVERSE_WISHART = "InverseWishart"
    LAPLACE = "Laplace"
    LOGISTIC = "Logistic"
    LOGNORMAL = "LogNormal"
    NORMAL = "Normal"
    POISSON = "Poisson"
    STUDENT_T = "StudentT"
    WEIBULL = "Weibull"
    WISHART = "Wishart"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "MatrixDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "ParameterValue",
    "FloatArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
