"""
Sampling entry points by family name.

Thin wrappers that look a built-in (or user registered) family up in the
configured registry and forward to its sampling surface::

    >>> from pysatl_random.families.api import sample_vector
    >>> from pysatl_random.types import FamilyName
    >>> draws = sample_vector(FamilyName.BETA, 1000, engine=1776, a=3.0, b=2.0)
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_random.families.configuration import configure_families_register

if TYPE_CHECKING:
    from typing import Any

    from pysatl_random.distributions.engine import EngineLike
    from pysatl_random.families.parametric_family import ParametricFamily
    from pysatl_random.types import FloatArray, ParameterValue


def _family(name: str) -> ParametricFamily:
    return configure_families_register().get(name)


def sample(
    family_name: str,
    parametrization_name: str | None = None,
    *,
    engine: EngineLike,
    **parameters_values: Any,
) -> Any:
    """
    Draw a single value of the named family.

    Parameters
    ----------
    family_name : str
        Registered family name, e.g. :attr:`FamilyName.GAMMA`.
    parametrization_name : str, optional
        Parametrization the values are given in (defaults to base).
    engine : Engine or int
        Engine to advance, or a non-negative seed.
    **parameters_values
        Parameter values.

    Returns
    -------
    Any
        The draw, or NaN (a NaN matrix for matrix families) for parameters
        outside the domain.

    Raises
    ------
    ValueError
        If no family with the given name is registered.
    """
    return _family(family_name).sample(parametrization_name, engine=engine, **parameters_values)


def sample_vector(
    family_name: str,
    num_elem: int,
    parametrization_name: str | None = None,
    *,
    engine: EngineLike = None,
    **parameters_values: ParameterValue,
) -> FloatArray:
    """Draw ``num_elem`` values of the named family into a fresh 1-D array."""
    return _family(family_name).sample_vector(
        num_elem, parametrization_name, engine=engine, **parameters_values
    )


def sample_matrix(
    family_name: str,
    rows: int,
    cols: int,
    parametrization_name: str | None = None,
    *,
    engine: EngineLike = None,
    **parameters_values: ParameterValue,
) -> FloatArray:
    """Draw a ``rows x cols`` matrix of values of the named family."""
    return _family(family_name).sample_matrix(
        rows, cols, parametrization_name, engine=engine, **parameters_values
    )


__all__ = [
    "sample",
    "sample_vector",
    "sample_matrix",
]
