"""
Numeric Type Promotion
======================

Resolution of the floating-point type used for the arithmetic and the result
of a sampling call:

- :func:`resolve_type`: pure rule over types;
- :func:`resolve_value_type`: the same rule applied to runtime values;
- :func:`resolve_parameter_type`: the rule applied to a parametrization.

Rules
-----
- If all inputs share one floating type, that type is the result.
- Mixed inputs promote to the widest floating type present.
- Integral-only inputs (and the empty input) resolve to ``float64``.
- The result is never narrower than ``float32``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from typing import Any

    from numpy.typing import DTypeLike

    from pysatl_random.families.parametrizations import Parametrization

_INTEGRAL_KINDS = frozenset("biu")
_FLOATING_KIND = "f"
_DEFAULT = np.dtype(np.float64)
_NARROWEST = np.dtype(np.float32)


def resolve_type(*types: DTypeLike) -> np.dtype[Any]:
    """
    Resolve the floating result type for the given argument types.

    Parameters
    ----------
    *types : DTypeLike
        Python types, numpy scalar types or dtypes of the arguments.

    Returns
    -------
    numpy.dtype
        Floating dtype used for internal arithmetic and the return value.

    Raises
    ------
    TypeError
        If any of the types is not integral, boolean or real floating.
    """
    widest: np.dtype[Any] | None = None
    for t in types:
        dt = np.dtype(t)
        if dt.kind in _INTEGRAL_KINDS:
            continue
        if dt.kind != _FLOATING_KIND:
            raise TypeError(f"Cannot resolve a real floating type from '{dt}'.")
        if widest is None or dt.itemsize > widest.itemsize:
            widest = dt

    if widest is None:
        return _DEFAULT
    if widest.itemsize < _NARROWEST.itemsize:
        return _NARROWEST
    return widest


def _type_of(value: Any) -> DTypeLike:
    # Python ints are integral whatever their magnitude.
    if isinstance(value, bool | int):
        return np.int64
    if isinstance(value, float):
        return np.float64
    return np.asarray(value).dtype


def resolve_value_type(*values: Any) -> np.dtype[Any]:
    """Resolve the floating result type from runtime values (scalars or arrays)."""
    return resolve_type(*(_type_of(v) for v in values))


def resolve_parameter_type(parameters: Parametrization) -> np.dtype[Any]:
    """Resolve the floating result type of a parametrization's values."""
    return resolve_value_type(*parameters.parameters.values())


__all__ = [
    "resolve_type",
    "resolve_value_type",
    "resolve_parameter_type",
]
