"""
Parameterization classes and specifications for distribution families.

This module provides the core abstractions for defining the parameterizations
of statistical distributions: domain constraints, the validity predicate used
by sampling kernels, and conversion to the base parameterization.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_random.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_random.families.parametric_family import ParametricFamily


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


def _collect_constraints(cls: type) -> list[ParametrizationConstraint]:
    """Collect methods marked with :func:`constraint`, base classes first."""
    constraints: dict[str, ParametrizationConstraint] = {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, staticmethod | classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    kind = "@staticmethod" if isinstance(attr, staticmethod) else "@classmethod"
                    raise TypeError(f"@constraint '{name}' must be an instance method, not {kind}")
                continue

            if not isfunction(attr):
                continue
            if not getattr(attr, "__is_constraint", False):
                # Overriding without @constraint drops the inherited check
                constraints.pop(name, None)
                continue
            desc = getattr(attr, "__constraint_description", attr.__name__)
            constraints[name] = ParametrizationConstraint(description=desc, check=attr)
    return list(constraints.values())


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Subclasses declare their parameters as (frozen) dataclass fields and their
    domain as methods marked with :func:`constraint`. Constraints are
    collected when the subclass is created, so a parametrization validates
    itself whether or not it is registered in a family.
    """

    # These attributes are set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._constraints = _collect_constraints(cls)

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        fields = getattr(self, "__dataclass_fields__", None)
        if fields:
            return {f: getattr(self, f) for f in fields}
        ann = getattr(self, "__annotations__", {})
        return {k: getattr(self, k) for k in ann}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def is_valid(self) -> bool:
        """
        Check whether all constraints hold.

        Returns
        -------
        bool
            True if the parameters lie in the distribution's domain.

        Notes
        -----
        Side effect free. NaN parameters fail every ordering constraint.
        """
        return all(c.check(self) for c in self._constraints)

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        ValueError
            If any constraint is not satisfied.
        """
        for c in self._constraints:
            if not c.check(self):
                raise ValueError(f'Constraint "{c.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert this parametrization to the base parametrization.

        Notes
        -----
        Base implementation returns self. Only called on valid parameters.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as a parametrization for a family.

    Parameters
    ----------
    family : ParametricFamily
        Family to register the parametrization with.
    name : str
        Name of the parametrization.

    Notes
    -----
    Converts the class to a frozen dataclass if it is not one already.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator
