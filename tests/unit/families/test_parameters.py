from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import Any

import pytest

from pysatl_random.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
)
from pysatl_random.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily
from tests.utils.mocks import MockSamplingStrategy


@dataclass(frozen=True, slots=True)
class Interval(Parametrization):
    low: float
    high: float

    @constraint(description="low < high")
    def check_order(self) -> bool:
        return self.low < self.high


@dataclass(frozen=True, slots=True)
class UnitInterval(Interval):
    @constraint(description="low >= 0")
    def check_low(self) -> bool:
        return self.low >= 0


@dataclass(frozen=True, slots=True)
class UnorderedInterval(Interval):
    def check_order(self) -> bool:
        return True


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == (
            "Value must be positive"
        )

    def test_free_function_parametrization_decorator(self) -> None:
        family = ParametricFamily(
            name="FreeDecoratorFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
            sampling_strategy=MockSamplingStrategy(),
        )

        @family.parametrization(name="kind")
        class Kind(Parametrization):
            value: float

        obj = Kind(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "kind"
        assert obj.parameters == {"value": 1.25}
        assert getattr(Kind, "__family__", None) is family
        assert getattr(Kind, "__param_name__", None) == "kind"
        assert hasattr(Kind, "__dataclass_fields__")

    def test_static_constraint_rejected(self) -> None:
        with pytest.raises(TypeError, match="instance method"):

            class Broken(Parametrization):
                @staticmethod
                @constraint(description="never")
                def check() -> bool:
                    return False

    # ---------- Validity ----------

    def test_is_valid_without_registration(self) -> None:
        assert Interval(low=0.0, high=1.0).is_valid()
        assert not Interval(low=1.0, high=0.0).is_valid()

    def test_nan_fails_ordering_constraints(self) -> None:
        assert not Interval(low=float("nan"), high=1.0).is_valid()

    def test_validate_raises_with_description(self) -> None:
        with pytest.raises(ValueError, match='Constraint "low < high" does not hold'):
            Interval(low=2.0, high=1.0).validate()

    def test_constraints_are_inherited(self) -> None:
        descriptions = [c.description for c in UnitInterval(low=0.0, high=1.0).constraints]
        assert descriptions == ["low < high", "low >= 0"]
        assert not UnitInterval(low=2.0, high=1.0).is_valid()
        assert not UnitInterval(low=-1.0, high=1.0).is_valid()

    def test_plain_override_drops_inherited_constraint(self) -> None:
        assert UnorderedInterval(low=2.0, high=1.0).is_valid()
        assert UnorderedInterval(low=2.0, high=1.0).constraints == []

    # ---------- Family-level conversion to base ----------

    def test_get_base_parameters_uses_family_logic(self) -> None:
        family = self.make_default_family()

        BaseCls = family.parametrizations["base"]
        AltCls = family.parametrizations["alt"]

        base_params = BaseCls(value=5.0)  # type: ignore[call-arg]
        assert family.to_base(base_params) is base_params

        alt_params = AltCls(value=-3.0)  # type: ignore[call-arg]
        base_from_alt = family.to_base(alt_params)
        assert isinstance(base_from_alt, BaseCls)
        assert base_from_alt.value == 3.0  # type: ignore[attr-defined]

    def test_get_parametrization(self) -> None:
        family = self.make_default_family()
        assert family.get_parametrization() is family.base
        assert family.get_parametrization("alt") is family.parametrizations["alt"]
        with pytest.raises(KeyError):
            family.get_parametrization("missing")

    def test_duplicate_parametrization_rejected(self) -> None:
        family = self.make_default_family()
        with pytest.raises(ValueError, match="already registered"):
            family.register_parametrization("base", family.base)
