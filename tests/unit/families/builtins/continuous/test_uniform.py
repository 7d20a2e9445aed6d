"""
Tests for Continuous Uniform Distribution Family

This module tests the functionality of the uniform distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import uniform

from pysatl_random.families.builtins.continuous.uniform import (
    UniformStandard,
    uniform_kernel,
    uniform_quantile,
)
from pysatl_random.types import CharacteristicName, FamilyName, UnivariateContinuous
from tests.unit.families.builtins.base import BaseDistributionTest
from tests.utils.mocks import ScriptedEngine


class TestUniformFamily(BaseDistributionTest):
    """Test suite for Uniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.uniform_family = self.family(FamilyName.CONTINUOUS_UNIFORM)
        self.uniform_dist_example = self.uniform_family(lower_bound=2.0, upper_bound=5.0)

    def test_family_properties(self):
        """Test basic properties of uniform family."""
        assert self.uniform_family.name == FamilyName.CONTINUOUS_UNIFORM
        assert self.uniform_family.parametrization_names == ["standard", "meanWidth", "minRange"]
        assert self.uniform_family.base_parametrization_name == "standard"

    def test_parametrization_creation(self):
        dist = self.uniform_family(lower_bound=2.0, upper_bound=5.0)
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"lower_bound": 2.0, "upper_bound": 5.0}

        dist = self.uniform_family(mean=3.5, width=3.0, parametrization_name="meanWidth")
        assert dist.parametrization_name == "meanWidth"

        dist = self.uniform_family(minimum=2.0, range_val=3.0, parametrization_name="minRange")
        assert dist.parametrization_name == "minRange"

    @pytest.mark.parametrize(
        "parametrization_name, params, error_match",
        [
            ("standard", {"lower_bound": 5.0, "upper_bound": 2.0}, "lower_bound < upper_bound"),
            ("standard", {"lower_bound": 2.0, "upper_bound": 2.0}, "lower_bound < upper_bound"),
            ("standard", {"lower_bound": -np.inf, "upper_bound": 2.0}, "bounds are finite"),
            ("meanWidth", {"mean": 3.5, "width": -1.0}, "0 < width < inf"),
            ("meanWidth", {"mean": np.nan, "width": 1.0}, "mean is finite"),
            ("minRange", {"minimum": 2.0, "range_val": 0.0}, "0 < range_val < inf"),
        ],
    )
    def test_parametrization_constraints(self, parametrization_name, params, error_match):
        with pytest.raises(ValueError, match=error_match):
            self.uniform_family.distribution(parametrization_name, **params)

    @pytest.mark.parametrize(
        "parametrization_name, params",
        [
            ("meanWidth", {"mean": 3.5, "width": 3.0}),
            ("minRange", {"minimum": 2.0, "range_val": 3.0}),
        ],
    )
    def test_parametrization_conversions(self, parametrization_name, params):
        """Every parametrization converts to bounds [2, 5]."""
        base = self.uniform_family.to_base(
            self.uniform_family.get_parametrization(parametrization_name)(**params)
        )
        assert base.parameters == {"lower_bound": 2.0, "upper_bound": 5.0}

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [0.0, 2.0, 3.0, 4.5, 5.0, 6.0], uniform.pdf),
            (CharacteristicName.CDF, [0.0, 2.0, 3.0, 4.5, 5.0, 6.0], uniform.cdf),
            (CharacteristicName.PPF, [0.0, 0.1, 0.5, 0.9, 1.0], uniform.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        self.assert_characteristic_matches(
            self.uniform_dist_example,
            char_name,
            test_data,
            lambda x: scipy_func(x, loc=2.0, scale=3.0),
        )

    def test_moments(self):
        assert self.uniform_dist_example.query_method(CharacteristicName.MEAN)(None) == 3.5
        assert self.uniform_dist_example.query_method(CharacteristicName.VAR)(None) == 0.75

    def test_ppf_rejects_probabilities_outside_unit_interval(self):
        with pytest.raises(ValueError, match="Probability"):
            self.uniform_dist_example.query_method(CharacteristicName.PPF)(np.array([-0.1]))

    def test_kernel_maps_one_uniform_linearly(self):
        engine = ScriptedEngine([0.25])
        value = uniform_kernel(UniformStandard(lower_bound=2.0, upper_bound=6.0), engine)
        assert value == 3.0
        assert engine.calls == 1
        assert uniform_quantile(UniformStandard(lower_bound=2.0, upper_bound=6.0), 0.25) == 3.0

    def test_draws_lie_in_support(self):
        draws = self.uniform_family.sample_vector(
            self.SAMPLE_SIZE, engine=4, lower_bound=2.0, upper_bound=5.0
        )
        assert np.all((draws >= 2.0) & (draws < 5.0))
        self.assert_sample_mean(draws, 3.5, 0.75)

    def test_alternative_parametrizations_sample_identically(self):
        base = self.uniform_family.sample_vector(8, engine=9, lower_bound=2.0, upper_bound=5.0)
        mean_width = self.uniform_family.sample_vector(
            8, "meanWidth", engine=9, mean=3.5, width=3.0
        )
        min_range = self.uniform_family.sample_vector(
            8, "minRange", engine=9, minimum=2.0, range_val=3.0
        )
        np.testing.assert_array_equal(base, mean_width)
        np.testing.assert_array_equal(base, min_range)

    def test_invalid_bounds_give_nan(self):
        assert np.isnan(self.uniform_family.sample(engine=1, lower_bound=1.0, upper_bound=1.0))
