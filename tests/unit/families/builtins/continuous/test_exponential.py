"""
Tests for Exponential Distribution Family

This module tests the functionality of the exponential distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import expon

from pysatl_random.families.builtins.continuous.exponential import (
    ExponentialRate,
    exponential_kernel,
)
from pysatl_random.types import CharacteristicName, FamilyName
from tests.unit.families.builtins.base import BaseDistributionTest
from tests.utils.mocks import ScriptedEngine


class TestExponentialFamily(BaseDistributionTest):
    """Test suite for Exponential distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.exponential_family = self.family(FamilyName.EXPONENTIAL)
        self.exponential_dist_example = self.exponential_family(lambda_=0.5)

    def test_family_properties(self):
        assert self.exponential_family.name == FamilyName.EXPONENTIAL
        assert self.exponential_family.parametrization_names == ["rate", "scale"]
        assert self.exponential_family.base_parametrization_name == "rate"

    def test_parametrization_constraints(self):
        with pytest.raises(ValueError, match="lambda_ > 0"):
            self.exponential_family(lambda_=0.0)
        with pytest.raises(ValueError, match="beta > 0"):
            self.exponential_family(beta=-2.0, parametrization_name="scale")

    def test_scale_parametrization_conversion(self):
        base = self.exponential_family.to_base(
            self.exponential_family.get_parametrization("scale")(beta=4.0)
        )
        assert base.parameters == {"lambda_": 0.25}

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-1.0, 0.0, 0.5, 1.0, 2.0, 10.0], expon.pdf),
            (CharacteristicName.CDF, [-1.0, 0.0, 0.5, 1.0, 2.0, 10.0], expon.cdf),
            (CharacteristicName.PPF, [0.0, 0.01, 0.1, 0.5, 0.9, 0.99], expon.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        self.assert_characteristic_matches(
            self.exponential_dist_example,
            char_name,
            test_data,
            lambda x: scipy_func(x, scale=2.0),
        )

    def test_moments(self):
        assert self.exponential_dist_example.query_method(CharacteristicName.MEAN)(None) == 2.0
        assert self.exponential_dist_example.query_method(CharacteristicName.VAR)(None) == 4.0

    def test_kernel_inverts_one_uniform(self):
        engine = ScriptedEngine([0.75])
        value = exponential_kernel(ExponentialRate(lambda_=2.0), engine)
        assert value == pytest.approx(np.log(4.0) / 2.0, rel=1e-12)
        assert engine.calls == 1

    def test_draws_are_non_negative(self):
        draws = self.exponential_family.sample_vector(self.SAMPLE_SIZE, engine=12, lambda_=0.5)
        assert np.all(draws >= 0.0)
        self.assert_sample_mean(draws, 2.0, 4.0)

    def test_float32_rate_gives_float32_draws(self):
        draws = self.exponential_family.sample_vector(4, engine=3, lambda_=np.float32(1.5))
        assert draws.dtype == np.float32

    def test_scale_parametrization_samples_like_rate(self):
        a = self.exponential_family.sample_vector(6, "scale", engine=5, beta=0.5)
        b = self.exponential_family.sample_vector(6, engine=5, lambda_=2.0)
        np.testing.assert_array_equal(a, b)
