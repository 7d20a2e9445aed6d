"""
Tests for Poisson Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import poisson

from pysatl_random.types import CharacteristicName, FamilyName
from tests.unit.families.builtins.base import BaseDistributionTest


class TestPoissonFamily(BaseDistributionTest):
    """Test suite for Poisson distribution family."""

    def setup_method(self):
        self.poisson_family = self.family(FamilyName.POISSON)
        self.distr = self.poisson_family(rate=3.5)

    @pytest.mark.parametrize("rate", [0.0, -1.0, float("inf"), float("nan")])
    def test_constraints(self, rate):
        with pytest.raises(ValueError, match="0 < rate < inf"):
            self.poisson_family(rate=rate)

    def test_seeded_draw(self):
        expected = np.random.default_rng(50).poisson(3.5)
        assert self.poisson_family.sample(engine=50, rate=3.5) == expected

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PMF, [-1.0, 0.0, 1.5, 3.0, 6.0, 20.0], poisson.pmf),
            (CharacteristicName.CDF, [-1.0, 0.0, 1.5, 3.0, 6.0, 20.0], poisson.cdf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        self.assert_characteristic_matches(
            self.distr, char_name, test_data, lambda x: scipy_func(x, 3.5)
        )

    def test_sampling_moments(self):
        assert self.distr.query_method(CharacteristicName.MEAN)(None) == 3.5
        assert self.distr.query_method(CharacteristicName.VAR)(None) == 3.5
        draws = self.poisson_family.sample_vector(self.SAMPLE_SIZE, engine=15, rate=3.5)
        assert np.all(draws == np.floor(draws))
        assert np.all(draws >= 0)
        self.assert_sample_mean(draws, 3.5, 3.5)

    def test_vector_with_cycled_rates(self):
        draws = self.poisson_family.sample_vector(6, engine=2, rate=[1.0, 50.0])
        rng = np.random.default_rng(2)
        expected = [rng.poisson(rate) for rate in (1.0, 50.0, 1.0, 50.0, 1.0, 50.0)]
        np.testing.assert_array_equal(draws, expected)
