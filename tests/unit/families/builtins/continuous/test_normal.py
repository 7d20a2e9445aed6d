"""
Tests for Normal Distribution Family

This module tests the functionality of the normal distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import lognorm, norm

from pysatl_random.distributions.engine import make_engine
from pysatl_random.families.builtins.continuous.lognormal import (
    LogNormalStandard,
    lognormal_kernel,
)
from pysatl_random.families.builtins.continuous.normal import NormalMeanVar, normal_kernel
from pysatl_random.types import CharacteristicName, FamilyName, UnivariateContinuous
from tests.unit.families.builtins.base import BaseDistributionTest


class TestNormalFamily(BaseDistributionTest):
    """Test suite for Normal distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.normal_family = self.family(FamilyName.NORMAL)
        self.normal_dist_example = self.normal_family(mu=2.0, sigma=1.5)

    def test_family_properties(self):
        """Test basic properties of normal family."""
        assert self.normal_family.name == FamilyName.NORMAL
        assert self.normal_family.parametrization_names == ["meanVar", "meanPrec"]
        assert self.normal_family.base_parametrization_name == "meanVar"

    def test_parametrization_creation(self):
        """Test creation of distributions in both parametrizations."""
        dist = self.normal_family(mu=2.0, sigma=1.5)
        assert dist.family_name == FamilyName.NORMAL
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"mu": 2.0, "sigma": 1.5}
        assert dist.parametrization_name == "meanVar"

        dist = self.normal_family(mu=2.0, tau=0.25, parametrization_name="meanPrec")
        assert dist.parameters.parameters == {"mu": 2.0, "tau": 0.25}
        assert dist.parametrization_name == "meanPrec"

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ValueError, match="sigma > 0"):
            self.normal_family(mu=0, sigma=-1.0)

        with pytest.raises(ValueError, match="tau > 0"):
            self.normal_family(mu=0, tau=-1.0, parametrization_name="meanPrec")

        with pytest.raises(ValueError, match="mu is not NaN"):
            self.normal_family(mu=float("nan"), sigma=1.0)

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_mu, expected_sigma",
        [
            ("meanVar", {"mu": 2.0, "sigma": 1.5}, 2.0, 1.5),
            ("meanPrec", {"mu": 2.0, "tau": 0.25}, 2.0, math.sqrt(1 / 0.25)),
        ],
    )
    def test_parametrization_conversions(
        self, parametrization_name, params, expected_mu, expected_sigma
    ):
        """Test conversions between different parameterizations."""
        base_params = self.normal_family.to_base(
            self.normal_family.get_parametrization(parametrization_name)(**params)
        )

        assert abs(base_params.parameters["mu"] - expected_mu) < self.CALCULATION_PRECISION
        assert abs(base_params.parameters["sigma"] - expected_sigma) < self.CALCULATION_PRECISION

    def test_moments(self):
        """Test moment calculations."""
        assert self.normal_dist_example.query_method(CharacteristicName.MEAN)(None) == 2.0
        assert self.normal_dist_example.query_method(CharacteristicName.VAR)(None) == 2.25

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.pdf),
            (CharacteristicName.CDF, [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.cdf),
            (CharacteristicName.PPF, [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99], norm.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        """Test that characteristics support array inputs and agree with scipy."""
        self.assert_characteristic_matches(
            self.normal_dist_example,
            char_name,
            test_data,
            lambda x: scipy_func(x, loc=2.0, scale=1.5),
        )

    def test_log_pdf(self):
        """Log-density is available through the ``log`` option."""
        self.assert_characteristic_matches(
            self.normal_dist_example,
            CharacteristicName.PDF,
            [-3.0, 0.0, 2.0, 10.0],
            lambda x: norm.logpdf(x, loc=2.0, scale=1.5),
            log=True,
        )

    def test_ppf_rejects_probabilities_outside_unit_interval(self):
        with pytest.raises(ValueError, match="Probability"):
            self.normal_dist_example.query_method(CharacteristicName.PPF)(np.array([0.5, 1.5]))

    def test_kernel_is_affine_standard_normal(self):
        """A draw is mu + sigma * z for the engine's next standard normal z."""
        value = normal_kernel(NormalMeanVar(mu=1.0, sigma=2.0), make_engine(77))
        assert value == 1.0 + 2.0 * np.random.default_rng(77).standard_normal()

    def test_sampling_moments(self):
        draws = self.normal_family.sample_vector(self.SAMPLE_SIZE, engine=1, mu=2.0, sigma=1.5)
        self.assert_sample_mean(draws, 2.0, 2.25)

    def test_mean_precision_sampling_agrees(self):
        a = self.normal_family.sample_vector(5, "meanPrec", engine=6, mu=0.0, tau=0.25)
        b = self.normal_family.sample_vector(5, engine=6, mu=0.0, sigma=2.0)
        np.testing.assert_array_equal(a, b)


class TestLogNormalFamily(BaseDistributionTest):
    def setup_method(self):
        self.family_ = self.family(FamilyName.LOGNORMAL)
        self.distr = self.family_(mu=0.5, sigma=0.75)

    def test_kernel_exponentiates_normal_draw(self):
        value = lognormal_kernel(LogNormalStandard(mu=0.5, sigma=0.75), make_engine(3))
        expected = normal_kernel(NormalMeanVar(mu=0.5, sigma=0.75), make_engine(3))
        assert value == np.exp(expected)

    @pytest.mark.parametrize(
        "char_name, test_data, reference",
        [
            ("pdf", [0.1, 0.5, 1.0, 2.0, 5.0], lognorm.pdf),
            ("cdf", [-1.0, 0.1, 1.0, 2.0, 5.0], lognorm.cdf),
            ("ppf", [0.01, 0.25, 0.5, 0.9], lognorm.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, reference):
        self.assert_characteristic_matches(
            self.distr,
            char_name,
            test_data,
            lambda x: reference(x, s=0.75, scale=np.exp(0.5)),
            1e-8,
        )

    def test_sampling_moments(self):
        mean = float(np.exp(0.5 + 0.75**2 / 2))
        var = float(np.expm1(0.75**2) * np.exp(1.0 + 0.75**2))
        draws = self.family_.sample_vector(self.SAMPLE_SIZE, engine=2, mu=0.5, sigma=0.75)
        assert np.all(draws > 0)
        self.assert_sample_mean(draws, mean, var)
        assert self.distr.query_method(CharacteristicName.MEAN)(None) == pytest.approx(mean)
        assert self.distr.query_method(CharacteristicName.VAR)(None) == pytest.approx(var)
