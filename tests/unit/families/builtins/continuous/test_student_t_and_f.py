"""
Tests for Student's t and Fisher's F Distribution Families

Both families are composed from Normal and Chi-squared draws.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import f, t

from pysatl_random.distributions.engine import make_engine
from pysatl_random.families.builtins.continuous.chi_squared import (
    ChiSquaredStandard,
    chi_squared_kernel,
)
from pysatl_random.families.builtins.continuous.f import FStandard, f_kernel
from pysatl_random.families.builtins.continuous.normal import NormalMeanVar, normal_kernel
from pysatl_random.families.builtins.continuous.student_t import (
    StudentTStandard,
    student_t_kernel,
)
from pysatl_random.types import CharacteristicName, FamilyName
from tests.unit.families.builtins.base import BaseDistributionTest


class TestStudentTFamily(BaseDistributionTest):
    """Test suite for Student's t distribution family."""

    def setup_method(self):
        self.t_family = self.family(FamilyName.STUDENT_T)
        self.distr = self.t_family(dof=6.0)

    def test_constraints(self):
        with pytest.raises(ValueError, match="dof > 0"):
            self.t_family(dof=0.0)

    def test_kernel_draws_normal_then_chi_squared(self):
        engine = make_engine(40)
        z = normal_kernel(NormalMeanVar(mu=0.0, sigma=1.0), engine)
        v = chi_squared_kernel(ChiSquaredStandard(dof=6.0), engine)

        value = student_t_kernel(StudentTStandard(dof=6.0), make_engine(40))
        assert value == pytest.approx(z / math.sqrt(v / 6.0), rel=1e-14)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-4.0, -1.0, 0.0, 0.5, 3.0], t.pdf),
            (CharacteristicName.CDF, [-4.0, -1.0, 0.0, 0.5, 3.0], t.cdf),
            (CharacteristicName.PPF, [0.01, 0.25, 0.5, 0.75, 0.99], t.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        self.assert_characteristic_matches(
            self.distr, char_name, test_data, lambda x: scipy_func(x, df=6.0), 1e-8
        )

    @pytest.mark.parametrize(
        "dof, mean, var",
        [
            (6.0, 0.0, 1.5),
            (2.0, 0.0, float("inf")),
            (0.5, float("nan"), float("nan")),
        ],
    )
    def test_moments(self, dof, mean, var):
        distr = self.t_family(dof=dof)
        actual_mean = distr.query_method(CharacteristicName.MEAN)(None)
        actual_var = distr.query_method(CharacteristicName.VAR)(None)
        assert actual_mean == mean or (math.isnan(mean) and math.isnan(actual_mean))
        assert actual_var == var or (math.isnan(var) and math.isnan(actual_var))

    def test_sampling_moments(self):
        draws = self.t_family.sample_vector(self.SAMPLE_SIZE, engine=11, dof=6.0)
        self.assert_sample_mean(draws, 0.0, 1.5)


class TestFFamily(BaseDistributionTest):
    """Test suite for F distribution family."""

    def setup_method(self):
        self.f_family = self.family(FamilyName.F)
        self.distr = self.f_family(dof_num=5.0, dof_den=12.0)

    @pytest.mark.parametrize(
        "params, error_match",
        [
            ({"dof_num": 0.0, "dof_den": 1.0}, "dof_num > 0"),
            ({"dof_num": 1.0, "dof_den": -1.0}, "dof_den > 0"),
        ],
    )
    def test_constraints(self, params, error_match):
        with pytest.raises(ValueError, match=error_match):
            self.f_family(**params)

    def test_kernel_is_ratio_of_scaled_chi_squared_draws(self):
        engine = make_engine(41)
        u = chi_squared_kernel(ChiSquaredStandard(dof=5.0), engine)
        v = chi_squared_kernel(ChiSquaredStandard(dof=12.0), engine)

        value = f_kernel(FStandard(dof_num=5.0, dof_den=12.0), make_engine(41))
        assert value == pytest.approx((u / 5.0) / (v / 12.0), rel=1e-14)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-1.0, 0.2, 0.5, 1.0, 3.0], f.pdf),
            (CharacteristicName.CDF, [-1.0, 0.0, 0.5, 1.0, 3.0], f.cdf),
            (CharacteristicName.PPF, [0.01, 0.25, 0.5, 0.75, 0.99], f.ppf),
        ],
    )
    def test_characteristics_match_scipy(self, char_name, test_data, scipy_func):
        self.assert_characteristic_matches(
            self.distr,
            char_name,
            test_data,
            lambda x: scipy_func(x, dfn=5.0, dfd=12.0),
            1e-8,
        )

    def test_moments(self):
        mean = 12.0 / 10.0
        var = 2 * 144.0 * 15.0 / (5.0 * 100.0 * 8.0)
        assert self.distr.query_method(CharacteristicName.MEAN)(None) == pytest.approx(mean)
        assert self.distr.query_method(CharacteristicName.VAR)(None) == pytest.approx(var)

        heavy = self.f_family(dof_num=5.0, dof_den=3.0)
        assert heavy.query_method(CharacteristicName.VAR)(None) == float("inf")

    def test_sampling_moments(self):
        draws = self.f_family.sample_vector(
            self.SAMPLE_SIZE, engine=12, dof_num=5.0, dof_den=12.0
        )
        assert np.all(draws >= 0.0)
        self.assert_sample_mean(draws, 1.2, 2 * 144.0 * 15.0 / (5.0 * 100.0 * 8.0))
