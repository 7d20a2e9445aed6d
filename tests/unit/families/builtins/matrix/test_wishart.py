"""
Tests for Wishart and Inverse-Wishart Distribution Families

Matrix-variate families: a single draw is a symmetric positive definite
``p x p`` matrix.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import invwishart, wishart

from pysatl_random.distributions.engine import make_engine
from pysatl_random.families.builtins.matrix.inverse_wishart import (
    InverseWishartStandard,
    inverse_wishart_kernel,
)
from pysatl_random.families.builtins.matrix.wishart import WishartStandard, wishart_kernel
from pysatl_random.types import CharacteristicName, FamilyName, Kind, MatrixDistributionType
from tests.unit.families.builtins.base import BaseDistributionTest

SCALE = np.array([[2.0, 0.5], [0.5, 1.0]])


def _bartlett_draw(scale, dof, seed):
    rng = np.random.default_rng(seed)
    p = scale.shape[0]
    bartlett = np.zeros((p, p))
    for i in range(p):
        bartlett[i, i] = np.sqrt(rng.standard_gamma((dof - i) / 2) * 2.0)
        for j in range(i):
            bartlett[i, j] = rng.standard_normal()
    factor = np.linalg.cholesky(scale) @ bartlett
    return factor @ factor.T


class TestWishartFamily(BaseDistributionTest):
    """Test suite for Wishart distribution family."""

    def setup_method(self):
        self.wishart_family = self.family(FamilyName.WISHART)
        self.distr = self.wishart_family(scale=SCALE, dof=5.0)

    def test_distribution_type_follows_scale_shape(self):
        assert self.distr.distribution_type == MatrixDistributionType(
            kind=Kind.CONTINUOUS, rows=2, cols=2
        )

    @pytest.mark.parametrize(
        "scale, dof, error_match",
        [
            (np.ones((2, 3)), 5.0, "scale is a square matrix"),
            (np.array([[2.0, 0.5], [0.1, 1.0]]), 5.0, "scale is finite and symmetric"),
            (np.array([[1.0, 2.0], [2.0, 1.0]]), 5.0, "scale is positive definite"),
            (SCALE, 0.5, "dof > p - 1"),
        ],
    )
    def test_constraints(self, scale, dof, error_match):
        with pytest.raises(ValueError, match=error_match):
            self.wishart_family(scale=scale, dof=dof)

    def test_draw_follows_bartlett_decomposition(self):
        draw = self.wishart_family.sample(engine=123, scale=SCALE, dof=5.0)
        np.testing.assert_allclose(draw, _bartlett_draw(SCALE, 5.0, 123), rtol=1e-12)

    def test_draw_is_symmetric_positive_definite(self):
        draw = wishart_kernel(WishartStandard(scale=SCALE, dof=2.5), make_engine(4))
        assert draw.shape == (2, 2)
        np.testing.assert_allclose(draw, draw.T)
        assert np.all(np.linalg.eigvalsh(draw) > 0)

    def test_sample_mean_is_dof_times_scale(self):
        engine = make_engine(99)
        draws = np.stack(
            [wishart_kernel(WishartStandard(scale=SCALE, dof=5.0), engine) for _ in range(4_000)]
        )
        expected = 5.0 * SCALE
        variance = 5.0 * (SCALE**2 + np.outer(np.diag(SCALE), np.diag(SCALE)))
        standard_error = np.sqrt(variance / draws.shape[0])
        deviation = np.abs(draws.mean(axis=0) - expected)
        assert np.all(deviation < self.SAMPLE_TOLERANCE * standard_error)

    def test_invalid_parameters_give_nan_matrix_without_consuming_engine(self):
        engine = make_engine(6)
        draw = wishart_kernel(
            WishartStandard(scale=np.array([[1.0, 2.0], [2.0, 1.0]]), dof=5.0), engine
        )
        assert draw.shape == (2, 2)
        assert np.all(np.isnan(draw))
        assert engine.random() == np.random.default_rng(6).random()

    def test_non_matrix_scale_gives_single_nan(self):
        draw = wishart_kernel(WishartStandard(scale=np.array([1.0, 2.0]), dof=5.0), make_engine(0))
        assert draw.shape == (1, 1)
        assert np.isnan(draw[0, 0])

    def test_vector_and_matrix_layers_reject_matrix_kernels(self):
        with pytest.raises(TypeError, match="scalar"):
            self.wishart_family.sample_vector(3, engine=1, scale=SCALE, dof=5.0)
        with pytest.raises(TypeError, match="scalar"):
            self.wishart_family.sample_matrix(2, 2, engine=1, scale=SCALE, dof=5.0)

    def test_distribution_sample_flattens_draws(self):
        sample = self.distr.sample(3, engine=17)
        assert sample.shape == (3, 4)

        engine = make_engine(17)
        for row in sample.array:
            expected = wishart_kernel(WishartStandard(scale=SCALE, dof=5.0), engine)
            np.testing.assert_array_equal(row, expected.reshape(-1))

    def test_pdf_matches_scipy(self):
        x = np.array([[9.0, 1.5], [1.5, 4.0]])
        pdf = self.distr.query_method(CharacteristicName.PDF)
        assert pdf(x) == pytest.approx(wishart.pdf(x, df=5.0, scale=SCALE), rel=1e-10)
        assert pdf(x, log=True) == pytest.approx(wishart.logpdf(x, df=5.0, scale=SCALE), rel=1e-10)
        assert pdf(np.array([[1.0, 2.0], [2.0, 1.0]])) == 0.0

    def test_mean(self):
        mean = self.distr.query_method(CharacteristicName.MEAN)(None)
        np.testing.assert_array_equal(mean, 5.0 * SCALE)


class TestInverseWishartFamily(BaseDistributionTest):
    """Test suite for Inverse-Wishart distribution family."""

    def setup_method(self):
        self.inverse_wishart_family = self.family(FamilyName.INVERSE_WISHART)
        self.distr = self.inverse_wishart_family(scale=SCALE, dof=10.0)

    def test_constraints_are_inherited(self):
        assert not InverseWishartStandard(scale=SCALE, dof=0.5).is_valid()
        with pytest.raises(ValueError, match="scale is positive definite"):
            self.inverse_wishart_family(scale=-SCALE, dof=10.0)

    def test_draw_inverts_wishart_draw_with_inverse_scale(self):
        draw = inverse_wishart_kernel(InverseWishartStandard(scale=SCALE, dof=10.0), make_engine(8))
        wishart_draw = wishart_kernel(
            WishartStandard(scale=np.linalg.inv(SCALE), dof=10.0), make_engine(8)
        )
        np.testing.assert_allclose(draw, np.linalg.inv(wishart_draw), rtol=1e-8)
        np.testing.assert_array_equal(draw, draw.T)

    def test_sample_mean(self):
        engine = make_engine(100)
        parameters = InverseWishartStandard(scale=SCALE, dof=10.0)
        draws = np.stack([inverse_wishart_kernel(parameters, engine) for _ in range(4_000)])
        np.testing.assert_allclose(draws.mean(axis=0), SCALE / 7.0, atol=0.03)

    def test_mean(self):
        mean = self.distr.query_method(CharacteristicName.MEAN)(None)
        np.testing.assert_allclose(mean, SCALE / 7.0)

        heavy = self.inverse_wishart_family(scale=SCALE, dof=2.5)
        assert np.all(np.isinf(heavy.query_method(CharacteristicName.MEAN)(None)))

    def test_pdf_matches_scipy(self):
        x = np.array([[0.4, 0.05], [0.05, 0.2]])
        pdf = self.distr.query_method(CharacteristicName.PDF)
        assert pdf(x) == pytest.approx(invwishart.pdf(x, df=10.0, scale=SCALE), rel=1e-10)
        assert pdf(x, log=True) == pytest.approx(
            invwishart.logpdf(x, df=10.0, scale=SCALE), rel=1e-10
        )

    def test_invalid_parameters_give_nan_matrix(self):
        draw = self.inverse_wishart_family.sample(engine=3, scale=SCALE, dof=1.0)
        assert draw.shape == (2, 2)
        assert np.all(np.isnan(draw))
