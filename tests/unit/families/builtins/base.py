"""
Common fixtures and utilities for built-in family tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from collections.abc import Callable
from typing import Any

import numpy as np

from pysatl_random.families.configuration import configure_families_register
from pysatl_random.families.parametric_family import ParametricFamily


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    # Number of draws for moment checks and the allowed error in standard errors
    SAMPLE_SIZE = 20_000
    SAMPLE_TOLERANCE = 5.0

    @staticmethod
    def family(name: str) -> ParametricFamily:
        return configure_families_register().get(name)

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    def assert_characteristic_matches(
        self,
        distr: Any,
        name: str,
        points: list[float],
        reference: Callable[[np.ndarray[Any, Any]], np.ndarray[Any, Any]],
        precision: float | None = None,
        **options: Any,
    ) -> None:
        """Compare a characteristic on ``points`` with a reference implementation."""
        data = np.array(points)
        actual = distr.query_method(name)(data, **options)
        assert np.shape(actual) == data.shape
        self.assert_arrays_almost_equal(actual, reference(data), precision)

    def assert_sample_mean(self, draws: np.ndarray[Any, Any], mean: float, var: float) -> None:
        """Sample mean lies within a few standard errors of ``mean``."""
        assert np.all(np.isfinite(draws))
        standard_error = math.sqrt(var / draws.size)
        assert abs(float(draws.mean()) - mean) < self.SAMPLE_TOLERANCE * standard_error
