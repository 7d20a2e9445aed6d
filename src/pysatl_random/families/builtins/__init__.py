"""
Built-in distribution families for PySATL Random.

This package contains the standard parametric families that are available by
default, grouped into continuous, discrete and matrix-variate families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_random.families.builtins.continuous import (
    configure_beta_family,
    configure_cauchy_family,
    configure_chi_squared_family,
    configure_exponential_family,
    configure_f_family,
    configure_gamma_family,
    configure_inverse_gamma_family,
    configure_laplace_family,
    configure_logistic_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_student_t_family,
    configure_uniform_family,
    configure_weibull_family,
)
from pysatl_random.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_poisson_family,
)
from pysatl_random.families.builtins.matrix import (
    configure_inverse_wishart_family,
    configure_wishart_family,
)

BUILTIN_FAMILIES = (
    configure_uniform_family,
    configure_normal_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_beta_family,
    configure_inverse_gamma_family,
    configure_cauchy_family,
    configure_logistic_family,
    configure_laplace_family,
    configure_weibull_family,
    configure_lognormal_family,
    configure_chi_squared_family,
    configure_student_t_family,
    configure_f_family,
    configure_bernoulli_family,
    configure_binomial_family,
    configure_poisson_family,
    configure_wishart_family,
    configure_inverse_wishart_family,
)
"""Configuration functions of every built-in family, in registration order."""

__all__ = [
    "BUILTIN_FAMILIES",
    "configure_beta_family",
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_cauchy_family",
    "configure_chi_squared_family",
    "configure_exponential_family",
    "configure_f_family",
    "configure_gamma_family",
    "configure_inverse_gamma_family",
    "configure_inverse_wishart_family",
    "configure_laplace_family",
    "configure_logistic_family",
    "configure_lognormal_family",
    "configure_normal_family",
    "configure_poisson_family",
    "configure_student_t_family",
    "configure_uniform_family",
    "configure_weibull_family",
    "configure_wishart_family",
]
