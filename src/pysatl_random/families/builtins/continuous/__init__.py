"""
Built-in continuous distribution families.

Each module defines the parametrization classes, the sampling kernel and the
configuration function of one univariate continuous family.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_random.families.builtins.continuous.beta import configure_beta_family
from pysatl_random.families.builtins.continuous.cauchy import configure_cauchy_family
from pysatl_random.families.builtins.continuous.chi_squared import configure_chi_squared_family
from pysatl_random.families.builtins.continuous.exponential import configure_exponential_family
from pysatl_random.families.builtins.continuous.f import configure_f_family
from pysatl_random.families.builtins.continuous.gamma import configure_gamma_family
from pysatl_random.families.builtins.continuous.inverse_gamma import (
    configure_inverse_gamma_family,
)
from pysatl_random.families.builtins.continuous.laplace import configure_laplace_family
from pysatl_random.families.builtins.continuous.logistic import configure_logistic_family
from pysatl_random.families.builtins.continuous.lognormal import configure_lognormal_family
from pysatl_random.families.builtins.continuous.normal import configure_normal_family
from pysatl_random.families.builtins.continuous.student_t import configure_student_t_family
from pysatl_random.families.builtins.continuous.uniform import configure_uniform_family
from pysatl_random.families.builtins.continuous.weibull import configure_weibull_family

__all__ = [
    "configure_beta_family",
    "configure_cauchy_family",
    "configure_chi_squared_family",
    "configure_exponential_family",
    "configure_f_family",
    "configure_gamma_family",
    "configure_inverse_gamma_family",
    "configure_laplace_family",
    "configure_logistic_family",
    "configure_lognormal_family",
    "configure_normal_family",
    "configure_student_t_family",
    "configure_uniform_family",
    "configure_weibull_family",
]
