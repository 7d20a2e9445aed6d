"""
Built-in discrete distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_random.families.builtins.discrete.bernoulli import configure_bernoulli_family
from pysatl_random.families.builtins.discrete.binomial import configure_binomial_family
from pysatl_random.families.builtins.discrete.poisson import configure_poisson_family

__all__ = [
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_poisson_family",
]
