"""
Built-in matrix-variate distribution families.

Their kernels produce ``p x p`` draws and are therefore not scalar: they are
sampled one matrix at a time and cannot fill vectors or matrices of draws.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_random.families.builtins.matrix.inverse_wishart import (
    configure_inverse_wishart_family,
)
from pysatl_random.families.builtins.matrix.wishart import configure_wishart_family

__all__ = [
    "configure_inverse_wishart_family",
    "configure_wishart_family",
]
