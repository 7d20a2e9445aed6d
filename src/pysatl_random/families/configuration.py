"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of PySATL Random:

- continuous: Beta, Cauchy, ChiSquared, ContinuousUniform, Exponential, F,
  Gamma, InverseGamma, Laplace, Logistic, LogNormal, Normal, StudentT, Weibull;
- discrete: Bernoulli, Binomial, Poisson;
- matrix-variate: Wishart, InverseWishart.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration happens once; :func:`reset_families_register` starts over.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_random.families.builtins import BUILTIN_FAMILIES
from pysatl_random.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all built-in families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    for configure in BUILTIN_FAMILIES:
        configure()
    registry = ParametricFamilyRegister()
    logger.debug("Configured %d built-in families", len(BUILTIN_FAMILIES))
    return registry


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
