"""
PySATL Random
=============

Unit tests for random variate generation: engines, kernels, output layers
and the built-in parametric families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
