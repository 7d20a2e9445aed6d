"""
Tests for the distribution layer: engines, type promotion, sampling kernels,
vector and matrix output layers and sampling strategies.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
