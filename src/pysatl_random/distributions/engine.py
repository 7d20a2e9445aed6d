"""
Engine Handle
=============

The pseudo-random engine threaded through every sampling call, the seed
convenience wrapper and the primitive draws all kernels are built from.

Notes
-----
- The engine is a :class:`numpy.random.Generator`. Its state advances on every
  draw and defines the reproducibility of the whole call graph.
- An engine must never be advanced by two logical draw sequences at the same
  time. Use one engine per thread or lock around every draw; this is not
  checked.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from numbers import Integral
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from typing import Any

type Engine = np.random.Generator
"""Stateful, seedable pseudo-random engine."""

type EngineLike = Engine | int | None
"""An engine, a non-negative integer seed, or ``None`` for OS entropy."""


def make_engine(seed: int) -> Engine:
    """
    Construct an engine deterministically seeded from ``seed``.

    Parameters
    ----------
    seed : int
        Non-negative integer seed.

    Returns
    -------
    Engine
        Fresh engine; equal seeds produce equal draw sequences.

    Raises
    ------
    TypeError
        If ``seed`` is not an integer (booleans are rejected).
    ValueError
        If ``seed`` is negative.
    """
    if isinstance(seed, bool | np.bool_) or not isinstance(seed, Integral):
        raise TypeError(f"Seed must be a non-negative integer, got {type(seed).__name__}.")
    if seed < 0:
        raise ValueError(f"Seed must be non-negative, got {seed}.")
    return np.random.default_rng(int(seed))


def resolve_engine(engine: EngineLike) -> Engine:
    """
    Turn an engine-or-seed argument into an engine.

    An existing engine is returned as is, never copied, so composed draws keep
    advancing the same state.
    """
    if isinstance(engine, np.random.Generator):
        return engine
    if engine is None:
        return np.random.default_rng()
    return make_engine(engine)


def draw_uniform(engine: Engine, dtype: np.dtype[Any]) -> Any:
    """
    One draw from U[0, 1).

    Single precision uniforms are generated natively by the engine, so the
    value never rounds up to 1.
    """
    if dtype == np.float32:
        return engine.random(dtype=np.float32)
    return dtype.type(engine.random())


def draw_standard_normal(engine: Engine, dtype: np.dtype[Any]) -> Any:
    """One draw from N(0, 1)."""
    return dtype.type(engine.standard_normal())


def draw_standard_gamma(shape: float, engine: Engine, dtype: np.dtype[Any]) -> Any:
    """One draw from Gamma(shape, 1)."""
    return dtype.type(engine.standard_gamma(shape))


def draw_bernoulli(p: float, engine: Engine, dtype: np.dtype[Any]) -> Any:
    """One Bernoulli(p) trial; consumes exactly one uniform."""
    return dtype.type(1) if draw_uniform(engine, dtype) < p else dtype.type(0)


def draw_poisson(rate: float, engine: Engine, dtype: np.dtype[Any]) -> Any:
    """One draw from Poisson(rate)."""
    return dtype.type(engine.poisson(rate))


__all__ = [
    "Engine",
    "EngineLike",
    "make_engine",
    "resolve_engine",
    "draw_uniform",
    "draw_standard_normal",
    "draw_standard_gamma",
    "draw_bernoulli",
    "draw_poisson",
]
