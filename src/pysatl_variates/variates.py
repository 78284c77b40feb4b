"""
Variate Samplers
================

One function per distribution, each producing a single variate from an
injected :class:`~pysatl_variates.sources.UniformSource`.

- Inverse transform: :func:`uniform`, :func:`exponential`, :func:`weibull`,
  :func:`rayleigh`, :func:`pareto`, :func:`cauchy`, :func:`bernoulli`.
- Box–Muller (cosine branch): :func:`normal` / :func:`gaussian`.
- Marsaglia–Tsang rejection: :func:`gamma`.
- Compositions: :func:`erlang`, :func:`chi_square`, :func:`student_t`,
  :func:`f_distribution`, :func:`beta`.

Notes
-----
- Parameters are not validated here. Use the parametrized families or
  :class:`~pysatl_variates.generator.VariateGenerator` with validation enabled
  to reject invalid parameters.
- A uniform draw of exactly ``0`` feeds a logarithm or a negative power in
  several samplers. Such draws evaluate to ``inf``/``nan`` following IEEE-754
  and never raise.
- The gamma rejection loop is unbounded unless ``max_iterations`` is given.
  It terminates with probability one.
"""

from __future__ import annotations

__author__ = "PySATL project"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import wraps
from typing import TYPE_CHECKING, ParamSpec

import numpy as np

from pysatl_variates.errors import SamplingExhaustedError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_variates.sources import UniformSource

logger = logging.getLogger(__name__)

P = ParamSpec("P")


def _ieee_float(func: Callable[P, Any]) -> Callable[P, float]:
    """Evaluate ``func`` with IEEE-754 semantics and return a Python float."""

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> float:
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return float(func(*args, **kwargs))

    return wrapper


@_ieee_float
def uniform(source: UniformSource, a: float = 0.0, b: float = 1.0) -> float:
    """
    Uniform variate on ``[a, b)``.

    Parameters
    ----------
    source : UniformSource
        Uniform source; advanced by exactly one draw.
    a, b : float
        Lower and upper bound, ``a <= b``.

    Returns
    -------
    float
        ``a + (b - a) * u``.
    """
    return a + (b - a) * source.next_uniform()


@_ieee_float
def normal(source: UniformSource, mean: float = 0.0, stddev: float = 1.0) -> float:
    """
    Normal variate via the Box–Muller transform.

    Two uniforms are consumed per variate; the paired sine variate is discarded.

    Parameters
    ----------
    source : UniformSource
        Uniform source.
    mean : float
        Mean of the distribution.
    stddev : float
        Standard deviation, ``stddev >= 0``.

    Returns
    -------
    float
        ``stddev * sqrt(-2 ln u1) * cos(2 pi u2) + mean``.
    """
    u1 = source.next_uniform()
    u2 = source.next_uniform()
    return stddev * np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2) + mean


gaussian = normal
"""Alias of :func:`normal`."""


@_ieee_float
def exponential(source: UniformSource, rate: float = 1.0) -> float:
    """Exponential variate with rate ``rate``: ``-ln(u) / rate``."""
    return -np.log(source.next_uniform()) / rate


@_ieee_float
def weibull(source: UniformSource, scale: float = 1.0, shape: float = 1.0) -> float:
    """Weibull variate: ``scale * (-ln u) ** (1 / shape)``."""
    return scale * np.power(-np.log(source.next_uniform()), 1.0 / shape)


@_ieee_float
def rayleigh(source: UniformSource, sigma: float = 0.5) -> float:
    """Rayleigh variate: ``sqrt(-2 sigma**2 ln u)``."""
    return np.sqrt(-2.0 * np.square(sigma) * np.log(source.next_uniform()))


@_ieee_float
def pareto(source: UniformSource, scale: float = 2.0, shape: float = 3.0) -> float:
    """Pareto variate: ``scale * u ** (-1 / shape)``, always ``>= scale``."""
    return scale * np.power(source.next_uniform(), -1.0 / shape)


@_ieee_float
def cauchy(source: UniformSource, location: float = 0.0, scale: float = 1.0) -> float:
    """
    Cauchy variate: ``scale * tan(pi * u) + location``.

    Draws close to ``0.5`` land near the pole of ``tan`` and give very large
    magnitudes; this is the heavy tail of the distribution.
    """
    return scale * np.tan(np.pi * source.next_uniform()) + location


@_ieee_float
def erlang(source: UniformSource, shape: int = 2, rate: float = 0.5) -> float:
    """
    Erlang variate as a sum of ``shape`` unit exponentials scaled by ``1 / rate``.

    ``shape <= 0`` gives ``0.0``.
    """
    total = 0.0
    for _ in range(shape):
        total += exponential(source, 1.0) / rate
    return total


@_ieee_float
def gamma(
    source: UniformSource,
    shape: float = 2.0,
    rate: float = 0.5,
    max_iterations: int | None = None,
) -> float:
    """
    Gamma variate using the method of Marsaglia and Tsang.

    Parameters
    ----------
    source : UniformSource
        Uniform source.
    shape : float
        Shape ``alpha > 0``.
    rate : float
        Rate ``beta > 0``; the result is scaled by ``1 / rate``.
    max_iterations : int or None, default None
        Cap on candidate draws. ``None`` keeps the loop unbounded.

    Returns
    -------
    float
        A positive gamma variate.

    Raises
    ------
    SamplingExhaustedError
        If ``max_iterations`` candidates were rejected.

    Notes
    -----
    For ``shape < 1`` a variate of ``Gamma(shape + 1, rate)`` is drawn first
    and multiplied by ``u ** (1 / shape)``. The boosted call uses the same cap.
    """
    if shape < 1.0:
        boosted = gamma(source, shape + 1.0, rate, max_iterations)
        return boosted * np.power(source.next_uniform(), 1.0 / shape)

    d = shape - 1.0 / 3.0
    c = 1.0 / np.sqrt(9.0 * d)

    iterations = 0
    while max_iterations is None or iterations < max_iterations:
        iterations += 1
        z = normal(source)
        if z < -1.0 / c:
            continue
        v = (1.0 + c * z) ** 3
        if np.log(source.next_uniform()) <= 0.5 * z**2 + d - d * v + d * np.log(v):
            return d * v / rate

    logger.warning("Gamma(%s, %s) rejected %d candidates", shape, rate, iterations)
    raise SamplingExhaustedError(iterations)


@_ieee_float
def chi_square(source: UniformSource, df: int = 10) -> float:
    """Chi-square variate: sum of ``df`` squared standard normals."""
    total = 0.0
    for _ in range(df):
        total += normal(source, 0.0, 1.0) ** 2
    return total


@_ieee_float
def student_t(source: UniformSource, df: float = 10.0) -> float:
    """
    Student-t variate: ``Z / sqrt(X / df)``.

    ``X`` is drawn with ``int(df)`` degrees of freedom while the real-valued
    ``df`` divides it.
    """
    z = normal(source, 0.0, 1.0)
    return z / np.sqrt(np.divide(chi_square(source, int(df)), df))


@_ieee_float
def f_distribution(source: UniformSource, d1: int = 4, d2: int = 6) -> float:
    """F variate: ``(X1 * d2) / (X2 * d1)`` with ``X1 ~ chi2(d1)``, ``X2 ~ chi2(d2)``."""
    numerator = chi_square(source, d1) * d2
    return np.divide(numerator, chi_square(source, d2) * d1)


@_ieee_float
def beta(
    source: UniformSource,
    a: float = 2.0,
    b: float = 5.0,
    max_iterations: int | None = None,
) -> float:
    """
    Beta variate from two gamma draws.

    Uses ``X / (X + Y) = 1 / (1 + Y / X)`` with ``X ~ Gamma(a, 1)`` and
    ``Y ~ Gamma(b, 1)``; ``Y`` is drawn first. ``max_iterations`` applies to
    each gamma draw.
    """
    y = gamma(source, b, 1.0, max_iterations)
    x = gamma(source, a, 1.0, max_iterations)
    return 1.0 / (1.0 + np.divide(y, x))


def bernoulli(source: UniformSource, p: float = 0.5) -> bool:
    """
    Bernoulli trial.

    Returns
    -------
    bool
        ``True`` when the uniform draw is ``<= p``, so ``P(True) = p``.
    """
    return source.next_uniform() <= p


__all__ = [
    "uniform",
    "normal",
    "gaussian",
    "exponential",
    "weibull",
    "rayleigh",
    "pareto",
    "cauchy",
    "erlang",
    "gamma",
    "chi_square",
    "student_t",
    "f_distribution",
    "beta",
    "bernoulli",
]
